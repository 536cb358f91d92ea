"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .game import GameRecord


@dataclass
class UserStats:
    """User statistics data model."""
    games_played: int = 0
    games_finished: int = 0
    total_attempts: int = 0
    average_attempts: float = 0.0
    best_attempts: Dict[str, int] = field(default_factory=dict)


@dataclass
class User:
    """User data model with an append-only play history."""
    username: str
    history: List[GameRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    last_login: Optional[datetime] = None

    @property
    def next_game_number(self) -> int:
        return len(self.history) + 1

    def add_record(self, record: GameRecord) -> None:
        """Append a completed record; it becomes read-only from here on."""
        record.seal()
        self.history.append(record)

    def stats(self) -> UserStats:
        """Aggregate statistics over the finished games in the history."""
        finished = [record for record in self.history if record.finished]
        total_attempts = sum(record.attempt_count for record in finished)

        best_attempts: Dict[str, int] = {}
        for record in finished:
            label = record.difficulty.label
            if label not in best_attempts or record.attempt_count < best_attempts[label]:
                best_attempts[label] = record.attempt_count

        return UserStats(
            games_played=len(self.history),
            games_finished=len(finished),
            total_attempts=total_attempts,
            average_attempts=round(total_attempts / len(finished), 2) if finished else 0.0,
            best_attempts=best_attempts
        )


@dataclass
class RankingEntry:
    """One row of the ranking table."""
    rank: int
    username: str
    difficulty: str
    best_attempts: int
    games_played: int
