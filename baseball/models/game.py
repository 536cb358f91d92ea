"""
Game Data Models

Contains the per-playthrough data structures.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..config.game_settings import DifficultyMode
from ..exceptions import GameRecordLockedError


@dataclass
class GuessResult:
    """Outcome of one submitted guess; `error` is set when the guess was rejected."""
    guess: str
    strikes: int = 0
    balls: int = 0
    is_exact_match: bool = False
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


@dataclass
class GameRecord:
    """
    Bookkeeping for one playthrough.

    The record is mutable while the Play state owns it. Once it is saved to a
    user's history it is sealed and any further change raises
    GameRecordLockedError.
    """
    game_number: int
    difficulty: DifficultyMode
    attempt_count: int = 0
    finished: bool = False
    finished_at: Optional[datetime] = None
    sealed: bool = field(default=False, repr=False, compare=False)

    def increase_attempt_count(self) -> int:
        self._check_not_sealed()
        self.attempt_count += 1
        return self.attempt_count

    def mark_finished(self, finished_at: Optional[datetime] = None) -> None:
        """Mark the playthrough as won. Can only happen once."""
        self._check_not_sealed()
        if self.finished:
            raise GameRecordLockedError(f"Game #{self.game_number} is already finished")
        self.finished = True
        self.finished_at = finished_at or datetime.now()

    def seal(self) -> None:
        self.sealed = True

    def _check_not_sealed(self) -> None:
        if self.sealed:
            raise GameRecordLockedError(f"Game #{self.game_number} is saved and read-only")
