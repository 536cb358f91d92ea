"""
Play State

Runs one playthrough: builds a fresh engine and record, reads guesses until
the secret is found, then saves the record to the user's history.
"""

from typing import Optional

from .base import GameState, StateKind
from .menu import MenuState
from ..config.game_settings import DifficultyMode
from ..exceptions import GameInitializationError
from ..models.game import GameRecord
from ..services.guess_engine import GuessEngine
from ..utils.game_logger import game_logger

GUESS_PROMPT = "Enter a {length}-digit number: "


class PlayState(GameState):
    """
    A single playthrough at one difficulty.

    Every submitted line counts as an attempt, including malformed ones.
    """

    kind = StateKind.PLAY

    def __init__(self, difficulty: DifficultyMode):
        self.difficulty = difficulty
        self.engine: Optional[GuessEngine] = None
        self.record: Optional[GameRecord] = None

    def __repr__(self) -> str:
        return f"PlayState(difficulty={self.difficulty.label})"

    def handle(self, session) -> GameState:
        username = session.user.username

        try:
            self.engine = session.engine_factory(self.difficulty.length)
            self.engine.generate_secret()
        except GameInitializationError as e:
            game_logger.log_error(username, e, 'game_init', difficulty=self.difficulty.label)
            game_logger.log_game_event(username, 'game_aborted', difficulty=self.difficulty.label, reason=str(e))
            session.display.show_error(f"Could not start the game: {e}")
            self.engine = None
            return MenuState()

        self.record = GameRecord(game_number=session.user.next_game_number, difficulty=self.difficulty)
        game_logger.log_game_event(
            username, 'game_started', self.record.game_number,
            difficulty=self.difficulty.label, length=self.engine.length
        )
        session.display.show_game_start(self.record)

        self._play(session)

        session.user.add_record(self.record)
        game_logger.log_game_event(
            username, 'game_won', self.record.game_number,
            difficulty=self.difficulty.label, attempts=self.record.attempt_count
        )
        session.display.show_victory(self.record)
        return MenuState()

    def _play(self, session) -> None:
        """Reads guesses until one matches the secret exactly."""
        prompt = GUESS_PROMPT.format(length=self.engine.length)
        username = session.user.username

        while not self.record.finished:
            line = session.read_line(prompt)
            attempt = self.record.increase_attempt_count()
            result = self.engine.validate_and_score(line)

            if not result.is_valid:
                game_logger.log_game_event(
                    username, 'guess_rejected', self.record.game_number,
                    attempt=attempt, reason=result.error
                )
                session.display.show_error(result.error)
                continue

            game_logger.log_game_event(
                username, 'guess_scored', self.record.game_number,
                attempt=attempt, strikes=result.strikes, balls=result.balls
            )
            session.display.show_score(result)

            if result.is_exact_match:
                self.record.mark_finished()
