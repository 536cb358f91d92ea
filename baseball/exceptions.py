"""
Game Exceptions

Error kinds raised by the game core. Malformed guesses are not exceptions:
they come back as a GuessResult carrying an error message.
"""


class GameError(Exception):
    """Base class for all number baseball errors."""


class InvalidOptionError(GameError, ValueError):
    """A menu or difficulty option number that does not exist."""

    def __init__(self, option):
        self.option = option
        super().__init__(f"Unknown option: {option}")


class GameInitializationError(GameError):
    """The guess engine could not be set up for a playthrough."""


class GameRecordLockedError(GameError, RuntimeError):
    """A game record was modified after it was saved to a user's history."""
