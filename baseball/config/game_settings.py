"""
Game Configuration Constants Module

Defines the game rules: the digit alphabet, the difficulty modes and the
text shown for menu and guess errors. Digit lengths per difficulty come
from the application config so they can be tuned through the environment.
"""

from enum import Enum
from typing import Final, Iterable, List, Optional

from .app_config import Config
from ..exceptions import InvalidOptionError

DIGITS: Final[str] = "0123456789"
"""Alphabet secrets and guesses are drawn from."""

MAX_SECRET_LENGTH: Final[int] = len(DIGITS)
"""A secret of distinct digits cannot be longer than the alphabet."""

MIN_MENU_OPTION: Final[int] = 1
MAX_MENU_OPTION: Final[int] = 4

# User-facing messages
EMPTY_INPUT_MESSAGE: Final[str] = "Please enter a value"
INVALID_OPTION_MESSAGE: Final[str] = "Please enter a valid option number"
EMPTY_GUESS_MESSAGE: Final[str] = "Please enter a number"
NON_NUMERIC_GUESS_MESSAGE: Final[str] = "Guess must contain digits only"
WRONG_LENGTH_GUESS_MESSAGE: Final[str] = "Guess must be exactly {length} digits"
REPEATED_DIGIT_GUESS_MESSAGE: Final[str] = "All digits must be unique (no repeating digits)"


class DifficultyMode(Enum):
    """Difficulty levels, each fixing the length of the secret number."""

    EASY = (1, "Easy", Config.EASY_DIGITS)
    NORMAL = (2, "Normal", Config.NORMAL_DIGITS)
    HARD = (3, "Hard", Config.HARD_DIGITS)

    def __init__(self, option: int, label: str, length: int):
        self.option = option
        self.label = label
        self.length = length

    @classmethod
    def find_by_option(cls, option: int) -> "DifficultyMode":
        """
        Look up a difficulty by the number shown in the difficulty menu.

        Raises:
            InvalidOptionError: If no mode uses that option number
        """
        for mode in cls:
            if mode.option == option:
                return mode
        raise InvalidOptionError(option)

    @classmethod
    def options(cls) -> List[int]:
        return [mode.option for mode in cls]


def validate_difficulty_integrity(modes: Optional[Iterable] = None) -> bool:
    """
    Validates the difficulty table.

    Checks that:
    1. Every secret length is between 1 and MAX_SECRET_LENGTH
    2. Option numbers are unique

    Args:
        modes: Difficulty table to check, DifficultyMode when omitted

    Returns:
        bool: True if all checks pass

    Raises:
        ValueError: If any check fails with a detailed error message
    """
    modes = list(DifficultyMode if modes is None else modes)
    for mode in modes:
        if not 1 <= mode.length <= MAX_SECRET_LENGTH:
            raise ValueError(
                f"Difficulty '{mode.label}' has secret length {mode.length}, "
                f"expected 1..{MAX_SECRET_LENGTH}"
            )

    options = [mode.option for mode in modes]
    if len(options) != len(set(options)):
        raise ValueError(f"Duplicate difficulty option numbers: {options}")

    return True
