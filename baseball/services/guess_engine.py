"""
Guess Engine

Contains the core number baseball logic: secret generation, guess
validation and strike/ball scoring.
"""

import random
from typing import Optional, Tuple

from ..config.game_settings import (
    DIGITS,
    EMPTY_GUESS_MESSAGE,
    MAX_SECRET_LENGTH,
    NON_NUMERIC_GUESS_MESSAGE,
    REPEATED_DIGIT_GUESS_MESSAGE,
    WRONG_LENGTH_GUESS_MESSAGE,
)
from ..exceptions import GameInitializationError
from ..models.game import GuessResult


class GuessEngine:
    """
    Secret holder and scorer for a single playthrough.

    A new engine is built for every Play phase so that no secret or random
    state carries over from one game to the next.
    """

    def __init__(self, length: int, rng: Optional[random.Random] = None):
        """
        Args:
            length: Number of digits in the secret
            rng: Random source, a fresh one when omitted

        Raises:
            GameInitializationError: If no secret of distinct digits can have this length
        """
        if not isinstance(length, int) or not 1 <= length <= MAX_SECRET_LENGTH:
            raise GameInitializationError(
                f"Cannot build a secret of {length} distinct digits (allowed 1..{MAX_SECRET_LENGTH})"
            )
        self.length = length
        self.secret: Optional[str] = None
        self._rng = rng or random.Random()

    def generate_secret(self) -> str:
        """Draw `length` distinct digits without replacement, in the order drawn."""
        try:
            self.secret = ''.join(self._rng.sample(DIGITS, self.length))
        except ValueError as e:
            raise GameInitializationError(f"Secret generation failed: {e}") from e
        return self.secret

    def validate_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess without scoring it.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not guess or not isinstance(guess, str):
            return False, EMPTY_GUESS_MESSAGE

        guess = guess.strip()

        if not guess:
            return False, EMPTY_GUESS_MESSAGE

        if not all(char in DIGITS for char in guess):
            return False, NON_NUMERIC_GUESS_MESSAGE

        if len(guess) != self.length:
            return False, WRONG_LENGTH_GUESS_MESSAGE.format(length=self.length)

        if len(set(guess)) != len(guess):
            return False, REPEATED_DIGIT_GUESS_MESSAGE

        return True, ""

    def validate_and_score(self, guess: str) -> GuessResult:
        """
        Validates a guess and, if it is well formed, scores it against the secret.

        Raises:
            GameInitializationError: If called before a secret was generated
        """
        if self.secret is None:
            raise GameInitializationError("No secret has been generated")

        is_valid, error = self.validate_guess(guess)
        if not is_valid:
            return GuessResult(guess=guess or "", error=error)

        normalized_guess = guess.strip()
        strikes, balls = self._score(normalized_guess)
        return GuessResult(
            guess=normalized_guess,
            strikes=strikes,
            balls=balls,
            is_exact_match=strikes == self.length
        )

    def _score(self, guess: str) -> Tuple[int, int]:
        """Count strikes, then balls among the positions that were not strikes."""
        secret_digits = list(self.secret)
        unmatched_positions = []
        strikes = 0

        # First pass: exact position matches
        for i in range(self.length):
            if guess[i] == secret_digits[i]:
                strikes += 1
                secret_digits[i] = None  # type: ignore
            else:
                unmatched_positions.append(i)

        # Second pass: each remaining secret digit can be claimed by one ball
        balls = 0
        for i in unmatched_positions:
            if guess[i] in secret_digits:
                balls += 1
                secret_digits[secret_digits.index(guess[i])] = None  # type: ignore

        return strikes, balls
