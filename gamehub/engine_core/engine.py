"""
Engine - Applies guesses to game state.

The engine is the single point of state transition for Guess the Number.

Design principles:
- Pure transition: (state, guess) -> (new_state, outcome)
- Validates before applying; a rejected guess consumes no attempt
- No I/O and no memory between calls: a restored state is a cold start
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import Mapping

from . import codec
from .action import GuessResult
from .errors import InvalidGuessError
from .state import GuessGameState, Outcome, TARGET_MIN, TARGET_MAX


@dataclass
class GuessGameEngine:
    """
    Rules for Guess the Number.

    Stateless apart from its random source - all game data is in
    GuessGameState.
    """
    rng: random.Random = field(default_factory=random.Random)

    def start(self) -> GuessGameState:
        """Create a fresh game with a uniformly chosen target."""
        return GuessGameState(target=self.rng.randint(TARGET_MIN, TARGET_MAX))

    def submit_guess(self, state: GuessGameState, guess: int) -> GuessResult:
        """
        Apply one guess.

        Raises:
            InvalidGuessError: the game is over or the guess is out of range.
        """
        error = self._validate_guess(state, guess)
        if error:
            raise InvalidGuessError(guess, error)

        attempts = state.attempts_used + 1
        if guess == state.target:
            return GuessResult(state.with_attempt(active=False), Outcome.WON, guess)
        if attempts >= state.max_attempts:
            return GuessResult(state.with_attempt(active=False), Outcome.LOST, guess)

        outcome = Outcome.TOO_LOW if guess < state.target else Outcome.TOO_HIGH
        return GuessResult(state.with_attempt(active=True), outcome, guess)

    def restore(self, query: Mapping[str, str]) -> GuessGameState:
        """Rebuild state from message query parameters."""
        return codec.decode(query)

    def _validate_guess(self, state: GuessGameState, guess: int) -> str | None:
        """Return error message if the guess cannot be applied, None if valid."""
        if not state.active:
            return "Game is over - start a new game"
        if state.attempts_remaining == 0:
            return "No attempts left - start a new game"
        # bool is an int subclass; True is not a guess
        if isinstance(guess, bool) or not isinstance(guess, int):
            return f"Please enter a number between {TARGET_MIN} and {TARGET_MAX}"
        if not TARGET_MIN <= guess <= TARGET_MAX:
            return f"Please enter a number between {TARGET_MIN} and {TARGET_MAX}"
        return None


def submit_guess(state: GuessGameState, guess: int) -> GuessResult:
    """Convenience wrapper around GuessGameEngine.submit_guess."""
    return GuessGameEngine().submit_guess(state, guess)
