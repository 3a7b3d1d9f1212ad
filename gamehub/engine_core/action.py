"""
Guess results - What a single guess submission returns.

The outcome is only available here, at the moment of the transition.
It is not stored in the state and does not survive a round-trip
through a message.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import GuessGameState, Outcome


@dataclass(frozen=True)
class GuessResult:
    """New state plus the classification of the guess that produced it."""
    state: GuessGameState
    outcome: Outcome
    guess: int

    @property
    def won(self) -> bool:
        return self.outcome == Outcome.WON

    @property
    def finished(self) -> bool:
        return not self.state.active
