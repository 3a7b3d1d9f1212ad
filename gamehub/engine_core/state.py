"""
Game State - The value that is shared between conversation partners.

Design principles:
- Immutable: every transition returns a new state
- Serializable: flattens to four query parameters (see codec)
- Self-checking: invariants can be re-established after a cold restore
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum


TARGET_MIN = 1
TARGET_MAX = 100
MAX_ATTEMPTS = 7


class Outcome(Enum):
    """Classification of a single guess."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessGameState:
    """
    State of one Guess the Number session.

    Won and lost games are both just `active=False`. The reason a game
    ended is only known at the moment of the transition and is not part
    of this value.
    """
    target: int
    attempts_used: int = 0
    active: bool = True
    max_attempts: int = MAX_ATTEMPTS

    @property
    def attempts_remaining(self) -> int:
        return max(self.max_attempts - self.attempts_used, 0)

    def with_attempt(self, active: bool) -> GuessGameState:
        """Return new state with one more attempt consumed."""
        return replace(self, attempts_used=self.attempts_used + 1, active=active)

    def clamped(self) -> GuessGameState:
        """
        Return a state that satisfies the attempt invariant.

        A state that claims more attempts than allowed is treated as a
        finished game rather than an impossible live one.
        """
        if self.attempts_used > self.max_attempts:
            return replace(self, attempts_used=self.max_attempts, active=False)
        return self
