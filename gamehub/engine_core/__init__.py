"""
Engine Core - Game state, guessing rules and the state codec.

The engine is the runtime that:
1. Starts a game with a random target
2. Applies guesses and classifies them
3. Encodes state into message query parameters
4. Restores state from those parameters in a fresh process
"""

from .state import GuessGameState, Outcome, MAX_ATTEMPTS, TARGET_MIN, TARGET_MAX
from .action import GuessResult
from .engine import GuessGameEngine, submit_guess
from .errors import (
    GameHubError,
    InvalidGuessError,
    InvalidStateError,
    UnknownGameTypeError,
    SessionNotFoundError,
)
from . import codec

__all__ = [
    "GuessGameState",
    "Outcome",
    "MAX_ATTEMPTS",
    "TARGET_MIN",
    "TARGET_MAX",
    "GuessResult",
    "GuessGameEngine",
    "submit_guess",
    "GameHubError",
    "InvalidGuessError",
    "InvalidStateError",
    "UnknownGameTypeError",
    "SessionNotFoundError",
    "codec",
]
