"""
Errors raised by the engine and the session layer.

Every error carries an `error_code` that the API reports verbatim.
None of them are fatal: callers recover locally.
"""

from __future__ import annotations
from typing import Any


class GameHubError(Exception):
    """Base class for all GameHub errors."""
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidGuessError(GameHubError):
    """Guess outside the allowed range, or submitted to a finished game."""
    error_code = "INVALID_GUESS"

    def __init__(self, guess: int, reason: str):
        super().__init__(reason, details={"guess": guess})
        self.guess = guess
        self.reason = reason


class InvalidStateError(GameHubError):
    """A serialized state is missing a field that cannot be defaulted."""
    error_code = "INVALID_STATE"

    def __init__(self, field: str, value: str | None = None):
        if value is None:
            message = f"Missing required field: {field}"
        else:
            message = f"Invalid value for {field}: {value!r}"
        super().__init__(message, details={"field": field, "value": value})
        self.field = field
        self.value = value


class UnknownGameTypeError(GameHubError):
    """A message does not carry a game this hub knows how to restore."""
    error_code = "UNKNOWN_GAME_TYPE"

    def __init__(self, game_type: str | None):
        if game_type is None:
            message = "Message has no gameType"
        else:
            message = f"Unknown gameType: {game_type}"
        super().__init__(message, details={"game_type": game_type})
        self.game_type = game_type


class SessionNotFoundError(GameHubError):
    error_code = "SESSION_NOT_FOUND"

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id} not found", details={"session_id": session_id})
        self.session_id = session_id
