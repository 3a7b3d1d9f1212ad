"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between clients and the hub.

Error Codes:
- INVALID_GUESS: Guess out of range, or the game is already over
- INVALID_STATE: A message URL did not contain a usable game state
- UNKNOWN_GAME_TYPE: The game type is not in the catalog
- SESSION_NOT_FOUND: Session does not exist or has been ended
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    FINISHED = "finished"


class OutcomeValue(str, Enum):
    """Result of a single guess."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    WON = "won"
    LOST = "lost"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_GUESS = "INVALID_GUESS"
    INVALID_STATE = "INVALID_STATE"
    UNKNOWN_GAME_TYPE = "UNKNOWN_GAME_TYPE"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GameInfo(BaseModel):
    """A game as listed in the menu."""
    game_type: str = Field(description="Value used as gameType in message URLs")
    title: str
    emoji: str
    description: str


class GameStateInfo(BaseModel):
    """Game progress. The target is only revealed once the game is over."""
    attempts_used: int
    max_attempts: int
    attempts_remaining: int
    active: bool
    target: Optional[int] = None


class MessageInfo(BaseModel):
    """Shareable message for the current state."""
    url: str
    query: dict[str, str]
    caption: str
    subcaption: str
    image_title: str
    image_status: str


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Start a new game."""
    game_type: str = Field("numberGuess", description="Game from the catalog")


class GuessRequest(BaseModel):
    """Submit one guess."""
    guess: int = Field(description="Number between 1 and 100")


class RestoreRequest(BaseModel):
    """
    Restore a game from a received message.

    Provide either the full message `url` or its already-parsed `query`.
    """
    url: Optional[str] = None
    query: Optional[dict[str, str]] = None

    @model_validator(mode="after")
    def _require_source(self):
        if self.url is None and self.query is None:
            raise ValueError("Either url or query is required")
        return self


# =============================================================================
# Response Models
# =============================================================================

class CatalogResponse(BaseModel):
    """Menu contents."""
    title: str
    subtitle: str
    games: list[GameInfo]


class SessionResponse(BaseModel):
    """Current view of a session."""
    session_id: str
    game_type: str
    status: SessionStatus
    state: GameStateInfo
    last_outcome: Optional[OutcomeValue] = None
    result_text: Optional[str] = None
    attempts_text: str
    restored: bool = False
    created_at: float
    message: MessageInfo
    api_version: str = "v1"


class GuessResponse(BaseModel):
    """Result of a guess plus the updated session."""
    guess: int
    outcome: OutcomeValue
    result_text: str
    session: SessionResponse


class RestoreResponse(BaseModel):
    """
    Session created from a message.

    `restored` is false when the message state was unusable and a fresh
    game was started instead.
    """
    restored: bool
    session: SessionResponse
    warnings: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
