"""
API Module - HTTP interface for GameHub clients.

Clients:
1. Read the game menu
2. Start sessions and submit guesses
3. Share the message URL of every state change
4. Restore sessions from received message URLs

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    GuessRequest,
    RestoreRequest,
    # Responses
    CatalogResponse,
    SessionResponse,
    GuessResponse,
    RestoreResponse,
    ErrorResponse,
    # Shared
    GameInfo,
    GameStateInfo,
    MessageInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "GuessRequest",
    "RestoreRequest",
    # Responses
    "CatalogResponse",
    "SessionResponse",
    "GuessResponse",
    "RestoreResponse",
    "ErrorResponse",
    # Shared
    "GameInfo",
    "GameStateInfo",
    "MessageInfo",
    # Service
    "APIService",
    "create_app",
]
