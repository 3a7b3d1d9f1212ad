"""
FastAPI Application - REST API for GameHub clients.

Endpoints:
    GET    /api/v1/health                      Liveness check
    GET    /api/v1/games                       Game menu
    POST   /api/v1/sessions                    Start a game
    GET    /api/v1/sessions                    List running games
    POST   /api/v1/sessions/restore            Restore a game from a message
    GET    /api/v1/sessions/{id}               Get session and its message
    DELETE /api/v1/sessions/{id}               End session
    POST   /api/v1/sessions/{id}/guesses       Submit a guess
    POST   /api/v1/sessions/{id}/new-game      Replace the game with a fresh one

Sharing Flow:
    1. Every session response includes `message.url`
    2. The client sends that URL to the conversation
    3. The partner's client POSTs it to /sessions/restore
    4. Unusable states start a fresh game (`restored=false`)

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Config
from ..engine_core.errors import GameHubError
from ..session import SessionManager
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    GuessRequest,
    RestoreRequest,
    # Response models
    CatalogResponse,
    SessionResponse,
    GuessResponse,
    RestoreResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None, config_class=Config) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        config_class: Settings holder, `Config` by default

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="GameHub API",
        description="""
Mini-games shared through conversation messages.

## Sharing

Every session response carries a `message` with a `url` such as
`?gameType=numberGuess&target=42&attempts=3&active=true`.
Send it to the conversation; the receiving client restores the game with
`POST /api/v1/sessions/restore`.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_GUESS` | Guess out of range or game already over |
| `INVALID_STATE` | Message state could not be recovered |
| `UNKNOWN_GAME_TYPE` | Game type not in the catalog |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config_class.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        session_manager=SessionManager(),
        message_base_url=config_class.MESSAGE_BASE_URL,
    )
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(GameHubError)
    async def handle_gamehub_error(request: Request, exc: GameHubError) -> JSONResponse:
        error_code = ErrorCode(exc.error_code)
        status_code = 404 if error_code == ErrorCode.SESSION_NOT_FOUND else 400
        logger.debug("%s %s -> %s", request.method, request.url.path, error_code.value)
        return make_error_response(error_code, exc.message, status_code, exc.details)

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Meta"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="gamehub", version=__version__)

    @app.get(
        "/api/v1/games",
        response_model=CatalogResponse,
        tags=["Games"],
        summary="List available games",
    )
    async def list_games() -> CatalogResponse:
        """Menu title and the games that can be started."""
        return api_service.list_games()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse, "description": "Unknown game type"}},
        tags=["Sessions"],
        summary="Start a new game session",
    )
    async def create_session(body: Optional[CreateSessionRequest] = None) -> SessionResponse:
        """Start a game. Defaults to Guess the Number."""
        api_service.cleanup(config_class.SESSION_MAX_AGE_SEC, config_class.SESSION_IDLE_SEC)
        return api_service.create_session(body or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List running sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List IDs of sessions whose games still accept guesses."""
        return api_service.list_sessions()

    @app.post(
        "/api/v1/sessions/restore",
        response_model=RestoreResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse, "description": "Message is not for a known game"}},
        tags=["Sessions"],
        summary="Restore a game from a received message",
    )
    async def restore_session(body: RestoreRequest) -> RestoreResponse:
        """
        Restore a game from a message URL or its query parameters.

        **Request Body:**
        ```json
        {"url": "?gameType=numberGuess&target=42&attempts=3&active=true"}
        ```
        """
        api_service.cleanup(config_class.SESSION_MAX_AGE_SEC, config_class.SESSION_IDLE_SEC)
        return api_service.restore_session(body)

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> SessionResponse:
        """Get the current state of a session and its shareable message."""
        return api_service.get_session(session_id)

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """End a session and release it."""
        return api_service.end_session(session_id, reason)

    # =========================================================================
    # Game Loop Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/guesses",
        response_model=GuessResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid guess"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game Loop"],
        summary="Submit a guess",
    )
    async def submit_guess(session_id: str, body: GuessRequest) -> GuessResponse:
        """
        Submit a guess between 1 and 100.

        Invalid guesses do not use up an attempt.
        """
        return api_service.submit_guess(session_id, body)

    @app.post(
        "/api/v1/sessions/{session_id}/new-game",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Start over with a new number",
    )
    async def new_game(session_id: str) -> SessionResponse:
        return api_service.new_game(session_id)

    return app


# For running directly: uvicorn gamehub.api.app:app
app = create_app()
