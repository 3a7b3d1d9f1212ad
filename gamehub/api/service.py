"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session/engine calls
2. Builds shareable messages for every state change
3. Restores sessions from received messages
4. Formats responses

This layer is framework-agnostic. Errors are raised as GameHubError
subclasses and turned into HTTP responses by the app.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

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
    SessionListResponse,
    EndSessionResponse,
    # Shared
    GameInfo,
    GameStateInfo,
    MessageInfo,
    # Enums
    SessionStatus,
    OutcomeValue,
)
from ..engine_core.codec import KEY_GAME_TYPE
from ..engine_core.errors import InvalidStateError, UnknownGameTypeError
from ..games import MENU_TITLE, MENU_SUBTITLE
from ..messages import compose_message, outcome_text, attempts_text, parse_message_url
from ..session import SessionManager, Session

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        result = service.submit_guess(session.session_id, GuessRequest(guess=50))

        # On the other device
        restored = service.restore_session(RestoreRequest(url=result.session.message.url))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    message_base_url: str = ""

    def list_games(self) -> CatalogResponse:
        return CatalogResponse(
            title=MENU_TITLE,
            subtitle=MENU_SUBTITLE,
            games=[
                GameInfo(
                    game_type=game.game_type,
                    title=game.title,
                    emoji=game.emoji,
                    description=game.description,
                )
                for game in self.session_manager.catalog.available_games()
            ],
        )

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new game session."""
        kind = self.session_manager.catalog.resolve_game_type(request.game_type)
        if kind is None:
            raise UnknownGameTypeError(request.game_type)
        session = self.session_manager.create_session(kind)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse:
        session = self.session_manager.require_session(session_id)
        return self._session_to_response(session)

    def submit_guess(self, session_id: str, request: GuessRequest) -> GuessResponse:
        """
        Submit a guess.

        An invalid guess raises and leaves the session untouched.
        """
        result = self.session_manager.submit_guess(session_id, request.guess)
        session = self.session_manager.require_session(session_id)
        return GuessResponse(
            guess=result.guess,
            outcome=OutcomeValue(result.outcome.value),
            result_text=outcome_text(result.outcome, result.state.target),
            session=self._session_to_response(session),
        )

    def new_game(self, session_id: str) -> SessionResponse:
        session = self.session_manager.new_game(session_id)
        return self._session_to_response(session)

    def restore_session(self, request: RestoreRequest) -> RestoreResponse:
        """
        Restore a session from a received message.

        A message for an unknown game is an error. A message for a known
        game whose state cannot be recovered starts a fresh game instead.
        """
        if request.url is not None:
            _, query = parse_message_url(request.url)
        else:
            query = dict(request.query or {})

        kind = self.session_manager.catalog.resolve_game_type(query.get(KEY_GAME_TYPE))
        if kind is None:
            raise UnknownGameTypeError(query.get(KEY_GAME_TYPE))

        try:
            session = self.session_manager.restore_session(query)
        except InvalidStateError as e:
            logger.warning("Could not restore game (%s), starting a new one", e.message)
            session = self.session_manager.create_session(kind)
            return RestoreResponse(
                restored=False,
                session=self._session_to_response(session),
                warnings=[e.message],
            )

        return RestoreResponse(restored=True, session=self._session_to_response(session))

    def end_session(self, session_id: str, reason: str = "user_ended") -> EndSessionResponse:
        success = self.session_manager.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    def list_sessions(self) -> SessionListResponse:
        """List sessions whose games are still running."""
        sessions = self.session_manager.list_active_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    def cleanup(self, max_age_seconds: int, idle_seconds: int | None = None) -> int:
        removed = self.session_manager.cleanup_stale_sessions(max_age_seconds, idle_seconds)
        if removed:
            logger.info("Removed %d stale sessions", removed)
        return removed

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _session_to_response(self, session: Session) -> SessionResponse:
        state = session.state
        message = compose_message(session, self.message_base_url)
        outcome = session.last_outcome

        return SessionResponse(
            session_id=session.session_id,
            game_type=session.game.game_type,
            status=SessionStatus.ACTIVE if state.active else SessionStatus.FINISHED,
            state=GameStateInfo(
                attempts_used=state.attempts_used,
                max_attempts=state.max_attempts,
                attempts_remaining=state.attempts_remaining,
                active=state.active,
                target=None if state.active else state.target,
            ),
            last_outcome=OutcomeValue(outcome.value) if outcome else None,
            result_text=outcome_text(outcome, state.target) if outcome else None,
            attempts_text=attempts_text(state),
            restored=session.restored,
            created_at=session.created_at,
            message=MessageInfo(
                url=message.url,
                query=message.query,
                caption=message.layout.caption,
                subcaption=message.layout.subcaption,
                image_title=message.layout.image_title,
                image_status=message.layout.image_status,
            ),
        )
