"""
Tests for API service layer.

Tests:
- API service methods
- Session lifecycle via API
- Restore fallbacks
- Error handling
"""

import pytest

from ..api.schemas import (
    CreateSessionRequest,
    GuessRequest,
    RestoreRequest,
    SessionStatus,
    OutcomeValue,
)
from ..api.service import APIService
from ..engine_core.errors import (
    InvalidGuessError,
    SessionNotFoundError,
    UnknownGameTypeError,
)
from ..session import SessionManager
from .conftest import force_target


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self):
        """Create a fresh API service."""
        return APIService(session_manager=SessionManager(seed=21))

    def test_list_games(self, service):
        response = service.list_games()

        assert response.title == "🎮 Game Hub"
        assert response.subtitle == "Choose a game to play with friends!"
        assert [g.game_type for g in response.games] == ["numberGuess"]

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest())

        assert response.game_type == "numberGuess"
        assert response.status == SessionStatus.ACTIVE
        assert response.state.attempts_remaining == 7
        assert response.state.target is None
        assert response.attempts_text == "Attempts remaining: 7"
        assert response.message.caption == "Guess the Number - 0/7 attempts"
        assert response.message.url.startswith("?gameType=numberGuess&target=")

    def test_create_unknown_game(self, service):
        with pytest.raises(UnknownGameTypeError):
            service.create_session(CreateSessionRequest(game_type="chess"))

    def test_get_nonexistent_session(self, service):
        with pytest.raises(SessionNotFoundError):
            service.get_session("nonexistent-id")

    def test_guess_then_win(self, service):
        created = service.create_session(CreateSessionRequest())
        force_target(service.session_manager, created.session_id, 42)

        first = service.submit_guess(created.session_id, GuessRequest(guess=50))
        assert first.outcome == OutcomeValue.TOO_HIGH
        assert first.result_text == "📉 Too high!"
        assert first.session.state.attempts_used == 1

        second = service.submit_guess(created.session_id, GuessRequest(guess=42))
        assert second.outcome == OutcomeValue.WON
        assert second.session.status == SessionStatus.FINISHED
        assert second.session.state.target == 42
        assert second.session.message.caption == "Game Finished!"
        assert second.session.message.subcaption == "🎉 Congratulations! You guessed it!"
        assert second.session.message.query["active"] == "false"

    def test_invalid_guess(self, service):
        created = service.create_session(CreateSessionRequest())

        with pytest.raises(InvalidGuessError):
            service.submit_guess(created.session_id, GuessRequest(guess=0))

        assert service.get_session(created.session_id).state.attempts_used == 0

    def test_new_game(self, service):
        created = service.create_session(CreateSessionRequest())
        force_target(service.session_manager, created.session_id, 42)
        service.submit_guess(created.session_id, GuessRequest(guess=42))

        response = service.new_game(created.session_id)

        assert response.status == SessionStatus.ACTIVE
        assert response.last_outcome is None
        assert response.state.attempts_used == 0

    def test_end_and_list_sessions(self, service):
        ids = [service.create_session(CreateSessionRequest()).session_id for _ in range(3)]

        listing = service.list_sessions()
        assert listing.count == 3
        assert set(listing.sessions) == set(ids)

        assert service.end_session(ids[0]).success
        assert service.list_sessions().count == 2
        assert not service.end_session(ids[0]).success


class TestRestoreViaService:
    """Tests for restoring sessions from messages."""

    @pytest.fixture
    def service(self):
        return APIService(session_manager=SessionManager(seed=3))

    def test_restore_from_url(self, service):
        response = service.restore_session(
            RestoreRequest(url="?gameType=numberGuess&target=42&attempts=3&active=true")
        )

        assert response.restored
        assert response.warnings == []
        assert response.session.restored
        assert response.session.state.attempts_used == 3
        assert response.session.status == SessionStatus.ACTIVE

    def test_restore_from_query(self, service):
        response = service.restore_session(
            RestoreRequest(query={"gameType": "numberGuess", "target": "17"})
        )

        assert response.restored
        assert response.session.status == SessionStatus.FINISHED
        assert response.session.state.target == 17
        assert response.session.last_outcome is None
        assert response.session.message.subcaption == "Game Complete!"

    def test_restore_without_target_starts_new_game(self, service):
        response = service.restore_session(
            RestoreRequest(url="?gameType=numberGuess&attempts=2&active=true")
        )

        assert not response.restored
        assert response.session.status == SessionStatus.ACTIVE
        assert response.session.state.attempts_used == 0
        assert "target" in response.warnings[0]

    def test_restore_unknown_game(self, service):
        with pytest.raises(UnknownGameTypeError):
            service.restore_session(RestoreRequest(url="?gameType=chess&target=4"))

    def test_round_trip_between_services(self, service):
        """A message from one device restores on another."""
        sender = APIService(session_manager=SessionManager(seed=8))
        created = sender.create_session(CreateSessionRequest())
        sent = sender.submit_guess(created.session_id, GuessRequest(guess=50))

        received = service.restore_session(RestoreRequest(url=sent.session.message.url))

        assert received.session.state.attempts_used == sent.session.state.attempts_used
        assert received.session.state.active == sent.session.state.active
        assert received.session.message.url == sent.session.message.url
