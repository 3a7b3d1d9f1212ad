"""
Pytest fixtures for GameHub tests.
"""

import random

import pytest

from ..engine_core.engine import GuessGameEngine
from ..engine_core.state import GuessGameState
from ..games import GameCatalog
from ..session import SessionManager


@pytest.fixture
def engine() -> GuessGameEngine:
    """Engine with a fixed seed."""
    return GuessGameEngine(rng=random.Random(1234))


@pytest.fixture
def fresh_state() -> GuessGameState:
    """Active game with target 42 and no guesses yet."""
    return GuessGameState(target=42)


@pytest.fixture
def finished_state() -> GuessGameState:
    """Game that has used every attempt."""
    return GuessGameState(target=1, attempts_used=7, active=False)


@pytest.fixture
def manager() -> SessionManager:
    """Session manager with reproducible targets."""
    return SessionManager(seed=99)


@pytest.fixture
def catalog() -> GameCatalog:
    return GameCatalog.default(rng=random.Random(7))


def force_target(manager: SessionManager, session_id: str, target: int):
    """Replace a session's random target with a known one."""
    session = manager.require_session(session_id)
    session.state = GuessGameState(target=target)
    return session
