"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. User picks a game from the menu -> new session with a fresh state
2. Each guess replaces the session state with the engine's result
3. Every state change can be shared as a message URL
4. A partner opening that message gets a NEW session restored from the
   URL; nothing is shared in memory between the two
5. "New Game" replaces the state wholesale; ending removes the session

PERSISTENCE RULES:
- NO database: sessions live in memory only
- The message URL is the only durable copy of a game
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping
import logging
import random
import time
import uuid

from ..engine_core.action import GuessResult
from ..engine_core.codec import KEY_GAME_TYPE
from ..engine_core.errors import SessionNotFoundError, UnknownGameTypeError
from ..engine_core.state import GuessGameState, Outcome
from ..games import GameCatalog, GameDefinition, GameKind

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    One play-through of a game.

    Contains:
    - The catalog entry being played
    - The engine (rules plus random source)
    - The current state and the outcome of the last guess

    `last_outcome` is None for new games and for restored ones: the
    reason a shared game ended is not part of the message.
    """
    session_id: str
    game: GameDefinition
    engine: Any
    state: GuessGameState
    created_at: float
    last_activity: float = 0.0

    last_outcome: Outcome | None = None
    restored: bool = False
    guesses: list[int] = field(default_factory=list)

    def is_active(self) -> bool:
        """Check if the game still accepts guesses."""
        return self.state.active

    def to_query(self) -> dict[str, str]:
        """Encode the current state as message query parameters."""
        return self.game.encode(self.state)

    def touch(self):
        self.last_activity = time.time()


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from catalog entries
    - Restore sessions from message query parameters
    - Route guesses to the owning session's engine
    - Clean up old sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, catalog: GameCatalog | None = None, seed: int | None = None):
        if catalog is None:
            rng = random.Random(seed) if seed is not None else None
            catalog = GameCatalog.default(rng=rng)
        self.catalog = catalog
        self._sessions: dict[str, Session] = {}

    def create_session(self, kind: GameKind = GameKind.NUMBER_GUESS) -> Session:
        """
        Start a new game session.

        Args:
            kind: Which game from the catalog to play

        Returns:
            New Session with a fresh state
        """
        game = self.catalog.get(kind)
        engine = game.create_engine()
        session = self._register(game, engine, engine.start())
        logger.info("Created %s session %s", game.game_type, session.session_id)
        return session

    def restore_session(self, query: Mapping[str, str]) -> Session:
        """
        Create a session from the query parameters of a received message.

        Raises:
            UnknownGameTypeError: the message is not for a game in the catalog.
            InvalidStateError: the game's codec could not recover the state.
        """
        game_type = query.get(KEY_GAME_TYPE)
        kind = self.catalog.resolve_game_type(game_type)
        if kind is None:
            raise UnknownGameTypeError(game_type)

        game = self.catalog.get(kind)
        state = game.decode(query)
        session = self._register(game, game.create_engine(), state, restored=True)
        logger.info(
            "Restored %s session %s (attempts=%d, active=%s)",
            game.game_type, session.session_id, state.attempts_used, state.active,
        )
        return session

    def submit_guess(self, session_id: str, guess: int) -> GuessResult:
        """
        Apply a guess to a session.

        Raises:
            SessionNotFoundError: no such session.
            InvalidGuessError: propagated from the engine; state unchanged.
        """
        session = self.require_session(session_id)
        result = session.engine.submit_guess(session.state, guess)

        session.state = result.state
        session.last_outcome = result.outcome
        session.guesses.append(guess)
        session.touch()

        if result.finished:
            logger.info(
                "Session %s finished: %s after %d attempts",
                session_id, result.outcome.value, result.state.attempts_used,
            )
        return result

    def new_game(self, session_id: str) -> Session:
        """Replace a session's state with a brand-new game."""
        session = self.require_session(session_id)
        session.state = session.engine.start()
        session.last_outcome = None
        session.restored = False
        session.guesses = []
        session.touch()
        logger.debug("Session %s started a new game", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def require_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and remove it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.debug("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions that still accept guesses."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    def cleanup_stale_sessions(
        self,
        max_age_seconds: int = 3600,
        idle_seconds: int | None = None,
    ) -> int:
        """
        Remove sessions nobody will come back to.

        Finished sessions go once they are older than max_age_seconds.
        Running sessions go once no guess or new game has touched them for
        idle_seconds; they are kept forever when idle_seconds is None.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = []
        for session_id, session in self._sessions.items():
            if session.is_active():
                if idle_seconds is not None and current_time - session.last_activity > idle_seconds:
                    to_remove.append(session_id)
            elif current_time - session.created_at > max_age_seconds:
                to_remove.append(session_id)

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)

    def _register(
        self,
        game: GameDefinition,
        engine: Any,
        state: GuessGameState,
        restored: bool = False,
    ) -> Session:
        now = time.time()
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            engine=engine,
            state=state,
            created_at=now,
            last_activity=now,
            restored=restored,
        )
        self._sessions[session.session_id] = session
        return session
