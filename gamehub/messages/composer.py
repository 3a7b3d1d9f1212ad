"""
Composer - Turns a session into a shareable message, and a received
message back into a session.

The transport (actually inserting the message into a conversation) is
somebody else's job; this module only produces and consumes URLs.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..session.manager import Session, SessionManager
from .layout import MessageLayout, build_layout
from .url import build_message_url, parse_message_url


@dataclass(frozen=True)
class GameMessage:
    url: str
    query: dict[str, str]
    layout: MessageLayout


def compose_message(session: Session, base_url: str = "") -> GameMessage:
    """Build the message for a session's current state."""
    query = session.to_query()
    return GameMessage(
        url=build_message_url(query, base_url),
        query=query,
        layout=build_layout(session.state, session.last_outcome),
    )


def restore_from_url(manager: SessionManager, url: str) -> Session:
    """
    Create a session from a received message URL.

    Raises:
        UnknownGameTypeError: the URL does not name a known game.
        InvalidStateError: the game state could not be recovered.
    """
    _, query = parse_message_url(url)
    return manager.restore_session(query)
