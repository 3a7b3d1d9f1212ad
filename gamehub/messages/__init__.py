"""
Messages - Sharing games through conversation messages.

- url: query-string encoding of a game state
- layout: caption, subcaption and screen texts
- composer: session <-> message glue
"""

from .url import build_message_url, parse_message_url
from .layout import (
    MessageLayout,
    build_layout,
    outcome_text,
    attempts_text,
    GAME_SCREEN_TITLE,
    INSTRUCTIONS,
    INVALID_INPUT_TITLE,
    INVALID_INPUT_MESSAGE,
)
from .composer import GameMessage, compose_message, restore_from_url

__all__ = [
    "build_message_url",
    "parse_message_url",
    "MessageLayout",
    "build_layout",
    "outcome_text",
    "attempts_text",
    "GAME_SCREEN_TITLE",
    "INSTRUCTIONS",
    "INVALID_INPUT_TITLE",
    "INVALID_INPUT_MESSAGE",
    "GameMessage",
    "compose_message",
    "restore_from_url",
]
