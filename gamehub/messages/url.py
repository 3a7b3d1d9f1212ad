"""
Message URLs - Query-string form of an encoded game state.

Shared games travel as URLs like:
    ?gameType=numberGuess&target=42&attempts=3&active=true

An optional base URL can be prepended for transports that need an
absolute link.
"""

from __future__ import annotations
from typing import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit

from ..engine_core.codec import KEY_GAME_TYPE


def build_message_url(query: Mapping[str, str], base_url: str = "") -> str:
    """Append query parameters to base_url, preserving their order."""
    encoded = urlencode(list(query.items()))
    if not base_url:
        return f"?{encoded}"
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{encoded}"


def parse_message_url(url: str) -> tuple[str | None, dict[str, str]]:
    """
    Split a message URL into its game type and its query mapping.

    `gameType` is taken from its first occurrence; for every other key
    the last occurrence wins. Blank values are kept so the codec can
    apply its own defaults.
    """
    game_type: str | None = None
    query: dict[str, str] = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == KEY_GAME_TYPE:
            if game_type is None:
                game_type = value
                query[key] = value
            continue
        query[key] = value
    return game_type, query
