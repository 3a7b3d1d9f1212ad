"""
Games module - The catalog of mini-games.

Each game has its own subpackage with:
- Catalog entry (title, emoji, description)
- Engine factory
- State codec bindings
"""

from .definition import GameDefinition, GameKind
from .catalog import (
    GameCatalog,
    GAME_CATALOG,
    MENU_TITLE,
    MENU_SUBTITLE,
    available_games,
    get_game,
    resolve_game_type,
)

__all__ = [
    "GameDefinition",
    "GameKind",
    "GameCatalog",
    "GAME_CATALOG",
    "MENU_TITLE",
    "MENU_SUBTITLE",
    "available_games",
    "get_game",
    "resolve_game_type",
]
