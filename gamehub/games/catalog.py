"""
Game Catalog - The games offered in the menu.

The catalog is a dispatch table from GameKind to GameDefinition.
Lookups by `gameType` string return None for anything the hub does not
know, so callers can leave the menu in place.
"""

from __future__ import annotations
import random

from .definition import GameDefinition, GameKind
from .number_guess import create_number_guess_game

MENU_TITLE = "🎮 Game Hub"
MENU_SUBTITLE = "Choose a game to play with friends!"


class GameCatalog:
    """
    Registry of playable games, in menu order.

    Usage:
        catalog = GameCatalog.default()
        game = catalog.get(GameKind.NUMBER_GUESS)
        engine = game.create_engine()
    """

    def __init__(self, games: list[GameDefinition]):
        self._games: dict[GameKind, GameDefinition] = {}
        for game in games:
            if game.kind in self._games:
                raise ValueError(f"Duplicate game kind: {game.kind.value}")
            self._games[game.kind] = game

        missing = set(GameKind) - set(self._games)
        if missing:
            names = ", ".join(sorted(kind.value for kind in missing))
            raise ValueError(f"Catalog has no entry for: {names}")

    @classmethod
    def default(cls, rng: random.Random | None = None) -> GameCatalog:
        return cls([create_number_guess_game(rng)])

    def available_games(self) -> list[GameDefinition]:
        return list(self._games.values())

    def get(self, kind: GameKind) -> GameDefinition:
        return self._games[kind]

    def resolve_game_type(self, game_type: str | None) -> GameKind | None:
        """Map a `gameType` discriminator to a GameKind, or None."""
        if game_type is None:
            return None
        try:
            kind = GameKind(game_type)
        except ValueError:
            return None
        return kind if kind in self._games else None

    def __len__(self) -> int:
        return len(self._games)


GAME_CATALOG = GameCatalog.default()


def available_games() -> list[GameDefinition]:
    """Games in menu order."""
    return GAME_CATALOG.available_games()


def get_game(kind: GameKind) -> GameDefinition:
    return GAME_CATALOG.get(kind)


def resolve_game_type(game_type: str | None) -> GameKind | None:
    return GAME_CATALOG.resolve_game_type(game_type)
