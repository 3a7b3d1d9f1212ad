"""
Game definitions - The shape every game in the hub has.

Games are a closed set of variants. Adding a game means adding a
GameKind member and a catalog entry; dispatch is a table lookup, not
subclassing.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping


class GameKind(str, Enum):
    """Game variants. Values are the `gameType` sent in message URLs."""
    NUMBER_GUESS = "numberGuess"


@dataclass(frozen=True)
class GameDefinition:
    """
    A menu entry plus the functions needed to play and share the game.

    Note: the engine factory returns a fresh engine per session so each
    session owns its random source.
    """
    kind: GameKind
    title: str
    emoji: str
    description: str
    create_engine: Callable[[], Any]
    encode: Callable[[Any], dict[str, str]]
    decode: Callable[[Mapping[str, str]], Any]

    @property
    def game_type(self) -> str:
        return self.kind.value

    @property
    def menu_label(self) -> str:
        return f"{self.emoji} {self.title}"
