"""
Navigator - Which screen the hub is showing.

The hub has exactly one visible screen at a time: the game menu, or one
game. Transitions are pure functions over ScreenState; the Navigator
holds the current slot and tells listeners about every change so a
presentation layer can tear down the old screen before mounting the new one.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable
import logging

from ..games import GAME_CATALOG, GameCatalog, GameKind

logger = logging.getLogger(__name__)


class Screen(Enum):
    MENU = "menu"
    PLAYING = "playing"


@dataclass(frozen=True)
class ScreenState:
    screen: Screen
    game_kind: GameKind | None = None

    def __post_init__(self):
        if (self.screen == Screen.PLAYING) != (self.game_kind is not None):
            raise ValueError("PLAYING screens need a game kind, MENU screens must not have one")

    @property
    def is_menu(self) -> bool:
        return self.screen == Screen.MENU


def menu_screen() -> ScreenState:
    return ScreenState(Screen.MENU)


def select_game(current: ScreenState, kind: GameKind) -> ScreenState:
    """Show a game, replacing whatever is on screen."""
    return ScreenState(Screen.PLAYING, kind)


def back_to_menu(current: ScreenState) -> ScreenState:
    return menu_screen()


def open_from_message(
    current: ScreenState,
    game_type: str | None,
    catalog: GameCatalog = GAME_CATALOG,
) -> ScreenState:
    """
    Show the game a received message belongs to.

    Messages without a known `gameType` leave the current screen alone.
    """
    kind = catalog.resolve_game_type(game_type)
    if kind is None:
        return current
    return select_game(current, kind)


Listener = Callable[[ScreenState, ScreenState], None]


class Navigator:
    """
    Holds the single current screen.

    Usage:
        nav = Navigator(on_change=lambda old, new: render(new))
        nav.select_game(GameKind.NUMBER_GUESS)
        nav.back_to_menu()
    """

    def __init__(self, on_change: Listener | None = None, catalog: GameCatalog = GAME_CATALOG):
        self.catalog = catalog
        self.current = menu_screen()
        self._listeners: list[Listener] = []
        if on_change is not None:
            self._listeners.append(on_change)

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def select_game(self, kind: GameKind) -> ScreenState:
        return self._transition(select_game(self.current, kind))

    def back_to_menu(self) -> ScreenState:
        return self._transition(back_to_menu(self.current))

    def open_from_message(self, game_type: str | None) -> ScreenState:
        """
        Show the game a received message belongs to.

        A known game always notifies listeners, even when it is already on
        screen.
        """
        new = open_from_message(self.current, game_type, self.catalog)
        if new is self.current:
            return new
        return self._transition(new, force=True)

    def _transition(self, new: ScreenState, force: bool = False) -> ScreenState:
        old = self.current
        if new == old and not force:
            return old
        self.current = new
        logger.debug("Screen %s -> %s", old, new)
        for listener in self._listeners:
            listener(old, new)
        return new
