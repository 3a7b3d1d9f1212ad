"""
Tests for the screen navigator.
"""

import pytest

from ..games import GameKind
from ..session import (
    Navigator,
    Screen,
    ScreenState,
    menu_screen,
    select_game,
    back_to_menu,
    open_from_message,
)


class TestTransitions:
    """Tests for the pure transition functions."""

    def test_starts_at_menu(self):
        assert menu_screen() == ScreenState(Screen.MENU)
        assert menu_screen().is_menu

    def test_select_and_back(self):
        playing = select_game(menu_screen(), GameKind.NUMBER_GUESS)

        assert playing == ScreenState(Screen.PLAYING, GameKind.NUMBER_GUESS)
        assert back_to_menu(playing) == menu_screen()

    def test_open_from_message_known_game(self):
        state = open_from_message(menu_screen(), "numberGuess")

        assert state.screen == Screen.PLAYING
        assert state.game_kind == GameKind.NUMBER_GUESS

    @pytest.mark.parametrize("game_type", [None, "", "chess"])
    def test_open_from_message_unknown_game_keeps_screen(self, game_type):
        current = menu_screen()

        assert open_from_message(current, game_type) is current

    def test_playing_requires_game_kind(self):
        with pytest.raises(ValueError):
            ScreenState(Screen.PLAYING)

    def test_menu_rejects_game_kind(self):
        with pytest.raises(ValueError):
            ScreenState(Screen.MENU, GameKind.NUMBER_GUESS)


class TestNavigator:
    """Tests for the stateful navigator."""

    def test_listener_sees_teardown_then_mount(self):
        changes = []
        nav = Navigator(on_change=lambda old, new: changes.append((old.screen, new.screen)))

        nav.select_game(GameKind.NUMBER_GUESS)
        nav.back_to_menu()

        assert changes == [
            (Screen.MENU, Screen.PLAYING),
            (Screen.PLAYING, Screen.MENU),
        ]
        assert nav.current.is_menu

    def test_no_notification_without_change(self):
        changes = []
        nav = Navigator(on_change=lambda old, new: changes.append(new))

        nav.back_to_menu()
        nav.open_from_message("unknownGame")

        assert changes == []

    def test_message_for_current_game_still_notifies(self):
        changes = []
        nav = Navigator(on_change=lambda old, new: changes.append((old, new)))
        nav.select_game(GameKind.NUMBER_GUESS)
        playing = nav.current

        nav.open_from_message("numberGuess")

        assert changes[-1] == (playing, playing)
        assert len(changes) == 2

    def test_select_same_game_does_not_notify(self):
        changes = []
        nav = Navigator(on_change=lambda old, new: changes.append(new))

        nav.select_game(GameKind.NUMBER_GUESS)
        nav.select_game(GameKind.NUMBER_GUESS)

        assert len(changes) == 1

    def test_subscribe_multiple_listeners(self):
        seen_a, seen_b = [], []
        nav = Navigator()
        nav.subscribe(lambda old, new: seen_a.append(new))
        nav.subscribe(lambda old, new: seen_b.append(new))

        nav.open_from_message("numberGuess")

        assert seen_a == seen_b == [ScreenState(Screen.PLAYING, GameKind.NUMBER_GUESS)]
