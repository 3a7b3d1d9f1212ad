"""
Tests for the command-line client.
"""

import pytest

from ..cli import HubShell, GuessScreen, main
from ..engine_core.state import GuessGameState
from ..games import GameKind
from ..session import Screen, SessionManager


def scripted(lines):
    """Input function that replays lines, then signals end of input."""
    remaining = list(lines)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


class TestGuessScreen:
    """Tests for the game screen."""

    @pytest.fixture
    def screen_parts(self, manager):
        session = manager.create_session()
        session.state = GuessGameState(target=42)
        calls = {"back": 0, "sent": [], "out": []}
        screen = GuessScreen(
            manager,
            session,
            on_back=lambda: calls.__setitem__("back", calls["back"] + 1),
            on_send=calls["sent"].append,
            write=calls["out"].append,
        )
        return screen, session, calls

    def test_guess_sends_message(self, screen_parts):
        screen, session, calls = screen_parts

        screen.submit("50")

        assert "📉 Too high!" in calls["out"]
        assert "Attempts remaining: 6" in calls["out"]
        assert calls["sent"][0].url == "?gameType=numberGuess&target=42&attempts=1&active=true"

    def test_invalid_input_does_not_send(self, screen_parts):
        screen, session, calls = screen_parts

        screen.submit("abc")
        screen.submit("0")

        assert calls["sent"] == []
        assert calls["out"].count("Invalid Input: Please enter a number between 1 and 100") == 2
        assert session.state.attempts_used == 0

    def test_back_uses_callback(self, screen_parts):
        screen, session, calls = screen_parts
        screen.read = scripted(["b"])

        assert screen.run() is False
        assert calls["back"] == 1


class TestHubShell:
    """Tests for the menu loop."""

    def test_play_a_game_and_quit(self):
        manager = SessionManager(seed=1)
        out = []
        shell = HubShell(manager, read=scripted(["1", "50", "q"]), write=out.append)

        assert shell.run() == 0
        assert "🎮 Game Hub" in out
        assert any(line.startswith("Share: ?gameType=numberGuess") for line in out)
        assert shell.navigator.current.screen == Screen.PLAYING

    def test_back_to_menu_ends_session(self):
        manager = SessionManager(seed=1)
        out = []
        shell = HubShell(manager, read=scripted(["1", "b", "q"]), write=out.append)

        shell.run()

        assert shell.navigator.current.is_menu
        assert manager.list_sessions() == []
        assert out.count("🎮 Game Hub") == 2

    def test_resume_restored_session(self):
        manager = SessionManager(seed=1)
        session = manager.restore_session({
            "gameType": "numberGuess", "target": "42", "attempts": "1", "active": "true",
        })
        out = []
        shell = HubShell(manager, read=scripted(["42"]), write=out.append)

        shell.run(session)

        assert "🎉 Congratulations! You guessed it!" in out
        assert not session.state.active

    def test_message_for_game_on_screen_replaces_it(self):
        manager = SessionManager(seed=1)
        shell = HubShell(manager, read=scripted([]), write=[].append)
        shell.navigator.select_game(GameKind.NUMBER_GUESS)
        playing = shell.screen.session
        received = manager.restore_session({
            "gameType": "numberGuess", "target": "42", "attempts": "3", "active": "true",
        })

        shell.open_message(received)

        assert shell.screen.session is received
        assert manager.get_session(playing.session_id) is None
        assert manager.list_sessions() == [received.session_id]


class TestMain:
    """Tests for the argparse entry point."""

    def test_games_command(self, capsys):
        assert main(["games"]) == 0

        assert "Guess the Number" in capsys.readouterr().out

    def test_restore_command(self, capsys):
        assert main(["restore", "?gameType=numberGuess&target=9&attempts=7&active=false"]) == 0

        out = capsys.readouterr().out
        assert "Game Finished!" in out
        assert "The number was 9" in out

    def test_restore_unknown_game(self, capsys):
        with pytest.raises(SystemExit):
            main(["restore", "?gameType=chess"])

    def test_restore_missing_target_starts_new_game(self, capsys):
        assert main(["restore", "?gameType=numberGuess"]) == 0

        assert "starting a new one" in capsys.readouterr().out
