"""
GameHub CLI - Command-line interface for the hub.

Usage:
    gamehub games                  List available games
    gamehub play [--seed N]        Play from the menu in the terminal
    gamehub restore <url>          Open a game from a message URL
    gamehub serve                  Run the REST API
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable

from .config import Config
from .engine_core.errors import InvalidGuessError, InvalidStateError, UnknownGameTypeError
from .games import GameKind, MENU_TITLE, MENU_SUBTITLE
from .messages import (
    GameMessage,
    compose_message,
    outcome_text,
    attempts_text,
    restore_from_url,
    GAME_SCREEN_TITLE,
    INSTRUCTIONS,
    INVALID_INPUT_TITLE,
    INVALID_INPUT_MESSAGE,
)
from .session import Navigator, Screen, ScreenState, SessionManager, Session

logger = logging.getLogger(__name__)


class GuessScreen:
    """
    Terminal screen for one Guess the Number session.

    The screen does not know its host: leaving and sharing go through
    the callbacks it is constructed with.
    """

    def __init__(
        self,
        manager: SessionManager,
        session: Session,
        on_back: Callable[[], None],
        on_send: Callable[[GameMessage], None],
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        base_url: str = "",
    ):
        self.manager = manager
        self.session = session
        self.on_back = on_back
        self.on_send = on_send
        self.read = read
        self.write = write
        self.base_url = base_url

    def show(self):
        self.write(GAME_SCREEN_TITLE)
        self.write(INSTRUCTIONS)
        self.write(attempts_text(self.session.state))

    def run(self) -> bool:
        """
        Read commands until the user leaves.

        Returns True if the user asked to quit the whole hub.
        """
        self.show()
        while True:
            try:
                line = self.read("guess> ").strip()
            except EOFError:
                return True

            if line in {"q", "quit"}:
                return True
            if line in {"b", "back"}:
                self.on_back()
                return False
            if line in {"n", "new"}:
                self.new_game()
                continue
            self.submit(line)

    def submit(self, text: str):
        try:
            guess = int(text)
            result = self.manager.submit_guess(self.session.session_id, guess)
        except (ValueError, InvalidGuessError):
            self.write(f"{INVALID_INPUT_TITLE}: {INVALID_INPUT_MESSAGE}")
            return

        self.write(outcome_text(result.outcome, result.state.target))
        self.write(attempts_text(result.state))
        if result.finished:
            self.write("Type 'n' for a new game or 'b' to go back.")
        self.on_send(compose_message(self.session, self.base_url))

    def new_game(self):
        self.manager.new_game(self.session.session_id)
        self.show()


class HubShell:
    """Menu loop driving the Navigator."""

    def __init__(
        self,
        manager: SessionManager,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        base_url: str = "",
    ):
        self.manager = manager
        self.read = read
        self.write = write
        self.base_url = base_url
        self.navigator = Navigator(catalog=manager.catalog)
        self.screen: GuessScreen | None = None
        self._incoming: Session | None = None
        self.navigator.subscribe(self._on_screen_change)

    def run(self, session: Session | None = None) -> int:
        if session is not None:
            self.open_message(session)

        while True:
            if self.navigator.current.screen == Screen.PLAYING and self.screen:
                if self.screen.run():
                    return 0
                continue

            kind = self._choose_game()
            if kind is None:
                return 0
            self.navigator.select_game(kind)

    def open_message(self, session: Session):
        """Show a session restored from a received message."""
        self._incoming = session
        try:
            self.navigator.open_from_message(session.game.game_type)
        finally:
            self._incoming = None

    def send(self, message: GameMessage):
        self.write(f"{message.layout.caption} | {message.layout.subcaption}")
        self.write(f"Share: {message.url}")

    def _choose_game(self) -> GameKind | None:
        games = self.manager.catalog.available_games()
        self.write(MENU_TITLE)
        self.write(MENU_SUBTITLE)
        for i, game in enumerate(games, start=1):
            self.write(f"  {i}. {game.menu_label} - {game.description}")

        while True:
            try:
                choice = self.read("game> ").strip()
            except EOFError:
                return None
            if choice in {"q", "quit"}:
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(games):
                return games[int(choice) - 1].kind
            self.write(f"Choose 1-{len(games)} or 'q' to quit.")

    def _on_screen_change(self, old: ScreenState, new: ScreenState):
        if self.screen is not None:
            self.manager.end_session(self.screen.session.session_id, reason="replaced")
            self.screen = None
        if new.screen == Screen.PLAYING:
            self._mount(self._incoming or self.manager.create_session(new.game_kind))

    def _mount(self, session: Session):
        self.screen = GuessScreen(
            self.manager,
            session,
            on_back=self.navigator.back_to_menu,
            on_send=self.send,
            read=self.read,
            write=self.write,
            base_url=self.base_url,
        )


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="GameHub - Mini-games shared through messages",
        prog="gamehub",
    )
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("games", help="List available games")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, help="Seed for reproducible targets")
    play_parser.add_argument("--base-url", default=Config.MESSAGE_BASE_URL, help="Prefix for share URLs")

    restore_parser = subparsers.add_parser("restore", help="Open a game from a message URL")
    restore_parser.add_argument("url", help="Message URL, e.g. '?gameType=numberGuess&target=42'")
    restore_parser.add_argument("--play", action="store_true", help="Keep playing after restoring")

    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "games":
        return cmd_games(args)
    elif args.command == "play":
        return cmd_play(args)
    elif args.command == "restore":
        return cmd_restore(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_games(args):
    """List the game menu."""
    manager = SessionManager()
    print(MENU_TITLE)
    for game in manager.catalog.available_games():
        print(f"{game.menu_label} [{game.game_type}]")
        print(f"    {game.description}")
    return 0


def cmd_play(args):
    """Interactive menu and game loop."""
    manager = SessionManager(seed=args.seed)
    return HubShell(manager, base_url=args.base_url).run()


def cmd_restore(args):
    """Open a game from a message URL."""
    manager = SessionManager()
    try:
        session = restore_from_url(manager, args.url)
    except UnknownGameTypeError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    except InvalidStateError as e:
        logger.warning("Could not restore game: %s", e.message)
        print(f"Could not restore game ({e.message}); starting a new one.")
        session = manager.create_session(GameKind.NUMBER_GUESS)

    state = session.state
    message = compose_message(session)
    print(message.layout.caption)
    print(message.layout.subcaption)
    print(attempts_text(state))
    if not state.active:
        print(f"The number was {state.target}")

    if args.play:
        return HubShell(manager).run(session)
    return 0


def cmd_serve(args):
    """Run the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("gamehub.api.app:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
