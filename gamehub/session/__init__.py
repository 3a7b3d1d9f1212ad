"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when the user picks a game from the menu
- Or restored from the URL of a received message
- Holds the current game state and the last guess outcome
- Destroyed when the user leaves

Sessions are EPHEMERAL:
- No persistence to database
- State travels between devices only inside message URLs

The navigator tracks which screen (menu or game) is showing.
"""

from .manager import SessionManager, Session
from .navigator import (
    Navigator,
    Screen,
    ScreenState,
    menu_screen,
    select_game,
    back_to_menu,
    open_from_message,
)

__all__ = [
    "SessionManager",
    "Session",
    "Navigator",
    "Screen",
    "ScreenState",
    "menu_screen",
    "select_game",
    "back_to_menu",
    "open_from_message",
]
