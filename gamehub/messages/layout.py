"""
Message layout - The text shown for a game, in the menu, on the game
screen and on the bubble sent to the conversation.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import GuessGameState, Outcome, TARGET_MIN, TARGET_MAX
from ..games.number_guess import TITLE, EMOJI

GAME_SCREEN_TITLE = f"{EMOJI} {TITLE}!"
INSTRUCTIONS = f"I'm thinking of a number between {TARGET_MIN} and {TARGET_MAX}"
INVALID_INPUT_TITLE = "Invalid Input"
INVALID_INPUT_MESSAGE = f"Please enter a number between {TARGET_MIN} and {TARGET_MAX}"
GAME_COMPLETE = "Game Complete!"


@dataclass(frozen=True)
class MessageLayout:
    """Caption texts plus the two lines drawn on the preview image."""
    caption: str
    subcaption: str
    image_title: str
    image_status: str


def outcome_text(outcome: Outcome, target: int) -> str:
    """Result line for a guess."""
    if outcome == Outcome.WON:
        return "🎉 Congratulations! You guessed it!"
    if outcome == Outcome.LOST:
        return f"😔 Game Over! The number was {target}"
    if outcome == Outcome.TOO_LOW:
        return "📈 Too low!"
    return "📉 Too high!"


def attempts_text(state: GuessGameState) -> str:
    if state.active:
        return f"Attempts remaining: {state.attempts_remaining}"
    return f"Game finished in {state.attempts_used} attempts"


def build_layout(state: GuessGameState, outcome: Outcome | None = None) -> MessageLayout:
    """
    Layout for the message bubble.

    Finished games restored from a message have no outcome; they fall
    back to a neutral "Game Complete!" line.
    """
    if state.active:
        return MessageLayout(
            caption=f"{TITLE} - {state.attempts_used}/{state.max_attempts} attempts",
            subcaption="Can you guess the number?",
            image_title=f"{EMOJI} {TITLE}",
            image_status=f"Attempts: {state.attempts_used}/{state.max_attempts}",
        )

    subcaption = outcome_text(outcome, state.target) if outcome else GAME_COMPLETE
    return MessageLayout(
        caption="Game Finished!",
        subcaption=subcaption,
        image_title=f"{EMOJI} {TITLE}",
        image_status=GAME_COMPLETE,
    )
