"""
Guess the Number catalog entry.
"""

from __future__ import annotations
import random

from ...engine_core import codec
from ...engine_core.engine import GuessGameEngine
from ..definition import GameDefinition, GameKind

TITLE = "Guess the Number"
EMOJI = "🎯"
DESCRIPTION = "Guess the secret number between 1-100 in 7 tries!"


def create_number_guess_game(rng: random.Random | None = None) -> GameDefinition:
    """
    Create the Guess the Number definition.

    Args:
        rng: Optional shared random source. When omitted every engine
            gets its own unseeded generator.
    """
    def create_engine() -> GuessGameEngine:
        if rng is None:
            return GuessGameEngine()
        return GuessGameEngine(rng=rng)

    return GameDefinition(
        kind=GameKind.NUMBER_GUESS,
        title=TITLE,
        emoji=EMOJI,
        description=DESCRIPTION,
        create_engine=create_engine,
        encode=codec.encode,
        decode=codec.decode,
    )
