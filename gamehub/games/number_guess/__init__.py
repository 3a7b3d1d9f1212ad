"""
Guess the Number

The hub's first game: find a secret number between 1 and 100
in at most 7 guesses, with "too low" / "too high" hints.
"""

from .game import create_number_guess_game, TITLE, EMOJI, DESCRIPTION

__all__ = [
    "create_number_guess_game",
    "TITLE",
    "EMOJI",
    "DESCRIPTION",
]
