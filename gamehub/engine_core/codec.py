"""
Codec - Flattens GuessGameState to string query parameters and back.

The keys are a wire contract shared with every message already sent:
    gameType, target, attempts, active

Decoding is lenient for everything except `target`. Unknown keys are
ignored so newer senders can add fields. The `gameType` discriminator is
written here but never read: dispatch happens in the game catalog.
"""

from __future__ import annotations
import re
from typing import Mapping

from .errors import InvalidStateError
from .state import GuessGameState, TARGET_MIN, TARGET_MAX

GAME_TYPE = "numberGuess"

KEY_GAME_TYPE = "gameType"
KEY_TARGET = "target"
KEY_ATTEMPTS = "attempts"
KEY_ACTIVE = "active"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str | None) -> int | None:
    if value is None or not _INT_PATTERN.fullmatch(value):
        return None
    return int(value)


def _parse_bool(value: str | None) -> bool:
    # Anything but a literal "true" resumes as finished
    return value == "true"


def encode(state: GuessGameState) -> dict[str, str]:
    """Encode state as an ordered mapping of query parameters."""
    return {
        KEY_GAME_TYPE: GAME_TYPE,
        KEY_TARGET: str(state.target),
        KEY_ATTEMPTS: str(state.attempts_used),
        KEY_ACTIVE: "true" if state.active else "false",
    }


def decode(query: Mapping[str, str]) -> GuessGameState:
    """
    Rebuild a state from query parameters.

    Raises:
        InvalidStateError: `target` is absent, not an integer, or out of range.
    """
    raw_target = query.get(KEY_TARGET)
    target = _parse_int(raw_target)
    if target is None or not TARGET_MIN <= target <= TARGET_MAX:
        raise InvalidStateError(KEY_TARGET, raw_target)

    attempts = _parse_int(query.get(KEY_ATTEMPTS))
    if attempts is None or attempts < 0:
        attempts = 0

    state = GuessGameState(
        target=target,
        attempts_used=attempts,
        active=_parse_bool(query.get(KEY_ACTIVE)),
    )
    return state.clamped()
