"""Dice notation and inline macro expansion.

Macros (keywords case-insensitive):
  {{roll:XdY}}, {{roll:XdY+Z}}, {{roll:XdY-Z}}  -> sum of X rolls of a Y-sided die plus Z
  {{random:min:max}}                             -> uniform integer in [min, max]

Malformed dice notation rolls 0 instead of raising, so a typo in a profile
degrades to a harmless number rather than blocking the game. A dice count above
MAX_DICE counts as malformed.
"""

from __future__ import annotations

import random
import re
from typing import Any, Optional

from mazemaster.rng import resolve_rng

DICE_RE = re.compile(r"(\d+)d(\d+)([+-]\d+)?", re.IGNORECASE | re.ASCII)
ROLL_MACRO_RE = re.compile(r"\{\{roll:([^}]+)\}\}", re.IGNORECASE)
RANDOM_MACRO_RE = re.compile(r"\{\{random:(\d+):(\d+)\}\}", re.IGNORECASE | re.ASCII)

MAX_DICE = 1000


def roll_dice(notation: Any, rng: Optional[random.Random] = None) -> int:
    if not notation or not isinstance(notation, str):
        return 0
    match = DICE_RE.fullmatch(notation)
    if not match:
        return 0
    try:
        num_dice = int(match.group(1))
        sides = int(match.group(2))
        modifier = int(match.group(3)) if match.group(3) else 0
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return 0
    if num_dice <= 0 or sides <= 0 or num_dice > MAX_DICE:
        return 0
    rng = resolve_rng(rng)
    return sum(rng.randint(1, sides) for _ in range(num_dice)) + modifier


def roll_random(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    if low > high:
        low, high = high, low
    return resolve_rng(rng).randint(low, high)


def _expand_random(match: re.Match, rng: random.Random) -> int:
    try:
        low, high = int(match.group(1)), int(match.group(2))
    except ValueError:
        return 0
    return roll_random(low, high, rng)


def process_macros(text: Any, rng: Optional[random.Random] = None) -> Any:
    """Expand every roll macro, then every random macro, in one pass each."""
    if not text or not isinstance(text, str):
        return text
    rng = resolve_rng(rng)
    text = ROLL_MACRO_RE.sub(lambda m: str(roll_dice(m.group(1).strip(), rng)), text)
    text = RANDOM_MACRO_RE.sub(lambda m: str(_expand_random(m, rng)), text)
    return text


__all__ = ["MAX_DICE", "DICE_RE", "ROLL_MACRO_RE", "RANDOM_MACRO_RE", "roll_dice", "roll_random", "process_macros"]
