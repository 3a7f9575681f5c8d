"""Secret passage discovery checks.

Discovery chance by method (hint_level h):
  * tap:     0.15 + h * 0.25, or 0.95 once h >= 3
  * item:    0.9 + h * 0.025
  * passive: 0.7 when h >= 3, else 0
  * other:   0
A ``secretSense`` charge in the inventory adds a flat 0.2; the total is capped
at 1.0. One uniform draw decides the outcome. A failed tap on a hinted
passage returns a hint signal so the UI can describe a hollow sound without
revealing anything.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from mazemaster.logging_utils import get_logger
from mazemaster.maze.cells import Cell
from mazemaster.rng import resolve_rng

log = get_logger("mazemaster.secrets")

SECRET_SENSE_BONUS = 0.2

# Base discovery chance per method, as a function of the passage hint level.
_BASE_CHANCE = {
    "tap": lambda h: 0.95 if h >= 3 else 0.15 + h * 0.25,
    "item": lambda h: 0.9 + h * 0.025,
    "passive": lambda h: 0.7 if h >= 3 else 0.0,
}
METHODS = tuple(_BASE_CHANCE)


@dataclass
class DiscoveryResult:
    found: bool
    revealed: bool = False
    hint: bool = False
    hint_level: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"found": self.found}
        if self.revealed:
            out["revealed"] = True
        if self.hint:
            out["hint"] = True
            out["hintLevel"] = self.hint_level
        return out


def discovery_chance(method: str, hint_level: int, inventory: Optional[Mapping[str, Any]] = None) -> float:
    chance = _BASE_CHANCE[method](hint_level) if method in METHODS else 0.0
    if (inventory or {}).get("secretSense", 0) > 0:
        chance += SECRET_SENSE_BONUS
    return min(chance, 1.0)


def attempt_secret_discovery(
    cell: Optional[Cell],
    direction: str,
    method: str,
    inventory: Optional[Mapping[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> DiscoveryResult:
    secret = cell.secret_passage if cell is not None else None
    if secret is None or secret.direction != direction or secret.revealed:
        return DiscoveryResult(found=False)

    chance = discovery_chance(method, secret.hint_level, inventory)
    if resolve_rng(rng).random() < chance:
        log.debug(event="secret_found", direction=direction, method=method, chance=round(chance, 3))
        return DiscoveryResult(found=True, revealed=True)
    if method == "tap" and secret.hint_level > 0:
        return DiscoveryResult(found=False, hint=True, hint_level=secret.hint_level)
    return DiscoveryResult(found=False)


def apply_discovery(cell: Cell, result: DiscoveryResult) -> bool:
    """Persist a successful discovery onto ``cell``; returns True when the passage flipped."""
    secret = cell.secret_passage
    if not result.found or secret is None or secret.revealed:
        return False
    secret.revealed = True
    return True


__all__ = ["METHODS", "DiscoveryResult", "discovery_chance", "attempt_secret_discovery", "apply_discovery"]
