"""Combat arithmetic helpers.

Damage pipeline (each stage multiplies the running value, in this order):
  1. damage_mult                      (default 1.0)
  2. combo: 1 + min(combo_bonus * 0.05, 0.5)   -- capped at a 10-hit equivalent
  3. critical: crit_multiplier        (default 1.5, only when critical_hit)
  4. blocking: 1 - block_reduction    (default 0.5, only when blocking)
  5. equipment: 1 - min(damage_reduction, 0.75)

Healing:
  base (or base% of max_hp when is_percent) * heal_mult, never exceeding the
  missing HP (max_hp - current_hp).

Rules:
  - Rounding happens once, at the end, half-up (2.5 -> 3).
  - Results are clamped to a minimum of 0. A current_hp above max_hp is not
    validated; it simply yields 0 healing.
  - A value that overflows to inf, or is NaN, raises ValueError.

Battlebar timing (the reaction mini-game during attacks) scales the hit zone
width and cursor traverse time linearly with effective difficulty 1..10.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional

COMBO_STEP = 0.05
COMBO_CAP = 0.5
REDUCTION_CAP = 0.75

BATTLEBAR_DIFFICULTY_RANGE = {
    "min_zone_width": 0.10,
    "max_zone_width": 0.45,
    "min_traverse_time": 1200,
    "max_traverse_time": 4000,
}


def round_half_up(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(f"combat value must be finite, got {value!r}")
    return int(math.floor(value + 0.5))


@dataclass
class DamageModifiers:
    damage_mult: float = 1.0
    combo_bonus: float = 0
    critical_hit: bool = False
    crit_multiplier: float = 1.5
    damage_reduction: float = 0.0
    blocking: bool = False
    block_reduction: float = 0.5

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DamageModifiers":
        data = data or {}
        d = cls()
        return cls(
            damage_mult=float(data.get("damageMult", d.damage_mult)),
            combo_bonus=float(data.get("comboBonus", d.combo_bonus)),
            critical_hit=bool(data.get("criticalHit", d.critical_hit)),
            crit_multiplier=float(data.get("critMultiplier", d.crit_multiplier)),
            damage_reduction=float(data.get("damageReduction", d.damage_reduction)),
            blocking=bool(data.get("blocking", d.blocking)),
            block_reduction=float(data.get("blockReduction", d.block_reduction)),
        )


@dataclass
class HealingModifiers:
    heal_mult: float = 1.0
    max_hp: int = 100
    current_hp: int = 50
    is_percent: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "HealingModifiers":
        data = data or {}
        d = cls()
        return cls(
            heal_mult=float(data.get("healMult", d.heal_mult)),
            max_hp=int(data.get("maxHp", d.max_hp)),
            current_hp=int(data.get("currentHp", d.current_hp)),
            is_percent=bool(data.get("isPercent", d.is_percent)),
        )


def calculate_damage(base_damage: float, modifiers: Optional[DamageModifiers] = None) -> int:
    m = modifiers or DamageModifiers()
    damage = base_damage * m.damage_mult
    damage *= 1 + min(m.combo_bonus * COMBO_STEP, COMBO_CAP)
    if m.critical_hit:
        damage *= m.crit_multiplier
    if m.blocking:
        damage *= 1 - m.block_reduction
    damage *= 1 - min(m.damage_reduction, REDUCTION_CAP)
    return max(0, round_half_up(damage))


def calculate_healing(base_healing: float, modifiers: Optional[HealingModifiers] = None) -> int:
    m = modifiers or HealingModifiers()
    if m.is_percent:
        healing = (base_healing / 100) * m.max_hp
    else:
        healing = base_healing
    healing *= m.heal_mult
    healing = min(healing, m.max_hp - m.current_hp)
    return max(0, round_half_up(healing))


class BattlebarSettings(NamedTuple):
    zone_width: float
    traverse_time: int


def get_battlebar_settings(difficulty: float = 5, multiplier: float = 1.0) -> BattlebarSettings:
    effective = max(1.0, min(10.0, difficulty * multiplier))
    t = (effective - 1) / 9
    r = BATTLEBAR_DIFFICULTY_RANGE
    zone_width = r["max_zone_width"] - t * (r["max_zone_width"] - r["min_zone_width"])
    traverse_time = r["max_traverse_time"] - t * (r["max_traverse_time"] - r["min_traverse_time"])
    return BattlebarSettings(zone_width=zone_width, traverse_time=round_half_up(traverse_time))


__all__ = [
    "DamageModifiers",
    "HealingModifiers",
    "BattlebarSettings",
    "calculate_damage",
    "calculate_healing",
    "get_battlebar_settings",
    "round_half_up",
]
