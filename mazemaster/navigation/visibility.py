"""Sight radius and line-of-sight over the maze grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Set

from mazemaster.maze.cells import Grid, Position, in_bounds

LANTERN_BONUS = 2
TORCH_BONUS = 1


@dataclass
class Visibility:
    base_radius: int = 3
    temp_bonus: int = 0
    perm_bonus: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Visibility":
        data = data or {}
        return cls(
            base_radius=int(data.get("baseRadius", data.get("base_radius", 3))),
            temp_bonus=int(data.get("tempBonus", data.get("temp_bonus", 0))),
            perm_bonus=int(data.get("permBonus", data.get("perm_bonus", 0))),
        )


def get_visibility_radius(visibility: Visibility, items: Optional[Mapping[str, Any]] = None) -> int:
    items = items or {}
    radius = visibility.base_radius + visibility.temp_bonus + visibility.perm_bonus
    if items.get("lantern"):
        radius += LANTERN_BONUS
    if items.get("torch"):
        radius += TORCH_BONUS
    return max(1, radius)


def has_line_of_sight(x1: int, y1: int, x2: int, y2: int, grid: Grid) -> bool:
    """Walk a Bresenham line and fail on the first closed wall or off-grid step."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1

    while x != x2 or y != y2:
        if not in_bounds(grid, x, y):
            return False
        walls = grid[y][x].walls
        e2 = 2 * err
        next_x, next_y = x, y
        if e2 > -dy:
            err -= dy
            next_x = x + sx
        if e2 < dx:
            err += dx
            next_y = y + sy
        if not in_bounds(grid, next_x, next_y):
            return False
        if next_x != x and walls["right" if sx > 0 else "left"]:
            return False
        if next_y != y and walls["bottom" if sy > 0 else "top"]:
            return False
        x, y = next_x, next_y
    return True


def visible_cells(x: int, y: int, radius: int, grid: Grid) -> Set[Position]:
    """Cells within Manhattan ``radius`` of (x, y) that are in line of sight."""
    seen: Set[Position] = set()
    if not in_bounds(grid, x, y):
        return seen
    for ty in range(y - radius, y + radius + 1):
        span = radius - abs(ty - y)
        for tx in range(x - span, x + span + 1):
            if in_bounds(grid, tx, ty) and has_line_of_sight(x, y, tx, ty, grid):
                seen.add(Position(tx, ty))
    return seen


__all__ = ["Visibility", "get_visibility_radius", "has_line_of_sight", "visible_cells"]
