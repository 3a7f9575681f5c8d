"""Rendering tags and serialization for the external grid renderer."""

from __future__ import annotations

from typing import Any, Dict, List

from .cells import Cell, FeatureKind, Grid

FLOOR = "floor"

# Tag per feature kind; FeatureKind ordering is the rendering priority.
CELL_TYPES = {
    FeatureKind.EXIT: "exit",
    FeatureKind.PORTAL: "portal",
    FeatureKind.STAIR_UP: "stairUp",
    FeatureKind.STAIR_DOWN: "stairDown",
    FeatureKind.CHEST: "chest",
    FeatureKind.TRAP: "trap",
    FeatureKind.MINION: "minion",
}


def get_cell_type(cell: Cell) -> str:
    """Return the single rendering tag for ``cell``.

    Priority: exit > portal > stairUp > stairDown > unopened chest >
    untriggered trap > untriggered minion > floor. Spent chests, traps and
    minions render as floor, as do secret passages (the renderer draws the
    wall until it is revealed).
    """
    feature = cell.feature
    if feature is None or not feature.active:
        return FLOOR
    return CELL_TYPES.get(feature.kind, FLOOR)


def grid_to_dict(grid: Grid) -> List[List[Dict[str, Any]]]:
    return [[cell.to_dict() for cell in row] for row in grid]


def grid_to_types(grid: Grid) -> List[List[str]]:
    return [[get_cell_type(cell) for cell in row] for row in grid]


__all__ = ["FLOOR", "CELL_TYPES", "get_cell_type", "grid_to_dict", "grid_to_types"]
