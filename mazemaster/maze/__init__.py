"""Public maze package interface.

Minimal public surface:
    from mazemaster.maze import generate, MazeGenerator, Cell, Grid, Position, get_cell_type
"""

from .cells import (  # noqa: F401
    DIRECTIONS,
    Cell,
    Chest,
    Exit,
    FeatureKind,
    Grid,
    Minion,
    Portal,
    Position,
    SecretPassage,
    StairDown,
    StairUp,
    Trap,
    Walls,
    carve,
    new_grid,
)
from .generator import MazeGenerator, generate  # noqa: F401
from .tiles import get_cell_type, grid_to_dict  # noqa: F401

__all__ = [
    "DIRECTIONS",
    "Cell",
    "Chest",
    "Exit",
    "FeatureKind",
    "Grid",
    "Minion",
    "Portal",
    "Position",
    "SecretPassage",
    "StairDown",
    "StairUp",
    "Trap",
    "Walls",
    "carve",
    "new_grid",
    "MazeGenerator",
    "generate",
    "get_cell_type",
    "grid_to_dict",
]
