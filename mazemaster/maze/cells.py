"""Grid cell model.

A cell owns four wall flags and at most one feature. Features form a closed
set of variants whose ``FeatureKind`` ordering doubles as the rendering
priority (lower value wins).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Union

DIRECTIONS = ("top", "right", "bottom", "left")
OPPOSITE = {"top": "bottom", "right": "left", "bottom": "top", "left": "right"}
DELTAS = {"top": (0, -1), "right": (1, 0), "bottom": (0, 1), "left": (-1, 0)}


class Position(NamedTuple):
    x: int
    y: int

    def to_list(self) -> List[int]:
        return [self.x, self.y]


class Walls:
    __slots__ = DIRECTIONS

    def __init__(self, top: bool = True, right: bool = True, bottom: bool = True, left: bool = True):
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    def __getitem__(self, direction: str) -> bool:
        if direction not in DIRECTIONS:
            raise KeyError(direction)
        return getattr(self, direction)

    def __setitem__(self, direction: str, value: bool) -> None:
        if direction not in DIRECTIONS:
            raise KeyError(direction)
        setattr(self, direction, bool(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Walls):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def open_count(self) -> int:
        return sum(1 for d in DIRECTIONS if not getattr(self, d))

    def to_dict(self) -> Dict[str, bool]:
        return {d: getattr(self, d) for d in DIRECTIONS}

    def __repr__(self) -> str:
        return f"Walls({', '.join(f'{d}={getattr(self, d)}' for d in DIRECTIONS)})"


class FeatureKind(IntEnum):
    EXIT = 1
    PORTAL = 2
    STAIR_UP = 3
    STAIR_DOWN = 4
    CHEST = 5
    TRAP = 6
    MINION = 7
    SECRET_PASSAGE = 8


@dataclass
class Exit:
    kind: ClassVar[FeatureKind] = FeatureKind.EXIT
    tag: ClassVar[str] = "exit"

    @property
    def active(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {}


@dataclass
class Portal:
    kind: ClassVar[FeatureKind] = FeatureKind.PORTAL
    tag: ClassVar[str] = "portal"
    target: Optional[Position] = None

    @property
    def active(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"target": list(self.target) if self.target else None}


@dataclass
class StairUp:
    kind: ClassVar[FeatureKind] = FeatureKind.STAIR_UP
    tag: ClassVar[str] = "stairUp"

    @property
    def active(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {}


@dataclass
class StairDown:
    kind: ClassVar[FeatureKind] = FeatureKind.STAIR_DOWN
    tag: ClassVar[str] = "stairDown"

    @property
    def active(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {}


@dataclass
class Chest:
    kind: ClassVar[FeatureKind] = FeatureKind.CHEST
    tag: ClassVar[str] = "chest"
    opened: bool = False
    loot: Optional[str] = None

    @property
    def active(self) -> bool:
        return not self.opened

    def to_dict(self) -> Dict[str, Any]:
        return {"opened": self.opened, "loot": self.loot}


@dataclass
class Trap:
    kind: ClassVar[FeatureKind] = FeatureKind.TRAP
    tag: ClassVar[str] = "trap"
    triggered: bool = False
    damage: int = 0

    @property
    def active(self) -> bool:
        return not self.triggered

    def to_dict(self) -> Dict[str, Any]:
        return {"triggered": self.triggered, "damage": self.damage}


@dataclass
class Minion:
    kind: ClassVar[FeatureKind] = FeatureKind.MINION
    tag: ClassVar[str] = "minion"
    minion_id: str = ""
    triggered: bool = False

    @property
    def active(self) -> bool:
        return not self.triggered

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.minion_id, "triggered": self.triggered}


@dataclass
class SecretPassage:
    kind: ClassVar[FeatureKind] = FeatureKind.SECRET_PASSAGE
    tag: ClassVar[str] = "secretPassage"
    direction: str = "top"
    hint_level: int = 0
    revealed: bool = False

    def __post_init__(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(f"secret passage direction must be one of {DIRECTIONS}, got {self.direction!r}")

    @property
    def active(self) -> bool:
        # Passages never claim the rendering tag; the renderer draws the wall.
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"direction": self.direction, "hintLevel": self.hint_level, "revealed": self.revealed}


Feature = Union[Exit, Portal, StairUp, StairDown, Chest, Trap, Minion, SecretPassage]
FEATURE_TYPES = (Exit, Portal, StairUp, StairDown, Chest, Trap, Minion, SecretPassage)


class Cell:
    """Lightweight container for one maze grid cell."""

    __slots__ = ("walls", "visited", "feature")

    def __init__(self, walls: Optional[Walls] = None, feature: Optional[Feature] = None):
        self.walls = walls or Walls()
        self.visited = False
        self.feature = feature

    def _feature_of(self, kind: FeatureKind):
        f = self.feature
        return f if f is not None and f.kind == kind else None

    @property
    def exit(self) -> Optional[Exit]:
        return self._feature_of(FeatureKind.EXIT)

    @property
    def portal(self) -> Optional[Portal]:
        return self._feature_of(FeatureKind.PORTAL)

    @property
    def stair_up(self) -> Optional[StairUp]:
        return self._feature_of(FeatureKind.STAIR_UP)

    @property
    def stair_down(self) -> Optional[StairDown]:
        return self._feature_of(FeatureKind.STAIR_DOWN)

    @property
    def chest(self) -> Optional[Chest]:
        return self._feature_of(FeatureKind.CHEST)

    @property
    def trap(self) -> Optional[Trap]:
        return self._feature_of(FeatureKind.TRAP)

    @property
    def minion(self) -> Optional[Minion]:
        return self._feature_of(FeatureKind.MINION)

    @property
    def secret_passage(self) -> Optional[SecretPassage]:
        return self._feature_of(FeatureKind.SECRET_PASSAGE)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"walls": self.walls.to_dict()}
        for ftype in FEATURE_TYPES:
            data[ftype.tag] = None
        if self.feature is not None:
            data[self.feature.tag] = self.feature.to_dict()
        return data

    def __repr__(self) -> str:
        return f"Cell({self.walls!r}, feature={self.feature!r})"


Grid = List[List[Cell]]


def new_grid(size: int) -> Grid:
    """Return a ``size`` x ``size`` grid with every wall closed."""
    if size < 1:
        raise ValueError("grid size must be >= 1")
    return [[Cell() for _ in range(size)] for _ in range(size)]


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def cell_at(grid: Grid, x: int, y: int) -> Optional[Cell]:
    return grid[y][x] if in_bounds(grid, x, y) else None


def carve(grid: Grid, x: int, y: int, direction: str) -> Position:
    """Open the wall between (x, y) and its neighbor on both sides; return the neighbor."""
    dx, dy = DELTAS[direction]
    nx, ny = x + dx, y + dy
    if not (in_bounds(grid, x, y) and in_bounds(grid, nx, ny)):
        raise ValueError(f"cannot carve {direction} from {(x, y)}: neighbor out of bounds")
    grid[y][x].walls[direction] = False
    grid[ny][nx].walls[OPPOSITE[direction]] = False
    return Position(nx, ny)


__all__ = [
    "DIRECTIONS",
    "OPPOSITE",
    "DELTAS",
    "Position",
    "Walls",
    "FeatureKind",
    "Exit",
    "Portal",
    "StairUp",
    "StairDown",
    "Chest",
    "Trap",
    "Minion",
    "SecretPassage",
    "Feature",
    "FEATURE_TYPES",
    "Cell",
    "Grid",
    "new_grid",
    "in_bounds",
    "cell_at",
    "carve",
]
