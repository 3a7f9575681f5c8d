"""Perfect-maze generation by randomized depth-first backtracking.

The walk keeps an explicit stack of positions instead of recursing, so memory
use is bounded by the cell count regardless of maze size. Carving always
updates both sides of a wall, and ``visited`` is reset once the walk finishes
because it is scratch state, not a gameplay flag.
"""
from __future__ import annotations

import random
import time
from typing import List, Optional, Tuple

from mazemaster.logging_utils import get_logger
from mazemaster.rng import resolve_rng

from .cells import DELTAS, Grid, Position, carve, new_grid

log = get_logger("mazemaster.maze")

# Candidate order matters for seeded replay: top, right, bottom, left.
_NEIGHBOR_ORDER = ("top", "right", "bottom", "left")


def _unvisited_neighbors(grid: Grid, x: int, y: int) -> List[Tuple[str, int, int]]:
    size = len(grid)
    out = []
    for direction in _NEIGHBOR_ORDER:
        dx, dy = DELTAS[direction]
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size and not grid[ny][nx].visited:
            out.append((direction, nx, ny))
    return out


def generate(size: int, rng: Optional[random.Random] = None) -> Grid:
    """Return a fully connected, acyclic ``size`` x ``size`` maze."""
    rng = resolve_rng(rng)
    grid = new_grid(size)
    stack: List[Position] = []
    current = Position(0, 0)
    grid[0][0].visited = True
    while True:
        neighbors = _unvisited_neighbors(grid, current.x, current.y)
        if neighbors:
            direction, _nx, _ny = rng.choice(neighbors)
            stack.append(current)
            current = carve(grid, current.x, current.y, direction)
            grid[current.y][current.x].visited = True
        elif stack:
            current = stack.pop()
        else:
            break
    for row in grid:
        for cell in row:
            cell.visited = False
    return grid


class MazeGenerator:
    """Seeded wrapper around :func:`generate` that records timing."""

    def __init__(self, size: int, seed: Optional[int] = None):
        if size < 1:
            raise ValueError("maze size must be >= 1")
        self.size = size
        self.seed = seed
        self.runtime_ms = 0

    def run(self) -> Grid:
        start = time.perf_counter()
        grid = generate(self.size, random.Random(self.seed))
        self.runtime_ms = int((time.perf_counter() - start) * 1000)
        log.debug(event="maze_generated", size=self.size, seed=self.seed, runtime_ms=self.runtime_ms)
        return grid


__all__ = ["generate", "MazeGenerator"]
