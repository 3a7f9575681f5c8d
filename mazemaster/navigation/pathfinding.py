"""Grid navigation: A* search plus local movement queries.

Contract summary:
- find_path(sx, sy, gx, gy, grid, size, max_steps=50) -> list[Position] | None
    Path excludes the start and includes the goal. ``[]`` means already there;
    ``None`` means no route, or the search expanded more than ``max_steps * 4``
    cells. The budget bounds work, not path length.
- get_valid_moves(x, y, grid, size) -> list[Position]
    Orthogonal neighbors reachable through open walls (minion wandering).
- can_move(x, y, direction, grid) -> bool
- manhattan_distance(x1, y1, x2, y2) -> int
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mazemaster.logging_utils import get_logger
from mazemaster.maze.cells import DIRECTIONS, Grid, Position, cell_at

log = get_logger("mazemaster.navigation")


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x1 - x2) + abs(y1 - y2)


def get_valid_moves(x: int, y: int, grid: Grid, size: int) -> List[Position]:
    cell = cell_at(grid, x, y)
    if cell is None:
        return []
    walls = cell.walls
    moves: List[Position] = []
    if not walls.top and y > 0:
        moves.append(Position(x, y - 1))
    if not walls.bottom and y < size - 1:
        moves.append(Position(x, y + 1))
    if not walls.left and x > 0:
        moves.append(Position(x - 1, y))
    if not walls.right and x < size - 1:
        moves.append(Position(x + 1, y))
    return moves


def can_move(x: int, y: int, direction: str, grid: Grid) -> bool:
    cell = cell_at(grid, x, y)
    if cell is None or direction not in DIRECTIONS:
        return False
    return not cell.walls[direction]


def _reconstruct(came_from: Dict[Position, Position], end: Position) -> List[Position]:
    path: List[Position] = []
    node = end
    while node in came_from:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path


def find_path(
    start_x: int,
    start_y: int,
    goal_x: int,
    goal_y: int,
    grid: Grid,
    size: int,
    max_steps: int = 50,
) -> Optional[List[Position]]:
    if start_x == goal_x and start_y == goal_y:
        return []
    start = Position(start_x, start_y)
    goal = Position(goal_x, goal_y)
    budget = max_steps * 4

    # Entries are [f, position]; kept as lists so an improved f can be patched in place.
    open_list: List[list] = [[manhattan_distance(start_x, start_y, goal_x, goal_y), start]]
    open_entries: Dict[Position, list] = {start: open_list[0]}
    came_from: Dict[Position, Position] = {}
    g_score: Dict[Position, int] = {start: 0}
    closed = set()

    while open_list:
        # Stable sort: equal f-scores keep insertion order, so runs are reproducible.
        open_list.sort(key=lambda entry: entry[0])
        _f, current = open_list.pop(0)
        del open_entries[current]
        if current == goal:
            return _reconstruct(came_from, current)
        closed.add(current)

        for neighbor in get_valid_moves(current.x, current.y, grid, size):
            if neighbor in closed:
                continue
            tentative = g_score[current] + 1
            if neighbor not in g_score or tentative < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f = tentative + manhattan_distance(neighbor.x, neighbor.y, goal_x, goal_y)
                entry = open_entries.get(neighbor)
                if entry is None:
                    entry = [f, neighbor]
                    open_list.append(entry)
                    open_entries[neighbor] = entry
                else:
                    entry[0] = f

        if len(closed) > budget:
            log.debug(event="path_search_exhausted", start=str(start), goal=str(goal), expanded=len(closed))
            return None

    log.debug(event="path_not_found", start=str(start), goal=str(goal), expanded=len(closed))
    return None


__all__ = ["find_path", "get_valid_moves", "can_move", "manhattan_distance"]
