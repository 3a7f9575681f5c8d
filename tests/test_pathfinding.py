import random

import pytest

from mazemaster.maze import MazeGenerator, Position, generate
from mazemaster.navigation import can_move, find_path, get_valid_moves, manhattan_distance
from tests.maze_test_utils import open_grid, serpentine_grid, walled_grid


def _assert_walkable(path, start, grid):
    prev = start
    for step in path:
        assert manhattan_distance(prev[0], prev[1], step.x, step.y) == 1
        assert step in get_valid_moves(prev[0], prev[1], grid, len(grid))
        prev = (step.x, step.y)


def test_manhattan_distance():
    assert manhattan_distance(0, 0, 3, 4) == 7
    assert manhattan_distance(2, 2, 2, 2) == 0
    assert manhattan_distance(5, 1, 1, 5) == 8


def test_path_in_open_grid_is_shortest():
    grid = open_grid(5)
    path = find_path(0, 0, 4, 4, grid, 5)
    assert path is not None
    assert len(path) == 8
    assert path[-1] == Position(4, 4)
    assert Position(0, 0) not in path
    _assert_walkable(path, (0, 0), grid)


def test_same_start_and_goal_is_empty_path():
    assert find_path(2, 2, 2, 2, walled_grid(5), 5) == []


def test_isolated_cells_have_no_path():
    assert find_path(0, 0, 2, 2, walled_grid(3), 3) is None


def test_corridor_path_follows_passage():
    grid = serpentine_grid(5)
    path = find_path(0, 0, 4, 4, grid, 5)
    assert path is not None
    # The corridor visits every cell before reaching the far corner
    assert len(path) == 24
    _assert_walkable(path, (0, 0), grid)


def test_search_budget_exhaustion_returns_none():
    grid = serpentine_grid(5)
    assert find_path(0, 0, 4, 4, grid, 5, max_steps=2) is None


def test_generated_maze_always_routable():
    size = 10
    grid = MazeGenerator(size, seed=99).run()
    path = find_path(0, 0, size - 1, size - 1, grid, size, max_steps=100)
    assert path is not None
    assert path[-1] == Position(size - 1, size - 1)
    _assert_walkable(path, (0, 0), grid)


def test_valid_moves_order_top_bottom_left_right():
    grid = open_grid(5)
    assert get_valid_moves(2, 2, grid, 5) == [
        Position(2, 1),
        Position(2, 3),
        Position(1, 2),
        Position(3, 2),
    ]


def test_valid_moves_respect_walls_and_bounds():
    grid = open_grid(3)
    assert get_valid_moves(0, 0, grid, 3) == [Position(0, 1), Position(1, 0)]
    assert get_valid_moves(1, 1, walled_grid(3), 3) == []
    assert get_valid_moves(7, 7, grid, 3) == []


@pytest.mark.parametrize(
    "x,y,direction,expected",
    [
        (0, 0, "right", True),
        (0, 0, "bottom", True),
        (0, 0, "top", False),
        (0, 0, "left", False),
        (0, 0, "sideways", False),
        (9, 9, "top", False),
    ],
)
def test_can_move(x, y, direction, expected):
    assert can_move(x, y, direction, open_grid(3)) is expected


@pytest.mark.parametrize("seed", [1, 2, 3, 42, 1234])
def test_size_eight_maze_routable_with_default_budget(seed):
    grid = generate(8, random.Random(seed))
    path = find_path(0, 0, 7, 7, grid, 8)
    assert path is not None
    assert path[-1] == Position(7, 7)
    _assert_walkable(path, (0, 0), grid)
