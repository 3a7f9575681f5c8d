import pytest

from mazemaster.maze import Position
from mazemaster.navigation import Visibility, get_visibility_radius, has_line_of_sight, visible_cells
from tests.maze_test_utils import open_grid, serpentine_grid, walled_grid


@pytest.mark.parametrize(
    "vis,items,expected",
    [
        (Visibility(), {}, 3),
        (Visibility(), {"torch": True}, 4),
        (Visibility(), {"lantern": True}, 5),
        (Visibility(), {"torch": True, "lantern": True}, 6),
        (Visibility(temp_bonus=2), {}, 5),
        (Visibility(temp_bonus=1, perm_bonus=1), {"lantern": True}, 7),
        (Visibility(base_radius=3), {"torch": 0}, 3),
    ],
)
def test_visibility_radius(vis, items, expected):
    assert get_visibility_radius(vis, items) == expected


def test_visibility_radius_floor_is_one():
    assert get_visibility_radius(Visibility(base_radius=0)) == 1
    assert get_visibility_radius(Visibility(base_radius=2, temp_bonus=-5)) == 1


def test_visibility_from_dict_accepts_both_key_styles():
    assert Visibility.from_dict({"baseRadius": 4, "tempBonus": 1}) == Visibility(4, 1, 0)
    assert Visibility.from_dict({"base_radius": 2, "perm_bonus": 3}) == Visibility(2, 0, 3)
    assert Visibility.from_dict(None) == Visibility()


def test_line_of_sight_open_grid():
    grid = open_grid(3)
    assert has_line_of_sight(0, 0, 2, 2, grid)
    assert has_line_of_sight(2, 0, 0, 0, grid)
    assert has_line_of_sight(1, 1, 1, 1, grid)


def test_line_of_sight_blocked_by_walls():
    grid = walled_grid(3)
    assert not has_line_of_sight(0, 0, 1, 0, grid)
    assert not has_line_of_sight(1, 1, 1, 2, grid)


def test_line_of_sight_blocked_by_single_wall():
    grid = open_grid(3)
    grid[0][1].walls["right"] = True
    grid[0][2].walls["left"] = True
    assert has_line_of_sight(0, 0, 1, 0, grid)
    assert not has_line_of_sight(0, 0, 2, 0, grid)
    assert not has_line_of_sight(2, 0, 0, 0, grid)


def test_line_of_sight_off_grid_target():
    assert not has_line_of_sight(0, 0, 5, 0, open_grid(3))


def test_visible_cells_manhattan_radius():
    grid = open_grid(5)
    seen = visible_cells(2, 2, 1, grid)
    assert seen == {Position(2, 2), Position(2, 1), Position(2, 3), Position(1, 2), Position(3, 2)}


def test_visible_cells_walled_grid_sees_only_self():
    assert visible_cells(1, 1, 3, walled_grid(3)) == {Position(1, 1)}


def test_visible_cells_clipped_to_grid():
    seen = visible_cells(0, 0, 2, open_grid(3))
    assert all(0 <= p.x < 3 and 0 <= p.y < 3 for p in seen)
    assert Position(2, 0) in seen and Position(1, 1) in seen
    assert visible_cells(9, 9, 2, open_grid(3)) == set()


def test_visible_cells_stop_at_corridor_walls():
    grid = serpentine_grid(4)
    seen = visible_cells(0, 0, 3, grid)
    # row 0 is one straight corridor; the row below sits behind closed walls
    assert {Position(1, 0), Position(2, 0), Position(3, 0)} <= seen
    assert Position(0, 1) not in seen
    assert Position(1, 1) not in seen
