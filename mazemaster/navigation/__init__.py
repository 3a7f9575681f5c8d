from .pathfinding import can_move, find_path, get_valid_moves, manhattan_distance  # noqa: F401
from .visibility import Visibility, get_visibility_radius, has_line_of_sight, visible_cells  # noqa: F401

__all__ = [
    "can_move",
    "find_path",
    "get_valid_moves",
    "manhattan_distance",
    "Visibility",
    "get_visibility_radius",
    "has_line_of_sight",
    "visible_cells",
]
