"""
project: MazeMaster Engine
module: engine_api.py
License: MIT

JSON endpoints exposing the simulation engine to an external host.

Every request is self-contained: mazes are rebuilt from (size, seed), so a
host can replay the same grid for pathfinding without server-side state.
Malformed input yields HTTP 400 with ``{"error": "..."}``.
"""

from functools import wraps

from flask import Blueprint, current_app, jsonify, request

from mazemaster.hooks import HOOK_CATALOG, fire_hook
from mazemaster.maze import MazeGenerator, grid_to_dict
from mazemaster.navigation import Visibility, find_path, get_visibility_radius
from mazemaster.rng import make_rng, random_seed
from mazemaster.services.combat_utils import (
    DamageModifiers,
    HealingModifiers,
    calculate_damage,
    calculate_healing,
)
from mazemaster.services.objectives import init_objectives, progress_to_dict

bp_engine = Blueprint("engine", __name__)


def bad_request_on_error(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except (ValueError, TypeError, KeyError, OverflowError) as exc:
            return jsonify({"error": str(exc) or exc.__class__.__name__}), 400

    return wrapper


def _body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object")
    return data


def _object(data: dict, key: str):
    """Return data[key] when it is an object (or absent/null -> None), else 400."""
    value = data.get(key)
    if value is not None and not isinstance(value, dict):
        raise ValueError(f"{key} must be an object")
    return value


def _size(data: dict) -> int:
    size = int(data.get("size", current_app.config["MAZE_DEFAULT_SIZE"]))
    limit = current_app.config["MAZE_MAX_SIZE"]
    if not 1 <= size <= limit:
        raise ValueError(f"size must be between 1 and {limit}")
    return size


def _seed(data: dict, required: bool = False) -> int:
    raw = data.get("seed", current_app.config.get("MAZE_SEED"))
    if raw is None or raw == "":
        if required:
            raise ValueError("seed is required")
        return random_seed()
    return int(raw)


def _point(data: dict, key: str, size: int):
    raw = data[key]
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{key} must be [x, y]")
    x, y = int(raw[0]), int(raw[1])
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"{key} out of bounds")
    return x, y


@bp_engine.route("/api/maze/generate", methods=["POST"])
@bad_request_on_error
def api_generate_maze():
    """Generate a maze. Body: {size?, seed?} -> {size, seed, grid}"""
    data = _body()
    size = _size(data)
    seed = _seed(data)
    grid = MazeGenerator(size, seed).run()
    return jsonify({"size": size, "seed": seed, "grid": grid_to_dict(grid)})


@bp_engine.route("/api/maze/path", methods=["POST"])
@bad_request_on_error
def api_find_path():
    """Shortest path in the maze rebuilt from (size, seed).

    Body: {size, seed, start: [x, y], goal: [x, y], max_steps?}
    Response: {found, path: [[x, y], ...] | null}
    """
    data = _body()
    size = _size(data)
    seed = _seed(data, required=True)
    sx, sy = _point(data, "start", size)
    gx, gy = _point(data, "goal", size)
    max_steps = int(data.get("max_steps", current_app.config["MAZE_MAX_STEPS"]))
    grid = MazeGenerator(size, seed).run()
    path = find_path(sx, sy, gx, gy, grid, size, max_steps=max_steps)
    return jsonify({"found": path is not None, "path": None if path is None else [p.to_list() for p in path]})


@bp_engine.route("/api/combat/damage", methods=["POST"])
@bad_request_on_error
def api_damage():
    data = _body()
    mods = DamageModifiers.from_dict(_object(data, "modifiers"))
    return jsonify({"damage": calculate_damage(float(data["base"]), mods)})


@bp_engine.route("/api/combat/heal", methods=["POST"])
@bad_request_on_error
def api_heal():
    data = _body()
    mods = HealingModifiers.from_dict(_object(data, "modifiers"))
    return jsonify({"healing": calculate_healing(float(data["base"]), mods)})


@bp_engine.route("/api/visibility/radius", methods=["POST"])
@bad_request_on_error
def api_visibility_radius():
    data = _body()
    vis_data = dict(_object(data, "visibility") or {})
    vis_data.setdefault("baseRadius", current_app.config["VISIBILITY_BASE_RADIUS"])
    radius = get_visibility_radius(Visibility.from_dict(vis_data), _object(data, "items") or {})
    return jsonify({"radius": radius})


@bp_engine.route("/api/objectives/init", methods=["POST"])
@bad_request_on_error
def api_init_objectives():
    data = _body()
    profile = _object(data, "profile")
    return jsonify({"progress": progress_to_dict(init_objectives(profile))})


@bp_engine.route("/api/hooks/fire", methods=["POST"])
@bad_request_on_error
def api_fire_hook():
    """Resolve a hook. Body: {profile, hook, params?, seed?} -> {executed, command|error}"""
    data = _body()
    hook = data["hook"]
    if not isinstance(hook, str):
        raise ValueError("hook must be a string")
    profile = _object(data, "profile")
    params = _object(data, "params") or {}
    seed = data.get("seed")
    rng = make_rng(int(seed)) if seed is not None else None
    return jsonify(fire_hook(profile, hook, params, rng=rng).to_dict())


@bp_engine.route("/api/hooks/catalog")
def api_hook_catalog():
    """Known hook names mapped to the parameters gameplay supplies."""
    return jsonify(HOOK_CATALOG)
