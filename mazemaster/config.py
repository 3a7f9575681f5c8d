import os
from dataclasses import dataclass
from typing import Optional


def _int_env(key: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


@dataclass
class EngineConfig:
    maze_size: int = 10
    max_steps: int = 50
    base_radius: int = 3
    seed: Optional[int] = None

    def __post_init__(self):
        if self.maze_size < 1:
            raise ValueError("maze_size must be >= 1")
        if self.max_steps < 1:
            raise ValueError("max_steps must be >= 1")
        if self.base_radius < 0:
            raise ValueError("base_radius must be >= 0")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from ``MAZEMASTER_*`` environment variables."""
        return cls(
            maze_size=_int_env("MAZEMASTER_MAZE_SIZE", cls.maze_size),
            max_steps=_int_env("MAZEMASTER_MAX_STEPS", cls.max_steps),
            base_radius=_int_env("MAZEMASTER_BASE_RADIUS", cls.base_radius),
            seed=_int_env("MAZEMASTER_SEED", None),
        )

    def to_flask_config(self) -> dict:
        return {
            "MAZE_DEFAULT_SIZE": self.maze_size,
            "MAZE_MAX_STEPS": self.max_steps,
            "VISIBILITY_BASE_RADIUS": self.base_radius,
            "MAZE_SEED": self.seed,
        }


__all__ = ["EngineConfig"]
