from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass
class ObjectiveProgress:
    target: int
    current: int = 0
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def init_objectives(profile: Optional[Mapping[str, Any]]) -> Dict[str, ObjectiveProgress]:
    """Build the per-objective progress table for a new game.

    One entry per ``profile["objectives"]`` item keyed by its ``id``; a missing
    or falsy ``count`` means a single completion is required. Gameplay code
    owns incrementing ``current`` and flipping ``completed``.
    """
    progress: Dict[str, ObjectiveProgress] = {}
    for obj in (profile or {}).get("objectives") or []:
        progress[obj["id"]] = ObjectiveProgress(target=obj.get("count") or 1)
    return progress


def progress_to_dict(progress: Mapping[str, ObjectiveProgress]) -> Dict[str, Dict[str, Any]]:
    return {k: v.to_dict() for k, v in progress.items()}


__all__ = ["ObjectiveProgress", "init_objectives", "progress_to_dict"]
