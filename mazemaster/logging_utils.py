"""Minimal structured logging helper.

Emits key=value pairs (or compact JSON) with a timestamp and level so engine
events can be grepped or shipped to a log collector without a formatter setup.

Usage:
    from mazemaster.logging_utils import get_logger
    log = get_logger("mazemaster.hooks")
    log.info(event="hook_fired", hook="onMove")

Non-numeric values are stringified with spaces replaced by underscores.
Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _env_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def current_level() -> int:
    return LEVELS.get(os.getenv("MAZEMASTER_LOG_LEVEL", "info").lower(), 20)


def json_mode() -> bool:
    return _env_truthy(os.getenv("MAZEMASTER_LOG_JSON", "0"))


def format_record(level: str, **fields) -> str:
    if json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, bool):
            parts.append(f"{k}={str(v).lower()}")
        elif isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazemaster"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < current_level():
            return
        fields.setdefault("logger", self.name)
        print(format_record(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazemaster")

__all__ = ["LEVELS", "format_record", "get_logger", "log"]
