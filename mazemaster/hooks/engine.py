"""Hook command resolution.

A profile maps event names (``onMove``, ``onDamage``...) to command templates.
Resolving an event runs three ordered stages over the template text:

  1. substitute   ``{{key}}`` -> str(params[key]) for every provided key
  2. expand       ``{{roll:...}}`` then ``{{random:a:b}}`` macros
  3. validate     anything still shaped like ``{{...}}`` is a missing variable

Substitution runs first so a macro can take part of its notation from a
parameter (``{{roll:2d6+{{bonus}}}}``). Each stage runs exactly once; a macro
whose argument is itself a macro is not re-expanded.

Failures are returned, never raised:
  * NOT_CONFIGURED      no profile, or the hook is missing/blank
  * VALIDATION_FAILURE  the final text is blank or has unsubstituted variables

The final command string is opaque here; it may chain several host commands
with ``|`` and is handed back to the caller for dispatch.
"""

from __future__ import annotations

import json
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from mazemaster.logging_utils import get_logger

from .macros import process_macros

log = get_logger("mazemaster.hooks")

TOKEN_RE = re.compile(r"\{\{[^}]+\}\}")
VALID_MACRO_RES = (
    re.compile(r"\{\{roll:[^}]+\}\}", re.IGNORECASE),
    re.compile(r"\{\{random:\d+:\d+\}\}", re.IGNORECASE | re.ASCII),
)

NO_PROFILE = "No profile provided"
HOOK_UNDEFINED = "Hook not defined or empty"


class HookFailure(str, Enum):
    NOT_CONFIGURED = "not_configured"
    VALIDATION_FAILURE = "validation_failure"


@dataclass
class ValidationResult:
    valid: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": True} if self.valid else {"valid": False, "reason": self.reason}


@dataclass
class HookResult:
    executed: bool
    command: Optional[str] = None
    error: Optional[str] = None
    failure: Optional[HookFailure] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.executed:
            return {"executed": True, "command": self.command}
        return {"executed": False, "error": self.error}


def stringify_param(value: Any) -> str:
    """Render a parameter value the way the host scripting layer prints it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def substitute_hook_params(command: Any, params: Optional[Mapping[str, Any]] = None) -> Any:
    if not command or not isinstance(command, str):
        return command
    result = command
    for key, value in (params or {}).items():
        result = result.replace("{{" + str(key) + "}}", stringify_param(value))
    return result


def validate_hook_command(command: Any) -> ValidationResult:
    if not command or not isinstance(command, str):
        return ValidationResult(False, "Command is empty or not a string")
    trimmed = command.strip()
    if not trimmed:
        return ValidationResult(False, "Command is empty after trimming")
    leftovers = [
        token
        for token in TOKEN_RE.findall(trimmed)
        if not any(rx.fullmatch(token) for rx in VALID_MACRO_RES)
    ]
    if leftovers:
        return ValidationResult(False, f"Unsubstituted variables: {', '.join(leftovers)}")
    return ValidationResult(True)


def fire_hook(
    profile: Optional[Mapping[str, Any]],
    hook_name: str,
    params: Optional[Mapping[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> HookResult:
    """Resolve ``hook_name`` from ``profile`` into a dispatch-ready command."""
    if profile is None:
        return HookResult(False, error=NO_PROFILE, failure=HookFailure.NOT_CONFIGURED)
    template = profile.get(hook_name)
    if not template or not isinstance(template, str) or not template.strip():
        return HookResult(False, error=HOOK_UNDEFINED, failure=HookFailure.NOT_CONFIGURED)

    command = substitute_hook_params(template, params)
    command = process_macros(command, rng)

    validation = validate_hook_command(command)
    if not validation.valid:
        log.debug(event="hook_invalid", hook=hook_name, reason=validation.reason)
        return HookResult(False, error=validation.reason, failure=HookFailure.VALIDATION_FAILURE)
    return HookResult(True, command=command)


__all__ = [
    "HookFailure",
    "HookResult",
    "ValidationResult",
    "stringify_param",
    "substitute_hook_params",
    "validate_hook_command",
    "fire_hook",
]
