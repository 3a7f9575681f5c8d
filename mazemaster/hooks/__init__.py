"""Event hook pipeline: template substitution, macro expansion and validation."""

from .catalog import HOOK_CATALOG  # noqa: F401
from .dispatch import DispatchOutcome, HookDispatcher  # noqa: F401
from .engine import (  # noqa: F401
    HookFailure,
    HookResult,
    ValidationResult,
    fire_hook,
    substitute_hook_params,
    validate_hook_command,
)
from .macros import process_macros, roll_dice  # noqa: F401

__all__ = [
    "HOOK_CATALOG",
    "DispatchOutcome",
    "HookDispatcher",
    "HookFailure",
    "HookResult",
    "ValidationResult",
    "fire_hook",
    "substitute_hook_params",
    "validate_hook_command",
    "process_macros",
    "roll_dice",
]
