"""Caller-side glue between resolved hooks and the host command runner.

The engine only resolves text. ``HookDispatcher`` is what gameplay code holds:
it fires a hook against the active profile, logs why nothing happened when
resolution fails, and forwards successful commands to the injected
``dispatch(command)`` callable (the host's slash-command executor). Errors
raised by the host are logged and reported in the outcome; the game loop
never sees them.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional

from mazemaster.logging_utils import get_logger

from .engine import HookFailure, HookResult, fire_hook

log = get_logger("mazemaster.dispatch")

DispatchFn = Callable[[str], Any]


@dataclass
class DispatchOutcome:
    hook: str
    result: HookResult
    dispatched: bool = False
    response: Any = None
    error: Optional[str] = None


class HookDispatcher:
    def __init__(
        self,
        profile: Optional[Mapping[str, Any]],
        dispatch: DispatchFn,
        rng: Optional[random.Random] = None,
    ):
        self.profile = profile
        self.dispatch = dispatch
        self.rng = rng
        self.history: List[DispatchOutcome] = []

    def fire(self, hook: str, params: Optional[Mapping[str, Any]] = None) -> DispatchOutcome:
        result = fire_hook(self.profile, hook, params, rng=self.rng)
        outcome = DispatchOutcome(hook=hook, result=result)
        if not result.executed:
            if result.failure is HookFailure.VALIDATION_FAILURE:
                log.warn(event="hook_rejected", hook=hook, reason=result.error)
            else:
                log.debug(event="hook_skipped", hook=hook, reason=result.error)
            outcome.error = result.error
        else:
            try:
                outcome.response = self.dispatch(result.command)
                outcome.dispatched = True
                log.info(event="hook_dispatched", hook=hook)
            except Exception as exc:
                outcome.error = f"Dispatch failed: {exc}"
                log.error(event="hook_dispatch_failed", hook=hook, error=repr(exc))
        self.history.append(outcome)
        return outcome

    def fire_many(self, events) -> List[DispatchOutcome]:
        """Fire ``(hook, params)`` pairs strictly in the order given."""
        return [self.fire(hook, params) for hook, params in events]


__all__ = ["DispatchOutcome", "HookDispatcher"]
