"""Injectable randomness source.

Every randomized engine call accepts an ``rng`` argument implementing the
``random.Random`` interface (``random``, ``randint``, ``choice``). Passing
``None`` falls back to a process-wide generator, so casual callers keep the
old "just roll" behaviour while tests and replays pass a seeded instance.
"""

from __future__ import annotations

import random
from typing import Optional

_DEFAULT_RNG = random.Random()


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a fresh generator; ``seed=None`` seeds from system entropy."""
    return random.Random(seed)


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    return rng if rng is not None else _DEFAULT_RNG


def random_seed() -> int:
    return _DEFAULT_RNG.randint(1, 1_000_000)


__all__ = ["make_rng", "resolve_rng", "random_seed"]
