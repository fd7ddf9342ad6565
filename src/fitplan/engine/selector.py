"""Randomized candidate selection.

All randomness in the engine goes through a ``random.Random`` instance so
that a seed reproduces a plan exactly.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    """Return the injected RNG, or a new one seeded with ``seed``.

    Args:
        seed: Random seed for reproducibility (None for unseeded)
        rng: Existing generator; takes precedence over ``seed``

    Returns:
        random.Random instance
    """
    if rng is not None:
        return rng
    return random.Random(seed)


def shuffled(pool: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly shuffled copy of ``pool``."""
    items = list(pool)
    rng.shuffle(items)
    return items


def select_candidates(pool: Sequence[T], k: int, rng: random.Random) -> list[T]:
    """Sample up to ``k`` items without replacement.

    Args:
        pool: Filtered candidates (not modified)
        k: Desired count
        rng: Random number generator

    Returns:
        The first ``min(k, len(pool))`` items of a shuffled copy. Empty if
        the pool is empty.
    """
    if k <= 0 or not pool:
        return []
    return shuffled(pool, rng)[: min(k, len(pool))]


def choose_one(pool: Sequence[T], rng: random.Random) -> Optional[T]:
    """Pick a single candidate, or None from an empty pool."""
    picked = select_candidates(pool, 1, rng)
    return picked[0] if picked else None
