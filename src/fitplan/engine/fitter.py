"""Time-budget fitting for workout sections.

Warm-up and cool-down sections are packed greedily from short
micro-exercises. The main section is sized by a fixed minutes-per-exercise
heuristic rather than packed.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, Sequence

from fitplan.catalog.models import MicroExercise
from fitplan.engine.exclusions import DEFAULT_EXCLUSIONS, ExclusionSet, filter_by_injuries
from fitplan.engine.models import Exercise
from fitplan.engine.selector import shuffled

logger = logging.getLogger(__name__)

MINUTES_PER_MAIN_EXERCISE = 6
MIN_MAIN_EXERCISES = 5
MAX_MAIN_EXERCISES = 8


def fit_time_budget(candidates: Sequence[MicroExercise], budget: int) -> list[Exercise]:
    """Greedily pack micro-exercises into a minute budget.

    Walks ``candidates`` in order, accepting each one that still fits.
    Stops once the running total is within one minute of the budget or the
    candidates run out. The packing is not optimal; it only guarantees the
    total never exceeds ``budget``.

    Args:
        candidates: Already filtered and shuffled micro-exercises
        budget: Section length in minutes

    Returns:
        Accepted exercises with durations in seconds and no rest.
    """
    selected: list[Exercise] = []
    total = 0

    for candidate in candidates:
        if total + candidate.minutes <= budget:
            selected.append(
                Exercise(
                    name=candidate.name,
                    duration=candidate.minutes * 60,
                    rest_seconds=0,
                    instructions=candidate.instructions,
                    difficulty=candidate.difficulty,
                )
            )
            total += candidate.minutes
        if total >= budget - 1:
            break

    return selected


def fill_section(
    pool: Sequence[MicroExercise],
    budget: int,
    injuries: Iterable[str],
    rng: random.Random,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> list[Exercise]:
    """Filter, shuffle and pack a warm-up or cool-down section.

    An empty list is a valid result when no safe candidate fits.
    """
    if budget <= 0:
        return []
    safe = filter_by_injuries(pool, injuries, exclusions)
    packed = fit_time_budget(shuffled(safe, rng), budget)
    logger.debug(
        "Packed %d of %d safe candidates into %d minutes", len(packed), len(safe), budget
    )
    return packed


def main_exercise_count(budget: int) -> int:
    """Number of main-section exercises for a budget, about six minutes each."""
    return min(MAX_MAIN_EXERCISES, max(MIN_MAIN_EXERCISES, budget // MINUTES_PER_MAIN_EXERCISE))


def split_sections(
    total: int, fraction: float = 0.15, cap: int = 10
) -> tuple[int, int, int]:
    """Split a session into warm-up, main and cool-down minutes.

    Warm-up and cool-down each get ``min(cap, floor(total * fraction))``;
    the main section gets the remainder, so the parts always sum to ``total``.
    """
    edge = min(cap, math.floor(total * fraction))
    return edge, total - 2 * edge, edge
