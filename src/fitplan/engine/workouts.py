"""Sectioned workout generation.

A workout is split into warm-up, main and cool-down sections. Warm-up and
cool-down are packed from micro-exercises by the time-budget fitter. The
main section samples the workout type's library and scales each pick to
the user's fitness level.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from fitplan.catalog import FitnessLevel, TemplateCatalog, WorkoutType, get_catalog
from fitplan.engine.exclusions import (
    DEFAULT_EXCLUSIONS,
    ExclusionSet,
    filter_by_equipment,
    filter_by_injuries,
)
from fitplan.engine.fitter import fill_section, main_exercise_count, split_sections
from fitplan.engine.models import Exercise, WorkoutPlan, WorkoutRequest, WorkoutSection
from fitplan.engine.scaling import get_profile, scale_exercise
from fitplan.engine.selector import make_rng, select_candidates

logger = logging.getLogger(__name__)


def build_main_section(
    catalog: TemplateCatalog,
    workout_type: WorkoutType,
    budget: int,
    level: FitnessLevel,
    equipment: Iterable[str],
    injuries: Iterable[str],
    rng: random.Random,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> tuple[list[Exercise], bool]:
    """Select and scale the main-section exercises.

    Args:
        catalog: Template catalog
        workout_type: Library to draw from
        budget: Main-section minutes
        level: Fitness level for scaling
        equipment: Available equipment keywords (only gym workouts filter on them)
        injuries: Injury keywords
        rng: Random number generator
        exclusions: Rule tables

    Returns:
        Tuple of (scaled exercises, whether the safe default was used)
    """
    injuries = list(injuries)
    equipment = list(equipment)

    pool = filter_by_injuries(catalog.exercises_for(workout_type), injuries, exclusions)
    if workout_type == WorkoutType.GYM and equipment:
        pool = filter_by_equipment(pool, equipment, exclusions)

    fallback = False
    if not pool:
        fallback = True
        pool = filter_by_injuries(catalog.safe_default(), injuries, exclusions)
        logger.info(
            "No %s exercises left after filtering; using %d safe default exercises",
            workout_type.value, len(pool),
        )

    profile = get_profile(level)
    selected = select_candidates(pool, main_exercise_count(budget), rng)
    return [scale_exercise(t, profile) for t in selected], fallback


def generate_workout(
    request: WorkoutRequest,
    catalog: Optional[TemplateCatalog] = None,
    rng: Optional[random.Random] = None,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
    section_fraction: float = 0.15,
    section_cap: int = 10,
) -> WorkoutPlan:
    """Generate a warm-up / main / cool-down workout.

    Args:
        request: Workout type, duration, level, equipment and injuries
        catalog: Template catalog (defaults to the process-wide catalog)
        rng: Random generator; when omitted one is seeded from request.seed
        exclusions: Rule tables
        section_fraction: Share of the duration for warm-up and for cool-down
        section_cap: Maximum minutes for warm-up and for cool-down

    Returns:
        WorkoutPlan whose total duration equals the requested duration.
    """
    catalog = catalog or get_catalog()
    rng = make_rng(request.seed, rng)

    warmup_minutes, main_minutes, cooldown_minutes = split_sections(
        request.duration, section_fraction, section_cap
    )

    warmup = fill_section(catalog.warmups, warmup_minutes, request.injuries, rng, exclusions)
    main, fallback = build_main_section(
        catalog,
        request.workout_type,
        main_minutes,
        request.fitness_level,
        request.equipment,
        request.injuries,
        rng,
        exclusions,
    )
    cooldown = fill_section(catalog.cooldowns, cooldown_minutes, request.injuries, rng, exclusions)

    logger.debug(
        "Workout %s/%s: %d+%d+%d minutes, %d main exercises",
        request.workout_type.value, request.fitness_level.value,
        warmup_minutes, main_minutes, cooldown_minutes, len(main),
    )

    return WorkoutPlan(
        warmup=WorkoutSection("warmup", warmup_minutes, warmup),
        main=WorkoutSection("main", main_minutes, main),
        cooldown=WorkoutSection("cooldown", cooldown_minutes, cooldown),
        main_fallback=fallback,
    )
