"""Focus-area session generation.

A session is a single block of exercises drawn in catalog order from the
level x focus-area library. Volume comes straight from the difficulty
profile instead of being scaled from a baseline.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from fitplan.catalog import FocusArea, TemplateCatalog, WorkoutType, get_catalog
from fitplan.engine.exclusions import (
    DEFAULT_EXCLUSIONS,
    ExclusionSet,
    filter_by_injuries,
    filter_for_home,
)
from fitplan.engine.models import Exercise, SessionPlan, SessionRequest
from fitplan.engine.scaling import DifficultyProfile, get_profile

logger = logging.getLogger(__name__)

WORK_MINUTES_PER_SET = 3
BASE_HOLD_SECONDS = 30


def exercises_needed(duration: int, profile: DifficultyProfile) -> int:
    """Estimate how many exercises fill ``duration`` minutes at a profile's pace."""
    minutes_per_set = WORK_MINUTES_PER_SET + profile.rest_seconds / 60
    total_sets = math.floor(duration / minutes_per_set)
    return math.ceil(total_sets / profile.sets)


def session_name(request: SessionRequest) -> str:
    focus = " ".join(w.capitalize() for w in request.focus_area.value.split("_"))
    place = "Gym" if request.workout_type == WorkoutType.GYM else "Home"
    return f"{request.difficulty.value.capitalize()} {focus} {place} Workout"


def generate_session(
    request: SessionRequest,
    catalog: Optional[TemplateCatalog] = None,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> SessionPlan:
    """Generate a focus-area session.

    Home sessions keep only exercises that need no equipment, a chair, a
    dumbbell, or equipment the user listed. Injury filtering applies to both
    gym and home sessions. If nothing is left, the injury-safe beginner
    full-body default is used.

    Args:
        request: Type, focus area, difficulty, duration, equipment and injuries
        catalog: Template catalog (defaults to the process-wide catalog)
        exclusions: Rule tables

    Returns:
        SessionPlan
    """
    catalog = catalog or get_catalog()
    profile = get_profile(request.difficulty)

    pool = list(catalog.session_exercises(request.difficulty, request.focus_area))
    if request.workout_type == WorkoutType.HOME:
        pool = filter_for_home(pool, request.equipment, exclusions)
    pool = filter_by_injuries(pool, request.injuries, exclusions)

    fallback = False
    if not pool:
        fallback = True
        pool = filter_by_injuries(catalog.safe_default(), request.injuries, exclusions)
        logger.info("Focus pool empty after filtering; using %d safe default exercises", len(pool))

    selected = pool[: min(exercises_needed(request.duration, profile), len(pool))]

    exercises = []
    for template in selected:
        if request.focus_area == FocusArea.CORE and "plank" in template.name.lower():
            reps = f"{BASE_HOLD_SECONDS + profile.hold_bonus} seconds"
        else:
            reps = profile.rep_range
        exercises.append(
            Exercise(
                name=template.name,
                sets=profile.sets,
                reps=reps,
                rest_seconds=profile.rest_seconds,
                instructions=template.instructions,
                difficulty=template.difficulty,
            )
        )

    return SessionPlan(
        workout_name=session_name(request),
        workout_type=request.workout_type,
        focus_area=request.focus_area,
        difficulty=request.difficulty,
        duration=request.duration,
        exercises=exercises,
        fallback=fallback,
    )
