"""Plan generation engine.

Turns a numeric target plus exclusion rules into a meal or workout drawn
from the template catalog:

- Exclusion filtering (allergies, injuries, equipment)
- Seeded sampling without replacement
- Greedy time-budget packing for warm-up and cool-down
- Difficulty scaling for exercises, clamped macro scaling for meals
- Plan assembly with totals recomputed from the final items
"""

from __future__ import annotations

from fitplan.engine.exclusions import DEFAULT_EXCLUSIONS, ExclusionSet
from fitplan.engine.meals import generate_day_plan, generate_meal
from fitplan.engine.models import (
    DayPlan,
    DayPlanRequest,
    Exercise,
    Macros,
    MealItem,
    MealPlan,
    MealRequest,
    SessionPlan,
    SessionRequest,
    WorkoutPlan,
    WorkoutRequest,
    WorkoutSection,
)
from fitplan.engine.sessions import generate_session
from fitplan.engine.workouts import generate_workout

__all__ = [
    "DEFAULT_EXCLUSIONS",
    "DayPlan",
    "DayPlanRequest",
    "Exercise",
    "ExclusionSet",
    "Macros",
    "MealItem",
    "MealPlan",
    "MealRequest",
    "SessionPlan",
    "SessionRequest",
    "WorkoutPlan",
    "WorkoutRequest",
    "WorkoutSection",
    "generate_day_plan",
    "generate_meal",
    "generate_session",
    "generate_workout",
]
