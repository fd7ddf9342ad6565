"""Difficulty and macro scaling.

Both scalers produce new plan items and never touch the templates they
read from. Rounding is half-up throughout, so 10.5 reps become 11.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from fitplan.catalog.models import ExerciseTemplate, FitnessLevel, MealItemTemplate, MealTime
from fitplan.engine.models import Exercise, MealItem

MIN_ITEM_SCALE = 0.5
MAX_ITEM_SCALE = 2.0
PROTEIN_GAP_THRESHOLD = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


# =============================================================================
# Difficulty scaling
# =============================================================================


@dataclass(frozen=True)
class DifficultyProfile:
    """Per-level volume settings.

    Attributes:
        sets: Sets multiplier numerator (applied as sets / 3), also the
            absolute set count for focus sessions
        reps: Reps and duration multiplier
        rest: Rest multiplier numerator (applied as rest / 45)
        min_reps: Low end of the focus-session rep range
        max_reps: High end of the focus-session rep range
        rest_seconds: Focus-session rest between sets
        hold_bonus: Extra seconds added to core-session plank holds
    """

    sets: int
    reps: float
    rest: int
    min_reps: int
    max_reps: int
    rest_seconds: int
    hold_bonus: int

    @property
    def rep_range(self) -> str:
        return f"{self.min_reps}-{self.max_reps}"


DIFFICULTY_PROFILES: dict[FitnessLevel, DifficultyProfile] = {
    FitnessLevel.BEGINNER: DifficultyProfile(
        sets=2, reps=0.7, rest=60, min_reps=8, max_reps=10, rest_seconds=75, hold_bonus=0
    ),
    FitnessLevel.INTERMEDIATE: DifficultyProfile(
        sets=3, reps=1.0, rest=45, min_reps=10, max_reps=12, rest_seconds=52, hold_bonus=15
    ),
    FitnessLevel.ADVANCED: DifficultyProfile(
        sets=4, reps=1.3, rest=30, min_reps=12, max_reps=15, rest_seconds=37, hold_bonus=30
    ),
}


def get_profile(level: FitnessLevel) -> DifficultyProfile:
    return DIFFICULTY_PROFILES[level]


def scale_exercise(template: ExerciseTemplate, profile: DifficultyProfile) -> Exercise:
    """Apply a difficulty profile to a main-section exercise.

    Multipliers are relative to the intermediate baseline (3 sets, 45s rest).
    String reps such as "60 seconds" are kept as authored.
    """
    reps = template.reps
    if isinstance(reps, (int, float)) and not isinstance(reps, bool):
        reps = round_half_up(reps * profile.reps)

    duration = None
    if template.duration:
        duration = round_half_up(template.duration * profile.reps)

    return Exercise(
        name=template.name,
        sets=max(2, round_half_up(template.sets * profile.sets / 3)),
        reps=reps,
        duration=duration,
        rest_seconds=round_half_up(template.rest_seconds * profile.rest / 45),
        instructions=template.instructions,
        difficulty=template.difficulty,
    )


# =============================================================================
# Macro scaling
# =============================================================================


def clamp_scale(target_calories: float, current_calories: float) -> float:
    """Compute the shared item scale, clamped to [0.5, 2.0]."""
    scale = target_calories / current_calories if current_calories > 0 else 1.0
    return max(MIN_ITEM_SCALE, min(MAX_ITEM_SCALE, scale))


def scale_meal_items(
    items: tuple[MealItemTemplate, ...], target_calories: float
) -> tuple[list[MealItem], float]:
    """Scale every item of a template by one clamped factor.

    Args:
        items: Template sub-items
        target_calories: Calorie target for the meal

    Returns:
        Tuple of (new items, applied item scale)
    """
    item_scale = clamp_scale(target_calories, sum(i.calories for i in items))
    scaled = [
        MealItem(
            name=i.name,
            quantity=i.quantity,
            calories=round_half_up(i.calories * item_scale),
            protein=round_half_up(i.protein * item_scale),
            carbs=round_half_up(i.carbs * item_scale),
            fats=round_half_up(i.fats * item_scale),
        )
        for i in items
    ]
    return scaled, item_scale


def protein_supplement(meal_time: MealTime, deficit: float) -> MealItem | None:
    """Build the protein top-up item for a shortfall, if one is needed.

    A deficit of more than 5g adds Greek yogurt (breakfast, snack; up to
    10g) or paneer cubes (lunch, dinner; up to 7g). Its calories, carbs and
    fats are fixed; only protein follows the deficit.
    """
    if deficit <= PROTEIN_GAP_THRESHOLD:
        return None

    if meal_time in (MealTime.BREAKFAST, MealTime.SNACK):
        return MealItem(
            name="Greek yogurt (protein boost)",
            quantity="100g",
            calories=100,
            protein=min(deficit, 10),
            carbs=5,
            fats=5,
        )
    return MealItem(
        name="Paneer cubes (protein boost)",
        quantity="50g",
        calories=90,
        protein=min(deficit, 7),
        carbs=2,
        fats=6,
    )
