"""Data models for generated plans.

Every aggregate here (meal macros, day totals, workout duration) is a
property computed from the plan's own items. There is no field a caller
could overwrite with a requested target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from fitplan.catalog.models import (
    FitnessLevel,
    FocusArea,
    MealTime,
    Reps,
    WorkoutType,
)


# =============================================================================
# Requests
# =============================================================================


@dataclass
class MealRequest:
    """Request for a single meal.

    Attributes:
        meal_time: Category to draw the template from
        calories: Target kcal
        protein: Target protein grams
        carbs: Target carbohydrate grams (informational)
        fats: Target fat grams (informational)
        allergies: Lowercase allergy keywords
        goal: Free-text goal label (informational)
        seed: Random seed for reproducibility
    """

    meal_time: MealTime
    calories: float
    protein: float
    carbs: float = 0.0
    fats: float = 0.0
    allergies: list[str] = field(default_factory=list)
    goal: str = ""
    seed: Optional[int] = None


@dataclass
class DayPlanRequest:
    """Request for a full day of meals, with daily targets."""

    calories: float
    protein: float
    carbs: float = 0.0
    fats: float = 0.0
    allergies: list[str] = field(default_factory=list)
    goal: str = ""
    seed: Optional[int] = None


@dataclass
class WorkoutRequest:
    """Request for a sectioned (warm-up / main / cool-down) workout.

    Attributes:
        workout_type: Main-section library to draw from
        duration: Total minutes
        fitness_level: Level used for difficulty scaling
        equipment: Available equipment keywords (gym filtering only)
        injuries: Injury keywords
        goal: Free-text goal label (informational)
        seed: Random seed for reproducibility
    """

    workout_type: WorkoutType
    duration: int
    fitness_level: FitnessLevel
    equipment: list[str] = field(default_factory=list)
    injuries: list[str] = field(default_factory=list)
    goal: str = ""
    seed: Optional[int] = None


@dataclass
class SessionRequest:
    """Request for a single-section focus-area session."""

    workout_type: WorkoutType
    focus_area: FocusArea
    difficulty: FitnessLevel
    duration: int
    equipment: list[str] = field(default_factory=list)
    injuries: list[str] = field(default_factory=list)


# =============================================================================
# Meal plans
# =============================================================================


@dataclass(frozen=True)
class Macros:
    """Calories and macronutrients."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0

    def __add__(self, other: "Macros") -> "Macros":
        return Macros(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }


@dataclass
class MealItem:
    """A resolved meal item with its final (scaled) nutrition."""

    name: str
    quantity: str
    calories: float
    protein: float
    carbs: float
    fats: float

    @property
    def macros(self) -> Macros:
        return Macros(self.calories, self.protein, self.carbs, self.fats)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }


def sum_macros(items: list[MealItem]) -> Macros:
    total = Macros()
    for item in items:
        total = total + item.macros
    return total


@dataclass
class MealPlan:
    """A generated meal.

    Attributes:
        name: Template display name
        meal_time: Category the template came from
        template_id: Identifier of the source template
        items: Final items, including any protein supplement
        instructions: Preparation steps
        alternatives: Suggested substitutions
        item_scale: Clamped scale factor applied to every template item
        allergen_fallback: True when allergy filtering emptied the pool and
            the unfiltered pool was used
    """

    name: str
    meal_time: MealTime
    template_id: str
    items: list[MealItem]
    instructions: str = ""
    alternatives: str = ""
    item_scale: float = 1.0
    allergen_fallback: bool = False

    @property
    def total_macros(self) -> Macros:
        return sum_macros(self.items)

    @property
    def has_supplement(self) -> bool:
        return any(i.name.endswith("(protein boost)") for i in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "mealTime": self.meal_time.value,
            "items": [i.to_dict() for i in self.items],
            "totalMacros": self.total_macros.to_dict(),
            "instructions": self.instructions,
            "alternatives": self.alternatives,
            "allergenFallback": self.allergen_fallback,
        }


@dataclass
class DayPlan:
    """A full day of meals.

    Attributes:
        meals: Meals in serving order
        snack_shortfall: Snacks left out because too few templates avoid
            the requested allergies
    """

    meals: list[MealPlan]
    snack_shortfall: int = 0

    @property
    def total_macros(self) -> Macros:
        total = Macros()
        for meal in self.meals:
            total = total + meal.total_macros
        return total

    @property
    def allergen_fallback(self) -> bool:
        return any(m.allergen_fallback for m in self.meals)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meals": [m.to_dict() for m in self.meals],
            "totalMacros": self.total_macros.to_dict(),
            "allergenFallback": self.allergen_fallback,
            "snackShortfall": self.snack_shortfall,
        }


# =============================================================================
# Workout plans
# =============================================================================


@dataclass
class Exercise:
    """A resolved exercise with final (scaled) volume.

    ``duration`` is in seconds for warm-up/cool-down items and in minutes for
    time-based main-section work, matching the public output shape.
    """

    name: str
    rest_seconds: int
    instructions: str = ""
    difficulty: str = ""
    sets: Optional[int] = None
    reps: Optional[Reps] = None
    duration: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.sets is not None:
            data["sets"] = self.sets
        if self.reps is not None:
            data["reps"] = self.reps
        if self.duration is not None:
            data["duration"] = self.duration
        data["rest_seconds"] = self.rest_seconds
        data["instructions"] = self.instructions
        data["difficulty"] = self.difficulty
        return data


@dataclass
class WorkoutSection:
    """A duration-bounded group of exercises."""

    type: str  # "warmup", "main" or "cooldown"
    duration: int
    exercises: list[Exercise] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "duration": self.duration,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass
class WorkoutPlan:
    """A sectioned workout.

    Attributes:
        warmup: Warm-up section
        main: Main section
        cooldown: Cool-down section
        main_fallback: True when the safe default replaced an empty main pool
    """

    warmup: WorkoutSection
    main: WorkoutSection
    cooldown: WorkoutSection
    main_fallback: bool = False

    @property
    def sections(self) -> list[WorkoutSection]:
        return [self.warmup, self.main, self.cooldown]

    @property
    def total_duration(self) -> int:
        return sum(s.duration for s in self.sections)

    def exercise_names(self) -> list[str]:
        return [e.name for s in self.sections for e in s.exercises]

    def to_dict(self) -> dict[str, Any]:
        return {
            "warmup": self.warmup.to_dict(),
            "main": self.main.to_dict(),
            "cooldown": self.cooldown.to_dict(),
            "totalDuration": self.total_duration,
            "mainFallback": self.main_fallback,
        }


@dataclass
class SessionPlan:
    """A single-section focus-area workout."""

    workout_name: str
    workout_type: WorkoutType
    focus_area: FocusArea
    difficulty: FitnessLevel
    duration: int
    exercises: list[Exercise] = field(default_factory=list)
    fallback: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "workoutName": self.workout_name,
            "workoutType": self.workout_type.value,
            "focusArea": self.focus_area.value,
            "difficulty": self.difficulty.value,
            "duration": self.duration,
            "exercises": [e.to_dict() for e in self.exercises],
            "fallback": self.fallback,
        }
