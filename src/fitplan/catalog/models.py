"""Data models for the template catalog.

Templates are the hand-authored building blocks every generated plan is
drawn from. They are frozen: scaling always produces new plan items, so a
catalog can be shared by reference across any number of plan requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class MealTime(Enum):
    """Meal time categories for meal templates."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class WorkoutType(Enum):
    """Exercise library keys for sectioned workouts."""

    GYM = "gym"
    HOME = "home"
    CARDIO = "cardio"
    STRENGTH = "strength"


class FitnessLevel(Enum):
    """Fitness levels used for difficulty scaling and session catalogs."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FocusArea(Enum):
    """Body regions for focus-area sessions."""

    FULL_BODY = "full_body"
    UPPER = "upper"
    LOWER = "lower"
    CORE = "core"


Reps = Union[int, str]


@dataclass(frozen=True)
class MealItemTemplate:
    """One named component of a meal template with baseline nutrition.

    Attributes:
        name: Display name (e.g., "Roasted peanuts")
        quantity: Free-text serving size (e.g., "30g")
        calories: Baseline kcal
        protein: Baseline protein grams
        carbs: Baseline carbohydrate grams
        fats: Baseline fat grams
    """

    name: str
    quantity: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class MealTemplate:
    """A complete meal with its sub-items.

    Attributes:
        id: Stable identifier (e.g., "breakfast-poha")
        name: Display name
        meal_time: Category this meal belongs to
        items: Sub-items with baseline nutrition
        instructions: Preparation steps
        alternatives: Suggested substitutions
    """

    id: str
    name: str
    meal_time: MealTime
    items: tuple[MealItemTemplate, ...]
    instructions: str = ""
    alternatives: str = ""

    @property
    def total_calories(self) -> float:
        return sum(i.calories for i in self.items)

    @property
    def total_protein(self) -> float:
        return sum(i.protein for i in self.items)

    @property
    def haystack(self) -> str:
        """Lowercase concatenation of item names, used for allergy matching."""
        return " ".join(i.name.lower() for i in self.items)


@dataclass(frozen=True)
class ExerciseTemplate:
    """A main-section or focus-area exercise with baseline volume.

    Attributes:
        id: Stable identifier
        name: Display name
        category: Library key this exercise was authored under
        sets: Baseline sets
        reps: Baseline reps; int, or a string like "60 seconds" that is
            never scaled
        duration: Baseline minutes for time-based work (None if rep-based)
        rest_seconds: Baseline rest between sets
        equipment: Equipment tag ("none", "chair", "dumbbell", "barbell", ...)
        instructions: Coaching cue
        difficulty: "easy", "moderate" or "hard"
    """

    id: str
    name: str
    category: str
    sets: int = 3
    reps: Optional[Reps] = None
    duration: Optional[int] = None
    rest_seconds: int = 45
    equipment: str = "none"
    instructions: str = ""
    difficulty: str = "moderate"


@dataclass(frozen=True)
class MicroExercise:
    """A short warm-up or cool-down movement with a fixed minute cost."""

    id: str
    name: str
    minutes: int
    instructions: str = ""
    difficulty: str = "easy"


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class TemplateCatalog:
    """Read-only library of every template the engine can draw from.

    Attributes:
        meals: Meal templates keyed by meal time
        workouts: Main-section exercise libraries keyed by workout type
        warmups: Warm-up micro-exercises
        cooldowns: Cool-down micro-exercises
        sessions: Focus-session exercises keyed by (level, focus area)
    """

    meals: Mapping[MealTime, tuple[MealTemplate, ...]]
    workouts: Mapping[WorkoutType, tuple[ExerciseTemplate, ...]]
    warmups: tuple[MicroExercise, ...] = ()
    cooldowns: tuple[MicroExercise, ...] = ()
    sessions: Mapping[tuple[FitnessLevel, FocusArea], tuple[ExerciseTemplate, ...]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "meals", _freeze(self.meals))
        object.__setattr__(self, "workouts", _freeze(self.workouts))
        object.__setattr__(self, "sessions", _freeze(self.sessions))

    def meals_for(self, meal_time: MealTime) -> tuple[MealTemplate, ...]:
        return self.meals.get(meal_time, ())

    def exercises_for(self, workout_type: WorkoutType) -> tuple[ExerciseTemplate, ...]:
        """Get a workout library, falling back to the home library."""
        library = self.workouts.get(workout_type)
        if library is None:
            library = self.workouts.get(WorkoutType.HOME, ())
        return library

    def session_exercises(
        self, level: FitnessLevel, focus: FocusArea
    ) -> tuple[ExerciseTemplate, ...]:
        return self.sessions.get((level, focus), ())

    def safe_default(self) -> tuple[ExerciseTemplate, ...]:
        """Beginner full-body exercises that need no equipment."""
        return tuple(
            ex
            for ex in self.session_exercises(FitnessLevel.BEGINNER, FocusArea.FULL_BODY)
            if ex.equipment == "none"
        )

    def counts(self) -> dict[str, int]:
        """Summarize catalog size per group."""
        return {
            "meals": sum(len(v) for v in self.meals.values()),
            "workout_exercises": sum(len(v) for v in self.workouts.values()),
            "warmups": len(self.warmups),
            "cooldowns": len(self.cooldowns),
            "session_exercises": sum(len(v) for v in self.sessions.values()),
        }
