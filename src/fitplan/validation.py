"""Request validation in front of the engine.

The engine assumes well-formed requests. This module turns raw caller input
(strings, comma-separated lists, numbers from a form or the CLI) into
request objects, or raises ``PlanRequestError`` with a machine-readable code.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Type, TypeVar, Union

from fitplan.catalog import FitnessLevel, FocusArea, MealTime, WorkoutType
from fitplan.engine.models import DayPlanRequest, MealRequest, SessionRequest, WorkoutRequest

E = TypeVar("E", bound=Enum)

WORKOUT_MIN_DURATION = 15
WORKOUT_MAX_DURATION = 180
SESSION_MIN_DURATION = 10
SESSION_MAX_DURATION = 180
SESSION_WORKOUT_TYPES = (WorkoutType.GYM, WorkoutType.HOME)


class PlanRequestError(ValueError):
    """Raised when caller input cannot be turned into a plan request."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code

    def to_dict(self) -> dict[str, str]:
        return {"error": str(self), "code": self.code}


def parse_keywords(value: Union[str, Iterable[str], None]) -> list[str]:
    """Parse a comma-separated string or list into trimmed lowercase keywords.

    Examples:
        >>> parse_keywords("Knee, shoulder,,")
        ['knee', 'shoulder']
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [v.strip().lower() for v in value if v and v.strip()]


def _parse_enum(enum_cls: Type[E], value: str, field: str, code: str) -> E:
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(e.value for e in enum_cls)
        raise PlanRequestError(f"{field} must be one of: {valid}", code) from None


def _positive(value, field: str) -> float:
    code = f"INVALID_{field.upper()}"
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise PlanRequestError(f"{field} must be a positive number", code) from None
    if number <= 0:
        raise PlanRequestError(f"{field} must be a positive number", code)
    return number


def _duration(value, low: int, high: int) -> int:
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        minutes = None
    if minutes is None or minutes < low or minutes > high:
        raise PlanRequestError(
            f"duration must be an integer between {low} and {high} minutes",
            "INVALID_DURATION",
        )
    return minutes


def build_meal_request(
    meal_time: str,
    calories,
    protein,
    carbs,
    fats,
    allergies: Union[str, Iterable[str], None] = None,
    goal: str = "",
    seed: Optional[int] = None,
) -> MealRequest:
    """Validate inputs for a single meal."""
    return MealRequest(
        meal_time=_parse_enum(MealTime, meal_time, "meal_time", "INVALID_MEAL_TIME"),
        calories=_positive(calories, "calories"),
        protein=_positive(protein, "protein"),
        carbs=_positive(carbs, "carbs"),
        fats=_positive(fats, "fats"),
        allergies=parse_keywords(allergies),
        goal=(goal or "").strip(),
        seed=seed,
    )


def build_day_request(
    calories,
    protein,
    carbs,
    fats,
    allergies: Union[str, Iterable[str], None] = None,
    goal: str = "",
    seed: Optional[int] = None,
) -> DayPlanRequest:
    """Validate inputs for a full-day plan."""
    return DayPlanRequest(
        calories=_positive(calories, "calories"),
        protein=_positive(protein, "protein"),
        carbs=_positive(carbs, "carbs"),
        fats=_positive(fats, "fats"),
        allergies=parse_keywords(allergies),
        goal=(goal or "").strip(),
        seed=seed,
    )


def build_workout_request(
    workout_type: str,
    duration,
    fitness_level: str,
    equipment: Union[str, Iterable[str], None] = None,
    injuries: Union[str, Iterable[str], None] = None,
    goal: str = "",
    seed: Optional[int] = None,
    min_duration: int = WORKOUT_MIN_DURATION,
    max_duration: int = WORKOUT_MAX_DURATION,
) -> WorkoutRequest:
    """Validate inputs for a sectioned workout."""
    return WorkoutRequest(
        workout_type=_parse_enum(WorkoutType, workout_type, "workout_type", "INVALID_WORKOUT_TYPE"),
        duration=_duration(duration, min_duration, max_duration),
        fitness_level=_parse_enum(
            FitnessLevel, fitness_level, "fitness_level", "INVALID_FITNESS_LEVEL"
        ),
        equipment=parse_keywords(equipment),
        injuries=parse_keywords(injuries),
        goal=(goal or "").strip(),
        seed=seed,
    )


def build_session_request(
    workout_type: str,
    focus_area: str,
    difficulty: str,
    duration,
    equipment: Union[str, Iterable[str], None] = None,
    injuries: Union[str, Iterable[str], None] = None,
) -> SessionRequest:
    """Validate inputs for a focus-area session (gym or home only)."""
    parsed_type = _parse_enum(WorkoutType, workout_type, "workout_type", "INVALID_WORKOUT_TYPE")
    if parsed_type not in SESSION_WORKOUT_TYPES:
        valid = ", ".join(t.value for t in SESSION_WORKOUT_TYPES)
        raise PlanRequestError(f"workout_type must be one of: {valid}", "INVALID_WORKOUT_TYPE")

    return SessionRequest(
        workout_type=parsed_type,
        focus_area=_parse_enum(FocusArea, focus_area, "focus_area", "INVALID_FOCUS_AREA"),
        difficulty=_parse_enum(FitnessLevel, difficulty, "difficulty", "INVALID_DIFFICULTY"),
        duration=_duration(duration, SESSION_MIN_DURATION, SESSION_MAX_DURATION),
        equipment=parse_keywords(equipment),
        injuries=parse_keywords(injuries),
    )
