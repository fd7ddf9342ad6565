"""Catalog construction and YAML loading.

The built-in catalog is assembled once per process by ``get_catalog()``.
A replacement catalog can be authored as YAML and loaded with
``load_catalog()``, either directly or through the ``catalog.path`` setting.

YAML layout (every top-level key is optional except ``meals``):

    meals:
      breakfast:
        - id: breakfast-oats
          name: Oats
          items:
            - {name: Rolled oats, quantity: 1/2 cup, calories: 150,
               protein: 5, carbs: 27, fats: 3}
    workouts:
      home:
        - {id: home-push-ups, name: Push-ups, sets: 3, reps: 15,
           rest_seconds: 45, equipment: none}
    warmups:
      - {id: warmup-arm-circles, name: Arm Circles, minutes: 1}
    cooldowns: [...]
    sessions:
      beginner:
        full_body: [...]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from fitplan.catalog.exercises import (
    COOLDOWN_EXERCISES,
    SESSION_EXERCISES,
    WARMUP_EXERCISES,
    WORKOUT_LIBRARIES,
)
from fitplan.catalog.meals import MEAL_TEMPLATES
from fitplan.catalog.models import (
    ExerciseTemplate,
    FitnessLevel,
    FocusArea,
    MealItemTemplate,
    MealTemplate,
    MealTime,
    MicroExercise,
    TemplateCatalog,
    WorkoutType,
)


def build_default_catalog() -> TemplateCatalog:
    """Assemble the built-in catalog."""
    return TemplateCatalog(
        meals=MEAL_TEMPLATES,
        workouts=WORKOUT_LIBRARIES,
        warmups=WARMUP_EXERCISES,
        cooldowns=COOLDOWN_EXERCISES,
        sessions=SESSION_EXERCISES,
    )


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where}: missing required field '{key}'")
    return data[key]


def _enum(enum_cls, value: str, where: str):
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(e.value for e in enum_cls)
        raise ValueError(f"{where}: unknown key '{value}' (expected one of: {valid})") from None


def _parse_meal(data: dict[str, Any], meal_time: MealTime) -> MealTemplate:
    where = f"meals.{meal_time.value}"
    name = _require(data, "name", where)
    items = tuple(
        MealItemTemplate(
            name=_require(item, "name", f"{where}.{name}"),
            quantity=str(item.get("quantity", "")),
            calories=float(_require(item, "calories", f"{where}.{name}")),
            protein=float(item.get("protein", 0)),
            carbs=float(item.get("carbs", 0)),
            fats=float(item.get("fats", 0)),
        )
        for item in _require(data, "items", f"{where}.{name}")
    )
    return MealTemplate(
        id=data.get("id") or f"{meal_time.value}-{name.lower().replace(' ', '-')}",
        name=name,
        meal_time=meal_time,
        items=items,
        instructions=data.get("instructions", ""),
        alternatives=data.get("alternatives", ""),
    )


def _parse_exercise(data: dict[str, Any], category: str) -> ExerciseTemplate:
    name = _require(data, "name", category)
    return ExerciseTemplate(
        id=data.get("id") or f"{category}-{name.lower().replace(' ', '-')}",
        name=name,
        category=category,
        sets=int(data.get("sets", 3)),
        reps=data.get("reps"),
        duration=data.get("duration"),
        rest_seconds=int(data.get("rest_seconds", 45)),
        equipment=str(data.get("equipment", "none")).lower(),
        instructions=data.get("instructions", ""),
        difficulty=data.get("difficulty", "moderate"),
    )


def _parse_micro(data: dict[str, Any], prefix: str) -> MicroExercise:
    name = _require(data, "name", prefix)
    return MicroExercise(
        id=data.get("id") or f"{prefix}-{name.lower().replace(' ', '-')}",
        name=name,
        minutes=int(_require(data, "minutes", f"{prefix}.{name}")),
        instructions=data.get("instructions", ""),
        difficulty=data.get("difficulty", "easy"),
    )


def parse_catalog(data: dict[str, Any]) -> TemplateCatalog:
    """Build a catalog from a parsed YAML/JSON document.

    Args:
        data: Mapping in the layout documented in this module

    Returns:
        TemplateCatalog

    Raises:
        ValueError: If a category key is unknown or a required field is missing
    """
    if not isinstance(data, dict) or "meals" not in data:
        raise ValueError("Catalog document must be a mapping with a 'meals' section")

    meals = {}
    for key, entries in (data["meals"] or {}).items():
        meal_time = _enum(MealTime, key, "meals")
        meals[meal_time] = tuple(_parse_meal(m, meal_time) for m in entries or [])

    workouts = {}
    for key, entries in (data.get("workouts") or {}).items():
        workout_type = _enum(WorkoutType, key, "workouts")
        workouts[workout_type] = tuple(
            _parse_exercise(e, workout_type.value) for e in entries or []
        )

    sessions = {}
    for level_key, areas in (data.get("sessions") or {}).items():
        level = _enum(FitnessLevel, level_key, "sessions")
        for focus_key, entries in (areas or {}).items():
            focus = _enum(FocusArea, focus_key, f"sessions.{level_key}")
            category = f"{level.value}-{focus.value}"
            sessions[(level, focus)] = tuple(_parse_exercise(e, category) for e in entries or [])

    return TemplateCatalog(
        meals=meals,
        workouts=workouts,
        warmups=tuple(_parse_micro(w, "warmup") for w in data.get("warmups") or []),
        cooldowns=tuple(_parse_micro(c, "cooldown") for c in data.get("cooldowns") or []),
        sessions=sessions,
    )


def load_catalog(path: Path) -> TemplateCatalog:
    """Load a catalog from a YAML file.

    Args:
        path: Path to catalog YAML

    Returns:
        TemplateCatalog

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return parse_catalog(data)


# Process-wide catalog (lazy loaded, never mutated)
_catalog: Optional[TemplateCatalog] = None


def get_catalog() -> TemplateCatalog:
    """Get the process-wide catalog, building it on first use.

    Uses the YAML file named by the ``catalog.path`` setting when present,
    otherwise the built-in templates.
    """
    global _catalog
    if _catalog is None:
        from fitplan.config import get_settings

        catalog_path = get_settings().catalog.path
        _catalog = load_catalog(catalog_path) if catalog_path else build_default_catalog()
    return _catalog


def reset_catalog() -> None:
    """Drop the cached catalog so the next ``get_catalog()`` rebuilds it."""
    global _catalog
    _catalog = None
