"""Template catalog: the read-only library plans are generated from.

The catalog is built once per process and passed by reference into the
engine. Nothing in the engine mutates it.
"""

from __future__ import annotations

from fitplan.catalog.loader import (
    build_default_catalog,
    get_catalog,
    load_catalog,
    parse_catalog,
    reset_catalog,
)
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

__all__ = [
    "ExerciseTemplate",
    "FitnessLevel",
    "FocusArea",
    "MealItemTemplate",
    "MealTemplate",
    "MealTime",
    "MicroExercise",
    "TemplateCatalog",
    "WorkoutType",
    "build_default_catalog",
    "get_catalog",
    "load_catalog",
    "parse_catalog",
    "reset_catalog",
]
