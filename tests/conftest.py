"""Pytest fixtures for fitplan tests."""

from __future__ import annotations

import random

import pytest

from fitplan.catalog import (
    ExerciseTemplate,
    FitnessLevel,
    FocusArea,
    MealItemTemplate,
    MealTemplate,
    MealTime,
    MicroExercise,
    TemplateCatalog,
    WorkoutType,
    build_default_catalog,
    reset_catalog,
)
from fitplan.config import reload_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at an empty temp location so a user's config never leaks in."""
    monkeypatch.setenv("FITPLAN_CONFIG", str(tmp_path / "config.yaml"))
    reload_settings()
    reset_catalog()
    yield
    reset_catalog()


@pytest.fixture
def catalog():
    """The built-in template catalog."""
    return build_default_catalog()


@pytest.fixture
def rng():
    """Seeded random generator."""
    return random.Random(42)


def make_meal(template_id: str, meal_time: MealTime, *items: tuple) -> MealTemplate:
    """Build a meal template from (name, calories, protein) tuples."""
    return MealTemplate(
        id=template_id,
        name=template_id.replace("-", " ").title(),
        meal_time=meal_time,
        items=tuple(
            MealItemTemplate(name, "1 serving", calories, protein, 10, 5)
            for name, calories, protein in items
        ),
    )


def make_exercise(name: str, equipment: str = "none", category: str = "home") -> ExerciseTemplate:
    """Build a baseline exercise template (3 sets, 12 reps, 45s rest)."""
    return ExerciseTemplate(
        id=f"{category}-{name.lower().replace(' ', '-')}",
        name=name,
        category=category,
        sets=3,
        reps=12,
        rest_seconds=45,
        equipment=equipment,
    )


@pytest.fixture
def small_catalog():
    """A tiny hand-built catalog with one template per meal time.

    Every meal contains yogurt, and the only main-section exercises are
    knee-unfriendly, so filters can be driven into their fallbacks.
    """
    meals = {
        MealTime.BREAKFAST: (
            make_meal("breakfast-yogurt-bowl", MealTime.BREAKFAST, ("Greek yogurt", 200, 10), ("Oats", 150, 5)),
        ),
        MealTime.LUNCH: (
            make_meal("lunch-curd-rice", MealTime.LUNCH, ("Curd", 100, 5), ("Rice", 250, 5)),
        ),
        MealTime.DINNER: (
            make_meal("dinner-raita-pulao", MealTime.DINNER, ("Raita", 80, 3), ("Pulao", 270, 7)),
        ),
        MealTime.SNACK: (
            make_meal("snack-yogurt", MealTime.SNACK, ("Yogurt", 100, 10)),
            make_meal("snack-apple", MealTime.SNACK, ("Apple", 95, 0)),
        ),
    }
    workouts = {
        WorkoutType.HOME: (
            make_exercise("Jump Squats"),
            make_exercise("Reverse Lunges"),
        ),
    }
    sessions = {
        (FitnessLevel.BEGINNER, FocusArea.FULL_BODY): (
            make_exercise("Glute Bridges", category="beginner-full_body"),
            make_exercise("Wall Sit", category="beginner-full_body"),
            make_exercise("Dumbbell Squats", equipment="dumbbell", category="beginner-full_body"),
        ),
        (FitnessLevel.INTERMEDIATE, FocusArea.CORE): (
            make_exercise("Side Plank", category="intermediate-core"),
        ),
    }
    warmups = (
        MicroExercise("warmup-march", "Marching", 2),
        MicroExercise("warmup-arm-swings", "Arm Swings", 1),
    )
    cooldowns = (MicroExercise("cooldown-breathing", "Deep Breathing", 2),)
    return TemplateCatalog(
        meals=meals,
        workouts=workouts,
        warmups=warmups,
        cooldowns=cooldowns,
        sessions=sessions,
    )
