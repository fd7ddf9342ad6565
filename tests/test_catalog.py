"""Tests for the template catalog and YAML loading."""

from __future__ import annotations

import pytest
import yaml

from fitplan.catalog import (
    FitnessLevel,
    FocusArea,
    MealTime,
    TemplateCatalog,
    WorkoutType,
    get_catalog,
    load_catalog,
    parse_catalog,
    reset_catalog,
)
from fitplan.config import reload_settings


class TestBuiltInCatalog:
    """Tests for the built-in templates."""

    def test_counts(self, catalog):
        """Every group is populated."""
        assert catalog.counts() == {
            "meals": 20,
            "workout_exercises": 40,
            "warmups": 10,
            "cooldowns": 10,
            "session_exercises": 54,
        }

    def test_every_meal_time_has_five_templates(self, catalog):
        """Each meal time offers five templates."""
        for meal_time in MealTime:
            assert len(catalog.meals_for(meal_time)) == 5

    def test_every_session_group_present(self, catalog):
        """Each level and focus area has a library."""
        for level in FitnessLevel:
            for focus in FocusArea:
                assert catalog.session_exercises(level, focus)

    def test_ids_unique(self, catalog):
        """Template ids do not collide within a group."""
        meal_ids = [t.id for group in catalog.meals.values() for t in group]
        assert len(meal_ids) == len(set(meal_ids))
        exercise_ids = [t.id for group in catalog.workouts.values() for t in group]
        assert len(exercise_ids) == len(set(exercise_ids))

    def test_safe_default_is_bodyweight(self, catalog):
        """The safe default is beginner full-body work with no equipment."""
        default = catalog.safe_default()
        assert [e.name for e in default] == [
            "Bodyweight Squats",
            "Knee Push-ups",
            "Plank",
            "Walking Lunges",
            "Glute Bridges",
        ]
        assert all(e.equipment == "none" for e in default)

    def test_catalog_is_read_only(self, catalog):
        """Catalog mappings cannot be modified."""
        with pytest.raises(TypeError):
            catalog.meals[MealTime.BREAKFAST] = ()
        with pytest.raises(AttributeError):
            catalog.warmups = ()

    def test_missing_library_falls_back_to_home(self, small_catalog):
        """Unknown workout types draw from the home library."""
        assert small_catalog.exercises_for(WorkoutType.CARDIO) == small_catalog.exercises_for(
            WorkoutType.HOME
        )

    def test_template_totals(self, catalog):
        """Template totals are computed from items."""
        poha = next(t for t in catalog.meals_for(MealTime.BREAKFAST) if t.id == "breakfast-poha")
        assert poha.total_calories == 500
        assert poha.total_protein == 22
        assert "roasted peanuts" in poha.haystack


CATALOG_YAML = {
    "meals": {
        "breakfast": [
            {
                "id": "breakfast-oats",
                "name": "Overnight Oats",
                "items": [
                    {"name": "Rolled oats", "quantity": "1/2 cup", "calories": 150, "protein": 5, "carbs": 27, "fats": 3},
                    {"name": "Milk", "quantity": "1 cup", "calories": 100, "protein": 8, "carbs": 12, "fats": 2},
                ],
            }
        ],
    },
    "workouts": {
        "home": [
            {"name": "Push-ups", "sets": 3, "reps": 15, "rest_seconds": 45},
            {"name": "Wall Sit", "reps": "45 seconds", "equipment": "None"},
        ],
    },
    "warmups": [{"name": "Arm Circles", "minutes": 1}],
    "sessions": {
        "beginner": {
            "full_body": [{"name": "Glute Bridges", "reps": 12}],
        },
    },
}


class TestParseCatalog:
    """Tests for building catalogs from documents."""

    def test_parse_minimal(self):
        """A document with meals, workouts and sessions parses."""
        catalog = parse_catalog(CATALOG_YAML)
        oats = catalog.meals_for(MealTime.BREAKFAST)[0]
        assert oats.id == "breakfast-oats"
        assert oats.total_calories == 250
        home = catalog.exercises_for(WorkoutType.HOME)
        assert home[0].id == "home-push-ups"
        assert home[1].equipment == "none"
        assert home[1].reps == "45 seconds"
        assert catalog.warmups[0].minutes == 1
        assert catalog.safe_default()[0].name == "Glute Bridges"

    def test_requires_meals(self):
        """A document without meals is rejected."""
        with pytest.raises(ValueError, match="meals"):
            parse_catalog({"workouts": {}})

    def test_unknown_meal_time(self):
        """Unknown meal time keys are rejected."""
        with pytest.raises(ValueError, match="brunch"):
            parse_catalog({"meals": {"brunch": []}})

    def test_unknown_workout_type(self):
        """Unknown workout types are rejected."""
        with pytest.raises(ValueError, match="yoga"):
            parse_catalog({"meals": {}, "workouts": {"yoga": []}})

    def test_missing_field(self):
        """Items without calories are rejected."""
        doc = {"meals": {"lunch": [{"name": "Bowl", "items": [{"name": "Rice"}]}]}}
        with pytest.raises(ValueError, match="calories"):
            parse_catalog(doc)


class TestLoadCatalog:
    """Tests for loading catalogs from YAML files."""

    def test_load_file(self, tmp_path):
        """A YAML file loads into a catalog."""
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(CATALOG_YAML))
        catalog = load_catalog(path)
        assert isinstance(catalog, TemplateCatalog)
        assert catalog.counts()["meals"] == 1

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.yaml")

    def test_settings_path_used(self, tmp_path):
        """get_catalog() honors the catalog.path setting."""
        catalog_path = tmp_path / "catalog.yaml"
        catalog_path.write_text(yaml.safe_dump(CATALOG_YAML))
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"catalog": {"path": str(catalog_path)}}))

        reload_settings(config_path)
        reset_catalog()
        assert get_catalog().counts()["meals"] == 1

    def test_default_catalog_cached(self):
        """get_catalog() returns the same instance until reset."""
        first = get_catalog()
        assert get_catalog() is first
        reset_catalog()
        assert get_catalog() is not first
