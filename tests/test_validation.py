"""Tests for request validation."""

from __future__ import annotations

import pytest

from fitplan.catalog import FitnessLevel, FocusArea, MealTime, WorkoutType
from fitplan.validation import (
    PlanRequestError,
    build_day_request,
    build_meal_request,
    build_session_request,
    build_workout_request,
    parse_keywords,
)


class TestParseKeywords:
    """Tests for keyword parsing."""

    def test_comma_string(self):
        """Comma-separated strings are split, trimmed and lowercased."""
        assert parse_keywords(" Knee, SHOULDER ,, ") == ["knee", "shoulder"]

    def test_list_and_none(self):
        """Lists are normalized and None gives an empty list."""
        assert parse_keywords(["Dairy", " "]) == ["dairy"]
        assert parse_keywords(None) == []


class TestMealValidation:
    """Tests for meal and day request validation."""

    def test_valid_meal(self):
        """Valid input builds a request."""
        request = build_meal_request("Lunch", "600", 30, 70, 20, "dairy, nuts", " cut ", 5)
        assert request.meal_time == MealTime.LUNCH
        assert request.calories == 600.0
        assert request.allergies == ["dairy", "nuts"]
        assert request.goal == "cut"
        assert request.seed == 5

    def test_invalid_meal_time(self):
        """Unknown meal times are rejected with a code."""
        with pytest.raises(PlanRequestError) as exc:
            build_meal_request("brunch", 500, 20, 60, 15)
        assert exc.value.code == "INVALID_MEAL_TIME"

    @pytest.mark.parametrize(
        "field,args",
        [
            ("INVALID_CALORIES", (0, 20, 60, 15)),
            ("INVALID_PROTEIN", (500, -1, 60, 15)),
            ("INVALID_CARBS", (500, 20, "lots", 15)),
            ("INVALID_FATS", (500, 20, 60, None)),
        ],
    )
    def test_non_positive_numbers(self, field, args):
        """Each macro target must be a positive number."""
        with pytest.raises(PlanRequestError) as exc:
            build_meal_request("snack", *args)
        assert exc.value.code == field

    def test_error_is_value_error(self):
        """Validation errors are ValueErrors with a serializable form."""
        with pytest.raises(ValueError):
            build_day_request(-100, 50, 200, 60)
        err = PlanRequestError("bad", "INVALID_CALORIES")
        assert err.to_dict() == {"error": "bad", "code": "INVALID_CALORIES"}

    def test_valid_day(self):
        """Day requests carry daily targets."""
        request = build_day_request(2000, 100, 250, 60, ["Peanut"])
        assert request.calories == 2000
        assert request.allergies == ["peanut"]


class TestWorkoutValidation:
    """Tests for workout and session validation."""

    def test_valid_workout(self):
        """Valid input builds a workout request."""
        request = build_workout_request("GYM", "45", "advanced", "dumbbells", "knee")
        assert request.workout_type == WorkoutType.GYM
        assert request.duration == 45
        assert request.fitness_level == FitnessLevel.ADVANCED
        assert request.equipment == ["dumbbells"]
        assert request.injuries == ["knee"]

    @pytest.mark.parametrize("duration", [14, 181, "abc", None])
    def test_duration_bounds(self, duration):
        """Workout durations must be 15 to 180 minutes."""
        with pytest.raises(PlanRequestError) as exc:
            build_workout_request("home", duration, "beginner")
        assert exc.value.code == "INVALID_DURATION"

    def test_custom_duration_bounds(self):
        """Bounds can be tightened by the caller."""
        with pytest.raises(PlanRequestError):
            build_workout_request("home", 20, "beginner", min_duration=30)

    def test_invalid_type_and_level(self):
        """Unknown workout types and levels are rejected."""
        with pytest.raises(PlanRequestError) as exc:
            build_workout_request("yoga", 30, "beginner")
        assert exc.value.code == "INVALID_WORKOUT_TYPE"
        with pytest.raises(PlanRequestError) as exc:
            build_workout_request("home", 30, "expert")
        assert exc.value.code == "INVALID_FITNESS_LEVEL"

    def test_valid_session(self):
        """Sessions accept durations from 10 minutes."""
        request = build_session_request("home", "core", "beginner", 10, injuries="wrist")
        assert request.focus_area == FocusArea.CORE
        assert request.difficulty == FitnessLevel.BEGINNER
        assert request.duration == 10
        assert request.injuries == ["wrist"]

    def test_session_rejects_cardio(self):
        """Sessions are gym or home only."""
        with pytest.raises(PlanRequestError) as exc:
            build_session_request("cardio", "core", "beginner", 30)
        assert exc.value.code == "INVALID_WORKOUT_TYPE"

    def test_session_codes(self):
        """Focus area, difficulty and duration each have their own code."""
        with pytest.raises(PlanRequestError) as exc:
            build_session_request("gym", "arms", "beginner", 30)
        assert exc.value.code == "INVALID_FOCUS_AREA"
        with pytest.raises(PlanRequestError) as exc:
            build_session_request("gym", "core", "pro", 30)
        assert exc.value.code == "INVALID_DIFFICULTY"
        with pytest.raises(PlanRequestError) as exc:
            build_session_request("gym", "core", "beginner", 9)
        assert exc.value.code == "INVALID_DURATION"
