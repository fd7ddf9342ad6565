"""Tests for difficulty and macro scaling."""

from __future__ import annotations

import pytest

from fitplan.catalog import ExerciseTemplate, FitnessLevel, MealItemTemplate, MealTime
from fitplan.engine.scaling import (
    DIFFICULTY_PROFILES,
    clamp_scale,
    get_profile,
    protein_supplement,
    round_half_up,
    scale_exercise,
    scale_meal_items,
)


def _template(**kwargs) -> ExerciseTemplate:
    defaults = dict(id="t", name="Push-ups", category="home", sets=3, reps=10, rest_seconds=45)
    defaults.update(kwargs)
    return ExerciseTemplate(**defaults)


class TestRounding:
    """Tests for half-up rounding."""

    def test_half_rounds_up(self):
        """Ties round up rather than to even."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2


class TestDifficultyScaling:
    """Tests for main-section exercise scaling."""

    def test_intermediate_is_identity(self):
        """The intermediate profile leaves the baseline unchanged."""
        ex = scale_exercise(_template(), get_profile(FitnessLevel.INTERMEDIATE))
        assert (ex.sets, ex.reps, ex.rest_seconds) == (3, 10, 45)

    def test_beginner(self):
        """Beginners get fewer sets, fewer reps and longer rest."""
        ex = scale_exercise(_template(sets=4), get_profile(FitnessLevel.BEGINNER))
        assert ex.sets == 3  # 4 * 2/3 = 2.67
        assert ex.reps == 7
        assert ex.rest_seconds == 60

    def test_advanced(self):
        """Advanced users get more sets, more reps and shorter rest."""
        ex = scale_exercise(_template(sets=4), get_profile(FitnessLevel.ADVANCED))
        assert ex.sets == 5  # 4 * 4/3 = 5.33
        assert ex.reps == 13
        assert ex.rest_seconds == 30

    def test_minimum_two_sets(self):
        """Scaled sets never drop below two."""
        ex = scale_exercise(_template(sets=1), get_profile(FitnessLevel.BEGINNER))
        assert ex.sets == 2

    def test_string_reps_unchanged(self):
        """Timed reps like '60 seconds' are kept as authored."""
        ex = scale_exercise(_template(reps="60 seconds"), get_profile(FitnessLevel.ADVANCED))
        assert ex.reps == "60 seconds"

    def test_duration_scaled(self):
        """Time-based work scales with the reps multiplier."""
        template = _template(reps=None, duration=3)
        assert scale_exercise(template, get_profile(FitnessLevel.ADVANCED)).duration == 4
        assert scale_exercise(template, get_profile(FitnessLevel.BEGINNER)).duration == 2

    def test_zero_rest_stays_zero(self):
        """Continuous work keeps zero rest."""
        ex = scale_exercise(_template(rest_seconds=0), get_profile(FitnessLevel.BEGINNER))
        assert ex.rest_seconds == 0

    def test_template_not_modified(self):
        """Scaling produces a new exercise; the template is untouched."""
        template = _template()
        scale_exercise(template, get_profile(FitnessLevel.ADVANCED))
        assert template.sets == 3 and template.reps == 10

    def test_profiles_for_every_level(self):
        """Every fitness level has a profile."""
        assert set(DIFFICULTY_PROFILES) == set(FitnessLevel)
        assert get_profile(FitnessLevel.BEGINNER).rep_range == "8-10"
        assert get_profile(FitnessLevel.ADVANCED).rep_range == "12-15"


class TestMacroScaling:
    """Tests for clamped meal scaling."""

    ITEMS = (
        MealItemTemplate("Dal", "1 cup", 200, 10, 30, 2),
        MealItemTemplate("Rice", "1 cup", 150, 4, 32, 1),
    )

    def test_clamp_upper(self):
        """Scale factors above 2.0 are clamped."""
        assert clamp_scale(2200, 350) == 2.0

    def test_clamp_lower(self):
        """Scale factors below 0.5 are clamped."""
        assert clamp_scale(100, 350) == 0.5

    def test_zero_baseline(self):
        """A zero-calorie baseline scales by 1.0."""
        assert clamp_scale(500, 0) == 1.0

    def test_scale_applied_uniformly(self):
        """Every item and macro is scaled by the same factor."""
        items, scale = scale_meal_items(self.ITEMS, 2200)
        assert scale == 2.0
        assert [i.calories for i in items] == [400, 300]
        assert [i.protein for i in items] == [20, 8]
        assert [i.carbs for i in items] == [60, 64]

    def test_within_range(self):
        """An in-range target scales exactly."""
        items, scale = scale_meal_items(self.ITEMS, 700)
        assert scale == pytest.approx(2.0)
        items, scale = scale_meal_items(self.ITEMS, 525)
        assert scale == pytest.approx(1.5)
        assert [i.calories for i in items] == [300, 225]


class TestProteinSupplement:
    """Tests for the protein top-up item."""

    def test_small_gap_ignored(self):
        """A gap of 5g or less adds nothing."""
        assert protein_supplement(MealTime.BREAKFAST, 5) is None
        assert protein_supplement(MealTime.DINNER, 0) is None

    def test_breakfast_and_snack_use_yogurt(self):
        """Breakfast and snacks get Greek yogurt, up to 10g protein."""
        item = protein_supplement(MealTime.SNACK, 6)
        assert item.name == "Greek yogurt (protein boost)"
        assert item.protein == 6
        assert protein_supplement(MealTime.BREAKFAST, 25).protein == 10

    def test_lunch_and_dinner_use_paneer(self):
        """Lunch and dinner get paneer cubes, up to 7g protein."""
        item = protein_supplement(MealTime.LUNCH, 6)
        assert item.name == "Paneer cubes (protein boost)"
        assert item.protein == 6
        assert item.calories == 90
        assert protein_supplement(MealTime.DINNER, 30).protein == 7
