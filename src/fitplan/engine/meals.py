"""Meal generation.

A meal is one template chosen at random from the allergy-safe pool for its
meal time, scaled toward the calorie target and topped up with protein when
the scaled meal falls short. A day plan repeats that for each meal time with
a fixed share of the daily targets.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from fitplan.catalog import MealTemplate, MealTime, TemplateCatalog, get_catalog
from fitplan.engine.exclusions import (
    DEFAULT_EXCLUSIONS,
    ExclusionSet,
    filter_meals_by_allergies,
)
from fitplan.engine.models import DayPlan, DayPlanRequest, MealPlan, MealRequest, sum_macros
from fitplan.engine.scaling import protein_supplement, scale_meal_items
from fitplan.engine.selector import choose_one, make_rng, select_candidates

logger = logging.getLogger(__name__)

# Share of daily targets per meal time; snacks split theirs evenly
DAY_STRUCTURE: dict[MealTime, float] = {
    MealTime.BREAKFAST: 0.25,
    MealTime.LUNCH: 0.35,
    MealTime.DINNER: 0.30,
    MealTime.SNACK: 0.10,
}
SNACKS_PER_DAY = 2


def assemble_meal(
    template: MealTemplate,
    target_calories: float,
    target_protein: float,
    allergen_fallback: bool = False,
) -> MealPlan:
    """Scale a template and add a protein supplement if needed.

    Args:
        template: Chosen meal template (not modified)
        target_calories: Calorie target for this meal
        target_protein: Protein target for this meal
        allergen_fallback: Whether the template came from an unfiltered pool

    Returns:
        MealPlan whose totals are computed from its final items.
    """
    items, item_scale = scale_meal_items(template.items, target_calories)

    deficit = target_protein - sum_macros(items).protein
    supplement = protein_supplement(template.meal_time, deficit)
    if supplement is not None:
        items.append(supplement)

    logger.debug(
        "Assembled %s at scale %.2f (protein deficit %.1f, supplement=%s)",
        template.id, item_scale, deficit, supplement is not None,
    )

    return MealPlan(
        name=template.name,
        meal_time=template.meal_time,
        template_id=template.id,
        items=items,
        instructions=template.instructions,
        alternatives=template.alternatives,
        item_scale=item_scale,
        allergen_fallback=allergen_fallback,
    )


def _candidate_pool(
    catalog: TemplateCatalog,
    meal_time: MealTime,
    allergies: list[str],
    exclusions: ExclusionSet,
):
    templates = catalog.meals_for(meal_time)
    if not templates:
        raise ValueError(f"Catalog has no {meal_time.value} templates")
    return filter_meals_by_allergies(templates, allergies, exclusions)


def generate_meal(
    request: MealRequest,
    catalog: Optional[TemplateCatalog] = None,
    rng: Optional[random.Random] = None,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> MealPlan:
    """Generate a single meal.

    Args:
        request: Meal time, targets and allergies
        catalog: Template catalog (defaults to the process-wide catalog)
        rng: Random generator; when omitted one is seeded from request.seed
        exclusions: Rule tables for allergy filtering

    Returns:
        MealPlan
    """
    catalog = catalog or get_catalog()
    rng = make_rng(request.seed, rng)

    filtered = _candidate_pool(catalog, request.meal_time, request.allergies, exclusions)
    template = choose_one(filtered.pool, rng)

    return assemble_meal(template, request.calories, request.protein, filtered.fallback)


def generate_day_plan(
    request: DayPlanRequest,
    catalog: Optional[TemplateCatalog] = None,
    rng: Optional[random.Random] = None,
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> DayPlan:
    """Generate breakfast, lunch, dinner and two distinct snacks.

    Each meal receives its share of the daily calorie and protein targets
    (see ``DAY_STRUCTURE``). When fewer safe snack templates exist than
    ``SNACKS_PER_DAY``, the snack share goes to the ones available and the
    missing count is recorded in ``DayPlan.snack_shortfall``. Day totals are
    computed from the meals.
    """
    catalog = catalog or get_catalog()
    rng = make_rng(request.seed, rng)
    meals: list[MealPlan] = []
    snack_shortfall = 0

    for meal_time, share in DAY_STRUCTURE.items():
        filtered = _candidate_pool(catalog, meal_time, request.allergies, exclusions)
        wanted = SNACKS_PER_DAY if meal_time == MealTime.SNACK else 1
        selected = select_candidates(filtered.pool, wanted, rng)
        if len(selected) < wanted:
            snack_shortfall = wanted - len(selected)
            logger.warning(
                "Only %d of %d %s templates avoid allergies %s",
                len(selected), wanted, meal_time.value, sorted(request.allergies),
            )
        # Split the share over the templates actually selected
        for template in selected:
            meals.append(
                assemble_meal(
                    template,
                    request.calories * share / len(selected),
                    request.protein * share / len(selected),
                    filtered.fallback,
                )
            )

    logger.debug("Day plan with %d meals", len(meals))
    return DayPlan(meals=meals, snack_shortfall=snack_shortfall)
