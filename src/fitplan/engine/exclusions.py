"""Exclusion filtering for injuries, allergies and equipment.

Rules are keyword -> banned-substring tables. A candidate is rejected when
any banned substring for an active keyword appears in its lowercase name
(exercises) or in the joined names of its sub-items (meals). Keywords that
have no entry in a table never exclude anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Sequence, TypeVar

from fitplan.catalog.models import ExerciseTemplate, MealTemplate

logger = logging.getLogger(__name__)


class Named(Protocol):
    name: str


N = TypeVar("N", bound=Named)


# Injury -> banned exercise-name substrings. Covers main-section,
# focus-session, warm-up and cool-down names.
INJURY_RULES: dict[str, tuple[str, ...]] = {
    "knee": (
        "squats", "lunges", "leg press", "box jumps",
        "high knees", "butt kicks", "quad stretch", "hip flexor",
    ),
    "shoulder": (
        "press", "pull-ups", "overhead", "push-ups", "dips",
        "arm circles", "shoulder rolls", "chest stretch",
        "shoulder stretch", "tricep stretch",
    ),
    "back": (
        "deadlifts", "rows", "romanian", "squats",
        "cat-cow", "torso twists", "spinal twist", "child's pose",
    ),
    "wrist": ("push-ups", "plank", "dips"),
}

# Allergy -> banned ingredient substrings
ALLERGY_RULES: dict[str, tuple[str, ...]] = {
    "dairy": ("paneer", "yogurt", "curd", "ghee", "raita", "cheese", "cream", "whey"),
    "lactose": ("paneer", "yogurt", "curd", "raita", "cheese", "cream"),
    "milk": ("milk", "paneer", "yogurt", "curd", "ghee", "raita", "cheese", "cream", "whey"),
    "yogurt": ("yogurt", "curd", "raita"),
    "paneer": ("paneer",),
    "peanut": ("peanut",),
    "peanuts": ("peanut",),
    "nuts": ("almond", "cashew", "walnut", "pistachio", "mixed nuts", "peanut"),
    "tree nuts": ("almond", "cashew", "walnut", "pistachio", "mixed nuts"),
    "almond": ("almond",),
    "gluten": ("wheat", "roti", "bread", "kulcha", "toast", "granola", "naan"),
    "wheat": ("wheat", "roti", "bread", "kulcha", "toast", "naan"),
    "soy": ("tofu", "soy", "soya"),
    "tofu": ("tofu",),
    "oats": ("oats",),
    "sesame": ("tahini", "sesame"),
    "coconut": ("coconut",),
    "banana": ("banana",),
}

# User equipment keyword -> catalog equipment tag
EQUIPMENT_ALIASES: dict[str, str] = {
    "dumbbell": "dumbbell",
    "dumbbells": "dumbbell",
    "barbell": "barbell",
    "barbells": "barbell",
    "cable": "cable",
    "cables": "cable",
    "cable machine": "cable",
    "pull-up bar": "pullup_bar",
    "pullup bar": "pullup_bar",
    "dip bar": "dip_bar",
    "jump rope": "jump_rope",
}

# Tags that must be available for a gym exercise to be kept
GATED_EQUIPMENT = frozenset({"barbell", "dumbbell", "cable"})

# Tags every home session can use without declaring them
HOME_EQUIPMENT = frozenset({"none", "chair", "dumbbell"})


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ExclusionSet:
    """Rule tables used by every filter.

    Attributes:
        injury_rules: Injury keyword -> banned name substrings
        allergy_rules: Allergy keyword -> banned ingredient substrings
        equipment_aliases: User keyword -> equipment tag
    """

    injury_rules: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: INJURY_RULES)
    allergy_rules: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: ALLERGY_RULES)
    equipment_aliases: Mapping[str, str] = field(default_factory=lambda: EQUIPMENT_ALIASES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "injury_rules", _freeze(self.injury_rules))
        object.__setattr__(self, "allergy_rules", _freeze(self.allergy_rules))
        object.__setattr__(self, "equipment_aliases", _freeze(self.equipment_aliases))

    def banned_for_injuries(self, injuries: Iterable[str]) -> set[str]:
        return _banned(self.injury_rules, injuries)

    def banned_for_allergies(self, allergies: Iterable[str]) -> set[str]:
        return _banned(self.allergy_rules, allergies)

    def resolve_equipment(self, keywords: Iterable[str]) -> set[str]:
        """Map user equipment keywords to catalog tags."""
        tags = set()
        for keyword in normalize_keywords(keywords):
            tags.add(self.equipment_aliases.get(keyword, keyword.replace(" ", "_")))
        return tags


DEFAULT_EXCLUSIONS = ExclusionSet()


def normalize_keywords(keywords: Iterable[str]) -> list[str]:
    """Strip and lowercase keywords, dropping empties."""
    return [k.strip().lower() for k in keywords if k and k.strip()]


def _banned(rules: Mapping[str, tuple[str, ...]], keywords: Iterable[str]) -> set[str]:
    banned: set[str] = set()
    for keyword in normalize_keywords(keywords):
        # Unknown keywords are a no-op
        banned.update(rules.get(keyword, ()))
    return banned


def is_excluded(haystack: str, banned: Iterable[str]) -> bool:
    """Check whether any banned substring occurs in a lowercase haystack."""
    haystack = haystack.lower()
    return any(term in haystack for term in banned)


def filter_by_injuries(
    candidates: Sequence[N],
    injuries: Iterable[str],
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> list[N]:
    """Remove exercises whose names conflict with any active injury.

    Works for any named template (main exercises and warm-up/cool-down
    micro-exercises alike).
    """
    banned = exclusions.banned_for_injuries(injuries)
    if not banned:
        return list(candidates)
    kept = [c for c in candidates if not is_excluded(c.name, banned)]
    logger.debug("Injury filter kept %d of %d candidates", len(kept), len(candidates))
    return kept


@dataclass
class AllergyFilterResult:
    """Outcome of allergy filtering for a meal category.

    Attributes:
        pool: Templates to select from
        fallback: True when every template conflicted and the unfiltered
            pool was returned instead
    """

    pool: list[MealTemplate]
    fallback: bool = False


def filter_meals_by_allergies(
    templates: Sequence[MealTemplate],
    allergies: Iterable[str],
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> AllergyFilterResult:
    """Remove meal templates containing a banned ingredient.

    If nothing survives, the input pool is returned with ``fallback``
    set, so the plan may contain the allergen. Callers that cannot accept
    that must check the flag.
    """
    banned = exclusions.banned_for_allergies(allergies)
    if not banned:
        return AllergyFilterResult(pool=list(templates))

    safe = [t for t in templates if not is_excluded(t.haystack, banned)]
    if not safe and templates:
        logger.warning(
            "Every %s template conflicts with allergies %s; using unfiltered pool",
            templates[0].meal_time.value,
            sorted(normalize_keywords(allergies)),
        )
        return AllergyFilterResult(pool=list(templates), fallback=True)
    return AllergyFilterResult(pool=safe)


def filter_by_equipment(
    exercises: Sequence[ExerciseTemplate],
    equipment: Iterable[str],
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> list[ExerciseTemplate]:
    """Drop gated exercises (barbell, dumbbell, cable) the user lacks.

    An empty equipment list means no filtering at all.
    """
    available = exclusions.resolve_equipment(equipment)
    if not available:
        return list(exercises)
    return [
        ex for ex in exercises
        if ex.equipment not in GATED_EQUIPMENT or ex.equipment in available
    ]


def filter_for_home(
    exercises: Sequence[ExerciseTemplate],
    equipment: Iterable[str],
    exclusions: ExclusionSet = DEFAULT_EXCLUSIONS,
) -> list[ExerciseTemplate]:
    """Keep exercises doable at home with the declared equipment."""
    allowed = HOME_EQUIPMENT | exclusions.resolve_equipment(equipment)
    return [ex for ex in exercises if ex.equipment in allowed]
