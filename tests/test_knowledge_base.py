"""Tests for the reference tables."""

import pytest

from nutriscan.domain.knowledge_base import (
    ALLERGEN_TERMS,
    DIETARY_RESTRICTION_TERMS,
    FITNESS_GOAL_PROFILES,
    HEALTH_CONDITION_TERMS,
    PROBLEMATIC_INGREDIENTS,
    TargetRange,
)
from nutriscan.domain.profiles import (
    DIETARY_RESTRICTIONS,
    FITNESS_GOALS,
    HEALTH_CONDITIONS,
    KNOWN_ALLERGENS,
)


def test_tables_cover_every_known_value() -> None:
    assert tuple(ALLERGEN_TERMS) == KNOWN_ALLERGENS
    assert tuple(DIETARY_RESTRICTION_TERMS) == DIETARY_RESTRICTIONS
    assert tuple(FITNESS_GOAL_PROFILES) == FITNESS_GOALS
    assert set(HEALTH_CONDITION_TERMS) == set(HEALTH_CONDITIONS) - {"none"}


def test_problematic_ingredients_severities() -> None:
    assert len(PROBLEMATIC_INGREDIENTS) == 10
    high = {term for term, item in PROBLEMATIC_INGREDIENTS.items() if item.severity == "high"}
    assert high == {
        "high fructose corn syrup",
        "trans fats",
        "bha",
        "bht",
        "partially hydrogenated oils",
    }


def test_terms_are_lower_case() -> None:
    for table in (ALLERGEN_TERMS, DIETARY_RESTRICTION_TERMS, HEALTH_CONDITION_TERMS):
        for terms in table.values():
            assert all(term == term.lower() for term in terms)
    assert all(term == term.lower() for term in PROBLEMATIC_INGREDIENTS)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        ALLERGEN_TERMS["sesame"] = ("sesame",)  # type: ignore[index]


def test_fitness_targets() -> None:
    muscle = FITNESS_GOAL_PROFILES["muscle gain"].nutrition_target
    assert muscle.protein == TargetRange(min=20, max=50)
    assert muscle.calories == TargetRange(min=200)
    weight_loss = FITNESS_GOAL_PROFILES["weight loss"].nutrition_target
    assert weight_loss.sugar == TargetRange(max=25)
    assert weight_loss.calories == TargetRange(max=300)
    assert FITNESS_GOAL_PROFILES["endurance"].nutrition_target.carbs == TargetRange(min=30)
    assert FITNESS_GOAL_PROFILES["maintenance"].nutrition_target.sugar == TargetRange(max=30)
    assert "fiber" in FITNESS_GOAL_PROFILES["general health"].good
