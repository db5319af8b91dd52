"""Fitness goal compatibility checks."""

from collections.abc import Iterable

from nutriscan.domain.classification import FitnessCompatibility
from nutriscan.domain.knowledge_base import FITNESS_GOAL_PROFILES
from nutriscan.domain.products import NutritionFacts


def evaluate_fitness(
    facts: NutritionFacts, goals: Iterable[str]
) -> FitnessCompatibility:
    """Check nutrition facts against each goal's nutrition target.

    Only protein.min, carbs.min, sugar.max and calories min/max are checked.
    """
    reasons: list[str] = []
    for goal in goals:
        profile = FITNESS_GOAL_PROFILES.get(goal)
        if profile is None:
            continue
        target = profile.nutrition_target

        if target.protein and target.protein.min is not None:
            if facts.protein < target.protein.min:
                reasons.append(f"Low in protein for {goal}")
        if target.carbs and target.carbs.min is not None:
            if facts.carbs < target.carbs.min:
                reasons.append(f"Low in carbs for {goal}")
        if target.sugar and target.sugar.max is not None:
            if facts.sugar > target.sugar.max:
                reasons.append(f"High in sugar for {goal}")
        if target.calories and target.calories.max is not None:
            if facts.calories > target.calories.max:
                reasons.append(f"High in calories for {goal}")
        if target.calories and target.calories.min is not None:
            if facts.calories < target.calories.min:
                reasons.append(f"Low in calories for {goal}")

    return FitnessCompatibility(compatible=not reasons, reasons=tuple(reasons))
