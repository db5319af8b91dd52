"""Display-only nutrition score."""

from nutriscan.domain.products import NutritionFacts


def nutrition_score(facts: NutritionFacts) -> int:
    """Score nutrition facts from 0 to 100.

    Penalises sugar, sodium and fat, rewards protein. Thresholds are strict.
    """
    score = 100

    if facts.sugar > 50:
        score -= 30
    elif facts.sugar > 25:
        score -= 15

    if facts.sodium > 300:
        score -= 20
    elif facts.sodium > 150:
        score -= 10

    if facts.fat > 20:
        score -= 20
    elif facts.fat > 10:
        score -= 10

    if facts.protein > 20:
        score += 15
    elif facts.protein > 10:
        score += 10

    return max(0, min(100, score))
