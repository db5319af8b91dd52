"""Product classification against a user health profile."""

import logging
from collections.abc import Iterable, Sequence

from nutriscan.domain.classification import (
    Classification,
    ClassificationResult,
    Finding,
)
from nutriscan.domain.products import Product
from nutriscan.domain.profiles import HealthConditions, UserProfile, unique
from nutriscan.services.fitness import evaluate_fitness
from nutriscan.services.matching import (
    MatchMode,
    match_allergens,
    match_dietary,
    match_generic,
    match_health_conditions,
)

NO_ISSUES_REASON = "No problematic ingredients detected"

# Substring of a finding's ingredient -> suggested alternative.
_ALTERNATIVES: tuple[tuple[str, str], ...] = (
    (
        "high fructose corn syrup",
        "Products sweetened with natural sources like honey or monk fruit",
    ),
    ("artificial", "Products with natural ingredients"),
    ("sodium", "Low-sodium alternatives"),
)

_logger = logging.getLogger(__name__)


def classify(  # noqa: PLR0913
    product: Product,
    allergens: Iterable[str],
    dietary_restrictions: Iterable[str],
    health_conditions: HealthConditions | Iterable[str],
    fitness_goals: Iterable[str],
    *,
    match_mode: MatchMode = "substring",
) -> ClassificationResult:
    """Classify a product as healthy, ok or risky for the given profile."""
    ingredients = tuple(product.ingredients)
    if not isinstance(health_conditions, HealthConditions):
        health_conditions = unique(health_conditions)

    outcome = (
        match_allergens(ingredients, unique(allergens), match_mode)
        + match_dietary(ingredients, unique(dietary_restrictions), match_mode)
        + match_health_conditions(ingredients, health_conditions, match_mode)
        + match_generic(ingredients, match_mode)
    )
    fitness = evaluate_fitness(product.nutritional_info, unique(fitness_goals))

    reasons = list(outcome.reasons)
    classification = resolve_tier(outcome.findings, reasons, outcome.warnings)
    if classification == "healthy":
        reasons.append(NO_ISSUES_REASON)

    alternatives = suggest_alternatives(outcome.findings)
    _logger.debug(
        "Classified %r: %s (findings=%s, warnings=%s)",
        product.name,
        classification,
        len(outcome.findings),
        len(outcome.warnings),
    )
    return ClassificationResult(
        classification=classification,
        reasons=tuple(reasons),
        warnings=outcome.warnings or None,
        alternatives=alternatives or None,
        fitness_compatibility=fitness if fitness.reasons else None,
    )


def classify_for_profile(
    product: Product, profile: UserProfile, *, match_mode: MatchMode = "substring"
) -> ClassificationResult:
    """Classify a product using the facets of a stored profile."""
    return classify(
        product,
        profile.allergens,
        profile.dietary_restrictions,
        profile.conditions(),
        profile.fitness_goals,
        match_mode=match_mode,
    )


def resolve_tier(
    findings: Sequence[Finding],
    reasons: Sequence[str],
    warnings: Sequence[str],
) -> Classification:
    """Pick the tier from counts of findings, reasons and warnings."""
    high_count = sum(1 for finding in findings if finding.severity == "high")
    medium_count = sum(1 for finding in findings if finding.severity == "medium")
    if warnings or high_count > 0:
        return "risky"
    if medium_count > 0 or reasons:
        return "ok"
    return "healthy"


def suggest_alternatives(findings: Sequence[Finding]) -> tuple[str, ...]:
    """Return at most one suggestion per category, in a fixed order."""
    return tuple(
        suggestion
        for needle, suggestion in _ALTERNATIVES
        if any(needle in finding.ingredient for finding in findings)
    )
