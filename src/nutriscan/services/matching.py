"""Ingredient matching against the reference tables."""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from nutriscan.domain.classification import Finding
from nutriscan.domain.knowledge_base import (
    ALLERGEN_TERMS,
    DIETARY_RESTRICTION_TERMS,
    HEALTH_CONDITION_TERMS,
    PROBLEMATIC_INGREDIENTS,
)
from nutriscan.domain.profiles import HealthConditions, health_conditions_from

MatchMode = Literal["substring", "word"]


@dataclass(frozen=True)
class MatchOutcome:
    """Findings plus the reason and warning lines they produced."""

    findings: tuple[Finding, ...] = ()
    reasons: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __add__(self, other: "MatchOutcome") -> "MatchOutcome":
        return MatchOutcome(
            findings=self.findings + other.findings,
            reasons=self.reasons + other.reasons,
            warnings=self.warnings + other.warnings,
        )


@lru_cache(maxsize=512)
def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)")


def contains_term(ingredient: str, term: str, mode: MatchMode = "substring") -> bool:
    """Return True when the lower-cased term occurs in the ingredient.

    ``substring`` is a plain containment test, so ``egg`` matches
    ``eggplant``. ``word`` requires non-word characters on both sides.
    """
    text = ingredient.lower()
    needle = term.lower()
    if mode == "word":
        return _word_pattern(needle).search(text) is not None
    return needle in text


def _any_contains(
    ingredients: Sequence[str], term: str, mode: MatchMode
) -> bool:
    return any(contains_term(ingredient, term, mode) for ingredient in ingredients)


def allergen_terms(allergen: str) -> tuple[str, ...]:
    """Return the synonym terms for an allergen.

    User-added allergens are not in the reference table and match on their
    own name. A blank name has no terms.
    """
    terms = ALLERGEN_TERMS.get(allergen)
    if terms is not None:
        return terms
    name = allergen.strip().lower()
    return (name,) if name else ()


def match_allergens(
    ingredients: Sequence[str],
    allergens: Iterable[str],
    mode: MatchMode = "substring",
) -> MatchOutcome:
    """Flag each selected allergen found in the ingredients once."""
    findings: list[Finding] = []
    warnings: list[str] = []
    for allergen in allergens:
        if not any(
            _any_contains(ingredients, term, mode) for term in allergen_terms(allergen)
        ):
            continue
        warnings.append(f"Contains {allergen} allergen")
        findings.append(
            Finding(
                ingredient=allergen,
                issue=f"Contains {allergen} which you are allergic to",
                severity="high",
            )
        )
    return MatchOutcome(findings=tuple(findings), warnings=tuple(warnings))


def match_dietary(
    ingredients: Sequence[str],
    restrictions: Iterable[str],
    mode: MatchMode = "substring",
) -> MatchOutcome:
    """Emit one reason per disallowed term present, per restriction."""
    findings: list[Finding] = []
    reasons: list[str] = []
    for restriction in restrictions:
        for term in DIETARY_RESTRICTION_TERMS.get(restriction, ()):
            if not _any_contains(ingredients, term, mode):
                continue
            reasons.append(f"Contains {term} (not {restriction} friendly)")
            findings.append(
                Finding(
                    ingredient=term,
                    issue=f"Not compatible with {restriction} diet",
                    severity="medium",
                )
            )
    return MatchOutcome(findings=tuple(findings), reasons=tuple(reasons))


def match_health_conditions(
    ingredients: Sequence[str],
    conditions: HealthConditions | Iterable[str],
    mode: MatchMode = "substring",
) -> MatchOutcome:
    """Emit one warning per term of concern present, per condition."""
    findings: list[Finding] = []
    warnings: list[str] = []
    for condition in health_conditions_from(conditions).names():
        for term in HEALTH_CONDITION_TERMS.get(condition, ()):
            if not _any_contains(ingredients, term, mode):
                continue
            warnings.append(f"Contains {term} (concern for {condition})")
            findings.append(
                Finding(
                    ingredient=term,
                    issue=f"Not recommended for people with {condition}",
                    severity="high",
                )
            )
    return MatchOutcome(findings=tuple(findings), warnings=tuple(warnings))


def match_generic(
    ingredients: Sequence[str], mode: MatchMode = "substring"
) -> MatchOutcome:
    """Flag generally problematic ingredients regardless of the profile.

    Runs per ingredient, so a term present in two ingredients is reported
    twice.
    """
    findings: list[Finding] = []
    reasons: list[str] = []
    for ingredient in ingredients:
        for term, details in PROBLEMATIC_INGREDIENTS.items():
            if not contains_term(ingredient, term, mode):
                continue
            reasons.append(f"Contains {term}: {details.issue}")
            findings.append(
                Finding(ingredient=term, issue=details.issue, severity=details.severity)
            )
    return MatchOutcome(findings=tuple(findings), reasons=tuple(reasons))
