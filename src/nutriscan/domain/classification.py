"""Classification result models."""

from dataclasses import dataclass
from typing import Literal

Classification = Literal["healthy", "ok", "risky"]
Severity = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class Finding:
    """A matched ingredient or term with its issue and severity."""

    ingredient: str
    issue: str
    severity: Severity


@dataclass(frozen=True)
class FitnessCompatibility:
    """Outcome of checking nutrition facts against fitness goals."""

    compatible: bool
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Final verdict for a product against a user profile.

    Optional fields are ``None`` when there is nothing to report; they are
    never empty tuples.
    """

    classification: Classification
    reasons: tuple[str, ...]
    warnings: tuple[str, ...] | None = None
    alternatives: tuple[str, ...] | None = None
    fitness_compatibility: FitnessCompatibility | None = None

