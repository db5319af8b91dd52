"""User health profile models."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

Allergen = str
DietaryRestriction = Literal[
    "vegan",
    "vegetarian",
    "keto",
    "paleo",
    "low carb",
    "low fat",
    "low sugar",
    "low sodium",
]
HealthCondition = Literal[
    "diabetes",
    "hypertension",
    "high cholesterol",
    "heart disease",
    "celiac",
    "IBS",
    "none",
]
FitnessGoal = Literal[
    "weight loss",
    "muscle gain",
    "maintenance",
    "endurance",
    "general health",
]

KNOWN_ALLERGENS: tuple[str, ...] = (
    "peanuts",
    "dairy",
    "gluten",
    "shellfish",
    "eggs",
    "soy",
    "tree nuts",
    "fish",
)
DIETARY_RESTRICTIONS: tuple[str, ...] = (
    "vegan",
    "vegetarian",
    "keto",
    "paleo",
    "low carb",
    "low fat",
    "low sugar",
    "low sodium",
)
HEALTH_CONDITIONS: tuple[str, ...] = (
    "diabetes",
    "hypertension",
    "high cholesterol",
    "heart disease",
    "celiac",
    "IBS",
    "none",
)
FITNESS_GOALS: tuple[str, ...] = (
    "weight loss",
    "muscle gain",
    "maintenance",
    "endurance",
    "general health",
)

NO_CONDITION = "none"
DEFAULT_FITNESS_GOALS: tuple[str, ...] = ("general health",)


@dataclass(frozen=True)
class NoConditions:
    """The user reported no health conditions."""

    def names(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class Conditions:
    """One or more real health conditions, in the order they were given."""

    values: tuple[str, ...]

    def names(self) -> tuple[str, ...]:
        return self.values


HealthConditions = NoConditions | Conditions


def health_conditions_from(values: Iterable[str] | HealthConditions) -> HealthConditions:
    """Normalise any wire representation of health conditions.

    An empty list and ``["none"]`` both mean no conditions. When ``"none"``
    appears alongside real conditions the sentinel is dropped.
    """
    if isinstance(values, (NoConditions, Conditions)):
        return values
    real = tuple(dict.fromkeys(value for value in values if value != NO_CONDITION))
    if not real:
        return NoConditions()
    return Conditions(real)


def unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class UserProfile:
    """Full user profile as edited in the app."""

    name: str = ""
    age: int = 30
    height: float = 170
    weight: float = 70
    allergens: tuple[str, ...] = ()
    dietary_restrictions: tuple[str, ...] = ()
    fitness_goals: tuple[str, ...] = DEFAULT_FITNESS_GOALS
    health_conditions: tuple[str, ...] = ()
    additional_notes: str = ""
    custom_allergens: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "custom_allergens", MappingProxyType(dict(self.custom_allergens))
        )

    def conditions(self) -> HealthConditions:
        """Return the health conditions as a tagged variant."""
        return health_conditions_from(self.health_conditions)

    def available_allergens(self) -> dict[str, str]:
        """Return every selectable allergen key mapped to its display label."""
        labels = {allergen: allergen.title() for allergen in KNOWN_ALLERGENS}
        labels.update(self.custom_allergens)
        return labels
