"""Profile store for the facets the classifier reads."""

from dataclasses import dataclass, replace
from typing import Any, Protocol

from nutriscan.domain.profiles import (
    KNOWN_ALLERGENS,
    NO_CONDITION,
    UserProfile,
    unique,
)

_SEQUENCE_FIELDS = (
    "allergens",
    "dietary_restrictions",
    "fitness_goals",
    "health_conditions",
)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, profile_id: str) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile_id: str, profile: UserProfile) -> None:
        """Insert or replace a stored profile."""

    def delete_profile(self, profile_id: str) -> None:
        """Remove a stored profile."""


@dataclass
class ProfileService:
    """Loads and edits user profiles, falling back to defaults."""

    repository: ProfileRepository

    def get_profile(self, profile_id: str) -> UserProfile:
        """Return the stored profile or the default one."""
        return self.repository.get_profile(profile_id) or UserProfile()

    def update_profile(self, profile_id: str, **updates: Any) -> UserProfile:
        """Merge a partial update over the current profile and persist it."""
        current = self.get_profile(profile_id)
        normalised = dict(updates)
        for name in _SEQUENCE_FIELDS:
            if name in normalised:
                normalised[name] = unique(normalised[name])
        if "health_conditions" in normalised:
            normalised["health_conditions"] = exclusive_conditions(
                normalised["health_conditions"]
            )
        if "custom_allergens" in normalised:
            normalised["custom_allergens"] = dict(normalised["custom_allergens"])
        updated = replace(current, **normalised)
        self.repository.save_profile(profile_id, updated)
        return updated

    def reset_profile(self, profile_id: str) -> UserProfile:
        """Drop the stored profile and return the default."""
        self.repository.delete_profile(profile_id)
        return UserProfile()

    def add_custom_allergen(self, profile_id: str, label: str) -> UserProfile:
        """Register a free-text allergen and select it."""
        display = label.strip()
        if not display:
            raise ValueError("Allergen label must not be blank")
        key = display.lower()
        current = self.get_profile(profile_id)
        custom = dict(current.custom_allergens)
        if key not in KNOWN_ALLERGENS:
            custom.setdefault(key, display)
        return self.update_profile(
            profile_id,
            allergens=(*current.allergens, key),
            custom_allergens=custom,
        )


def exclusive_conditions(values: tuple[str, ...]) -> tuple[str, ...]:
    """Keep ``"none"`` only when no real condition is selected."""
    real = tuple(value for value in values if value != NO_CONDITION)
    if real:
        return real
    if NO_CONDITION in values:
        return (NO_CONDITION,)
    return ()
