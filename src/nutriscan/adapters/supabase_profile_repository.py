"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutriscan.domain.profiles import UserProfile
from nutriscan.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation storing each profile as a JSON document."""

    client: Client

    def get_profile(self, profile_id: str) -> UserProfile | None:
        """Return the stored profile, if any."""
        response = (
            self.client.table("user_profiles")
            .select("data")
            .eq("profile_id", profile_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        data = response.data[0].get("data")
        if not isinstance(data, dict):
            return None
        return profile_from_row(data)

    def save_profile(self, profile_id: str, profile: UserProfile) -> None:
        """Upsert the profile document."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {
                    "profile_id": profile_id,
                    "data": profile_to_row(profile),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="profile_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile in Supabase")

    def delete_profile(self, profile_id: str) -> None:
        """Delete the profile row."""
        self.client.table("user_profiles").delete().eq(
            "profile_id", profile_id
        ).execute()


def profile_to_row(profile: UserProfile) -> dict[str, object]:
    """Serialise a profile using the app's JSON field names."""
    return {
        "name": profile.name,
        "age": profile.age,
        "height": profile.height,
        "weight": profile.weight,
        "allergens": list(profile.allergens),
        "dietaryRestrictions": list(profile.dietary_restrictions),
        "fitnessGoals": list(profile.fitness_goals),
        "healthConditions": list(profile.health_conditions),
        "additionalNotes": profile.additional_notes,
        "customAllergens": dict(profile.custom_allergens),
    }


def profile_from_row(data: dict) -> UserProfile:
    """Build a profile from a stored document, defaulting missing keys."""
    default = UserProfile()
    fitness_goals = data.get("fitnessGoals")
    return UserProfile(
        name=str(data.get("name", default.name)),
        age=int(data.get("age", default.age)),
        height=float(data.get("height", default.height)),
        weight=float(data.get("weight", default.weight)),
        allergens=tuple(data.get("allergens") or ()),
        dietary_restrictions=tuple(data.get("dietaryRestrictions") or ()),
        fitness_goals=(
            default.fitness_goals if fitness_goals is None else tuple(fitness_goals)
        ),
        health_conditions=tuple(data.get("healthConditions") or ()),
        additional_notes=str(data.get("additionalNotes", default.additional_notes)),
        custom_allergens=dict(data.get("customAllergens") or {}),
    )
