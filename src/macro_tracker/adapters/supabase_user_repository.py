"""Supabase-backed user profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.supabase_queries import execute, parse_float
from macro_tracker.domain.models import NutrientGoals, UserProfile
from macro_tracker.services.users import UserRepository

_COLUMNS = (
    "id, name, email, protein_goal, carb_goal, fat_goal, calorie_goal, "
    "weight_goal, current_weight"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user id, if present."""
        response = execute(
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1),
            "load profile",
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, profile: UserProfile) -> UserProfile:
        """Write back goals and weights for a profile."""
        response = execute(
            self.client.table("profiles")
            .update(
                {
                    "protein_goal": profile.goals.protein,
                    "carb_goal": profile.goals.carbs,
                    "fat_goal": profile.goals.fat,
                    "calorie_goal": profile.goals.calories,
                    "weight_goal": profile.weight_goal,
                    "current_weight": profile.current_weight,
                }
            )
            .eq("id", str(profile.id)),
            "update profile",
        )
        if not response.data:
            return profile
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        goals=NutrientGoals(
            protein=parse_float(row.get("protein_goal")),
            carbs=parse_float(row.get("carb_goal")),
            fat=parse_float(row.get("fat_goal")),
            calories=parse_float(row.get("calorie_goal")),
        ),
        weight_goal=parse_float(row.get("weight_goal")),
        current_weight=parse_float(row.get("current_weight")),
    )
