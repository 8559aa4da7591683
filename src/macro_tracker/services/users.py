"""User profile business logic."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import UserProfile
from macro_tracker.domain.payloads import ProfilePatch
from macro_tracker.errors import NotFoundError

_GOAL_FIELDS = {
    "protein_goal": "protein",
    "carb_goal": "carbs",
    "fat_goal": "fat",
    "calorie_goal": "calories",
}


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user id, if present."""

    def update_profile(self, profile: UserProfile) -> UserProfile:
        """Write back goals and weights of a profile."""


@dataclass
class ProfileService:
    """Application service for profile reads and goal edits."""

    repository: UserRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the caller's profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    def edit_profile(self, user_id: UUID, patch: ProfilePatch) -> UserProfile:
        """Update any supplied goals and weights."""
        current = self.get_profile(user_id)
        changes = patch.changes()
        if not changes:
            return current
        goal_changes = {
            _GOAL_FIELDS[key]: value
            for key, value in changes.items()
            if key in _GOAL_FIELDS
        }
        other_changes = {
            key: value for key, value in changes.items() if key not in _GOAL_FIELDS
        }
        updated = replace(
            current, goals=replace(current.goals, **goal_changes), **other_changes
        )
        return self.repository.update_profile(updated)
