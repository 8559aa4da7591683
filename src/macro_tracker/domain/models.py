"""Domain models for users, food entries and reviews."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


@dataclass(frozen=True)
class NutrientGoals:
    """Daily macro and calorie goals."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    calories: float = 0.0


@dataclass(frozen=True)
class UserProfile:
    """Represents a user profile without credential material."""

    id: UUID
    name: str
    email: str
    goals: NutrientGoals
    weight_goal: float = 0.0
    current_weight: float = 0.0


@dataclass(frozen=True)
class FoodEntry:
    """A logged food with its macros."""

    id: UUID
    owner_id: UUID
    timestamp: datetime
    name: str
    protein: float
    carbs: float
    fat: float
    calories: float
    image_ref: str


class Rating(StrEnum):
    """Qualitative rating used for taste and digestion."""

    BAD = "bad"
    OK = "ok"
    GREAT = "great"


@dataclass(frozen=True)
class Review:
    """A review of a food entry."""

    id: UUID
    food_id: UUID
    author_id: UUID
    taste: Rating
    digestion: Rating
    rate: int


@dataclass(frozen=True)
class FoodEntryDetail:
    """A food entry together with the reviews that reference it."""

    entry: FoodEntry
    reviews: list[Review]


@dataclass(frozen=True)
class ReviewWithFood:
    """A review with its referenced food entry, if it still exists."""

    review: Review
    food: FoodEntry | None
