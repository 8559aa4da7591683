"""JSON serialization of domain records."""

from macro_tracker.domain.models import (
    FoodEntry,
    NutrientGoals,
    Review,
    ReviewWithFood,
    UserProfile,
)
from macro_tracker.domain.stats import DailyStats, DayAggregate, NutrientTotals
from macro_tracker.services.foods import FoodEntryService


def serialize_entry(entry: FoodEntry, food_service: FoodEntryService) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "owner_id": str(entry.owner_id),
        "timestamp": entry.timestamp.isoformat(),
        "name": entry.name,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "calories": entry.calories,
        "image_ref": entry.image_ref,
        "image_url": food_service.image_url(entry),
    }


def serialize_review(review: Review) -> dict[str, object]:
    return {
        "id": str(review.id),
        "food_id": str(review.food_id),
        "author_id": str(review.author_id),
        "taste": review.taste.value,
        "digestion": review.digestion.value,
        "rate": review.rate,
    }


def serialize_review_with_food(
    item: ReviewWithFood, food_service: FoodEntryService
) -> dict[str, object]:
    payload = serialize_review(item.review)
    payload["food"] = (
        serialize_entry(item.food, food_service) if item.food is not None else None
    )
    return payload


def serialize_profile(profile: UserProfile) -> dict[str, object]:
    """Serialize a profile; credential material never reaches this record."""
    return {
        "id": str(profile.id),
        "name": profile.name,
        "email": profile.email,
        "protein_goal": profile.goals.protein,
        "carb_goal": profile.goals.carbs,
        "fat_goal": profile.goals.fat,
        "calorie_goal": profile.goals.calories,
        "weight_goal": profile.weight_goal,
        "current_weight": profile.current_weight,
    }


def serialize_totals(totals: NutrientTotals | NutrientGoals) -> dict[str, float]:
    return {
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
        "calories": totals.calories,
    }


def serialize_daily_stats(stats: DailyStats) -> dict[str, object]:
    return {
        "totals": serialize_totals(stats.totals),
        "goals": serialize_totals(stats.goals),
        "remaining": serialize_totals(stats.remaining),
    }


def serialize_day(row: DayAggregate) -> dict[str, object]:
    return {
        "date": row.day.isoformat(),
        "totals": serialize_totals(row.totals),
        "remaining": serialize_totals(row.remaining),
    }
