"""Supabase repository for reviews."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.supabase_queries import execute
from macro_tracker.domain.models import Rating, Review
from macro_tracker.errors import DependencyFailureError
from macro_tracker.services.reviews import ReviewRepository

_COLUMNS = "id, food_id, author_id, taste, digestion, rate"


@dataclass
class SupabaseReviewRepository(ReviewRepository):
    """Supabase implementation for review persistence."""

    client: Client

    def create_review(self, review: Review) -> Review:
        """Insert a review row and return the stored review."""
        response = execute(
            self.client.table("reviews").insert(
                {"id": str(review.id), **_serialize(review)}
            ),
            "create review",
        )
        if not response.data:
            raise DependencyFailureError("Could not create review")
        return _parse_review(response.data[0])

    def get_review(self, review_id: UUID) -> Review | None:
        """Return a review by id."""
        response = execute(
            self.client.table("reviews")
            .select(_COLUMNS)
            .eq("id", str(review_id))
            .limit(1),
            "load review",
        )
        if not response.data:
            return None
        return _parse_review(response.data[0])

    def list_reviews_by_author(self, author_id: UUID) -> list[Review]:
        """Return reviews written by an author."""
        response = execute(
            self.client.table("reviews")
            .select(_COLUMNS)
            .eq("author_id", str(author_id)),
            "list reviews",
        )
        return [_parse_review(row) for row in response.data or []]

    def list_reviews_for_food(self, food_id: UUID) -> list[Review]:
        """Return reviews that reference a food entry."""
        response = execute(
            self.client.table("reviews").select(_COLUMNS).eq("food_id", str(food_id)),
            "list reviews",
        )
        return [_parse_review(row) for row in response.data or []]

    def update_review(self, review: Review) -> Review:
        """Write back all mutable columns of a review."""
        response = execute(
            self.client.table("reviews")
            .update(_serialize(review))
            .eq("id", str(review.id)),
            "update review",
        )
        if not response.data:
            return review
        return _parse_review(response.data[0])

    def delete_review(self, review_id: UUID) -> None:
        """Delete a review row."""
        execute(
            self.client.table("reviews").delete().eq("id", str(review_id)),
            "delete review",
        )

    def delete_reviews_for_food(self, food_id: UUID) -> None:
        """Delete the reviews of a food entry."""
        execute(
            self.client.table("reviews").delete().eq("food_id", str(food_id)),
            "delete reviews",
        )


def _serialize(review: Review) -> dict[str, object]:
    return {
        "food_id": str(review.food_id),
        "author_id": str(review.author_id),
        "taste": review.taste.value,
        "digestion": review.digestion.value,
        "rate": review.rate,
    }


def _parse_review(row: dict[str, object]) -> Review:
    return Review(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        author_id=UUID(str(row["author_id"])),
        taste=Rating(row["taste"]),
        digestion=Rating(row["digestion"]),
        rate=int(row["rate"]),
    )
