"""Food review service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from macro_tracker.domain.models import FoodEntry, Review, ReviewWithFood
from macro_tracker.domain.payloads import ReviewInput, ReviewPatch
from macro_tracker.errors import NotFoundError
from macro_tracker.services.ownership import ensure_owner

_logger = logging.getLogger(__name__)


class ReviewRepository(Protocol):
    """Persistence interface for reviews."""

    def create_review(self, review: Review) -> Review:
        """Persist a new review and return it."""

    def get_review(self, review_id: UUID) -> Review | None:
        """Return a review by id, if present."""

    def list_reviews_by_author(self, author_id: UUID) -> list[Review]:
        """Return reviews written by an author."""

    def list_reviews_for_food(self, food_id: UUID) -> list[Review]:
        """Return reviews that reference a food entry."""

    def update_review(self, review: Review) -> Review:
        """Write back every mutable field of a review."""

    def delete_review(self, review_id: UUID) -> None:
        """Delete a review by id."""

    def delete_reviews_for_food(self, food_id: UUID) -> None:
        """Delete every review that references a food entry."""


class FoodEntryLookup(Protocol):
    """Read access to food entries needed by reviews."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id, if present."""


@dataclass
class ReviewService:
    """Application service for reviews of food entries."""

    repository: ReviewRepository
    foods: FoodEntryLookup

    def add_review(self, author_id: UUID, payload: ReviewInput) -> Review:
        """Create a review for an existing food entry."""
        self._require_food(payload.food_id)
        review = self.repository.create_review(
            Review(
                id=uuid4(),
                food_id=payload.food_id,
                author_id=author_id,
                taste=payload.taste,
                digestion=payload.digestion,
                rate=payload.rate,
            )
        )
        _logger.info("Review created: id=%s food=%s", review.id, review.food_id)
        return review

    def list_reviews(self, author_id: UUID) -> list[ReviewWithFood]:
        """Return the caller's reviews with the food each one references."""
        foods: dict[UUID, FoodEntry | None] = {}
        results = []
        for review in self.repository.list_reviews_by_author(author_id):
            if review.food_id not in foods:
                foods[review.food_id] = self.foods.get_entry(review.food_id)
            results.append(ReviewWithFood(review=review, food=foods[review.food_id]))
        return results

    def edit_review(
        self, author_id: UUID, review_id: UUID, patch: ReviewPatch
    ) -> Review:
        """Apply a partial update to one of the caller's reviews."""
        current = self._owned_review(author_id, review_id)
        changes = patch.changes()
        if not changes:
            return current
        if "food_id" in changes:
            self._require_food(patch.food_id)
        return self.repository.update_review(replace(current, **changes))

    def delete_review(self, author_id: UUID, review_id: UUID) -> None:
        """Delete one of the caller's reviews."""
        review = self._owned_review(author_id, review_id)
        self.repository.delete_review(review.id)
        _logger.info("Review deleted: id=%s author=%s", review_id, author_id)

    def _owned_review(self, author_id: UUID, review_id: UUID) -> Review:
        return ensure_owner(
            self.repository.get_review(review_id),
            author_id,
            owner_of=lambda review: review.author_id,
            label="Review",
        )

    def _require_food(self, food_id: UUID | None) -> None:
        if food_id is None or self.foods.get_entry(food_id) is None:
            raise NotFoundError("Food entry not found")
