"""Food entry service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from macro_tracker.domain.assets import ImageUpload
from macro_tracker.domain.models import FoodEntry, FoodEntryDetail
from macro_tracker.domain.payloads import FoodEntryInput, FoodEntryPatch
from macro_tracker.errors import DependencyFailureError, ValidationError
from macro_tracker.services.ownership import ensure_owner
from macro_tracker.services.reviews import ReviewRepository

_logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def create_entry(self, entry: FoodEntry) -> FoodEntry:
        """Persist a new entry and return it."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id, if present."""

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        """Return all entries of an owner, newest first."""

    def list_entries_between(
        self, owner_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return entries of an owner with start <= timestamp <= end."""

    def update_entry(self, entry: FoodEntry) -> FoodEntry:
        """Write back every mutable field of an entry."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry by id."""


class AssetStore(Protocol):
    """Storage interface for food images."""

    def upload(self, owner_id: UUID, image: ImageUpload) -> str:
        """Store an image and return its reference."""

    def delete(self, ref: str) -> None:
        """Delete a stored image; an already missing image is not an error."""

    def owns(self, ref: str) -> bool:
        """Return True when the reference points at an uploaded image."""

    def public_url(self, ref: str) -> str:
        """Return a URL clients can load the image from."""


@dataclass
class FoodEntryService:
    """Application service for logging and managing food entries."""

    repository: FoodEntryRepository
    review_repository: ReviewRepository
    asset_store: AssetStore
    default_image_ref: str
    max_image_bytes: int = 5 * 1024 * 1024

    def add_entry(
        self,
        owner_id: UUID,
        payload: FoodEntryInput,
        image: ImageUpload | None = None,
    ) -> FoodEntry:
        """Create a food entry, storing the image when one is supplied."""
        image_ref = self._store_image(owner_id, image) if image else None
        entry = FoodEntry(
            id=uuid4(),
            owner_id=owner_id,
            timestamp=payload.timestamp or datetime.now(tz=UTC),
            name=payload.name,
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
            calories=payload.calories,
            image_ref=image_ref or self.default_image_ref,
        )
        try:
            created = self.repository.create_entry(entry)
        except Exception:
            if image_ref:
                self._discard_image(image_ref)
            raise
        _logger.info("Food entry created: id=%s owner=%s", created.id, owner_id)
        return created

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        """Return the caller's food entries."""
        return self.repository.list_entries(owner_id)

    def get_entry_with_reviews(self, owner_id: UUID, entry_id: UUID) -> FoodEntryDetail:
        """Return one of the caller's entries with the reviews that reference it."""
        entry = self._owned_entry(owner_id, entry_id)
        reviews = self.review_repository.list_reviews_for_food(entry.id)
        return FoodEntryDetail(entry=entry, reviews=reviews)

    def edit_entry(
        self,
        owner_id: UUID,
        entry_id: UUID,
        patch: FoodEntryPatch,
        image: ImageUpload | None = None,
    ) -> FoodEntry:
        """Apply a partial update to one of the caller's entries."""
        current = self._owned_entry(owner_id, entry_id)
        changes = patch.changes()
        image_ref = self._store_image(owner_id, image) if image else None
        if image_ref:
            changes["image_ref"] = image_ref
        if not changes:
            return current
        try:
            updated = self.repository.update_entry(replace(current, **changes))
        except Exception:
            if image_ref:
                self._discard_image(image_ref)
            raise
        _logger.info("Food entry updated: id=%s fields=%s", entry_id, sorted(changes))
        return updated

    def delete_entry(self, owner_id: UUID, entry_id: UUID) -> None:
        """Delete one of the caller's entries after removing its image.

        The entry is kept when the image cannot be removed.
        """
        entry = self._owned_entry(owner_id, entry_id)
        if self.asset_store.owns(entry.image_ref):
            self.asset_store.delete(entry.image_ref)
        self.repository.delete_entry(entry.id)
        self.review_repository.delete_reviews_for_food(entry.id)
        _logger.info("Food entry deleted: id=%s owner=%s", entry_id, owner_id)

    def image_url(self, entry: FoodEntry) -> str:
        """Return the URL for an entry's image."""
        if self.asset_store.owns(entry.image_ref):
            return self.asset_store.public_url(entry.image_ref)
        return entry.image_ref

    def _owned_entry(self, owner_id: UUID, entry_id: UUID) -> FoodEntry:
        return ensure_owner(
            self.repository.get_entry(entry_id),
            owner_id,
            owner_of=lambda entry: entry.owner_id,
            label="Food entry",
        )

    def _store_image(self, owner_id: UUID, image: ImageUpload) -> str:
        if image.content_type not in ALLOWED_IMAGE_TYPES:
            allowed = ", ".join(sorted(ALLOWED_IMAGE_TYPES))
            raise ValidationError(f"Invalid image type. Allowed: {allowed}")
        if not image.content:
            raise ValidationError("Image file is empty")
        if len(image.content) > self.max_image_bytes:
            raise ValidationError(
                f"Image too large. Maximum size: {self.max_image_bytes} bytes"
            )
        return self.asset_store.upload(owner_id, image)

    def _discard_image(self, ref: str) -> None:
        try:
            self.asset_store.delete(ref)
        except DependencyFailureError:
            _logger.exception("Failed to remove orphaned image: ref=%s", ref)
