"""Tests for the food entry service."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from macro_tracker.domain.assets import ImageUpload
from macro_tracker.domain.models import Rating, Review
from macro_tracker.domain.payloads import FoodEntryInput, FoodEntryPatch
from macro_tracker.errors import DependencyFailureError, ForbiddenError, NotFoundError, ValidationError
from macro_tracker.services.foods import FoodEntryService
from tests.conftest import (
    PLACEHOLDER_IMAGE,
    FakeAssetStore,
    InMemoryFoodEntryRepository,
    InMemoryReviewRepository,
)

JPEG = ImageUpload(filename="oats.jpg", content_type="image/jpeg", content=b"jpeg")


def test_add_entry_defaults_macros_image_and_timestamp(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    before = datetime.now(tz=UTC)

    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Apple"))

    assert entry.owner_id == owner_id
    assert (entry.protein, entry.carbs, entry.fat, entry.calories) == (0, 0, 0, 0)
    assert entry.image_ref == PLACEHOLDER_IMAGE
    assert entry.timestamp >= before
    assert food_service.image_url(entry) == PLACEHOLDER_IMAGE


def test_add_entry_stores_uploaded_image(
    food_service: FoodEntryService, asset_store: FakeAssetStore, owner_id: UUID
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), JPEG)

    assert entry.image_ref in asset_store.objects
    assert food_service.image_url(entry).startswith("https://cdn.example.com/")


def test_add_entry_rejects_non_image_upload(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    upload = ImageUpload(filename="a.txt", content_type="text/plain", content=b"x")

    with pytest.raises(ValidationError):
        food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), upload)


def test_add_entry_rejects_oversized_image(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    upload = replace(JPEG, content=b"x" * 2048)

    with pytest.raises(ValidationError):
        food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), upload)


def test_add_entry_removes_upload_when_store_fails(
    food_repository: InMemoryFoodEntryRepository,
    food_service: FoodEntryService,
    asset_store: FakeAssetStore,
    owner_id: UUID,
) -> None:
    food_repository.fail_writes = True

    with pytest.raises(DependencyFailureError):
        food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), JPEG)

    assert asset_store.objects == {}
    assert len(asset_store.deleted) == 1


def test_list_entries_returns_only_own(
    food_service: FoodEntryService, owner_id: UUID, other_id: UUID
) -> None:
    mine = food_service.add_entry(owner_id, FoodEntryInput(name="Rice"))
    food_service.add_entry(other_id, FoodEntryInput(name="Beans"))

    assert food_service.list_entries(owner_id) == [mine]


def test_get_entry_with_reviews(
    food_service: FoodEntryService,
    review_repository: InMemoryReviewRepository,
    owner_id: UUID,
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Rice"))
    review = review_repository.create_review(
        Review(
            id=uuid4(),
            food_id=entry.id,
            author_id=owner_id,
            taste=Rating.GREAT,
            digestion=Rating.OK,
            rate=5,
        )
    )

    detail = food_service.get_entry_with_reviews(owner_id, entry.id)

    assert detail.entry == entry
    assert detail.reviews == [review]


def test_get_entry_of_other_owner_is_forbidden(
    food_service: FoodEntryService, owner_id: UUID, other_id: UUID
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Rice"))

    with pytest.raises(ForbiddenError):
        food_service.get_entry_with_reviews(other_id, entry.id)


def test_edit_entry_applies_only_supplied_fields(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    entry = food_service.add_entry(
        owner_id, FoodEntryInput(name="Rice", protein=4, carbs=40)
    )

    updated = food_service.edit_entry(
        owner_id, entry.id, FoodEntryPatch(protein=0, calories=180)
    )

    assert updated.protein == 0
    assert updated.calories == 180
    assert updated.carbs == 40
    assert updated.name == "Rice"
    assert updated.owner_id == owner_id


def test_edit_entry_replaces_image(
    food_service: FoodEntryService, asset_store: FakeAssetStore, owner_id: UUID
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Rice"))

    updated = food_service.edit_entry(owner_id, entry.id, FoodEntryPatch(), JPEG)

    assert updated.image_ref in asset_store.objects


def test_edit_by_other_owner_is_forbidden_and_unchanged(
    food_service: FoodEntryService, owner_id: UUID, other_id: UUID
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Rice", fat=2))

    with pytest.raises(ForbiddenError):
        food_service.edit_entry(other_id, entry.id, FoodEntryPatch(fat=50))

    assert food_service.get_entry_with_reviews(owner_id, entry.id).entry == entry


def test_edit_missing_entry_is_not_found(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    with pytest.raises(NotFoundError):
        food_service.edit_entry(owner_id, uuid4(), FoodEntryPatch(fat=1))


def test_concurrent_edits_resolve_last_write_wins(
    food_repository: InMemoryFoodEntryRepository,
    food_service: FoodEntryService,
    owner_id: UUID,
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Rice", protein=1))
    stale = food_repository.get_entry(entry.id)

    food_service.edit_entry(owner_id, entry.id, FoodEntryPatch(protein=20))
    food_repository.update_entry(replace(stale, carbs=99))

    current = food_repository.get_entry(entry.id)
    assert current.carbs == 99
    assert current.protein == 1


def test_delete_entry_removes_image_and_reviews(
    food_service: FoodEntryService,
    food_repository: InMemoryFoodEntryRepository,
    review_repository: InMemoryReviewRepository,
    asset_store: FakeAssetStore,
    owner_id: UUID,
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), JPEG)
    review_repository.create_review(
        Review(
            id=uuid4(),
            food_id=entry.id,
            author_id=owner_id,
            taste=Rating.OK,
            digestion=Rating.BAD,
            rate=2,
        )
    )

    food_service.delete_entry(owner_id, entry.id)

    assert food_repository.get_entry(entry.id) is None
    assert asset_store.deleted == [entry.image_ref]
    assert review_repository.list_reviews_for_food(entry.id) == []


def test_delete_entry_keeps_placeholder_image(
    food_service: FoodEntryService, asset_store: FakeAssetStore, owner_id: UUID
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Apple"))

    food_service.delete_entry(owner_id, entry.id)

    assert asset_store.deleted == []


def test_delete_aborts_when_image_deletion_fails(
    food_service: FoodEntryService,
    food_repository: InMemoryFoodEntryRepository,
    asset_store: FakeAssetStore,
    owner_id: UUID,
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Oats"), JPEG)
    asset_store.fail_delete = True

    with pytest.raises(DependencyFailureError):
        food_service.delete_entry(owner_id, entry.id)

    assert food_repository.get_entry(entry.id) == entry
    assert entry.image_ref in asset_store.objects


def test_delete_by_other_owner_is_forbidden(
    food_service: FoodEntryService,
    food_repository: InMemoryFoodEntryRepository,
    owner_id: UUID,
    other_id: UUID,
) -> None:
    entry = food_service.add_entry(owner_id, FoodEntryInput(name="Oats"))

    with pytest.raises(ForbiddenError):
        food_service.delete_entry(other_id, entry.id)

    assert food_repository.get_entry(entry.id) == entry


def test_delete_missing_entry_is_not_found(
    food_service: FoodEntryService, owner_id: UUID
) -> None:
    with pytest.raises(NotFoundError):
        food_service.delete_entry(owner_id, uuid4())
