"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.assets import ImageUpload
from macro_tracker.domain.models import FoodEntry, NutrientGoals, Review, UserProfile
from macro_tracker.errors import DependencyFailureError
from macro_tracker.services.auth import AuthGuard, CredentialVerifier
from macro_tracker.services.foods import AssetStore, FoodEntryRepository, FoodEntryService
from macro_tracker.services.reviews import ReviewRepository, ReviewService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import ProfileService, UserRepository

PLACEHOLDER_IMAGE = "https://example.com/placeholder.png"


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory food entry repository for tests."""

    entries: dict[UUID, FoodEntry] = field(default_factory=dict)
    fail_writes: bool = False

    def create_entry(self, entry: FoodEntry) -> FoodEntry:
        if self.fail_writes:
            raise DependencyFailureError("Could not create food entry")
        self.entries[entry.id] = entry
        return entry

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        return self.entries.get(entry_id)

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        owned = [entry for entry in self.entries.values() if entry.owner_id == owner_id]
        return sorted(owned, key=lambda entry: entry.timestamp, reverse=True)

    def list_entries_between(
        self, owner_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        return [
            entry
            for entry in self.entries.values()
            if entry.owner_id == owner_id and start <= entry.timestamp <= end
        ]

    def update_entry(self, entry: FoodEntry) -> FoodEntry:
        if self.fail_writes:
            raise DependencyFailureError("Could not update food entry")
        self.entries[entry.id] = entry
        return entry

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)


@dataclass
class InMemoryReviewRepository(ReviewRepository):
    """In-memory review repository for tests."""

    reviews: dict[UUID, Review] = field(default_factory=dict)

    def create_review(self, review: Review) -> Review:
        self.reviews[review.id] = review
        return review

    def get_review(self, review_id: UUID) -> Review | None:
        return self.reviews.get(review_id)

    def list_reviews_by_author(self, author_id: UUID) -> list[Review]:
        return [r for r in self.reviews.values() if r.author_id == author_id]

    def list_reviews_for_food(self, food_id: UUID) -> list[Review]:
        return [r for r in self.reviews.values() if r.food_id == food_id]

    def update_review(self, review: Review) -> Review:
        self.reviews[review.id] = review
        return review

    def delete_review(self, review_id: UUID) -> None:
        self.reviews.pop(review_id, None)

    def delete_reviews_for_food(self, food_id: UUID) -> None:
        for review_id in [r.id for r in self.reviews.values() if r.food_id == food_id]:
            del self.reviews[review_id]


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def add(self, user_id: UUID, goals: NutrientGoals | None = None) -> UserProfile:
        profile = UserProfile(
            id=user_id,
            name="Test User",
            email=f"{user_id.hex[:8]}@example.com",
            goals=goals or NutrientGoals(),
        )
        self.profiles[user_id] = profile
        return profile

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def update_profile(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.id] = profile
        return profile


@dataclass
class FakeAssetStore(AssetStore):
    """Asset store that keeps uploads in memory."""

    objects: dict[str, bytes] = field(default_factory=dict)
    deleted: list[str] = field(default_factory=list)
    fail_delete: bool = False
    fail_upload: bool = False

    def upload(self, owner_id: UUID, image: ImageUpload) -> str:
        if self.fail_upload:
            raise DependencyFailureError("Could not store image")
        ref = f"uploads/{owner_id}/{uuid4().hex}"
        self.objects[ref] = image.content
        return ref

    def delete(self, ref: str) -> None:
        if self.fail_delete:
            raise DependencyFailureError("Could not delete associated image")
        self.objects.pop(ref, None)
        self.deleted.append(ref)

    def owns(self, ref: str) -> bool:
        return ref.startswith("uploads/")

    def public_url(self, ref: str) -> str:
        return f"https://cdn.example.com/{ref}"


@dataclass
class FakeCredentialVerifier(CredentialVerifier):
    """Verifier backed by a token to principal mapping."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def verify(self, token: str) -> UUID | None:
        return self.tokens.get(token)


def make_entry(
    owner_id: UUID, timestamp: datetime, name: str = "Food", **macros: float
) -> FoodEntry:
    return FoodEntry(
        id=uuid4(),
        owner_id=owner_id,
        timestamp=timestamp,
        name=name,
        protein=macros.get("protein", 0.0),
        carbs=macros.get("carbs", 0.0),
        fat=macros.get("fat", 0.0),
        calories=macros.get("calories", 0.0),
        image_ref=PLACEHOLDER_IMAGE,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        default_image_ref=PLACEHOLDER_IMAGE,
    )


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_id() -> UUID:
    return uuid4()


@pytest.fixture
def food_repository() -> InMemoryFoodEntryRepository:
    return InMemoryFoodEntryRepository()


@pytest.fixture
def review_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def user_repository(owner_id: UUID, other_id: UUID) -> InMemoryUserRepository:
    repository = InMemoryUserRepository()
    repository.add(owner_id)
    repository.add(other_id)
    return repository


@pytest.fixture
def asset_store() -> FakeAssetStore:
    return FakeAssetStore()


@pytest.fixture
def food_service(
    food_repository: InMemoryFoodEntryRepository,
    review_repository: InMemoryReviewRepository,
    asset_store: FakeAssetStore,
) -> FoodEntryService:
    return FoodEntryService(
        repository=food_repository,
        review_repository=review_repository,
        asset_store=asset_store,
        default_image_ref=PLACEHOLDER_IMAGE,
        max_image_bytes=1024,
    )


@pytest.fixture
def review_service(
    review_repository: InMemoryReviewRepository,
    food_repository: InMemoryFoodEntryRepository,
) -> ReviewService:
    return ReviewService(repository=review_repository, foods=food_repository)


@pytest.fixture
def profile_service(user_repository: InMemoryUserRepository) -> ProfileService:
    return ProfileService(user_repository)


@pytest.fixture
def stats_service(
    food_repository: InMemoryFoodEntryRepository, profile_service: ProfileService
) -> StatsService:
    return StatsService(repository=food_repository, profile_service=profile_service)


@pytest.fixture
def verifier(owner_id: UUID, other_id: UUID) -> FakeCredentialVerifier:
    return FakeCredentialVerifier(tokens={"owner-token": owner_id, "other-token": other_id})


@pytest.fixture
def container(
    settings: Settings,
    verifier: FakeCredentialVerifier,
    food_service: FoodEntryService,
    review_service: ReviewService,
    profile_service: ProfileService,
    stats_service: StatsService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_guard=AuthGuard(verifier),
        food_service=food_service,
        review_service=review_service,
        profile_service=profile_service,
        stats_service=stats_service,
    )
