"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_asset_store import SupabaseAssetStore
from macro_tracker.adapters.supabase_credential_verifier import (
    SupabaseCredentialVerifier,
)
from macro_tracker.adapters.supabase_food_repository import (
    SupabaseFoodEntryRepository,
)
from macro_tracker.adapters.supabase_review_repository import (
    SupabaseReviewRepository,
)
from macro_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from macro_tracker.config import Settings
from macro_tracker.services.auth import AuthGuard
from macro_tracker.services.foods import FoodEntryService
from macro_tracker.services.reviews import ReviewService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_guard: AuthGuard
    food_service: FoodEntryService
    review_service: ReviewService
    profile_service: ProfileService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodEntryRepository(supabase_client)
    review_repository = SupabaseReviewRepository(supabase_client)
    user_repository = SupabaseUserRepository(supabase_client)
    asset_store = SupabaseAssetStore(
        client=supabase_client,
        bucket=resolved_settings.asset_bucket,
        folder=resolved_settings.asset_folder,
    )
    profile_service = ProfileService(user_repository)
    food_service = FoodEntryService(
        repository=food_repository,
        review_repository=review_repository,
        asset_store=asset_store,
        default_image_ref=resolved_settings.default_image_ref,
        max_image_bytes=resolved_settings.max_image_bytes,
    )
    review_service = ReviewService(repository=review_repository, foods=food_repository)
    stats_service = StatsService(
        repository=food_repository,
        profile_service=profile_service,
        default_timezone=resolved_settings.default_timezone,
    )
    auth_guard = AuthGuard(SupabaseCredentialVerifier(supabase_client))

    return AppContainer(
        settings=resolved_settings,
        auth_guard=auth_guard,
        food_service=food_service,
        review_service=review_service,
        profile_service=profile_service,
        stats_service=stats_service,
    )
