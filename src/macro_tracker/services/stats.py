"""Statistics service for daily and multi-day intake."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import FoodEntry
from macro_tracker.domain.stats import DailyStats, DayAggregate
from macro_tracker.services.aggregation import aggregate_by_day, aggregate_day
from macro_tracker.services.users import ProfileService
from macro_tracker.services.windows import (
    DEFAULT_TIMEZONE,
    resolve_day_window,
    resolve_range_window,
)


class StatsRepository(Protocol):
    """Range queries over food entries."""

    def list_entries_between(
        self, owner_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return entries of an owner with start <= timestamp <= end."""


@dataclass
class StatsService:
    """Service for computing intake against goals."""

    repository: StatsRepository
    profile_service: ProfileService
    default_timezone: str = DEFAULT_TIMEZONE

    def daily_stats(
        self,
        owner_id: UUID,
        date_text: str | None = None,
        timezone_name: str | None = None,
        now: datetime | None = None,
    ) -> DailyStats:
        """Return totals, goals and remaining for a local calendar day."""
        window = resolve_day_window(
            date_text,
            timezone_name,
            default_timezone=self.default_timezone,
            now=now,
        )
        goals = self.profile_service.get_profile(owner_id).goals
        entries = self.repository.list_entries_between(
            owner_id, window.start, window.end
        )
        return aggregate_day(entries, goals)

    def range_stats(
        self, owner_id: UUID, start_text: str | None, end_text: str | None
    ) -> list[DayAggregate]:
        """Return per-day totals for the UTC days between two dates."""
        window = resolve_range_window(start_text, end_text)
        goals = self.profile_service.get_profile(owner_id).goals
        entries = self.repository.list_entries_between(
            owner_id, window.start, window.end
        )
        return aggregate_by_day(entries, goals)
