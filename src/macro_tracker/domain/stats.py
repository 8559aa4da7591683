"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date, datetime

from macro_tracker.domain.models import NutrientGoals


@dataclass(frozen=True)
class TimeWindow:
    """Closed UTC interval."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        """Return True when the instant falls inside the window."""
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class NutrientTotals:
    """Summed macros and calories."""

    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    calories: float = 0.0


@dataclass(frozen=True)
class DailyStats:
    """Totals for a single window compared to goals."""

    totals: NutrientTotals
    goals: NutrientGoals
    remaining: NutrientTotals


@dataclass(frozen=True)
class DayAggregate:
    """Totals and remaining for one UTC calendar day."""

    day: date
    totals: NutrientTotals
    remaining: NutrientTotals
