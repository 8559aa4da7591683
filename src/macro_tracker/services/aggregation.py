"""Nutrient aggregation and goal deltas."""

import math
from collections import defaultdict
from collections.abc import Iterable
from datetime import UTC, date

from macro_tracker.domain.models import FoodEntry, NutrientGoals
from macro_tracker.domain.stats import DailyStats, DayAggregate, NutrientTotals


def sum_totals(entries: Iterable[FoodEntry]) -> NutrientTotals:
    """Sum protein, carbs, fat and calories across entries."""
    total = NutrientTotals()
    for entry in entries:
        total = NutrientTotals(
            protein=total.protein + _amount(entry.protein),
            carbs=total.carbs + _amount(entry.carbs),
            fat=total.fat + _amount(entry.fat),
            calories=total.calories + _amount(entry.calories),
        )
    return total


def compute_remaining(totals: NutrientTotals, goals: NutrientGoals) -> NutrientTotals:
    """Return goal minus total per field, rounded; negative means overage."""
    return NutrientTotals(
        protein=round_half_away(_amount(goals.protein) - totals.protein),
        carbs=round_half_away(_amount(goals.carbs) - totals.carbs),
        fat=round_half_away(_amount(goals.fat) - totals.fat),
        calories=round_half_away(_amount(goals.calories) - totals.calories),
    )


def aggregate_day(entries: Iterable[FoodEntry], goals: NutrientGoals) -> DailyStats:
    """Aggregate entries of a single window against goals."""
    totals = sum_totals(entries)
    return DailyStats(
        totals=totals, goals=goals, remaining=compute_remaining(totals, goals)
    )


def aggregate_by_day(
    entries: Iterable[FoodEntry], goals: NutrientGoals
) -> list[DayAggregate]:
    """Aggregate entries per UTC calendar day.

    Only days with at least one entry produce a row. Rows are ordered by
    ISO date.
    """
    grouped: dict[date, list[FoodEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.timestamp.astimezone(UTC).date()].append(entry)

    rows = []
    for day in sorted(grouped, key=date.isoformat):
        stats = aggregate_day(grouped[day], goals)
        rows.append(
            DayAggregate(day=day, totals=stats.totals, remaining=stats.remaining)
        )
    return rows


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def _amount(value: float | None) -> float:
    return float(value) if value is not None else 0.0
