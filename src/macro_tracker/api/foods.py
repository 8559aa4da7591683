"""Food entry and intake statistics endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macro_tracker.api.dependencies import (
    get_container,
    read_entry_body,
    require_principal,
)
from macro_tracker.api.serializers import (
    serialize_daily_stats,
    serialize_day,
    serialize_entry,
    serialize_review,
)
from macro_tracker.domain.payloads import FoodEntryInput, FoodEntryPatch, parse_payload

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.post("/add-food", status_code=status.HTTP_201_CREATED)
async def add_food(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Log a food entry with an optional image upload."""
    food_service = get_container(request).food_service
    fields, image = await read_entry_body(request)
    payload = parse_payload(FoodEntryInput, fields)
    entry = food_service.add_entry(principal_id, payload, image)
    return {
        "message": "Food item added successfully",
        "food": serialize_entry(entry, food_service),
    }


@router.get("/daily-stats")
async def daily_stats(
    request: Request,
    date: str | None = None,
    tz: str | None = None,
    principal_id: UUID = Depends(require_principal),
) -> dict[str, object]:
    """Return totals, goals and remaining for a local calendar day."""
    stats = get_container(request).stats_service.daily_stats(principal_id, date, tz)
    return serialize_daily_stats(stats)


@router.get("/weekly-stats")
async def weekly_stats(
    request: Request,
    start: str | None = None,
    end: str | None = None,
    principal_id: UUID = Depends(require_principal),
) -> dict[str, object]:
    """Return per-day totals for each UTC day with entries between two dates."""
    rows = get_container(request).stats_service.range_stats(principal_id, start, end)
    return {"days": [serialize_day(row) for row in rows]}


@router.get("")
async def list_foods(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Return the caller's food entries."""
    food_service = get_container(request).food_service
    entries = food_service.list_entries(principal_id)
    return {"foods": [serialize_entry(entry, food_service) for entry in entries]}


@router.get("/{entry_id}")
async def food_detail(
    entry_id: UUID, request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Return one of the caller's entries with its reviews."""
    food_service = get_container(request).food_service
    detail = food_service.get_entry_with_reviews(principal_id, entry_id)
    return {
        "food": serialize_entry(detail.entry, food_service),
        "reviews": [serialize_review(review) for review in detail.reviews],
    }


@router.put("/edit-food/{entry_id}")
async def edit_food(
    entry_id: UUID, request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Update fields of one of the caller's entries."""
    food_service = get_container(request).food_service
    fields, image = await read_entry_body(request)
    patch = parse_payload(FoodEntryPatch, fields)
    entry = food_service.edit_entry(principal_id, entry_id, patch, image)
    return {
        "message": "Food item updated successfully",
        "food": serialize_entry(entry, food_service),
    }


@router.delete("/delete-food/{entry_id}")
async def delete_food(
    entry_id: UUID, request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, str]:
    """Delete one of the caller's entries and its image."""
    get_container(request).food_service.delete_entry(principal_id, entry_id)
    return {"message": "Food item deleted successfully"}
