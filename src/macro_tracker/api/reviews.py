"""Review endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macro_tracker.api.dependencies import get_container, read_json, require_principal
from macro_tracker.api.serializers import serialize_review, serialize_review_with_food
from macro_tracker.domain.payloads import ReviewInput, ReviewPatch, parse_payload

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("/add", status_code=status.HTTP_201_CREATED)
async def add_review(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Review an existing food entry."""
    payload = parse_payload(ReviewInput, await read_json(request))
    review = get_container(request).review_service.add_review(principal_id, payload)
    return {"review": serialize_review(review)}


@router.get("")
async def list_reviews(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Return the caller's reviews with their foods."""
    container = get_container(request)
    reviews = container.review_service.list_reviews(principal_id)
    return {
        "reviews": [
            serialize_review_with_food(item, container.food_service)
            for item in reviews
        ]
    }


@router.put("/edit/{review_id}")
async def edit_review(
    review_id: UUID, request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Update one of the caller's reviews."""
    patch = parse_payload(ReviewPatch, await read_json(request))
    review = get_container(request).review_service.edit_review(
        principal_id, review_id, patch
    )
    return {
        "message": "Review updated successfully",
        "review": serialize_review(review),
    }


@router.delete("/delete/{review_id}")
async def delete_review(
    review_id: UUID, request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, str]:
    """Delete one of the caller's reviews."""
    get_container(request).review_service.delete_review(principal_id, review_id)
    return {"message": "Review deleted successfully"}
