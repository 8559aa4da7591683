"""Profile endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from macro_tracker.api.dependencies import get_container, read_json, require_principal
from macro_tracker.api.serializers import serialize_profile
from macro_tracker.domain.payloads import ProfilePatch, parse_payload

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/profile")
async def get_profile(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Return the caller's profile."""
    profile = get_container(request).profile_service.get_profile(principal_id)
    return serialize_profile(profile)


@router.put("/edit-profile")
async def edit_profile(
    request: Request, principal_id: UUID = Depends(require_principal)
) -> dict[str, object]:
    """Update the caller's goals and weights."""
    patch = parse_payload(ProfilePatch, await read_json(request))
    profile = get_container(request).profile_service.edit_profile(principal_id, patch)
    return {
        "message": "Profile updated successfully",
        "user": serialize_profile(profile),
    }
