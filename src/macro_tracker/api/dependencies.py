"""Shared FastAPI dependencies and request helpers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, Request

from macro_tracker.domain.assets import ImageUpload
from macro_tracker.errors import ValidationError

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_principal(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the Authorization header to the caller's principal id."""
    container = get_container(request)
    return container.auth_guard.resolve_principal(authorization)


async def read_json(request: Request) -> dict[str, object]:
    """Return the request body as a JSON object."""
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise ValidationError("Request body must be valid JSON") from exc
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


async def read_entry_body(
    request: Request,
) -> tuple[dict[str, object], ImageUpload | None]:
    """Return form or JSON fields and the optional `image` upload."""
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith(("multipart/form-data", "application/x-www-form")):
        return await read_json(request), None

    form = await request.form()
    fields: dict[str, object] = {}
    image: ImageUpload | None = None
    for key, value in form.multi_items():
        if isinstance(value, str):
            fields[key] = value
            continue
        if key != "image" or not value.filename:
            continue
        content = await value.read()
        if content:
            image = ImageUpload(
                filename=value.filename,
                content_type=value.content_type or "application/octet-stream",
                content=content,
            )
    return fields, image
