"""Ownership checks applied before reads, updates and deletes."""

import logging
from collections.abc import Callable
from typing import TypeVar
from uuid import UUID

from macro_tracker.errors import ForbiddenError, NotFoundError

_logger = logging.getLogger(__name__)

ResourceT = TypeVar("ResourceT")


def ensure_owner(
    resource: ResourceT | None,
    principal_id: UUID,
    *,
    owner_of: Callable[[ResourceT], UUID],
    label: str,
) -> ResourceT:
    """Return the resource when the principal owns it.

    Raises NotFoundError when the resource is absent and ForbiddenError when
    it belongs to another principal.
    """
    if resource is None:
        raise NotFoundError(f"{label} not found")
    if owner_of(resource) != principal_id:
        _logger.warning("Ownership denied: label=%s principal=%s", label, principal_id)
        raise ForbiddenError(f"Not allowed to access this {label.lower()}")
    return resource
