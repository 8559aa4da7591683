"""Shared helpers for Supabase table queries."""

import logging
from datetime import UTC, datetime
from typing import Any

import httpx
from supabase import PostgrestAPIError

from macro_tracker.errors import DependencyFailureError

_logger = logging.getLogger(__name__)


def execute(query: Any, action: str) -> Any:
    """Run a query builder, converting client failures to DependencyFailureError."""
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        _logger.exception("Supabase query failed: action=%s", action)
        raise DependencyFailureError(f"Could not {action}") from exc


def parse_float(value: object) -> float:
    """Parse a numeric column, treating missing values as zero."""
    if value is None or value == "":
        return 0.0
    return float(value)


def parse_timestamp(value: object) -> datetime:
    """Parse a timestamp column as an aware UTC datetime."""
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.fromisoformat(str(value))
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
