"""Calendar day to UTC window resolution."""

import re
from datetime import UTC, date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from macro_tracker.domain.stats import TimeWindow
from macro_tracker.errors import InvalidDateError, ValidationError

DEFAULT_TIMEZONE = "+01:00"
END_OF_DAY = time(23, 59, 59, 999000)

_UTC_NAMES = {"utc", "z", "gmt"}
_OFFSET_PATTERN = re.compile(
    r"^(?:UTC|GMT)?\s*(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str | None, default: str = DEFAULT_TIMEZONE) -> tzinfo:
    """Return a tzinfo for an IANA zone name or a fixed UTC offset."""
    raw = (name or "").strip() or default
    if raw.lower() in _UTC_NAMES:
        return UTC
    match = _OFFSET_PATTERN.match(raw)
    if match:
        sign = -1 if match["sign"] == "-" else 1
        offset = timedelta(
            hours=int(match["hours"]), minutes=int(match["minutes"] or 0)
        )
        try:
            return timezone(sign * offset)
        except ValueError as exc:
            raise ValidationError(f"Unsupported UTC offset: {raw}") from exc
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {raw}") from exc


def parse_day(text: str | None, tz: tzinfo, now: datetime | None = None) -> date:
    """Parse a calendar date, falling back to today in the given zone.

    Accepts ISO dates and ISO datetimes. An aware datetime is converted into
    the zone before its date is taken.
    """
    if text is None or not text.strip():
        return (now or datetime.now(tz=UTC)).astimezone(tz).date()
    raw = text.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        moment = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date format: {raw}") from exc
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz).date()


def day_window(day: date, tz: tzinfo) -> TimeWindow:
    """Return local midnight through local end-of-day of a date, in UTC."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, END_OF_DAY, tzinfo=tz)
    return TimeWindow(start=start.astimezone(UTC), end=end.astimezone(UTC))


def resolve_day_window(
    date_text: str | None = None,
    timezone_name: str | None = None,
    *,
    default_timezone: str = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> TimeWindow:
    """Resolve an optional date and timezone to the day's UTC window."""
    tz = parse_timezone(timezone_name, default_timezone)
    return day_window(parse_day(date_text, tz, now), tz)


def resolve_range_window(start_text: str | None, end_text: str | None) -> TimeWindow:
    """Resolve an inclusive range of UTC calendar dates to a UTC window."""
    if not start_text or not end_text:
        raise ValidationError("Both start and end dates are required")
    start_day = parse_day(start_text, UTC)
    end_day = parse_day(end_text, UTC)
    if end_day < start_day:
        raise ValidationError("End date must not precede start date")
    return TimeWindow(
        start=day_window(start_day, UTC).start, end=day_window(end_day, UTC).end
    )
