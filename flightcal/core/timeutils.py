"""Timestamp parsing and formatting helpers."""

import logging
from datetime import UTC, date, datetime, timedelta

import dateparser

from flightcal.core.constants import TIME_NOT_AVAILABLE

logger = logging.getLogger(__name__)


def parse_instant(value: object) -> datetime | None:
    """Parse an upstream timestamp into an aware datetime.

    AeroDataBox reports times as ``2024-05-01 10:00Z`` or
    ``2024-05-01 12:00+02:00``. Values without an offset are taken as UTC.

    Args:
        value: Raw timestamp value

    Returns:
        Aware datetime, or None if the value is not a parseable timestamp
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_local_time(value: str | None) -> str:
    """Render the wall-clock time of a local timestamp as ``7:05pm``.

    The time is shown as written in the timestamp, in the airport's own zone.
    """
    if not value:
        return TIME_NOT_AVAILABLE
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (ValueError, AttributeError):
        return TIME_NOT_AVAILABLE

    suffix = "pm" if parsed.hour >= 12 else "am"
    display_hour = parsed.hour % 12 or 12
    return f"{display_hour}:{parsed.minute:02d}{suffix}"


def format_gcal_timestamp(moment: datetime) -> str:
    """Format an instant as ``YYYYMMDDTHHMMSSZ`` in UTC."""
    return moment.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")


def format_duration(delta: timedelta) -> str:
    """Render a duration as ``2h 5m`` or ``45m``."""
    total_seconds = int(delta.total_seconds())
    sign = "-" if total_seconds < 0 else ""
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes = remainder // 60
    if hours > 0:
        return f"{sign}{hours}h {minutes}m"
    return f"{sign}{minutes}m"


def truncate_to_day(value: str) -> str:
    """Drop any time-of-day suffix from an ISO date string."""
    return value.strip().split("T")[0]


def parse_user_date(text: str | None) -> str | None:
    """Turn user input such as ``tomorrow`` or ``2024-05-01`` into ``YYYY-MM-DD``.

    Args:
        text: Free-form date text, or None for today

    Returns:
        ISO calendar date, or None if the text could not be understood
    """
    if not text:
        return date.today().isoformat()

    try:
        return date.fromisoformat(truncate_to_day(text)).isoformat()
    except ValueError:
        pass

    parsed = dateparser.parse(text, settings={"PREFER_DATES_FROM": "future"})
    if parsed is None:
        return None
    return parsed.date().isoformat()
