"""Core functionality module."""

from flightcal.core.constants import FormattingConstants
from flightcal.core.timeutils import (
    format_duration,
    format_gcal_timestamp,
    format_local_time,
    parse_instant,
    parse_user_date,
    truncate_to_day,
)

__all__ = [
    "FormattingConstants",
    "format_duration",
    "format_gcal_timestamp",
    "format_local_time",
    "parse_instant",
    "parse_user_date",
    "truncate_to_day",
]
