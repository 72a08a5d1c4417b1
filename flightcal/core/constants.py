"""
Constants and configuration values for flightcal.
"""

from enum import IntEnum, StrEnum

# API
API_BASE_URL = "https://aerodatabox.p.rapidapi.com"
API_HOST = "aerodatabox.p.rapidapi.com"
FLIGHTS_BY_NUMBER_ENDPOINT = "/flights/number/{flight_code}/{date}"

# External links
GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
FLIGHTAWARE_URL = "https://www.flightaware.com/live/flight/"

UNKNOWN = "Unknown"
UNKNOWN_AIRLINE = "Unknown Airline"
TIME_NOT_AVAILABLE = "Time not available"


class APIConstants(IntEnum):
    """API-related limits and constants."""

    REQUEST_TIMEOUT = 30


class CacheLimits(IntEnum):
    """Cache-related limits."""

    TTL_HOURS = 24
    SECONDS_PER_HOUR = 3600


class QuotaHeaders:
    """Rate-limit header aliases, in the order they are probed."""

    PREFIXES = (
        "x-ratelimit-requests",
        "x-rapidapi-quota",
        "x-ratelimit",
        "x-rapidapi-requests",
    )

    REMAINING = tuple(f"{prefix}-remaining" for prefix in PREFIXES)
    LIMIT = tuple(f"{prefix}-limit" for prefix in PREFIXES)
    RESET = tuple(f"{prefix}-reset" for prefix in PREFIXES)


class QuotaConstants(IntEnum):
    """Thresholds used to interpret quota reset values."""

    # 2000-01-01T00:00:00Z
    MIN_EPOCH_SECONDS = 946684800
    MIN_EPOCH_MILLISECONDS = 946684800000


class DisplayConstants(IntEnum):
    """Display and formatting limits."""

    API_KEY_MASK_MIN_LENGTH = 12
    API_KEY_PREFIX_LENGTH = 4
    API_KEY_SUFFIX_LENGTH = 4


class TableColumnWidths(IntEnum):
    """Table column width constants for CLI display."""

    INDEX = 4
    FLIGHT = 10
    AIRLINE = 22
    AIRPORT = 28
    TIME = 20
    STATUS = 12


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


class ResponseKeys(StrEnum):
    """Keys used by the legacy wire shape of fetch results."""

    DATA = "_data"
    QUOTA_INFO = "_quotaInfo"
    ERROR = "error"
