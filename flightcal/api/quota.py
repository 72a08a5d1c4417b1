"""Quota extraction from rate-limit response headers."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from requests.structures import CaseInsensitiveDict

from flightcal.core.constants import UNKNOWN, QuotaHeaders
from flightcal.models.quota import QuotaInfo

logger = logging.getLogger(__name__)


def _coerce(value: Any) -> Any:
    """Turn digit-only strings into integers and keep numbers as they are."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value
    # Other header values are kept as text
    return str(value)


def _first_header(headers: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    for name in aliases:
        value = headers.get(name)
        if value is not None:
            return _coerce(value)
    return UNKNOWN


def extract_quota_info(headers: Mapping[str, Any] | None) -> QuotaInfo:
    """Extract quota information from API response headers.

    Vendors report rate limits under several header names; each field takes
    the first alias that is present.

    Args:
        headers: Response headers, matched case-insensitively

    Returns:
        Quota summary, with ``Unknown`` for any field no header reported
    """
    lookup = CaseInsensitiveDict(headers or {})

    quota = QuotaInfo(
        remaining=_first_header(lookup, QuotaHeaders.REMAINING),
        limit=_first_header(lookup, QuotaHeaders.LIMIT),
        reset=_first_header(lookup, QuotaHeaders.RESET),
    )

    logger.debug(f"API quota: {quota.remaining} / {quota.limit} remaining, reset: {quota.reset}")
    if quota.reset != UNKNOWN and quota.reset_at is None:
        logger.debug(f"Quota reset value could not be read as a timestamp: {quota.reset!r}")

    return quota
