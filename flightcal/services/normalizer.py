"""Recovery of flight lists from the differently shaped API responses."""

import logging
from collections.abc import Callable
from typing import Any

from flightcal.core.constants import UNKNOWN, ResponseKeys
from flightcal.models.quota import QuotaInfo
from flightcal.models.result import FetchResult, NormalizedResult, PayloadKind

logger = logging.getLogger(__name__)

# A strategy returns the flight list if it recognizes the shape, else None.
FlightListStrategy = Callable[[Any], list[Any] | None]


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else [value]


def _from_outbound(data: Any) -> list[Any] | None:
    if isinstance(data, dict) and data.get("outbound") is not None:
        return _as_list(data["outbound"])
    return None


def _from_list(data: Any) -> list[Any] | None:
    if isinstance(data, list):
        return data
    return None


def _from_flights(data: Any) -> list[Any] | None:
    if isinstance(data, dict) and data.get("flights") is not None:
        return _as_list(data["flights"])
    return None


def _from_single(data: Any) -> list[Any] | None:
    if data is None:
        return []
    return [data]


# Tried in order; the last one always matches.
FLIGHT_LIST_STRATEGIES: list[FlightListStrategy] = [
    _from_outbound,
    _from_list,
    _from_flights,
    _from_single,
]


def _unknown_if_missing(value: Any) -> Any:
    if value is None or value == UNKNOWN:
        return UNKNOWN
    return value


def unwrap_quota(response: Any) -> tuple[QuotaInfo | None, Any]:
    """Split a wire-shaped response into its quota and the underlying data.

    Args:
        response: Either a ``_data``/``_quotaInfo`` wrapper, an object with
            ``_quotaInfo`` merged in, or a bare payload from the cache

    Returns:
        Tuple of (quota or None, data)
    """
    if not isinstance(response, dict) or ResponseKeys.QUOTA_INFO not in response:
        return None, response

    raw_quota = response.get(ResponseKeys.QUOTA_INFO) or {}
    quota = QuotaInfo(
        remaining=_unknown_if_missing(raw_quota.get("remaining")),
        limit=_unknown_if_missing(raw_quota.get("limit")),
        reset=_unknown_if_missing(raw_quota.get("reset")),
    )

    if ResponseKeys.DATA in response:
        return quota, response[ResponseKeys.DATA]

    data = {key: value for key, value in response.items() if key != ResponseKeys.QUOTA_INFO}
    return quota, data


def resolve_flights(data: Any) -> list[Any]:
    """Pick the flight list out of a payload using the first matching strategy."""
    for strategy in FLIGHT_LIST_STRATEGIES:
        flights = strategy(data)
        if flights is not None:
            logger.debug(f"Resolved {len(flights)} flight(s) via {strategy.__name__}")
            return flights
    return []


def normalize_response(response: FetchResult | Any) -> NormalizedResult:
    """Recover quota information and the flight list from a lookup result.

    Args:
        response: A fetch result, or a raw/wire-shaped payload

    Returns:
        Normalized result; ``error`` is set and ``flights`` empty on failure
    """
    if isinstance(response, FetchResult):
        if response.kind == PayloadKind.ERROR:
            return NormalizedResult(error=response.error)
        quota, data = response.quota, response.data
    else:
        quota, data = unwrap_quota(response)

    if isinstance(data, dict) and data.get(ResponseKeys.ERROR):
        logger.error(f"API returned error: {data[ResponseKeys.ERROR]}")
        return NormalizedResult(quota_info=quota, error=str(data[ResponseKeys.ERROR]))

    flights = resolve_flights(data)
    return NormalizedResult(quota_info=quota, flights=flights)
