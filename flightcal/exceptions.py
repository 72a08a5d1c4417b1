"""Custom exceptions for flightcal."""

from typing import Any


class FlightCalError(Exception):
    """Base exception for all flightcal errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize flightcal error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(FlightCalError):
    """Raised when configuration is invalid or missing."""


class MissingAPIKeyError(ConfigurationError):
    """Raised when no RapidAPI key has been configured."""

    def __init__(self) -> None:
        super().__init__("API key not set. Please configure it with 'flightcal set-key'.")


class NetworkError(FlightCalError):
    """Raised when the upstream API could not be reached."""

    def __init__(self, message: str = "Network error: Could not reach the API server.", reason: str | None = None) -> None:
        super().__init__(message, {"reason": reason} if reason else None)
        self.reason = reason


class UpstreamError(FlightCalError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_text: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize upstream error.

        Args:
            status_code: HTTP status code
            message: Error message reported by the API, or a fallback
            response_text: Raw response text from API
            details: Additional error details

        """
        super().__init__(f"API Error: {status_code} - {message}", details)
        self.status_code = status_code
        self.upstream_message = message
        self.response_text = response_text


class InvalidFlightDataError(FlightCalError):
    """Raised when a flight record lacks the fields needed for a calendar event."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Invalid flight data: {reason}", details)
        self.reason = reason


class LinkOpenError(FlightCalError):
    """Raised when the external link handler fails to open a URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to open Google Calendar: {reason}", {"url": url})
        self.url = url
        self.reason = reason


class CacheError(FlightCalError):
    """Raised when cache operations fail."""
