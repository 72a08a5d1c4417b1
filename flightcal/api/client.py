"""AeroDataBox (RapidAPI) client implementation."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from flightcal.api.quota import extract_quota_info
from flightcal.core.constants import API_BASE_URL, API_HOST, FLIGHTS_BY_NUMBER_ENDPOINT, UNKNOWN, APIConstants
from flightcal.core.timeutils import truncate_to_day
from flightcal.exceptions import MissingAPIKeyError, NetworkError, UpstreamError
from flightcal.models.quota import QuotaInfo


class AeroDataBoxClient:
    """Client for the AeroDataBox flight data API."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = API_BASE_URL,
        host: str = API_HOST,
        timeout: float = APIConstants.REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the API client.

        Args:
            api_key: RapidAPI key for authentication
            base_url: Base URL of the API
            host: Value of the X-RapidAPI-Host header
            timeout: Request timeout in seconds

        Raises:
            MissingAPIKeyError: If no API key is given

        """
        self.logger = logging.getLogger(__name__)

        if not api_key:
            self.logger.error("API key not provided")
            raise MissingAPIKeyError()

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.host = host
        self.timeout = timeout
        self.session: requests.Session | None = None

    def __enter__(self) -> "AeroDataBoxClient":
        """Enter context."""
        self.logger.debug("Opening client session")
        self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        if self.session:
            self.session.close()
            self.session = None
            self.logger.debug("Client session closed")

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
            "Accept": "application/json",
        }

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull the ``message`` field out of an error body, if there is one."""
        try:
            body = response.json()
        except ValueError:
            return "Unknown error"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return "Unknown error"

    def _make_request(self, method: str, endpoint: str) -> requests.Response:
        """Make a single API request.

        Args:
            method: HTTP method
            endpoint: API endpoint path

        Returns:
            Successful response

        Raises:
            NetworkError: If no response was received
            UpstreamError: If the API answered with an error status

        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        url = f"{self.base_url}{endpoint}"
        method_name = f"{method} {endpoint}"
        self.logger.debug(f"Making request: {method_name}")

        try:
            response = self.session.request(method, url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Network error in {method_name}: {e}")
            raise NetworkError(reason=str(e)) from e

        if not response.ok:
            message = self._error_message(response)
            self.logger.error(f"API error in {method_name}: {response.status_code} {message}")
            raise UpstreamError(response.status_code, message, response.text)

        return response

    def get_flights_by_number(self, flight_code: str, date: str) -> tuple[Any, QuotaInfo]:
        """Fetch the legs of a flight number on a given day.

        Args:
            flight_code: Flight number such as ``AA123``
            date: ISO date; any time-of-day suffix is dropped

        Returns:
            Tuple of (response body, quota information)

        """
        endpoint = FLIGHTS_BY_NUMBER_ENDPOINT.format(
            flight_code=quote(flight_code.strip(), safe=""),
            date=truncate_to_day(date),
        )
        self.logger.info(f"Fetching flight {flight_code} on {truncate_to_day(date)}")

        response = self._make_request("GET", endpoint)
        quota = extract_quota_info(response.headers)

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Response for {flight_code} is not valid JSON")
            raise UpstreamError(response.status_code, "Invalid JSON in response", response.text) from e

        if isinstance(data, list):
            self.logger.debug(f"Response is a list with {len(data)} items")
        elif isinstance(data, dict):
            self.logger.debug(f"Response is an object with keys: {list(data.keys())}")

        if quota.remaining == UNKNOWN:
            self.logger.debug("No rate-limit headers in response")

        return data, quota
