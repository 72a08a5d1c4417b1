"""Flight lookup service combining the API client with the TTL cache."""

import logging
from collections.abc import Callable

from flightcal.api.client import AeroDataBoxClient
from flightcal.cache.flight import FlightCache
from flightcal.config import Config
from flightcal.exceptions import FlightCalError, MissingAPIKeyError
from flightcal.models.result import FetchResult

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], AeroDataBoxClient]


class FlightFetcher:
    """Looks up flights, serving repeated queries from the cache."""

    def __init__(
        self,
        cache: FlightCache,
        credential_provider: Callable[[], str | None],
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            cache: Flight response cache
            credential_provider: Returns the API key, or None if unset
            client_factory: Builds an API client for a given key
        """
        self.cache = cache
        self.credential_provider = credential_provider
        self.client_factory = client_factory or AeroDataBoxClient

    @classmethod
    def from_config(cls, config: Config, cache: FlightCache, credential_provider: Callable[[], str | None]) -> "FlightFetcher":
        def factory(api_key: str) -> AeroDataBoxClient:
            return AeroDataBoxClient(
                api_key,
                base_url=config.api_base_url,
                host=config.api_host,
                timeout=config.request_timeout,
            )

        return cls(cache, credential_provider, factory)

    def fetch(self, flight_code: str, date: str, bypass_cache: bool = False) -> FetchResult:
        """Look up a flight by number and date.

        Cached responses are returned without quota information. A live
        response is cached as-is and returned with the quota it reported.

        Args:
            flight_code: Flight number such as ``AA123``
            date: ISO date, optionally with a time-of-day suffix
            bypass_cache: Skip the cache lookup and always call the API

        Returns:
            Fetch result; failures are reported through ``FetchResult.error``
        """
        cache_key = self.cache.cache_key(flight_code, date)

        if bypass_cache:
            logger.info(f"Cache bypass requested for {cache_key}")
        else:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return FetchResult.from_payload(cached, from_cache=True)

        api_key = self.credential_provider()
        if not api_key:
            logger.error("API key not set")
            return FetchResult.failure(MissingAPIKeyError().message)

        try:
            with self.client_factory(api_key) as client:
                data, quota = client.get_flights_by_number(flight_code, date)
        except FlightCalError as e:
            return FetchResult.failure(e.message)

        self.cache.set(cache_key, data)
        return FetchResult.from_payload(data, quota=quota)
