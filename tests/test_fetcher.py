import requests

from conftest import JFK_LAX, DummyResp
from flightcal.api.client import AeroDataBoxClient
from flightcal.models.result import PayloadKind
from flightcal.services.fetcher import FlightFetcher

RATE_HEADERS = {
    "Content-Type": "application/json",
    "X-RateLimit-Requests-Remaining": "41",
    "X-RateLimit-Requests-Limit": "100",
    "X-RateLimit-Requests-Reset": "1714600000",
}


def make_fetcher(flight_cache, api_key="test-key"):
    return FlightFetcher(flight_cache, lambda: api_key)


def test_live_fetch_returns_quota_and_caches_body(flight_cache, fake_api):
    fake_api.respond_with(DummyResp(200, [JFK_LAX], headers=RATE_HEADERS))

    result = make_fetcher(flight_cache).fetch("AA123", "2024-05-01T08:00:00Z")

    assert result.kind == PayloadKind.LIST
    assert result.data == [JFK_LAX]
    assert result.quota.remaining == 41
    assert result.quota.limit == 100
    assert not result.from_cache
    # The cache holds the raw body only
    assert flight_cache.get("flight_AA123_2024-05-01") == [JFK_LAX]


def test_request_shape(flight_cache, fake_api):
    make_fetcher(flight_cache).fetch("AA123", "2024-05-01")

    call = fake_api.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://aerodatabox.p.rapidapi.com/flights/number/AA123/2024-05-01"
    assert call["headers"]["X-RapidAPI-Key"] == "test-key"
    assert call["headers"]["X-RapidAPI-Host"] == "aerodatabox.p.rapidapi.com"


def test_second_fetch_within_ttl_uses_cache(flight_cache, fake_api, clock):
    fetcher = make_fetcher(flight_cache)
    first = fetcher.fetch("AA123", "2024-05-01")
    clock.advance(3600)
    fake_api.respond_with(DummyResp(200, [{"number": "changed"}]))

    second = fetcher.fetch("AA123", "2024-05-01")

    assert len(fake_api.calls) == 1
    assert second.from_cache
    assert second.quota is None
    assert second.data == first.data


def test_fetch_after_ttl_calls_api_again(flight_cache, fake_api, clock):
    fetcher = make_fetcher(flight_cache)
    fetcher.fetch("AA123", "2024-05-01")
    clock.advance(24 * 3600)

    result = fetcher.fetch("AA123", "2024-05-01")

    assert len(fake_api.calls) == 2
    assert not result.from_cache


def test_bypass_cache_always_calls_api_and_overwrites(flight_cache, fake_api, clock):
    fetcher = make_fetcher(flight_cache)
    fetcher.fetch("AA123", "2024-05-01", bypass_cache=True)
    first_entry = flight_cache.load("flight_AA123_2024-05-01")

    clock.advance(60)
    fake_api.respond_with(DummyResp(200, {"outbound": [JFK_LAX]}))
    result = fetcher.fetch("AA123", "2024-05-01", bypass_cache=True)
    second_entry = flight_cache.load("flight_AA123_2024-05-01")

    assert len(fake_api.calls) == 2
    assert result.kind == PayloadKind.OBJECT
    assert second_entry.cached_at == first_entry.cached_at + 60
    assert second_entry.payload == {"outbound": [JFK_LAX]}


def test_missing_api_key_skips_network(flight_cache, fake_api):
    result = make_fetcher(flight_cache, api_key=None).fetch("AA123", "2024-05-01")

    assert not result.ok
    assert result.error.startswith("API key not set")
    assert fake_api.calls == []


def test_cache_hit_does_not_need_api_key(flight_cache, fake_api):
    flight_cache.set("flight_AA123_2024-05-01", [JFK_LAX])

    result = make_fetcher(flight_cache, api_key=None).fetch("AA123", "2024-05-01")

    assert result.ok
    assert result.from_cache


def test_network_error(flight_cache, fake_api):
    fake_api.respond_with(requests.exceptions.ConnectionError("connection refused"))

    result = make_fetcher(flight_cache).fetch("AA123", "2024-05-01")

    assert result.error == "Network error: Could not reach the API server."
    assert not flight_cache.exists("flight_AA123_2024-05-01")


def test_upstream_error_uses_message(flight_cache, fake_api):
    fake_api.respond_with(DummyResp(404, {"message": "Flight not found"}))

    result = make_fetcher(flight_cache).fetch("AA123", "2024-05-01")

    assert result.error == "API Error: 404 - Flight not found"
    assert not flight_cache.exists("flight_AA123_2024-05-01")


def test_upstream_error_without_message(flight_cache, fake_api):
    fake_api.respond_with(DummyResp(500, {"detail": "boom"}))

    result = make_fetcher(flight_cache).fetch("AA123", "2024-05-01")

    assert result.error == "API Error: 500 - Unknown error"


def test_wire_shape_attaches_quota(flight_cache, fake_api):
    fake_api.respond_with(DummyResp(200, {"outbound": [JFK_LAX]}, headers=RATE_HEADERS))

    wire = make_fetcher(flight_cache).fetch("AA123", "2024-05-01").to_wire()

    assert wire["outbound"] == [JFK_LAX]
    assert wire["_quotaInfo"] == {"remaining": 41, "limit": 100, "reset": 1714600000}


def test_client_uses_configured_timeout(fake_api):
    with AeroDataBoxClient("key", timeout=5) as client:
        client.get_flights_by_number("BA 283", "2024-05-01")

    assert fake_api.calls[0]["timeout"] == 5
    assert fake_api.calls[0]["url"].endswith("/flights/number/BA%20283/2024-05-01")
