import copy
import json

import pytest
import requests

from flightcal.cache.flight import FlightCache

JFK_LAX = {
    "number": "AA 123",
    "status": "Expected",
    "departure": {
        "airport": {"icao": "KJFK", "iata": "JFK", "name": "New York John F Kennedy"},
        "scheduledTime": {"utc": "2024-05-01 14:00Z", "local": "2024-05-01 10:00-04:00"},
        "terminal": "8",
    },
    "arrival": {
        "airport": {"icao": "KLAX", "iata": "LAX", "name": "Los Angeles"},
        "scheduledTime": {"utc": "2024-05-01 20:15Z", "local": "2024-05-01 13:15-07:00"},
        "terminal": "4",
    },
    "airline": {"name": "American Airlines", "iata": "AA", "icao": "AAL"},
    "greatCircleDistance": {"km": 3983, "mile": 2475},
}


class FakeClock:
    def __init__(self, now=1_714_550_400.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class DummyResp:
    def __init__(self, status_code=200, payload=None, text="", headers=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = text or json.dumps(self._payload)
        self.headers = requests.structures.CaseInsensitiveDict(headers or {"Content-Type": "application/json"})

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return self._payload


@pytest.fixture
def flight():
    return copy.deepcopy(JFK_LAX)


@pytest.fixture
def delayed_flight(flight):
    flight["departure"]["predictedTime"] = {"utc": "2024-05-01 14:30Z", "local": "2024-05-01 10:30-04:00"}
    flight["arrival"]["predictedTime"] = {"utc": "2024-05-01 20:40Z", "local": "2024-05-01 13:40-07:00"}
    return flight


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def flight_cache(tmp_path, clock):
    cache = FlightCache(tmp_path / "cache", clock=clock)
    yield cache
    cache.close()


@pytest.fixture
def fake_api(monkeypatch):
    """Patch requests so every API call returns the queued response."""
    calls = []
    state = {"response": DummyResp(200, [copy.deepcopy(JFK_LAX)])}

    def fake_request(self, method, url, headers=None, timeout=None, **kwargs):
        calls.append({"method": method, "url": url, "headers": headers, "timeout": timeout})
        response = state["response"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests.Session, "request", fake_request)

    class FakeAPI:
        def respond_with(self, response):
            state["response"] = response

        @property
        def calls(self):
            return calls

    return FakeAPI()


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FLIGHTCAL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("FLIGHTCAL_RAPIDAPI_KEY", "test-rapidapi-key")
    monkeypatch.chdir(tmp_path)
    return tmp_path / "data"
