import json

import pytest
from typer.testing import CliRunner

from conftest import JFK_LAX, DummyResp
from flightcal.cache.credentials import CredentialStore, mask_api_key
from flightcal.cli.main import app

runner = CliRunner()


def test_search_json_output(cli_env, fake_api):
    fake_api.respond_with(
        DummyResp(200, [JFK_LAX], headers={"x-ratelimit-requests-remaining": "9", "x-ratelimit-requests-limit": "10"})
    )

    result = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01", "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["flights"] == [JFK_LAX]
    assert payload["quotaInfo"] == {"remaining": 9, "limit": 10, "reset": "Unknown"}


def test_search_twice_uses_cache(cli_env, fake_api):
    first = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])
    second = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert len(fake_api.calls) == 1
    assert "Using cached results" in second.output


def test_search_refresh_skips_cache(cli_env, fake_api):
    runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])
    result = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01", "--refresh"])

    assert result.exit_code == 0, result.output
    assert len(fake_api.calls) == 2


def test_search_without_key(cli_env, fake_api, monkeypatch):
    monkeypatch.delenv("FLIGHTCAL_RAPIDAPI_KEY")

    result = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])

    assert result.exit_code == 1
    assert "API key not set" in result.output
    assert fake_api.calls == []


def test_search_upstream_error(cli_env, fake_api):
    fake_api.respond_with(DummyResp(401, {"message": "Invalid API key"}))

    result = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])

    assert result.exit_code == 1
    assert "API Error: 401 - Invalid API key" in result.output


def test_search_invalid_date(cli_env, fake_api):
    result = runner.invoke(app, ["search", "AA123", "--date", "xyzzy"])

    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_add_print_url(cli_env, fake_api):
    result = runner.invoke(app, ["add", "AA123", "--date", "2024-05-01", "--print-url"])

    assert result.exit_code == 0, result.output
    assert "https://calendar.google.com/calendar/render?action=TEMPLATE" in result.stdout


def test_add_opens_browser(cli_env, fake_api, monkeypatch):
    opened = []
    monkeypatch.setattr("flightcal.cli.commands.calendar.launch_in_browser", opened.append)

    result = runner.invoke(app, ["add", "AA123", "--date", "2024-05-01"])

    assert result.exit_code == 0, result.output
    assert len(opened) == 1
    assert "dates=20240501T140000Z%2F20240501T201500Z" in opened[0]


def test_add_writes_ics(cli_env, fake_api, tmp_path):
    ics_path = tmp_path / "flight.ics"

    result = runner.invoke(app, ["add", "AA123", "--date", "2024-05-01", "--print-url", "--ics", str(ics_path)])

    assert result.exit_code == 0, result.output
    assert "DTSTART:20240501T140000Z" in ics_path.read_text(encoding="utf-8")


def test_add_index_out_of_range(cli_env, fake_api):
    result = runner.invoke(app, ["add", "AA123", "--date", "2024-05-01", "--index", "2"])

    assert result.exit_code == 1
    assert "only 1 flight(s) found" in result.output


def test_add_invalid_flight(cli_env, fake_api):
    fake_api.respond_with(DummyResp(200, [{"number": "AA 123", "departure": {}, "arrival": {}}]))

    result = runner.invoke(app, ["add", "AA123", "--date", "2024-05-01", "--print-url"])

    assert result.exit_code == 1
    assert "missing time information" in result.output


def test_set_key_persists(cli_env, monkeypatch):
    monkeypatch.delenv("FLIGHTCAL_RAPIDAPI_KEY")

    result = runner.invoke(app, ["set-key", "abcd1234efgh5678"])

    assert result.exit_code == 0, result.output
    assert "abcd...5678" in result.output
    store = CredentialStore(cli_env / "settings")
    assert store.get_credential() == "abcd1234efgh5678"
    store.close()


def test_set_key_prompts(cli_env, monkeypatch):
    monkeypatch.delenv("FLIGHTCAL_RAPIDAPI_KEY")

    result = runner.invoke(app, ["set-key"], input="prompted-key-value\n")

    assert result.exit_code == 0, result.output
    store = CredentialStore(cli_env / "settings")
    assert store.get_credential() == "prompted-key-value"
    store.close()


def test_saved_key_is_used_for_search(cli_env, fake_api, monkeypatch):
    monkeypatch.delenv("FLIGHTCAL_RAPIDAPI_KEY")
    runner.invoke(app, ["set-key", "saved-key-1234567"])

    result = runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])

    assert result.exit_code == 0, result.output
    assert fake_api.calls[0]["headers"]["X-RapidAPI-Key"] == "saved-key-1234567"


def test_clear_key(cli_env, monkeypatch):
    monkeypatch.delenv("FLIGHTCAL_RAPIDAPI_KEY")
    runner.invoke(app, ["set-key", "saved-key-1234567"])

    result = runner.invoke(app, ["clear-key"])

    assert result.exit_code == 0
    assert "removed" in result.output
    assert runner.invoke(app, ["show-key"]).exit_code == 1


def test_cache_commands(cli_env, fake_api):
    runner.invoke(app, ["search", "AA123", "--date", "2024-05-01"])

    status = runner.invoke(app, ["cache", "status"])
    assert status.exit_code == 0, status.output
    assert "Live" in status.output

    purge = runner.invoke(app, ["cache", "purge"])
    assert "Removed 0 expired" in purge.output

    clear = runner.invoke(app, ["cache", "clear", "--yes"])
    assert clear.exit_code == 0
    assert "Cleared 1 cached" in clear.output


@pytest.mark.parametrize(
    "key, expected",
    [("short", "*****"), ("abcd1234efgh5678", "abcd...5678")],
)
def test_mask_api_key(key, expected):
    assert mask_api_key(key) == expected
