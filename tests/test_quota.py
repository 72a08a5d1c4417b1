from datetime import UTC, datetime

from flightcal.api.quota import extract_quota_info
from flightcal.models.quota import QuotaInfo


def test_digit_strings_become_integers():
    quota = extract_quota_info({"x-ratelimit-requests-remaining": "42", "x-ratelimit-requests-limit": "100"})

    assert quota == QuotaInfo(remaining=42, limit=100, reset="Unknown")


def test_no_headers_yields_unknown():
    quota = extract_quota_info({})

    assert quota.remaining == "Unknown"
    assert quota.limit == "Unknown"
    assert quota.reset == "Unknown"
    assert not quota.is_known


def test_none_headers_yields_unknown():
    assert extract_quota_info(None) == QuotaInfo()


def test_alias_priority():
    quota = extract_quota_info(
        {
            "x-ratelimit-remaining": "5",
            "x-rapidapi-quota-remaining": "7",
            "x-rapidapi-requests-limit": "500",
            "x-ratelimit-limit": "300",
        }
    )

    assert quota.remaining == 7
    assert quota.limit == 300


def test_header_names_are_case_insensitive():
    quota = extract_quota_info({"X-RateLimit-Requests-Reset": "1714600000"})

    assert quota.reset == 1714600000
    assert quota.reset_at == datetime(2024, 5, 1, 21, 46, 40, tzinfo=UTC)


def test_non_numeric_values_are_kept_as_strings():
    quota = extract_quota_info({"x-ratelimit-requests-remaining": "12.5", "x-ratelimit-reset": "soon"})

    assert quota.remaining == "12.5"
    assert quota.reset == "soon"
    assert quota.reset_at is None


def test_small_reset_value_is_not_a_timestamp():
    quota = QuotaInfo(reset=3600)
    assert quota.reset_at is None


def test_numeric_header_values_are_kept():
    quota = extract_quota_info({"x-ratelimit-requests-remaining": 4.5, "x-ratelimit-requests-limit": 10})

    assert quota.remaining == 4.5
    assert quota.limit == 10
