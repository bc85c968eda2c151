from __future__ import annotations

import pytest
import requests

from india_covid_dashboard.stats_client import (
    STATS_URL,
    EmptyDataError,
    FetchError,
    StatsError,
    fetch_stats,
    parse_stats,
)

from .conftest import FakeResponse, region


def test_parse_stats_maps_fields(api_body):
    stats = parse_stats(api_body)
    assert stats.summary.total == 44690738
    assert stats.summary.deaths == 530779
    assert stats.summary.discharged == 44159321
    assert [r.loc for r in stats.regional] == ["Kerala", "Maharashtra", "Goa", "Karnataka"]
    assert stats.regional[0].total_confirmed == 6852498
    assert stats.last_refreshed == "2023-03-22T05:30:35.186Z"


def test_parse_stats_ignores_extra_fields(api_body):
    stats = parse_stats(api_body)
    assert not hasattr(stats.regional[0], "confirmedCasesIndian")


@pytest.mark.parametrize(
    "body",
    [
        {"data": None},
        {},
        [],
        None,
        "not an object",
        {"data": {"summary": {"total": 1, "deaths": 0, "discharged": 0}}},
        {"data": {"regional": []}},
    ],
)
def test_parse_stats_rejects_missing_data(body):
    with pytest.raises(EmptyDataError) as err:
        parse_stats(body)
    assert err.value.message == "No data available"


def test_parse_stats_rejects_malformed_regions():
    body = {
        "data": {
            "summary": {"total": 10, "deaths": 1, "discharged": 5},
            "regional": [{"loc": "A", "deaths": 1, "discharged": 2}],
        }
    }
    with pytest.raises(EmptyDataError, match="Malformed"):
        parse_stats(body)


def test_parse_stats_rejects_negative_counts():
    body = {
        "data": {
            "summary": {"total": -1, "deaths": 0, "discharged": 0},
            "regional": [region("A", 1)],
        }
    }
    with pytest.raises(EmptyDataError):
        parse_stats(body)


def test_fetch_stats_success(fake_get, api_body):
    calls = fake_get(FakeResponse(api_body))
    stats = fetch_stats()
    assert len(stats.regional) == 4
    assert len(calls) == 1
    url, kwargs = calls[0]
    assert url == STATS_URL
    assert kwargs == {"timeout": None}


def test_fetch_stats_uses_configured_timeout(fake_get, api_body, monkeypatch):
    monkeypatch.setenv("COVID_STATS_TIMEOUT", "7.5")
    calls = fake_get(FakeResponse(api_body))
    fetch_stats()
    assert calls[0][1]["timeout"] == 7.5


def test_fetch_stats_http_error(fake_get):
    fake_get(FakeResponse({"error": "boom"}, status_code=503))
    with pytest.raises(FetchError, match="503"):
        fetch_stats()


def test_fetch_stats_transport_error(fake_get):
    fake_get(requests.ConnectionError("Name or service not known"))
    with pytest.raises(FetchError, match="Name or service not known"):
        fetch_stats()


def test_fetch_stats_invalid_json(fake_get):
    fake_get(FakeResponse(json_error=ValueError("Expecting value: line 1 column 1 (char 0)")))
    with pytest.raises(FetchError) as err:
        fetch_stats()
    assert "Expecting value" in err.value.message


def test_fetch_stats_null_data(fake_get):
    fake_get(FakeResponse({"success": False, "data": None}))
    with pytest.raises(EmptyDataError):
        fetch_stats()


def test_error_messages_never_empty():
    assert FetchError("").message == "FetchError"
    assert isinstance(EmptyDataError("x"), StatsError)


@pytest.mark.parametrize(
    "summary, regional_row",
    [
        ({"total": True, "deaths": 0, "discharged": 0}, region("A", 1)),
        ({"total": 250, "deaths": "6", "discharged": 190}, region("A", 1)),
        ({"total": 250, "deaths": 6, "discharged": 1.0}, region("A", 1)),
        ({"total": 250, "deaths": 6, "discharged": 190}, region("A", "50")),
        ({"total": 250, "deaths": 6, "discharged": 190}, region("A", 50, deaths=False)),
        ({"total": 250, "deaths": 6, "discharged": 190}, region(42, 50)),
    ],
)
def test_parse_stats_rejects_coercible_counts(summary, regional_row):
    body = {"data": {"summary": summary, "regional": [regional_row]}}
    with pytest.raises(EmptyDataError, match="Malformed"):
        parse_stats(body)


@pytest.mark.parametrize("refreshed", [1700000000, None, {"at": "now"}])
def test_parse_stats_drops_non_string_refresh_time(api_body, refreshed):
    api_body["lastRefreshed"] = refreshed
    stats = parse_stats(api_body)
    assert stats.last_refreshed is None
    assert len(stats.regional) == 4
