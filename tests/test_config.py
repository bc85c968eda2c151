from __future__ import annotations

import logging

import pytest

from india_covid_dashboard import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("COVID_STATS_TIMEOUT", raising=False)


def test_timeout_unset_by_default(caplog):
    assert config.request_timeout() is None
    assert not [r for r in caplog.records if r.name == "india_covid_dashboard.config"]


def test_timeout_parsed(monkeypatch):
    monkeypatch.setenv("COVID_STATS_TIMEOUT", "12")
    assert config.request_timeout() == 12.0


@pytest.mark.parametrize("raw, reason", [("soon", "not a number"), ("0", "must be positive"), ("-3", "must be positive")])
def test_invalid_timeout_logs_warning(monkeypatch, caplog, raw, reason):
    monkeypatch.setenv("COVID_STATS_TIMEOUT", raw)
    with caplog.at_level(logging.WARNING, logger="india_covid_dashboard.config"):
        assert config.request_timeout() is None
    assert any(reason in r.getMessage() and raw in r.getMessage() for r in caplog.records)
