from __future__ import annotations

import pytest
import requests


def region(loc, confirmed, deaths=0, discharged=0, **extra):
    row = {"loc": loc, "totalConfirmed": confirmed, "deaths": deaths, "discharged": discharged}
    row.update(extra)
    return row


class FakeResponse:
    """Stand-in for `requests.Response` covering what the client touches."""

    def __init__(self, body=None, status_code=200, json_error=None):
        self._body = body
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._body


@pytest.fixture
def api_body():
    return {
        "success": True,
        "data": {
            "summary": {
                "total": 44690738,
                "confirmedCasesIndian": 44690738,
                "confirmedCasesForeign": 0,
                "discharged": 44159321,
                "deaths": 530779,
            },
            "regional": [
                region("Kerala", 6852498, 71601, 6780803, confirmedCasesIndian=6852498),
                region("Maharashtra", 8171048, 148558, 8022276),
                region("Goa", 259137, 4014, 255113),
                region("Karnataka", 4088311, 40334, 4047920),
            ],
        },
        "lastRefreshed": "2023-03-22T05:30:35.186Z",
        "lastOriginUpdate": "2023-03-21T02:30:00.000Z",
    }


@pytest.fixture
def fake_get(monkeypatch):
    """Patch `requests.get`; returns the list of recorded calls."""
    monkeypatch.delenv("COVID_STATS_TIMEOUT", raising=False)
    calls = []

    def install(result):
        def _get(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(result, BaseException):
                raise result
            return result

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install
