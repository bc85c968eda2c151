# india_covid_dashboard/stats_client.py
"""
Client for the rootnet.in COVID-19 India stats API.

`fetch_stats()` performs the single GET the dashboard needs and returns a
validated `StatsResponse`. Anything that goes wrong on the wire or while
decoding raises `FetchError`; a body that decodes but does not carry the
expected `data.summary` / `data.regional` shape raises `EmptyDataError`.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from . import config

logger = logging.getLogger(__name__)

STATS_URL = "https://api.rootnet.in/covid19-in/stats/latest"


# ========= Errors =========
class StatsError(Exception):
    """Base class for everything that stops the dashboard from rendering data."""

    def __init__(self, message: str):
        super().__init__(message or type(self).__name__)

    @property
    def message(self) -> str:
        return str(self)


class FetchError(StatsError):
    """Transport failure, non-2xx status or an undecodable body."""


class EmptyDataError(StatsError):
    """The body decoded but holds no usable `data` section."""


# ========= Payload schema =========
class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: StrictInt = Field(ge=0)
    deaths: StrictInt = Field(ge=0)
    discharged: StrictInt = Field(ge=0)


class RegionStat(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    loc: StrictStr
    total_confirmed: StrictInt = Field(alias="totalConfirmed", ge=0)
    deaths: StrictInt = Field(ge=0)
    discharged: StrictInt = Field(ge=0)


class StatsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: Summary
    regional: List[RegionStat]
    last_refreshed: Optional[str] = None


# ========= Parsing / fetching =========
def parse_stats(body: Any) -> StatsResponse:
    """Validate a decoded API body into a `StatsResponse`."""
    if not isinstance(body, dict):
        raise EmptyDataError("No data available")
    data = body.get("data")
    if not isinstance(data, dict) or "summary" not in data or "regional" not in data:
        raise EmptyDataError("No data available")

    # only shown in the footer
    refreshed = body.get("lastRefreshed")
    if not isinstance(refreshed, str):
        refreshed = None

    try:
        return StatsResponse(
            summary=data["summary"],
            regional=data["regional"],
            last_refreshed=refreshed,
        )
    except ValidationError as exc:
        logger.warning("stats payload failed validation: %s", exc)
        raise EmptyDataError(f"Malformed stats payload ({exc.error_count()} invalid fields)") from exc


def fetch_stats(url: str = STATS_URL) -> StatsResponse:
    """One GET against the stats API. No retries."""
    timeout = config.request_timeout()
    logger.info("fetching stats from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        body = resp.json()
    except requests.RequestException as exc:
        logger.exception("stats request failed")
        raise FetchError(str(exc)) from exc
    except ValueError as exc:
        logger.exception("stats response is not valid JSON")
        raise FetchError(str(exc)) from exc

    stats = parse_stats(body)
    logger.info("fetched %d regions", len(stats.regional))
    return stats
