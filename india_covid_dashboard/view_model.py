# india_covid_dashboard/view_model.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

from .stats_client import EmptyDataError, FetchError, RegionStat, StatsError, StatsResponse, Summary

TOP_N = 10
UPDATES_LIMIT = 8
MAP_ROWS_LIMIT = 7
SEVERE_DEATHS = 1000

logger = logging.getLogger(__name__)

LOADING = "loading"
ERROR = "error"
READY = "ready"


@dataclass(frozen=True)
class ViewModel:
    summary: Summary
    top_regions: Tuple[RegionStat, ...]
    last_refreshed: Optional[str] = None


@dataclass(frozen=True)
class ViewState:
    """Exactly one of loading / error / ready."""

    status: str = LOADING
    error: Optional[StatsError] = None
    view_model: Optional[ViewModel] = None

    @property
    def is_empty(self) -> bool:
        return isinstance(self.error, EmptyDataError)

    @property
    def message(self) -> str:
        if self.status != ERROR or self.error is None:
            return ""
        if self.is_empty:
            return "No data available"
        return f"Error: {self.error.message}"


def build_view_model(raw: StatsResponse, top_n: int = TOP_N) -> ViewModel:
    # sorted() is stable with reverse=True, so equal counts keep input order
    ranked = sorted(raw.regional, key=lambda r: r.total_confirmed, reverse=True)
    return ViewModel(
        summary=raw.summary,
        top_regions=tuple(ranked[:top_n]),
        last_refreshed=raw.last_refreshed,
    )


def load_view_state(fetch: Callable[[], StatsResponse]) -> ViewState:
    """Run the fetch once and settle it into an error or ready state."""
    try:
        raw = fetch()
    except StatsError as exc:
        return ViewState(status=ERROR, error=exc)
    except Exception as exc:
        logger.exception("stats fetch raised unexpectedly")
        return ViewState(status=ERROR, error=FetchError(str(exc) or type(exc).__name__))
    return ViewState(status=READY, view_model=build_view_model(raw))


# ---------- Presentation helpers ----------
def format_number(num: int) -> str:
    """Group digits the en-IN way: 1234567 -> '12,34,567'."""
    sign = "-" if num < 0 else ""
    digits = str(abs(int(num)))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def severity(region: RegionStat) -> str:
    return "high" if region.deaths > SEVERE_DEATHS else "normal"


def _matching(vm: ViewModel, query: str) -> List[RegionStat]:
    q = (query or "").strip().lower()
    if not q:
        return list(vm.top_regions)
    return [r for r in vm.top_regions if q in r.loc.lower()]


def chart_frame(vm: ViewModel) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": [r.loc for r in vm.top_regions],
            "confirmed": [r.total_confirmed for r in vm.top_regions],
            "deaths": [r.deaths for r in vm.top_regions],
            "recovered": [r.discharged for r in vm.top_regions],
        },
        columns=["name", "confirmed", "deaths", "recovered"],
    )


def state_updates(vm: ViewModel, query: str = "", limit: int = UPDATES_LIMIT) -> List[Dict[str, str]]:
    return [
        {"loc": r.loc, "cases": format_number(r.total_confirmed), "severity": severity(r)}
        for r in _matching(vm, query)[:limit]
    ]


def map_rows(vm: ViewModel, query: str = "", limit: int = MAP_ROWS_LIMIT) -> List[Tuple[str, str]]:
    return [(r.loc, format_number(r.total_confirmed)) for r in _matching(vm, query)[:limit]]
