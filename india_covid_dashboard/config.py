# india_covid_dashboard/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

import streamlit as st

logger = logging.getLogger(__name__)


def _secret_or_env(key: str, env_fallback: Optional[str] = None) -> Optional[str]:
    try:
        return st.secrets[key]
    except Exception:
        return os.environ.get(env_fallback or key)


def log_level() -> str:
    return (_secret_or_env("COVID_DASHBOARD_LOG_LEVEL") or "INFO").upper()


def request_timeout() -> Optional[float]:
    """Seconds to wait on the stats API, or None for the transport default."""
    raw = _secret_or_env("COVID_STATS_TIMEOUT")
    if raw in (None, ""):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("ignoring COVID_STATS_TIMEOUT=%r: not a number", raw)
        return None
    if value <= 0:
        logger.warning("ignoring COVID_STATS_TIMEOUT=%r: must be positive", raw)
        return None
    return value
