#!/usr/bin/env python3
# Covid-19 in India • State-level Tracker
# Routes: Dashboard

from __future__ import annotations

import logging

import streamlit as st

from india_covid_dashboard import config, ui
from india_covid_dashboard.stats_client import fetch_stats
from india_covid_dashboard.view_model import READY, ViewState, load_view_state

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Page config & base styles
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Covid-19 in India • Tracker", layout="wide")
ui.inject_base_css()

# -----------------------------------------------------------------------------
# Data: one fetch per browser session, settled into a single ViewState
# -----------------------------------------------------------------------------
STATE_KEY = "dashboard_state"


def current_view_state() -> ViewState:
    state = st.session_state.get(STATE_KEY)
    if state is None:
        placeholder = st.empty()
        with placeholder.container():
            ui.render_dashboard(ViewState())
        with st.spinner("Fetching latest figures..."):
            state = load_view_state(fetch_stats)
        placeholder.empty()
        st.session_state[STATE_KEY] = state
        logger.info("view state settled: %s", state.status)
    return state


# -----------------------------------------------------------------------------
# Sidebar + ROUTER
# -----------------------------------------------------------------------------
menu = ui.sidebar_menu()
route = menu.get("route", "Dashboard")

state = current_view_state()

if route == "Dashboard":
    ui.render_dashboard(state)

# -----------------------------------------------------------------------------
# Footer
# -----------------------------------------------------------------------------
refreshed = state.view_model.last_refreshed if state.status == READY and state.view_model else None
st.caption(
    "🦠 Source: api.rootnet.in"
    + (f" • Last refreshed: {refreshed}" if refreshed else "")
)
