# india_covid_dashboard/ui/pages/dashboard.py
from __future__ import annotations

import streamlit as st

from ...view_model import ERROR, LOADING, READY, ViewState, chart_frame, map_rows, state_updates
from ..charts import render_state_bar_chart
from ..components import (
    dashboard_header,
    map_card,
    prevention_card,
    state_updates_list,
    summary_cards,
)
from ..styles import render_divider, section_header, spacer


def render(state: ViewState):
    """Render one of the three page states."""
    if state.status == LOADING:
        st.info("Loading...")
        return
    if state.status == ERROR:
        if state.is_empty:
            st.warning(state.message)
        else:
            st.error(state.message)
        return
    if state.status != READY or state.view_model is None:
        raise ValueError(f"unknown view status: {state.status!r}")

    vm = state.view_model
    frame = chart_frame(vm)

    query = dashboard_header()
    spacer(6)

    summary_cards(vm.summary, frame)
    spacer(12)

    c1, c2 = st.columns([2, 1], gap="large")
    with c1:
        section_header("Covid-19 Statistics by State")
        st.caption(f"Top {len(vm.top_regions)} states by total confirmed cases")
        render_state_bar_chart(frame)
    with c2:
        state_updates_list(state_updates(vm, query=query))

    render_divider()

    c3, c4 = st.columns([2, 1], gap="large")
    with c3:
        map_card(map_rows(vm, query=query))
    with c4:
        prevention_card()
