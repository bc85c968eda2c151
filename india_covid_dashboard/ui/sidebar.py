# india_covid_dashboard/ui/sidebar.py — Indigo navigation rail
from __future__ import annotations
import streamlit as st

# Router keys the app understands; the rest of the rail is decorative
ROUTES = ["Dashboard"]

def _route_state_key() -> str:
    return "route"

def _current_route(default: str = "Dashboard") -> str:
    cur = st.session_state.get(_route_state_key(), default)
    if cur not in ROUTES:
        cur = default
        st.session_state[_route_state_key()] = cur
    return cur

def _nav_items():
    """Display label -> router key. Items without a route render disabled."""
    return [
        {"label": "▦ Dashboard",    "route": "Dashboard"},
        {"label": "〰 Activity",     "route": None},
        {"label": "🌡 Thermometer",  "route": None},
        {"label": "💬 Messages",     "route": None},
        {"label": "⚙ Settings",     "route": None},
    ]

def sidebar_menu() -> dict:
    st.sidebar.markdown("<div class='cv-sb-brand'>⚠ Covid-19 Tracker</div>", unsafe_allow_html=True)

    current = _current_route()

    for item in _nav_items():
        is_active = item["route"] == current
        st.sidebar.markdown(
            f'<div class="cv-sb-item {"active" if is_active else ""}">', unsafe_allow_html=True
        )
        key = f"sb_{item['label'].split()[-1].lower()}"
        if st.sidebar.button(
            item["label"],
            key=key,
            type="secondary",
            width="stretch",
            disabled=item["route"] is None,
        ):
            st.session_state[_route_state_key()] = item["route"]
            st.rerun()
        st.sidebar.markdown("</div>", unsafe_allow_html=True)

    st.sidebar.markdown("<div style='height:10px'></div>", unsafe_allow_html=True)
    st.sidebar.markdown(
        "<div style='font-size:.78rem;opacity:.85'>Data: api.rootnet.in</div>",
        unsafe_allow_html=True,
    )

    return {"route": current}
