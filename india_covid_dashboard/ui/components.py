# india_covid_dashboard/ui/components.py
from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd
import streamlit as st

from ..stats_client import Summary
from ..view_model import format_number
from .charts import render_sparkline
from .styles import BADGE_BG, PALETTE, section_header

__all__ = [
    "dashboard_header",
    "summary_cards",
    "state_updates_list",
    "map_card",
    "prevention_card",
]

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"

# (label, summary field, chart column, palette key)
SUMMARY_CARDS = [
    ("Total Confirmed Case", "total", "confirmed", "confirmed"),
    ("Total Deaths", "deaths", "deaths", "deaths"),
    ("Total Recovered", "discharged", "recovered", "recovered"),
]


def _illustration_html(name: str, alt: str) -> str:
    path = ASSETS_DIR / name
    if not path.exists():
        return f"<p><i>{escape(alt)}</i></p>"
    return (
        f"<div class='cv-illustration' role='img' aria-label='{escape(alt)}'>"
        f"{path.read_text(encoding='utf-8')}</div>"
    )


def dashboard_header() -> str:
    """Title block plus the state search box. Returns the current query."""
    c1, c2 = st.columns([2.2, 1.0])
    with c1:
        st.markdown(
            "<p class='cv-title'>Covid-19 in India</p>"
            "<p class='cv-subtitle'>State-level Tracker Dashboard</p>",
            unsafe_allow_html=True,
        )
    with c2:
        query = st.text_input(
            "Search states",
            placeholder="🔍 Search states...",
            label_visibility="collapsed",
            key="hdr_query",
        )
    return query


def summary_cards(summary: Summary, frame: pd.DataFrame):
    cols = st.columns(len(SUMMARY_CARDS))
    for col, (label, field, column, tone) in zip(cols, SUMMARY_CARDS):
        color = PALETTE[tone]
        with col:
            st.markdown(
                f"<div class='cv-card'>"
                f"<div class='cv-row' style='align-items:flex-start'>"
                f"<div><div class='cv-stat-value'>{format_number(getattr(summary, field))}</div>"
                f"<div class='cv-stat-label'>{label}</div></div>"
                f"<span class='cv-badge' style='color:{color};background:{BADGE_BG[tone]}'>All India</span>"
                f"</div></div>",
                unsafe_allow_html=True,
            )
            render_sparkline(frame, column, color, key=f"spark_{column}")


def state_updates_list(updates: List[Dict[str, str]]):
    section_header("State Updates", note="(Total Cases)")
    if not updates:
        st.info("No states match the search.")
        return
    rows = []
    for item in updates:
        dot = PALETTE["deaths"] if item["severity"] == "high" else PALETTE["confirmed"]
        rows.append(
            f"<div style='display:flex;align-items:center;margin:10px 0;color:#4B5563;font-size:.9rem'>"
            f"<span class='cv-dot' style='background:{dot}'></span>"
            f"<span><b>{item['cases']} cases</b> in {escape(item['loc'])}</span></div>"
        )
    st.markdown("<div class='cv-card'>" + "".join(rows) + "</div>", unsafe_allow_html=True)


def map_card(rows: List[Tuple[str, str]]):
    section_header("India Map", note="(Total Cases)")
    c1, c2 = st.columns(2)
    with c1:
        if not rows:
            st.info("No states match the search.")
        for loc, cases in rows:
            st.markdown(
                f"<div class='cv-row'><span style='color:#4B5563'>{escape(loc)}</span>"
                f"<span style='font-weight:650'>{cases}</span></div>",
                unsafe_allow_html=True,
            )
    with c2:
        st.markdown(_illustration_html("india_map.svg", "India Map"), unsafe_allow_html=True)


def prevention_card():
    st.markdown(
        "<div class='cv-prevention'>"
        + _illustration_html("prevention.svg", "Prevention Illustration")
        + "<h3 style='color:#FFFFFF;margin:8px 0 4px 0'>Prevention</h3>"
        "<p>Learn about COVID-19<br/>prevention measures</p>"
        "<span style='font-size:1.3rem' title='Learn more about prevention'>→</span>"
        "</div>",
        unsafe_allow_html=True,
    )
