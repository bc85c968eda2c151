# charts.py — UI-only chart components
from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from .styles import PALETTE, PLOT_TEMPLATE, PLOT_BG

CONFIRMED = PALETTE.get("confirmed", "#06b6d4")
DEATHS = PALETTE.get("deaths", "#ef4444")
RECOVERED = PALETTE.get("recovered", "#22c55e")

SERIES_COLORS = {
    "confirmed": CONFIRMED,
    "deaths": DEATHS,
    "recovered": RECOVERED,
}


# ---------- Mini util ----------
def _safe_has_cols(df: pd.DataFrame | None, cols) -> bool:
    return (df is not None) and (not df.empty) and all(c in df.columns for c in cols)


# ---------- Sparkline (summary cards) ----------
def sparkline_figure(frame: pd.DataFrame, column: str, color: str) -> go.Figure:
    fig = go.Figure(
        go.Scatter(
            x=frame["name"],
            y=frame[column],
            mode="lines",
            line=dict(width=2, color=color, shape="spline"),
            hovertemplate="%{x}: %{y:,}<extra></extra>",
        )
    )
    fig.update_layout(
        template=PLOT_TEMPLATE,
        height=64,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        paper_bgcolor=PLOT_BG,
        plot_bgcolor=PLOT_BG,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
    )
    return fig


def render_sparkline(frame: pd.DataFrame | None, column: str, color: str, key: str):
    if not _safe_has_cols(frame, ["name", column]):
        return
    st.plotly_chart(
        sparkline_figure(frame, column, color),
        width="stretch",
        config={"displayModeBar": False},
        key=key,
    )


# ---------- Grouped bar (top states) ----------
def state_bar_figure(frame: pd.DataFrame) -> go.Figure:
    long = frame.melt(
        id_vars="name",
        value_vars=["confirmed", "deaths", "recovered"],
        var_name="metric",
        value_name="count",
    )
    fig = px.bar(
        long,
        x="name",
        y="count",
        color="metric",
        barmode="group",
        category_orders={"metric": ["confirmed", "deaths", "recovered"]},
        color_discrete_map=SERIES_COLORS,
        template=PLOT_TEMPLATE,
    )
    fig.update_layout(
        height=320,
        margin=dict(l=10, r=10, t=10, b=10),
        legend=dict(orientation="h", title=None),
        xaxis_title=None,
        yaxis_title=None,
        paper_bgcolor=PLOT_BG,
        plot_bgcolor=PLOT_BG,
    )
    fig.update_yaxes(tickformat=",")
    return fig


def render_state_bar_chart(frame: pd.DataFrame | None):
    if not _safe_has_cols(frame, ["name", "confirmed", "deaths", "recovered"]):
        st.info("No state figures to chart.")
        return
    st.plotly_chart(state_bar_figure(frame), width="stretch", key="state_bar")
