from __future__ import annotations

from india_covid_dashboard.stats_client import parse_stats
from india_covid_dashboard.ui.charts import SERIES_COLORS, sparkline_figure, state_bar_figure
from india_covid_dashboard.view_model import build_view_model, chart_frame


def test_state_bar_figure_groups_three_series(api_body):
    frame = chart_frame(build_view_model(parse_stats(api_body)))
    fig = state_bar_figure(frame)
    assert [t.name for t in fig.data] == ["confirmed", "deaths", "recovered"]
    assert fig.layout.barmode == "group"
    assert list(fig.data[0].x) == frame["name"].tolist()
    assert fig.data[1].marker.color == SERIES_COLORS["deaths"]


def test_sparkline_figure_hides_axes(api_body):
    frame = chart_frame(build_view_model(parse_stats(api_body)))
    fig = sparkline_figure(frame, "deaths", "#ef4444")
    assert len(fig.data) == 1
    assert list(fig.data[0].y) == frame["deaths"].tolist()
    assert fig.layout.xaxis.visible is False
    assert fig.layout.height == 64
