# laureate_trends/plotter.py

import math
from typing import Optional

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from laureate_trends.aggregator import GroupSeries, to_long_frame
from laureate_trends.classifier import GROUP_COLUMN, CategoryGroup

WIDTH = 800
HEIGHT = 400
MARGIN = dict(t=50, r=30, b=60, l=70)

COLORS = {
    CategoryGroup.STEM.value: "steelblue",
    CategoryGroup.NON_STEM.value: "orange",
}
LINE_WIDTH = 2
HIGHLIGHT_WIDTH = 4

TITLE = "Nobel Laureates Trends: STEM vs Non-STEM"
X_LABEL = "Year"
Y_LABEL = "Number of Laureates"


def nice_count_max(value: float, ticks: int = 10) -> float:
    """
    Round the top of a [0, value] axis up to a whole tick step,
    where steps are 1, 2 or 5 times a power of ten.
    """
    if value <= 0:
        return 0
    # widening the top can change the step, so repeat until it settles
    prestep = None
    for _ in range(10):
        step = _tick_step(value, ticks)
        if step == prestep:
            break
        value = math.ceil(round(value / step, 9)) * step
        prestep = step
    return value


def _tick_step(value: float, ticks: int) -> float:
    step = value / ticks
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * 10 ** power


def build_line_figure(
    series: list[GroupSeries],
    domain: Optional[tuple[int, int]],
    y_max: int,
    highlighted: Optional[CategoryGroup] = None,
) -> go.Figure:
    df_long = to_long_frame(series)
    if df_long.empty:
        fig = go.Figure()
    else:
        fig = px.line(
            df_long, x="year", y="count", color=GROUP_COLUMN,
            color_discrete_map=COLORS,
            category_orders={GROUP_COLUMN: [s.categoryGroup.value for s in series]},
        )
        fig.update_traces(line_width=LINE_WIDTH)
        if highlighted is not None:
            fig.update_traces(line_width=HIGHLIGHT_WIDTH, selector=dict(name=CategoryGroup(highlighted).value))

    fig.update_layout(
        title=dict(text=TITLE, x=0.5, xanchor="center"),
        width=WIDTH, height=HEIGHT, margin=MARGIN,
        legend=dict(title=dict(text=""), orientation="v", x=1, y=1.15, xanchor="right", yanchor="top"),
    )
    fig.update_xaxes(title_text=X_LABEL, tickformat="d")
    if domain is not None:
        fig.update_xaxes(range=list(domain))
    fig.update_yaxes(title_text=Y_LABEL, rangemode="tozero")
    if y_max > 0:
        fig.update_yaxes(range=[0, nice_count_max(y_max)])
    return fig


def selected_group(event, series: list[GroupSeries]) -> Optional[CategoryGroup]:
    # event is the chart state Streamlit keeps for on_select
    if not event:
        return None
    points = (event.get("selection") or {}).get("points") or []
    for point in points:
        curve = point.get("curve_number")
        if curve is not None and 0 <= curve < len(series):
            return series[curve].categoryGroup
    return None


def plot_time_series(fig: go.Figure, key: str):
    st.plotly_chart(
        fig,
        use_container_width=True,
        on_select="rerun",
        selection_mode="points",
        key=key,
    )

