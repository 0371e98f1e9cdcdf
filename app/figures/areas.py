from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from config import CHART_COLORS
from figures.theme import apply_plotly_theme, hex_to_rgba, line_shape


def area_simple(
    df: pd.DataFrame,
    line_width: float = 2,
    interpolation: str = "cardinal",
    color: str = CHART_COLORS["blue"],
    show_gradient: bool = True,
    gradient_range: float = 0.5,
    overview: bool = False,
) -> go.Figure:
    trace = go.Scatter(
        x=df["day"],
        y=df["sales"],
        mode="lines",
        fill="tozeroy",
        line=dict(width=line_width, color=color, shape=line_shape(interpolation)),
    )
    if show_gradient:
        # Opaque at the line, fading to transparent at the baseline.
        trace.fillgradient = dict(
            type="vertical",
            colorscale=[[0.0, hex_to_rgba(color, 0.0)], [1.0, hex_to_rgba(color, gradient_range)]],
        )
    else:
        trace.fillcolor = hex_to_rgba(color, 0.5)
    return apply_plotly_theme(go.Figure(trace), "Day", "Sales", overview=overview)


def stacked_area(
    df: pd.DataFrame,
    colors: tuple[str, str] = (CHART_COLORS["yellow"], CHART_COLORS["blue"]),
    interpolation: str = "linear",
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure()
    for (city, group), color in zip(df.groupby("city", sort=False), colors):
        fig.add_trace(
            go.Scatter(
                x=group["weekday"].dt.strftime("%a"),
                y=group["sales"],
                name=city,
                mode="lines",
                stackgroup="sales",
                line=dict(width=0.5, color=color, shape=line_shape(interpolation)),
                fillcolor=hex_to_rgba(color, 0.85),
            )
        )
    return apply_plotly_theme(fig, "Weekday", "Sales", overview=overview, show_legend=True)
