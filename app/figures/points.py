from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from data.grids import Grid
from figures.theme import apply_plotly_theme


def scatter(
    df: pd.DataFrame,
    point_size: float = 10,
    show_legend: bool = True,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure()
    for city, group in df.groupby("city", sort=False):
        fig.add_trace(
            go.Scatter(
                x=group["weekday"].dt.strftime("%a"),
                y=group["sales"],
                mode="markers",
                name=city,
                marker=dict(size=point_size),
            )
        )
    return apply_plotly_theme(fig, "Weekday", "Sales", overview=overview, show_legend=show_legend)


def vector_field(
    grid: Grid,
    degree_offset: float = 0.0,
    hue_offset: float = 0.0,
    opacity: float = 0.7,
    size: float = 50,
    overview: bool = False,
) -> go.Figure:
    """Arrow glyph per grid point; its angle and hue both follow the point's value."""
    points = grid.points
    fig = go.Figure(
        go.Scatter(
            x=[p.x for p in points],
            y=[p.y for p in points],
            mode="markers",
            marker=dict(
                symbol="arrow",
                # Plotly marker angles are clockwise from 12 o'clock.
                angle=[90 - p.angle(degree_offset, in_radians=False) for p in points],
                color=[p.angle_color(hue_offset) for p in points],
                size=max(size / 5, 2) if not overview else 6,
                opacity=opacity,
            ),
            customdata=[round(p.val, 1) for p in points],
            hovertemplate="(%{x}, %{y}): %{customdata}<extra></extra>",
        )
    )
    fig = apply_plotly_theme(fig, "", "", overview=overview)
    fig.update_xaxes(showgrid=False, showticklabels=False)
    fig.update_yaxes(showgrid=False, showticklabels=False, scaleanchor="x")
    return fig
