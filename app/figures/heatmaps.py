from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from config import CHART_COLORS
from data.transforms import bin_index, day_of_week, relative_week, value_bins
from figures.theme import apply_plotly_theme

GRADIENT_COLORS = [
    CHART_COLORS["blue"],
    CHART_COLORS["green"],
    CHART_COLORS["yellow"],
    CHART_COLORS["orange"],
    CHART_COLORS["red"],
]
MONOTONE_COLORS = ["#FFFFFF", CHART_COLORS["blue"]]
CONTRIBUTION_COLORS = ["#FFFFFF", CHART_COLORS["green"]]
LEVEL_PALETTE = [CHART_COLORS["red"], CHART_COLORS["orange"], CHART_COLORS["yellow"], CHART_COLORS["green"]]
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _colorscale(colors: list[str]) -> list[list]:
    step = 1 / (len(colors) - 1)
    return [[i * step, c] for i, c in enumerate(colors)]


def _discrete_colorscale(colors: list[str]) -> list[list]:
    """Hard-edged scale: bin i covers [i/n, (i+1)/n]."""
    n = len(colors)
    scale = []
    for i, c in enumerate(colors):
        scale.append([i / n, c])
        scale.append([(i + 1) / n, c])
    return scale


def customizable_heat_map(
    grid: pd.DataFrame,
    show_colors: bool = True,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Heatmap(
            x=grid["x"],
            y=grid["y"],
            z=grid["val"],
            colorscale=_colorscale(GRADIENT_COLORS if show_colors else MONOTONE_COLORS),
            showscale=not overview,
            xgap=1,
            ygap=1,
        )
    )
    return apply_plotly_theme(fig, "Column", "Row", overview=overview)


def github_contributions(df: pd.DataFrame, overview: bool = False) -> go.Figure:
    """Contribution graph: one column per week, Sunday on top."""
    first = df["date"].min()
    weeks = [relative_week(d, first) for d in df["date"]]
    days = [day_of_week(d) for d in df["date"]]
    fig = go.Figure(
        go.Heatmap(
            x=weeks,
            y=days,
            z=df["level"],
            zmin=0,
            zmax=4,
            colorscale=_colorscale(CONTRIBUTION_COLORS),
            customdata=df["date"].dt.strftime("%b %d, %Y"),
            hovertemplate="%{customdata}: level %{z}<extra></extra>",
            showscale=False,
            xgap=3,
            ygap=3,
        )
    )
    fig = apply_plotly_theme(fig, "Week", "", overview=overview)
    fig.update_yaxes(autorange="reversed")
    if not overview:
        fig.update_yaxes(tickvals=list(range(7)), ticktext=WEEKDAY_LABELS, showgrid=False)
        fig.update_xaxes(showgrid=False, scaleanchor="y")
    return fig


def multi_color_heat_map(
    df: pd.DataFrame,
    colors: list[str] = LEVEL_PALETTE,
    overview: bool = False,
) -> go.Figure:
    """Values are bucketed into `len(colors)` equal bins, one flat color per bin."""
    edges = value_bins(df["value"], len(colors))
    bins = [bin_index(v, edges) for v in df["value"]]
    fig = go.Figure(
        go.Heatmap(
            x=df["x"],
            y=df["y"],
            z=bins,
            zmin=-0.5,
            zmax=len(colors) - 0.5,
            colorscale=_discrete_colorscale(colors),
            customdata=df["value"],
            hovertemplate="(%{x}, %{y}): %{customdata:.2f}<extra></extra>",
            showscale=False,
            xgap=2,
            ygap=2,
        )
    )
    return apply_plotly_theme(fig, "x", "y", overview=overview)
