from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from config import CHART_COLORS, THEME
from data.sample_data import WINE_IN, WINE_OUT
from data.transforms import DEFAULT_THRESHOLD, level_color, segment_by_threshold, stacked_or_grouped, threshold_colors
from figures.theme import apply_plotly_theme

DAY_MS = 24 * 60 * 60 * 1000
MAX_BAR_WIDTH = 20

TIME_SHEET_COLORS = {
    "Bread": CHART_COLORS["yellow"],
    "Butchery": CHART_COLORS["red"],
    "Counter": CHART_COLORS["black"],
    "Vegetables": CHART_COLORS["green"],
}


def bar_fraction(width: float, max_width: float = MAX_BAR_WIDTH) -> float:
    """Map a bar-width control value to a fraction of the slot."""
    return max(0.05, min(width / max_width, 1.0))


def single_bar(
    df: pd.DataFrame,
    bar_width: float = 7,
    color: str = CHART_COLORS["blue"],
    selected_day=None,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=df["day"],
            y=df["sales"],
            width=DAY_MS * bar_fraction(bar_width),
            marker_color=color,
            hovertemplate="%{x|%b %d}: %{y} sold<extra></extra>",
        )
    )
    if selected_day is not None and not overview:
        picked = df[df["day"] == pd.Timestamp(selected_day)]
        if len(picked):
            fig.add_vline(x=pd.Timestamp(selected_day), line_color=THEME["text_secondary"], line_dash="dot")
            fig.add_annotation(
                x=pd.Timestamp(selected_day),
                y=int(picked["sales"].iloc[0]),
                text=f"{int(picked['sales'].iloc[0])} sold",
                showarrow=False,
                yshift=14,
            )
    return apply_plotly_theme(fig, "Day", "Sales", overview=overview)


def single_bar_threshold(
    df: pd.DataFrame,
    threshold: float = DEFAULT_THRESHOLD,
    bar_width: float = 7,
    below_color: str = CHART_COLORS["blue"],
    above_color: str = CHART_COLORS["orange"],
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=df["day"],
            y=df["sales"],
            width=DAY_MS * bar_fraction(bar_width),
            marker_color=threshold_colors(df["sales"], threshold, below_color, above_color),
        )
    )
    fig.add_hline(y=threshold, line_color=CHART_COLORS["red"], line_width=2)
    if not overview:
        fig.add_annotation(
            xref="paper", x=1, y=threshold, text=f"Threshold: {int(threshold)}",
            showarrow=False, xanchor="right", yshift=10, font=dict(color=CHART_COLORS["red"]),
        )
    return apply_plotly_theme(fig, "Day", "Sales", overview=overview)


def threshold_bar(
    df: pd.DataFrame,
    threshold: float = DEFAULT_THRESHOLD,
    bar_width: float = 7,
    below_color: str = CHART_COLORS["blue"],
    above_color: str = CHART_COLORS["orange"],
    overview: bool = False,
) -> go.Figure:
    """One trace per contiguous run on either side of the threshold."""
    fig = go.Figure()
    for i, seg in enumerate(segment_by_threshold(df, threshold, below_color, above_color)):
        above = bool(seg["above_threshold"].iloc[0])
        fig.add_trace(
            go.Bar(
                x=seg["day"],
                y=seg["sales"],
                width=DAY_MS * bar_fraction(bar_width),
                marker_color=seg["fill_color"],
                name=f"Run {i + 1} ({'above' if above else 'below'})",
            )
        )
    fig.add_hline(y=threshold, line_color=THEME["text_secondary"], line_dash="dash")
    return apply_plotly_theme(fig, "Day", "Sales", overview=overview)


def two_bars(
    df: pd.DataFrame,
    bar_width: float = 13,
    show_legend: bool = True,
    stacked: bool = True,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure()
    for city, group in df.groupby("city", sort=False):
        fig.add_trace(
            go.Bar(
                x=group["weekday"].dt.strftime("%a"),
                y=group["sales"],
                name=city,
                width=bar_fraction(bar_width) * (1.0 if stacked else 0.5),
            )
        )
    fig.update_layout(barmode=stacked_or_grouped(stacked))
    return apply_plotly_theme(fig, "Weekday", "Sales", overview=overview, show_legend=show_legend)


def pyramid(
    df: pd.DataFrame,
    bar_height: float = 10,
    left_color: str = CHART_COLORS["green"],
    right_color: str = CHART_COLORS["blue"],
    overview: bool = False,
) -> go.Figure:
    """Population pyramid: males to the left (negated), females to the right."""
    fig = go.Figure()
    for sex, color, sign in [("Male", left_color, -1), ("Female", right_color, 1)]:
        part = df[df["sex"] == sex]
        fig.add_trace(
            go.Bar(
                y=part["age_range"],
                x=part["percentage"] * sign,
                orientation="h",
                name=sex,
                marker_color=color,
                width=min(bar_height / 25, 1.0),
                customdata=part["percentage"],
                hovertemplate="%{y}: %{customdata}%<extra>" + sex + "</extra>",
            )
        )
    fig.update_layout(barmode="relative", bargap=0)
    fig = apply_plotly_theme(fig, "Population (%)", "Age range", overview=overview, show_legend=True)
    if not overview:
        ticks = [-100, -75, -50, -25, 0, 25, 50, 75, 100]
        fig.update_xaxes(tickvals=ticks, ticktext=[str(abs(t)) for t in ticks])
    return fig


def time_sheet(df: pd.DataFrame, overview: bool = False, y: str = "department") -> go.Figure:
    fig = px.timeline(
        df,
        x_start="clock_in",
        x_end="clock_out",
        y=y,
        color="department",
        color_discrete_map=TIME_SHEET_COLORS,
        hover_data={"employee": True},
    )
    fig.update_yaxes(autorange="reversed")
    return apply_plotly_theme(fig, "Time", "", overview=overview, show_legend=True)


def sound_bars(levels: list[float], overview: bool = False) -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=list(range(len(levels))),
            y=levels,
            marker_color=[level_color(level / 2) for level in levels],
            hovertemplate="%{y:.2f}<extra></extra>",
        )
    )
    fig.update_layout(bargap=0.3)
    fig = apply_plotly_theme(fig, "Sample", "Level", overview=overview)
    fig.update_yaxes(range=[0, 2])
    return fig


def scrolling_bar(
    df: pd.DataFrame,
    in_color: str = CHART_COLORS["purple"],
    out_color: str = CHART_COLORS["green"],
    scroll_width: Optional[int] = None,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure()
    for flow, color, name in [(WINE_IN, in_color, "In"), (WINE_OUT, out_color, "Out")]:
        part = df[df["in_out"] == flow]
        if len(part) == 0:
            continue
        fig.add_trace(go.Bar(x=part["month"], y=part["actual"], name=name, marker_color=color))
    fig.update_layout(barmode="relative")
    fig = apply_plotly_theme(fig, "Month", "Bottles", overview=overview, show_legend=True)
    if scroll_width and not overview:
        fig.update_layout(width=scroll_width)
    return fig
