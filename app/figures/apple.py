from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from config import CHART_COLORS, THEME
from data.sample_data import DEVICE_CAPACITY_GB, ENTERTAINMENT, OTHER, PRODUCTIVITY, SOCIAL, UV_INDEX_MAX
from figures.theme import apply_plotly_theme, line_shape

SCREEN_TIME_COLORS = {
    SOCIAL: CHART_COLORS["blue"],
    ENTERTAINMENT: CHART_COLORS["teal"],
    PRODUCTIVITY: CHART_COLORS["orange"],
    OTHER: CHART_COLORS["gray"],
}

STORAGE_COLORS = {
    "Apps": CHART_COLORS["red"],
    "Photos": CHART_COLORS["yellow"],
    "iOS": CHART_COLORS["gray"],
    "System Data": "#C7C7CC",
}

UV_GRADIENT = [
    [0.0, CHART_COLORS["green"]],
    [3 / UV_INDEX_MAX, CHART_COLORS["yellow"]],
    [6 / UV_INDEX_MAX, CHART_COLORS["orange"]],
    [8 / UV_INDEX_MAX, CHART_COLORS["red"]],
    [1.0, CHART_COLORS["purple"]],
]
UV_LEVELS = [("Low", 1), ("Moderate", 3), ("High", 6), ("Very high", 8), ("Extreme", 11)]


def _minutes_axis(fig: go.Figure, upper_seconds: float) -> None:
    """Label a seconds axis in hours/minutes."""
    step = 3600 if upper_seconds > 2 * 3600 else 30 * 60
    ticks = list(range(0, int(upper_seconds) + step, step))
    labels = [f"{t // 3600}h" if step == 3600 else f"{t // 60}m" for t in ticks]
    fig.update_yaxes(tickvals=ticks, ticktext=labels)


def screen_time(
    day_df: pd.DataFrame,
    selected_day=None,
    colors: dict = SCREEN_TIME_COLORS,
    overview: bool = False,
) -> go.Figure:
    """Stacked bars of daily totals per category; the selected day stays opaque."""
    fig = go.Figure()
    selected = pd.Timestamp(selected_day).normalize() if selected_day is not None else None
    for category, color in colors.items():
        part = day_df[day_df["category"] == category]
        opacity = [1.0 if selected is None or d == selected else 0.35 for d in part["value_date"]]
        fig.add_trace(
            go.Bar(
                x=part["value_date"].dt.strftime("%a"),
                y=part["duration"],
                name=category,
                marker=dict(color=color, opacity=opacity),
                hovertemplate="%{x}: %{y:.0f}s<extra>" + category + "</extra>",
            )
        )
    fig.update_layout(barmode="stack", bargap=0.35)
    fig = apply_plotly_theme(fig, "", "", overview=overview, show_legend=True)
    if not overview and len(day_df):
        _minutes_axis(fig, day_df.groupby("value_date")["duration"].sum().max())
    return fig


def screen_time_day(hourly: pd.DataFrame, colors: dict = SCREEN_TIME_COLORS) -> go.Figure:
    fig = go.Figure()
    for category, color in colors.items():
        part = hourly[hourly["category"] == category]
        fig.add_trace(go.Bar(x=part["value_date"], y=part["duration"], name=category, marker_color=color))
    fig.update_layout(barmode="stack")
    fig = apply_plotly_theme(fig, "Hour", "", show_legend=True)
    fig.update_xaxes(tickformat="%H:%M")
    fig.update_yaxes(tickvals=[0, 1800, 3600], ticktext=["0m", "30m", "60m"])
    return fig


def one_dimensional_bar(
    df: pd.DataFrame,
    show_legend: bool = True,
    capacity_gb: float = DEVICE_CAPACITY_GB,
    overview: bool = False,
) -> go.Figure:
    """Storage usage as a single stacked horizontal bar over the device capacity."""
    fig = go.Figure()
    for row in df.itertuples():
        fig.add_trace(
            go.Bar(
                y=["Storage"],
                x=[row.size],
                name=row.category,
                orientation="h",
                marker_color=STORAGE_COLORS.get(row.category, CHART_COLORS["gray"]),
                hovertemplate=f"{row.category}: {row.size} GB<extra></extra>",
            )
        )
    fig.update_layout(barmode="stack", bargap=0.0)
    fig = apply_plotly_theme(fig, "", "", overview=overview, show_legend=show_legend)
    fig.update_xaxes(range=[0, capacity_gb], visible=False)
    fig.update_yaxes(visible=False)
    if not overview:
        fig.update_layout(height=120, legend=dict(y=-0.4, yanchor="top"))
    return fig


def storage_title(df: pd.DataFrame, capacity_gb: float = DEVICE_CAPACITY_GB) -> str:
    used = float(df["size"].sum()) if len(df) else 0.0
    return f"{used:.1f} GB of {capacity_gb:g} GB Used"


def heart_beat(
    samples: list[float],
    line_width: float = 3,
    color: str = CHART_COLORS["pink"],
    interpolation: str = "catmullRom",
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Scatter(
            x=list(range(len(samples))),
            y=samples,
            mode="lines",
            line=dict(width=line_width, color=color, shape=line_shape(interpolation)),
            hoverinfo="skip",
        )
    )
    fig = apply_plotly_theme(fig, "", "mV", overview=overview)
    if not overview:
        # Paper-style ECG grid.
        fig.update_xaxes(showticklabels=False, dtick=40, gridcolor="rgba(255, 45, 85, 0.15)")
        fig.update_yaxes(dtick=0.5, gridcolor="rgba(255, 45, 85, 0.15)")
    return fig


def uv_index(df: pd.DataFrame, now: Optional[pd.Timestamp] = None, overview: bool = False) -> go.Figure:
    fig = go.Figure(
        go.Scatter(
            x=df["date"],
            y=df["uv_index"],
            mode="lines+markers",
            line=dict(width=3, color=THEME["text_secondary"], shape="spline"),
            marker=dict(
                size=8,
                color=df["uv_index"],
                colorscale=UV_GRADIENT,
                cmin=0,
                cmax=UV_INDEX_MAX,
            ),
            hovertemplate="%{x|%H:%M}: UV %{y}<extra></extra>",
        )
    )
    fig = apply_plotly_theme(fig, "", "", overview=overview)
    fig.update_yaxes(range=[0, UV_INDEX_MAX])
    if overview or len(df) == 0:
        return fig

    peak = df.loc[df["uv_index"].idxmax()]
    fig.add_annotation(x=peak["date"], y=peak["uv_index"], text=f"Max {int(peak['uv_index'])}", showarrow=True, arrowhead=0, ay=-28)
    if now is not None:
        fig.add_vline(x=now, line_dash="dot", line_color=THEME["text_secondary"])
    fig.update_yaxes(
        tickvals=[v for _, v in UV_LEVELS],
        ticktext=[f"{label} {v}" for label, v in UV_LEVELS],
        side="right",
    )
    fig.update_xaxes(tickformat="%H:%M", dtick=6 * 60 * 60 * 1000)
    return fig
