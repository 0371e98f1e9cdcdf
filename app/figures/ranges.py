from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from config import CHART_COLORS
from figures.bars import bar_fraction
from figures.theme import apply_plotly_theme

MONTH_MS = 30 * 24 * 60 * 60 * 1000
DAY_MS = 24 * 60 * 60 * 1000


def _range_bars(
    x: pd.Series,
    lows: pd.Series,
    highs: pd.Series,
    width: float,
    color: str,
    show_min_max: bool,
    unit: str,
) -> list[go.Scatter | go.Bar]:
    traces: list[go.Scatter | go.Bar] = [
        go.Bar(
            x=x,
            y=highs - lows,
            base=lows,
            width=width,
            marker=dict(color=color, cornerradius="50%"),
            customdata=list(zip(lows, highs)),
            hovertemplate="%{customdata[0]} to %{customdata[1]} " + unit + "<extra></extra>",
        )
    ]
    if show_min_max:
        traces.append(go.Scatter(x=x, y=lows, mode="markers", marker=dict(color=color, size=8, symbol="circle-open"), name="Min"))
        traces.append(go.Scatter(x=x, y=highs, mode="markers", marker=dict(color=color, size=8, symbol="circle-open"), name="Max"))
    return traces


def range_simple(
    df: pd.DataFrame,
    bar_width: float = 10,
    color: str = CHART_COLORS["blue"],
    show_min_max: bool = False,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        _range_bars(
            df["month"], df["daily_min"], df["daily_max"],
            MONTH_MS * bar_fraction(bar_width), color, show_min_max and not overview, "sales",
        )
    )
    return apply_plotly_theme(fig, "Month", "Daily sales", overview=overview)


def heart_rate_range(
    df: pd.DataFrame,
    bar_width: float = 10,
    color: str = CHART_COLORS["red"],
    show_min_max: bool = False,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        _range_bars(
            df["weekday"], df["daily_min"], df["daily_max"],
            DAY_MS * bar_fraction(bar_width), color, show_min_max and not overview, "BPM",
        )
    )
    fig.update_layout(barmode="overlay")
    return apply_plotly_theme(fig, "Day", "BPM", overview=overview)


def candle_stick(
    df: pd.DataFrame,
    up_color: str = CHART_COLORS["blue"],
    down_color: str = CHART_COLORS["red"],
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Candlestick(
            x=df["timestamp"],
            open=df["open"],
            high=df["high"],
            low=df["low"],
            close=df["close"],
            increasing=dict(line=dict(color=up_color), fillcolor=up_color),
            decreasing=dict(line=dict(color=down_color), fillcolor=down_color),
        )
    )
    fig.update_layout(xaxis_rangeslider_visible=False)
    return apply_plotly_theme(fig, "Date", "Price (USD)", overview=overview)
