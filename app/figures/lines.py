from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from config import CHART_COLORS, THEME
from figures.theme import apply_plotly_theme, line_shape


def single_line(
    df: pd.DataFrame,
    line_width: float = 2,
    interpolation: str = "linear",
    color: str = CHART_COLORS["blue"],
    show_symbols: bool = False,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Scatter(
            x=df["day"],
            y=df["sales"],
            mode="lines+markers" if show_symbols else "lines",
            line=dict(width=line_width, color=color, shape=line_shape(interpolation)),
            marker=dict(size=line_width * 3, color=color),
            hovertemplate="%{x|%b %d}: %{y} sold<extra></extra>",
        )
    )
    return apply_plotly_theme(fig, "Day", "Sales", overview=overview)


def lollipop(
    df: pd.DataFrame,
    selected_index: Optional[int] = 10,
    line_width: float = 2,
    interpolation: str = "linear",
    color: str = CHART_COLORS["blue"],
    overview: bool = False,
) -> go.Figure:
    """Line chart with a vertical stick and a head marking the selected day."""
    fig = single_line(df, line_width=line_width, interpolation=interpolation, color=color, overview=overview)
    if selected_index is None or not 0 <= selected_index < len(df):
        return fig

    row = df.iloc[selected_index]
    fig.add_trace(
        go.Scatter(
            x=[row["day"], row["day"]],
            y=[0, row["sales"]],
            mode="lines",
            line=dict(color=THEME["text_secondary"], width=1),
            hoverinfo="skip",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[row["day"]],
            y=[row["sales"]],
            mode="markers",
            marker=dict(size=12, color=color, line=dict(color="white", width=2)),
            hoverinfo="skip",
        )
    )
    if not overview:
        fig.add_annotation(
            x=row["day"],
            y=row["sales"],
            text=f"{row['day']:%a, %b %d}<br><b>{int(row['sales'])}</b> sales",
            showarrow=False,
            yshift=28,
            bgcolor=THEME["bg_primary"],
        )
    return fig


def animating_line(
    df: pd.DataFrame,
    x_value: float = 0.0,
    line_width: float = 2,
    color: str = CHART_COLORS["blue"],
    point_color: str = CHART_COLORS["red"],
    animate: bool = False,
    overview: bool = False,
) -> go.Figure:
    """
    y = x**3 with a point riding the curve.

    With `animate`, the figure carries one Plotly frame per sample and a play
    button that sweeps the point across the full range.
    """
    fig = go.Figure(
        data=[
            go.Scatter(x=df["x"], y=df["y"], mode="lines", line=dict(width=line_width, color=color)),
            go.Scatter(x=[x_value], y=[x_value ** 3], mode="markers", marker=dict(size=12, color=point_color)),
        ]
    )
    if animate and not overview:
        stride = max(len(df) // 40, 1)
        fig.frames = [
            go.Frame(data=[go.Scatter(x=[x], y=[y])], traces=[1], name=f"{x:.2f}")
            for x, y in zip(df["x"].iloc[::stride], df["y"].iloc[::stride])
        ]
        fig.update_layout(
            updatemenus=[
                dict(
                    type="buttons",
                    showactive=False,
                    x=0, y=1.15, xanchor="left",
                    buttons=[
                        dict(
                            label="Animate",
                            method="animate",
                            args=[None, dict(frame=dict(duration=40, redraw=False), fromcurrent=False, transition=dict(duration=0))],
                        )
                    ],
                )
            ]
        )
    fig = apply_plotly_theme(fig, "x", "y", overview=overview)
    fig.update_xaxes(range=[-1.05, 1.05])
    fig.update_yaxes(range=[-1.05, 1.05])
    return fig


def line_with_points(
    points: pd.DataFrame,
    line: pd.DataFrame,
    plot_color: str = CHART_COLORS["blue"],
    line_color: str = CHART_COLORS["red"],
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure(
        data=[
            go.Scatter(
                x=points["x"],
                y=points["y"],
                mode="markers",
                marker=dict(size=5, color=plot_color, opacity=0.6),
                name="Samples",
            ),
            go.Scatter(x=line["x"], y=line["y"], mode="lines", line=dict(width=2, color=line_color), name="Trend"),
        ]
    )
    return apply_plotly_theme(fig, "x", "y", overview=overview)


def multi_line(
    df: pd.DataFrame,
    line_width: float = 2,
    interpolation: str = "catmullRom",
    show_symbols: bool = True,
    overview: bool = False,
) -> go.Figure:
    fig = go.Figure()
    for city, group in df.groupby("city", sort=False):
        fig.add_trace(
            go.Scatter(
                x=group["weekday"].dt.strftime("%a"),
                y=group["sales"],
                name=city,
                mode="lines+markers" if show_symbols else "lines",
                line=dict(width=line_width, shape=line_shape(interpolation)),
                marker=dict(size=line_width * 3),
            )
        )
    return apply_plotly_theme(fig, "Weekday", "Sales", overview=overview, show_legend=True)
