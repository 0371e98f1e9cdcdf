from __future__ import annotations

import plotly.graph_objects as go

from config import DETAIL_CHART_HEIGHT, PREVIEW_CHART_HEIGHT, THEME


# Interpolation names offered by the line/area pickers -> Plotly line_shape.
INTERPOLATIONS = {
    "linear": "linear",
    "monotone": "spline",
    "catmullRom": "spline",
    "cardinal": "spline",
    "stepStart": "hv",
    "stepCenter": "hvh",
    "stepEnd": "vh",
}


def line_shape(interpolation: str) -> str:
    try:
        return INTERPOLATIONS[interpolation]
    except KeyError:
        raise ValueError(f"Unknown interpolation {interpolation!r}; expected one of {list(INTERPOLATIONS)}") from None


def create_plotly_theme() -> dict:
    """
    Shared Plotly styling:
    - white chart surface (cards)
    - system font stack
    - soft grids
    """
    return {
        "font_family": "-apple-system, BlinkMacSystemFont, system-ui, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "colorway": [
            THEME["accent_primary"],
            THEME["warning"],
            THEME["success"],
            THEME["danger"],
            "#AF52DE",
            "#8E8E93",
        ],
        "gridcolor": THEME["grid"],
        "axis_linecolor": THEME["border_color"],
        "legend": {
            "orientation": "h",
            "yanchor": "bottom",
            "y": 1.02,
            "xanchor": "left",
            "x": 0,
            "font": {"color": THEME["text_secondary"]},
        },
        "title_font": {"color": THEME["navy_900"], "size": 16},
    }


def apply_plotly_theme(
    fig: go.Figure,
    x_title: str = "",
    y_title: str = "",
    overview: bool = False,
    show_legend: bool = False,
) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        height=PREVIEW_CHART_HEIGHT if overview else DETAIL_CHART_HEIGHT,
        margin=dict(l=0, r=0, t=0, b=0) if overview else dict(l=10, r=10, t=30, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        colorway=theme["colorway"],
        legend=theme["legend"],
        title_font=theme["title_font"],
        showlegend=show_legend and not overview,
    )
    if overview:
        # Previews are glanceable only.
        fig.update_xaxes(visible=False, fixedrange=True)
        fig.update_yaxes(visible=False, fixedrange=True)
        return fig

    fig.update_xaxes(
        title_text=x_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
    )
    fig.update_yaxes(
        title_text=y_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
    )
    return fig


def hex_to_rgba(color: str, alpha: float) -> str:
    color = color.lstrip("#")
    r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"
