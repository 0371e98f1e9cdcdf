from __future__ import annotations

from dataclasses import dataclass

import plotly.graph_objects as go
import streamlit as st

from config import CHART_COLORS

# Static previews: no mode bar, no zoom/pan.
PREVIEW_PLOT_CONFIG = {"displayModeBar": False, "staticPlot": True}
DETAIL_PLOT_CONFIG = {"displaylogo": False}


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            st.markdown(
                f"""
<div class="metric-card">
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
</div>
                """,
                unsafe_allow_html=True,
            )


def render_figure(fig: go.Figure, key: str, preview: bool = False, fixed_width: bool = False) -> None:
    st.plotly_chart(
        fig,
        use_container_width=not fixed_width,
        key=key,
        config=PREVIEW_PLOT_CONFIG if preview else DETAIL_PLOT_CONFIG,
    )


def color_control(label: str, default: str, key: str) -> str:
    """Color picker seeded from the named chart palette."""
    return st.color_picker(label, value=CHART_COLORS.get(default, default), key=key)


def width_control(label: str, key: str, min_value: int = 1, max_value: int = 20, default: int = 7, stepper: bool = False) -> int:
    if stepper:
        return int(st.number_input(label, min_value=min_value, max_value=max_value, value=default, step=1, key=key))
    return int(st.slider(label, min_value=min_value, max_value=max_value, value=default, key=key))
