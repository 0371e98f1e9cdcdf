from __future__ import annotations

import streamlit as st

from components.charts import render_figure, width_control
from components.narrative import render_chart_intro
from components.summary import render_summary
from config import AppConfig
from data import sample_data, summaries
from data.grids import Grid
from figures import points as figs

CATEGORY = "Point Charts"


def render_scatter(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Scatter", "Weekday sales per city.")
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        period = st.selectbox(
            "Period",
            sample_data.LOCATION_PERIODS,
            format_func=lambda p: p.replace("_", " ").capitalize(),
            key="scatter_period",
        )
    with c2:
        point_size = width_control("Point size", "scatter_size", default=10, stepper=True)
    with c3:
        show_legend = st.toggle("Show legend", value=True, key="scatter_legend")

    df = sample_data.location_sales(period)
    with slot:
        render_figure(figs.scatter(df, point_size=point_size, show_legend=show_legend), key="scatter_fig")
    render_summary(summaries.for_location_series(df))


def render_vector_field(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Vector Field", "Arrow angle and hue follow the value at each grid point.")
    grid = Grid(20, 20, seed=cfg.random_seed if cfg.random_seed is not None else 0)
    slot = st.container()

    c1, c2 = st.columns(2)
    with c1:
        degree_offset = st.slider("Degree offset", min_value=0, max_value=360, value=0, key="vector_degrees")
        opacity = st.slider("Opacity", min_value=0.0, max_value=1.0, value=0.7, step=0.05, key="vector_opacity")
    with c2:
        hue_offset = st.slider("Hue offset", min_value=-360, max_value=360, value=0, key="vector_hue")
        size = st.slider("Size", min_value=1, max_value=200, value=50, key="vector_size")

    with slot:
        render_figure(
            figs.vector_field(grid, degree_offset=degree_offset, hue_offset=hue_offset, opacity=opacity, size=size),
            key="vector_fig",
        )
