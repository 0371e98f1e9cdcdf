from __future__ import annotations

import streamlit as st

from components.charts import color_control, render_figure, width_control
from components.narrative import render_chart_intro
from components.summary import render_summary
from config import AppConfig
from data import sample_data, summaries
from figures import areas as figs
from figures.theme import INTERPOLATIONS

CATEGORY = "Area Charts"


def render_area_simple(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Area Simple", "Daily sales over the last 30 days.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    names = list(INTERPOLATIONS)
    c1, c2, c3 = st.columns(3)
    with c1:
        line_width = width_control("Line width", "area_width", max_value=10, default=2)
    with c2:
        interpolation = st.selectbox("Interpolation", names, index=names.index("cardinal"), key="area_interp")
    with c3:
        color = color_control("Color", "blue", "area_color")

    c4, c5 = st.columns(2)
    with c4:
        show_gradient = st.toggle("Show gradient", value=True, key="area_gradient")
    with c5:
        gradient_range = st.slider(
            "Gradient range", min_value=0.0, max_value=1.0, value=0.5, step=0.05,
            disabled=not show_gradient, key="area_gradient_range",
        )

    with slot:
        render_figure(
            figs.area_simple(
                df, line_width=line_width, interpolation=interpolation, color=color,
                show_gradient=show_gradient, gradient_range=gradient_range,
            ),
            key="area_fig",
        )
    render_summary(summaries.for_sales_series(df))


def render_stacked_area(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Stacked Area", "Weekday sales per city, stacked.")
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        period = st.selectbox(
            "Period",
            sample_data.LOCATION_PERIODS,
            format_func=lambda p: p.replace("_", " ").capitalize(),
            key="stacked_area_period",
        )
    with c2:
        first = color_control(sample_data.CITIES[0], "yellow", "stacked_area_first")
    with c3:
        second = color_control(sample_data.CITIES[1], "blue", "stacked_area_second")

    df = sample_data.location_sales(period)
    with slot:
        render_figure(figs.stacked_area(df, colors=(first, second)), key="stacked_area_fig")
    render_summary(summaries.for_location_series(df))
