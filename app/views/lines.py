from __future__ import annotations

import random

import streamlit as st

from components.charts import color_control, render_figure, width_control
from components.narrative import render_chart_intro
from components.summary import render_summary
from config import AppConfig
from data import grids, sample_data, summaries
from figures import lines as figs
from figures.theme import INTERPOLATIONS

CATEGORY = "Line Charts"


def _interpolation_control(key: str, default: str = "linear") -> str:
    names = list(INTERPOLATIONS)
    return st.selectbox("Interpolation", names, index=names.index(default), key=key)


def render_single_line(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Single Line", "Daily sales over the last 30 days.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        line_width = width_control("Line width", "single_line_width", default=2, stepper=True)
    with c2:
        interpolation = _interpolation_control("single_line_interp", "cardinal")
    with c3:
        color = color_control("Color", "blue", "single_line_color")
    with c4:
        show_symbols = st.toggle("Show symbols", value=True, key="single_line_symbols")

    with slot:
        render_figure(
            figs.single_line(df, line_width=line_width, interpolation=interpolation, color=color, show_symbols=show_symbols),
            key="single_line_fig",
        )
    render_summary(summaries.for_sales_series(df))


def render_lollipop(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Line with Lollipop", "Pick a day to inspect its sales.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        selected = st.select_slider(
            "Selected day",
            options=list(range(len(df))),
            value=10,
            format_func=lambda i: df["day"].iloc[i].strftime("%b %d"),
            key="lollipop_selected",
        )
    with c2:
        line_width = width_control("Line width", "lollipop_width", default=3, stepper=True)
    with c3:
        color = color_control("Color", "blue", "lollipop_color")

    with slot:
        render_figure(figs.lollipop(df, selected_index=selected, line_width=line_width, color=color), key="lollipop_fig")
    render_summary(summaries.for_sales_series(df))


def render_animating_line(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Animating Line", "A point riding y = x³.")
    df = grids.cubic_samples()
    slot = st.container()

    c1, c2 = st.columns([3, 1])
    with c1:
        x_value = st.slider("x", min_value=-1.0, max_value=1.0, value=0.0, step=0.01, key="animating_x")
    with c2:
        animate = st.toggle("Animate", value=False, key="animating_play", help="Adds a play button that sweeps the point along the curve.")

    with slot:
        render_figure(figs.animating_line(df, x_value=x_value, animate=animate), key=f"animating_fig_{animate}")
        st.caption(f"x = {x_value:.2f}, y = {x_value ** 3:.3f}")


def render_line_with_points(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Line with Points", "Noisy samples around a sine trend line.")
    if "line_points_seed" not in st.session_state:
        st.session_state["line_points_seed"] = cfg.random_seed if cfg.random_seed is not None else random.randrange(1 << 30)
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        plot_color = color_control("Points", "blue", "line_points_plot")
    with c2:
        line_color = color_control("Line", "red", "line_points_line")
    with c3:
        if st.button("🎲 New samples", key="line_points_reseed"):
            st.session_state["line_points_seed"] = random.randrange(1 << 30)

    seed = st.session_state["line_points_seed"]
    points = grids.plot_sin_points(rng=random.Random(seed))
    line = grids.line_sin_points(rng=random.Random(seed + 1))
    with slot:
        render_figure(figs.line_with_points(points, line, plot_color=plot_color, line_color=line_color), key="line_points_fig")


def render_multi_line(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Multi Line", "Weekday sales per city.")
    slot = st.container()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        period = st.selectbox(
            "Period",
            sample_data.LOCATION_PERIODS,
            format_func=lambda p: p.replace("_", " ").capitalize(),
            key="multi_line_period",
        )
    with c2:
        line_width = width_control("Line width", "multi_line_width", default=2, stepper=True)
    with c3:
        interpolation = _interpolation_control("multi_line_interp", "catmullRom")
    with c4:
        show_symbols = st.toggle("Show symbols", value=True, key="multi_line_symbols")

    df = sample_data.location_sales(period)
    with slot:
        render_figure(
            figs.multi_line(df, line_width=line_width, interpolation=interpolation, show_symbols=show_symbols),
            key="multi_line_fig",
        )
    render_summary(summaries.for_location_series(df))
