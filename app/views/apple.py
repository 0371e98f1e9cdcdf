from __future__ import annotations

from datetime import datetime

import pandas as pd
import streamlit as st

from components.charts import Kpi, color_control, render_figure, render_kpi_row, width_control
from components.narrative import render_chart_annotation, render_chart_intro
from components.summary import render_summary
from config import AppConfig
from data import sample_data, summaries
from data.transforms import daily_summaries, day_values, duration_description, make_day_values, nearest_hour, nearest_row
from figures import apple as figs
from figures.theme import INTERPOLATIONS

CATEGORY = "Apple"


def render_screen_time(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Screen Time", "Daily usage per app category; select a day for the hourly breakdown.")
    hourly = sample_data.screen_time_week()
    by_day = make_day_values(hourly)
    days = [pd.Timestamp(d) for d in sorted(by_day["value_date"].unique())]

    selected = st.select_slider(
        "Day",
        options=days,
        value=days[-1],
        format_func=lambda d: d.strftime("%A"),
        key="screen_time_day",
    )

    totals = daily_summaries(by_day)
    picked = totals[totals["value_date"] == selected]
    total = float(picked["total_duration"].iloc[0]) if len(picked) else 0.0
    week_avg = float(totals["total_duration"].mean()) if len(totals) else 0.0
    render_kpi_row(
        [
            Kpi(selected.strftime("%A"), duration_description(total)),
            Kpi("Daily average", duration_description(week_avg)),
        ]
    )

    render_figure(figs.screen_time(by_day, selected_day=selected), key="screen_time_week_fig")
    if len(picked):
        render_chart_annotation("Breakdown", str(picked["description"].iloc[0]))

    st.subheader("By hour")
    render_figure(figs.screen_time_day(day_values(hourly, selected)), key="screen_time_hour_fig")
    render_summary(summaries.for_screen_time_week(by_day))


def render_one_dimensional_bar(cfg: AppConfig) -> None:
    df = sample_data.data_usage()
    render_chart_intro(CATEGORY, "One Dimensional Bar", figs.storage_title(df))
    show_legend = st.toggle("Show legend", value=True, key="storage_legend")
    render_figure(figs.one_dimensional_bar(df, show_legend=show_legend), key="storage_fig")
    st.dataframe(df.rename(columns={"category": "Category", "size": "Size (GB)"}), hide_index=True, use_container_width=True)


def render_heart_beat(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Heart Beat", "A single electrocardiogram trace.")
    samples = sample_data.ecg_sample()
    slot = st.container()

    names = list(INTERPOLATIONS)
    c1, c2, c3 = st.columns(3)
    with c1:
        line_width = width_control("Line width", "heart_beat_width", max_value=10, default=3)
    with c2:
        interpolation = st.selectbox("Interpolation", names, index=names.index("catmullRom"), key="heart_beat_interp")
    with c3:
        color = color_control("Color", "pink", "heart_beat_color")

    with slot:
        render_figure(
            figs.heart_beat(samples, line_width=line_width, color=color, interpolation=interpolation),
            key="heart_beat_fig",
        )


def render_uv_index(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "UV Index", "Hourly forecast for the day.")
    df = sample_data.hourly_uv_index()

    hour = st.slider("Time", min_value=0, max_value=23, value=12, key="uv_hour", format="%d:00")
    day = sample_data.UV_REFERENCE_DAY
    when = nearest_hour(datetime(day.year, day.month, day.day, hour))
    row = nearest_row(df, "date", when)

    if row is not None:
        render_kpi_row([Kpi(when.strftime("%H:%M"), f"UV {int(row['uv_index'])}"), Kpi("Max", f"UV {int(df['uv_index'].max())}")])
    render_figure(figs.uv_index(df, now=when), key="uv_fig")
    render_summary(summaries.for_uv_index(df))
