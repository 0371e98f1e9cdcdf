from __future__ import annotations

import streamlit as st

from components.charts import Kpi, color_control, render_figure, render_kpi_row, width_control
from components.narrative import render_chart_intro
from components.summary import render_summary
from config import AppConfig
from data import sample_data, summaries
from data.transforms import heart_rate_bounds
from figures import ranges as figs

CATEGORY = "Range Charts"


def render_range_simple(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Range Simple", "Daily sales range (min to max) per month.")
    df = sample_data.sales_last_12_months()
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        bar_width = width_control("Bar width", "range_width", min_value=5, max_value=20, default=10)
    with c2:
        color = color_control("Color", "blue", "range_color")
    with c3:
        show_min_max = st.toggle("Show min/max points", value=False, key="range_min_max")

    with slot:
        render_kpi_row(
            [
                Kpi("Total sales", f"{sample_data.sales_last_12_months_total():,}"),
                Kpi("Daily average", f"{sample_data.sales_last_12_months_daily_average()}"),
            ]
        )
        render_figure(figs.range_simple(df, bar_width=bar_width, color=color, show_min_max=show_min_max), key="range_fig")
    render_summary(summaries.for_month_ranges(df))


def render_heart_rate_range(cfg: AppConfig) -> None:
    df = sample_data.heart_rate_last_week()
    low, high, first, last = heart_rate_bounds(df)
    span = f"{first:%b %d} to {last:%b %d}" if first is not None else ""
    render_chart_intro(CATEGORY, "Heart Rate Range", span)
    slot = st.container()

    c1, c2 = st.columns(2)
    with c1:
        bar_width = width_control("Bar width", "heart_rate_width", min_value=5, max_value=20, default=10)
    with c2:
        color = color_control("Color", "red", "heart_rate_color")

    with slot:
        render_kpi_row([Kpi("Range", f"{low}-{high} BPM")])
        render_figure(figs.heart_rate_range(df, bar_width=bar_width, color=color), key="heart_rate_fig")
    render_summary(summaries.for_heart_rate(df))


def render_candle_stick(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Candle Stick", f"{sample_data.STOCK_SYMBOL} daily prices.")
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        span = st.radio("Range", ["First 7 months", "Full year"], horizontal=True, key="candle_span")
    with c2:
        up = color_control("Up", "blue", "candle_up")
    with c3:
        down = color_control("Down", "red", "candle_down")

    df = sample_data.stock_prices_first_7_months() if span == "First 7 months" else sample_data.stock_prices()
    with slot:
        last = df.iloc[-1]
        render_kpi_row(
            [
                Kpi("Close", f"${last['close']:.2f}"),
                Kpi("High", f"${df['high'].max():.2f}"),
                Kpi("Low", f"${df['low'].min():.2f}"),
            ]
        )
        render_figure(figs.candle_stick(df, up_color=up, down_color=down), key="candle_fig")
    render_summary(summaries.for_stock_prices(df))
