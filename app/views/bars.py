from __future__ import annotations

import logging
import random

import streamlit as st

from audio.monitor import MicrophoneMonitor
from components.charts import Kpi, color_control, render_figure, render_kpi_row, width_control
from components.narrative import render_chart_annotation, render_chart_intro, render_hint
from components.summary import render_summary
from config import AppConfig
from data import sample_data, summaries
from data.sample_data import WINE_ALL, WINE_FLOW_TITLES
from data.transforms import DEFAULT_THRESHOLD, events_total_duration, events_total_seconds, format_duration, random_population
from figures import bars as figs

logger = logging.getLogger(__name__)

CATEGORY = "Bar Charts"
MONITOR_KEY = "mic_monitor"


def render_single_bar(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Single Bar", "Daily sales over the last 30 days.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        bar_width = width_control("Bar width", "single_bar_width", default=7)
    with c2:
        color = color_control("Color", "blue", "single_bar_color")
    with c3:
        options = [None] + list(df["day"])
        selected = st.selectbox(
            "Highlight day",
            options,
            format_func=lambda d: "None" if d is None else d.strftime("%b %d"),
            key="single_bar_selected",
        )

    with slot:
        render_kpi_row(
            [
                Kpi("Total sales", f"{sample_data.sales_last_30_days_total():,}"),
                Kpi("Daily average", f"{sample_data.sales_last_30_days_average():.0f}"),
            ]
        )
        render_figure(figs.single_bar(df, bar_width=bar_width, color=color, selected_day=selected), key="single_bar_fig")
    render_summary(summaries.for_sales_series(df))


def render_single_bar_threshold(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Single Bar Threshold", "Bars above the threshold change color.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    threshold = st.slider("Threshold", min_value=0, max_value=275, value=DEFAULT_THRESHOLD, key="sbt_threshold")
    c1, c2, c3 = st.columns(3)
    with c1:
        bar_width = width_control("Bar width", "sbt_width", default=7)
    with c2:
        below = color_control("Below threshold", "blue", "sbt_below")
    with c3:
        above = color_control("Above threshold", "orange", "sbt_above")

    with slot:
        render_figure(
            figs.single_bar_threshold(df, threshold=threshold, bar_width=bar_width, below_color=below, above_color=above),
            key="sbt_fig",
        )
        days_above = int((df["sales"] > threshold).sum())
        render_chart_annotation("Days above threshold", f"{days_above} of {len(df)} days sold more than {threshold} units.")
    render_summary(summaries.for_sales_series(df))


def render_threshold_bar(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Threshold Bar", "The series is split into runs that stay on one side of the threshold.")
    df = sample_data.sales_last_30_days()
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        bar_width = width_control("Bar width", "tb_width", default=7, stepper=True)
    with c2:
        below = color_control("Below threshold", "blue", "tb_below")
    with c3:
        above = color_control("Above threshold", "orange", "tb_above")

    with slot:
        render_figure(figs.threshold_bar(df, bar_width=bar_width, below_color=below, above_color=above), key="tb_fig")
    render_summary(summaries.for_sales_series(df))


def render_two_bars(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Two Bars", "Weekday sales in two cities.")
    slot = st.container()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        period = st.selectbox(
            "Period",
            sample_data.LOCATION_PERIODS,
            format_func=lambda p: p.replace("_", " ").capitalize(),
            key="two_bars_period",
        )
    with c2:
        bar_width = width_control("Bar width", "two_bars_width", default=13)
    with c3:
        show_legend = st.toggle("Show legend", value=True, key="two_bars_legend")
    with c4:
        stacked = st.toggle("Stacked", value=True, key="two_bars_stacked")

    df = sample_data.location_sales(period)
    city, weekday, sales = sample_data.location_best(period)
    with slot:
        render_figure(figs.two_bars(df, bar_width=bar_width, show_legend=show_legend, stacked=stacked), key="two_bars_fig")
        render_chart_annotation("Best day", f"{city} on {weekday:%A}s with {sales} sales.")
    render_summary(summaries.for_location_series(df))


def render_pyramid(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Pyramid", "Population share per age range.")
    if "pyramid_df" not in st.session_state:
        st.session_state["pyramid_df"] = sample_data.population_by_age()
    slot = st.container()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        bar_height = width_control("Bar height", "pyramid_height", max_value=25, default=10)
    with c2:
        left = color_control("Male", "green", "pyramid_left")
    with c3:
        right = color_control("Female", "blue", "pyramid_right")
    with c4:
        if st.button("🎲 Random data", key="pyramid_random"):
            rng = random.Random(cfg.random_seed) if cfg.random_seed is not None else None
            st.session_state["pyramid_df"] = random_population(rng)

    df = st.session_state["pyramid_df"]
    with slot:
        render_figure(figs.pyramid(df, bar_height=bar_height, left_color=left, right_color=right), key="pyramid_fig")
    render_summary(summaries.for_population(df))


def render_time_sheet(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Time Sheet", "Shifts per department.")
    slot = st.container()

    span = st.radio("Range", ["Last day", "Last week"], horizontal=True, key="time_sheet_span")
    df = sample_data.time_sheet_last_day() if span == "Last day" else sample_data.time_sheet_last_week()

    with slot:
        totals = [
            Kpi(dept, events_total_duration(df[df["department"] == dept]))
            for dept in sample_data.DEPARTMENTS
        ]
        render_kpi_row([Kpi("Total", events_total_duration(df))] + totals)
        render_figure(figs.time_sheet(df), key=f"time_sheet_fig_{span}")

    with st.expander("Shifts", expanded=False):
        table = df.copy()
        table["duration"] = [format_duration((o - i).total_seconds()) for i, o in zip(table["clock_in"], table["clock_out"])]
        st.dataframe(table, hide_index=True, use_container_width=True)
    logger.debug("Time sheet rendered (%s, %.0f s)", span, events_total_seconds(df))


def get_monitor(cfg: AppConfig) -> MicrophoneMonitor:
    monitor = st.session_state.get(MONITOR_KEY)
    if monitor is None:
        monitor = MicrophoneMonitor(
            interval=cfg.mic_sample_interval_s,
            window=cfg.mic_window,
            min_decibels=cfg.mic_min_decibels,
        )
        st.session_state[MONITOR_KEY] = monitor
    return monitor


def stop_microphone() -> None:
    """Release the input device; called whenever another page is shown."""
    monitor = st.session_state.get(MONITOR_KEY)
    if monitor is not None:
        monitor.stop_monitoring()


def _live_levels(monitor: MicrophoneMonitor) -> None:
    levels = monitor.samples()
    render_figure(figs.sound_bars(levels), key="sound_bars_fig")
    st.caption(f"Current level: {monitor.sample / 2:.0%}")


def render_sound_bars(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Sound Bars", "Live microphone level, one bar per sample.")
    monitor = get_monitor(cfg)

    label = "⏸ Stop monitoring" if monitor.is_running else "🎙 Start monitoring"
    if st.button(label, key="sound_bars_toggle", type="primary"):
        was_running = monitor.is_running
        running = monitor.toggle()
        st.session_state["mic_unavailable"] = not was_running and not running
        st.rerun()

    if st.session_state.get("mic_unavailable"):
        st.warning("Could not open the microphone. Check that an input device is connected and allowed.")
    elif not monitor.is_running:
        st.info("Microphone is off. Start monitoring to see live levels.")

    st.fragment(run_every=cfg.mic_sample_interval_s if monitor.is_running else None)(_live_levels)(monitor)
    render_summary(summaries.for_audio_levels(monitor.samples()))
    render_hint("Privacy", "Levels are read straight from the input stream. Nothing is recorded or stored.")


def render_scrolling_bar(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Scrolling Bar", "Monthly bottles in and out of the cellar.")
    slot = st.container()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        flow = st.selectbox(
            "Flow",
            list(WINE_FLOW_TITLES),
            format_func=lambda f: WINE_FLOW_TITLES[f],
            index=list(WINE_FLOW_TITLES).index(WINE_ALL),
            key="scrolling_flow",
        )
    with c2:
        scroll_width = st.slider("Scroll width", min_value=450, max_value=1600, value=800, step=50, key="scrolling_width")
    with c3:
        in_color = color_control("In", "purple", "scrolling_in")
    with c4:
        out_color = color_control("Out", "green", "scrolling_out")

    df = sample_data.wine_actions(flow)
    with slot:
        render_figure(
            figs.scrolling_bar(df, in_color=in_color, out_color=out_color, scroll_width=scroll_width),
            key="scrolling_fig",
            fixed_width=True,
        )
