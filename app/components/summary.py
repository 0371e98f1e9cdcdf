from __future__ import annotations

import streamlit as st

from data.summaries import ChartSummary


def render_summary(summary: ChartSummary, expanded: bool = False) -> None:
    """Axes + data points of a chart as tables (screen-reader friendly)."""
    with st.expander("📋 Data summary", expanded=expanded):
        st.markdown(f"**{summary.title}**")
        st.dataframe(summary.axis_rows(), hide_index=True, use_container_width=True)
        st.dataframe(summary.to_frame(), hide_index=True, use_container_width=True, height=240)
