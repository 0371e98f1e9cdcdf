from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from catalog import ChartCategory, charts_by_category
from components.charts import render_figure
from components.sidebar import open_chart
from config import AppConfig

logger = logging.getLogger(__name__)

CARDS_PER_ROW = 3


def render(cfg: AppConfig, category: Optional[ChartCategory]) -> None:
    """Root list: one section per category, one card per chart (title, preview, open button)."""
    grouped = charts_by_category()
    shown = [category] if category is not None else list(grouped)

    for cat in shown:
        charts = grouped[cat]
        st.markdown(f'<div class="category-title">{cat.label}</div>', unsafe_allow_html=True)
        for start in range(0, len(charts), CARDS_PER_ROW):
            cols = st.columns(CARDS_PER_ROW)
            for col, chart in zip(cols, charts[start:start + CARDS_PER_ROW]):
                with col:
                    st.markdown(f'<div class="chart-card-title">{chart.title}</div>', unsafe_allow_html=True)
                    render_figure(chart.preview(), key=f"preview_{chart.id}", preview=True)
                    st.button(
                        "Open",
                        key=f"open_{chart.id}",
                        on_click=open_chart,
                        args=(chart.id,),
                        use_container_width=True,
                    )
    logger.debug("Gallery rendered (category=%s)", category.value if category else "all")
