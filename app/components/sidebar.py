from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from catalog import ChartCategory, ChartNotFoundError, get_chart, parse_category
from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    category: Optional[ChartCategory]  # None = all categories
    chart_id: Optional[str]            # None = gallery list


NAV_ITEMS = [
    ("🗂️ All Charts", "all"),
    ("🍎 Apple", ChartCategory.APPLE.value),
    ("📈 Line", ChartCategory.LINE.value),
    ("📊 Bar", ChartCategory.BAR.value),
    ("⛰️ Area", ChartCategory.AREA.value),
    ("↕️ Range", ChartCategory.RANGE.value),
    ("🟩 Heat Map", ChartCategory.HEAT_MAP.value),
    ("✳️ Point", ChartCategory.POINT.value),
]


def open_chart(chart_id: str) -> None:
    st.session_state["chart_id"] = chart_id


def close_chart() -> None:
    st.session_state["chart_id"] = None


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 📈 Chart Gallery")
        st.caption("Chart types with sample data and live customization")

        labels = [l for l, _ in NAV_ITEMS]
        values = [v for _, v in NAV_ITEMS]
        default_value = cfg.default_category if cfg.default_category in values else "all"
        default_label = st.session_state.get("nav_label", labels[values.index(default_value)])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Category",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        if label != st.session_state.get("nav_label"):
            # Switching category always returns to the list.
            if "nav_label" in st.session_state:
                close_chart()
            st.session_state["nav_label"] = label
        category = parse_category(dict(NAV_ITEMS)[label])

        chart_id = st.session_state.get("chart_id")
        if chart_id:
            st.divider()
            try:
                st.markdown(f"**Open:** {get_chart(chart_id).title}")
            except ChartNotFoundError:
                pass  # app.py reports it and resets the route
            st.button("← Back to gallery", on_click=close_chart, use_container_width=True)

    return SidebarState(category=category, chart_id=st.session_state.get("chart_id"))
