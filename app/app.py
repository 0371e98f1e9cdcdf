"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from catalog import ChartNotFoundError, all_charts, get_chart  # noqa: E402
from components.header import render_header  # noqa: E402
from components.sidebar import close_chart, render_sidebar  # noqa: E402
from components.styles import apply_theme  # noqa: E402
from config import get_config  # noqa: E402
from logging_config import setup_logging  # noqa: E402

from views import gallery  # noqa: E402
from views.bars import stop_microphone  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    apply_theme()
    cfg = get_config()
    setup_logging(cfg)
    state = render_sidebar(cfg)

    render_header(
        app_name="Chart Gallery",
        subtitle="Chart types with sample data and live customization",
        right_pill=f"{len(all_charts())} charts",
    )

    # The microphone is only held while its page is open.
    if state.chart_id != "sound_bars":
        stop_microphone()

    # Routing only
    if state.chart_id is None:
        gallery.render(cfg, state.category)
        return

    try:
        chart = get_chart(state.chart_id)
    except ChartNotFoundError:
        logger.error("Unknown chart id %r", state.chart_id)
        close_chart()
        st.error("Unknown view")
        return

    logger.debug("Rendering chart %s", chart.id)
    chart.render_detail(cfg)


if __name__ == "__main__":
    main()
