from __future__ import annotations

import streamlit as st

from components.charts import render_figure
from components.narrative import render_chart_intro
from config import AppConfig
from data import sample_data
from data.grids import Grid
from figures import heatmaps as figs

CATEGORY = "Heat Maps"


def render_customizable_heat_map(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Customizable Heat Map", "A noisy gradient from corner to corner.")
    slot = st.container()

    c1, c2, c3 = st.columns(3)
    with c1:
        rows = int(st.number_input("Rows", min_value=1, max_value=50, value=10, step=1, key="heat_rows"))
    with c2:
        cols = int(st.number_input("Columns", min_value=1, max_value=50, value=10, step=1, key="heat_cols"))
    with c3:
        show_colors = st.toggle("Show colors", value=True, key="heat_colors")

    grid = Grid(rows, cols, seed=_seed(cfg, 0))
    with slot:
        render_figure(figs.customizable_heat_map(grid.to_frame(), show_colors=show_colors), key="heat_fig")


def render_github_contributions(cfg: AppConfig) -> None:
    df = sample_data.github_contributions()
    render_chart_intro(CATEGORY, "GitHub Contributions", f"{int((df['level'] > 0).sum())} active days in the last {len(df)} days.")
    render_figure(figs.github_contributions(df), key="contributions_fig")


def render_multi_color_heat_map(cfg: AppConfig) -> None:
    render_chart_intro(CATEGORY, "Multi-Color Heat Map", "Values bucketed into one color per range.")
    slot = st.container()
    seed = st.number_input("Seed", min_value=0, value=_seed(cfg, 3), step=1, key="multi_heat_seed")
    df = sample_data.heat_map_levels(seed=int(seed))
    with slot:
        render_figure(figs.multi_color_heat_map(df), key="multi_heat_fig")


def _seed(cfg: AppConfig, default: int) -> int:
    # Fixed seed keeps the grid stable across reruns while controls change.
    return cfg.random_seed if cfg.random_seed is not None else default
