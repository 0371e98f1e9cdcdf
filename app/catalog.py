"""
Chart registry: every chart in the gallery, its category, preview builder and detail page.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import plotly.graph_objects as go

from audio.level import OVERVIEW_SAMPLES
from config import AppConfig
from data import grids, sample_data
from data.transforms import make_day_values
from figures import apple as apple_figs
from figures import areas as area_figs
from figures import bars as bar_figs
from figures import heatmaps as heatmap_figs
from figures import lines as line_figs
from figures import points as point_figs
from figures import ranges as range_figs
from views import apple, areas, bars, heatmaps, lines, points, ranges


class ChartCategory(str, Enum):
    APPLE = "apple"
    LINE = "line"
    BAR = "bar"
    AREA = "area"
    RANGE = "range"
    HEAT_MAP = "heat_map"
    POINT = "point"

    @property
    def label(self) -> str:
        return CATEGORY_TITLES[self]


CATEGORY_TITLES = {
    ChartCategory.APPLE: "Apple",
    ChartCategory.LINE: "Line Charts",
    ChartCategory.BAR: "Bar Charts",
    ChartCategory.AREA: "Area Charts",
    ChartCategory.RANGE: "Range Charts",
    ChartCategory.HEAT_MAP: "Heat Maps",
    ChartCategory.POINT: "Point Charts",
}


class ChartNotFoundError(KeyError):
    pass


@dataclass(frozen=True)
class ChartType:
    id: str
    title: str
    category: ChartCategory
    preview: Callable[[], go.Figure]
    render_detail: Callable[[AppConfig], None]


def _preview_rng() -> random.Random:
    return random.Random(0)


CHARTS: list[ChartType] = [
    # Apple
    ChartType(
        "screen_time", "Screen Time", ChartCategory.APPLE,
        lambda: apple_figs.screen_time(make_day_values(sample_data.screen_time_week()), overview=True),
        apple.render_screen_time,
    ),
    ChartType(
        "one_dimensional_bar", "One Dimensional Bar", ChartCategory.APPLE,
        lambda: apple_figs.one_dimensional_bar(sample_data.data_usage(), overview=True),
        apple.render_one_dimensional_bar,
    ),
    ChartType(
        "heart_beat", "Heart Beat", ChartCategory.APPLE,
        lambda: apple_figs.heart_beat(sample_data.ecg_sample(), overview=True),
        apple.render_heart_beat,
    ),
    ChartType(
        "uv_index", "UV Index", ChartCategory.APPLE,
        lambda: apple_figs.uv_index(sample_data.hourly_uv_index(), overview=True),
        apple.render_uv_index,
    ),
    # Line
    ChartType(
        "single_line", "Single Line", ChartCategory.LINE,
        lambda: line_figs.single_line(sample_data.sales_last_30_days(), overview=True),
        lines.render_single_line,
    ),
    ChartType(
        "lollipop", "Line with Lollipop", ChartCategory.LINE,
        lambda: line_figs.lollipop(sample_data.sales_last_30_days(), overview=True),
        lines.render_lollipop,
    ),
    ChartType(
        "animating_line", "Animating Line", ChartCategory.LINE,
        lambda: line_figs.animating_line(grids.cubic_samples(), x_value=0.5, overview=True),
        lines.render_animating_line,
    ),
    ChartType(
        "line_with_points", "Line with Points", ChartCategory.LINE,
        lambda: line_figs.line_with_points(
            grids.plot_sin_points(rng=_preview_rng()), grids.line_sin_points(rng=_preview_rng()), overview=True
        ),
        lines.render_line_with_points,
    ),
    ChartType(
        "multi_line", "Multi Line", ChartCategory.LINE,
        lambda: line_figs.multi_line(sample_data.location_sales(), overview=True),
        lines.render_multi_line,
    ),
    # Bar
    ChartType(
        "single_bar", "Single Bar", ChartCategory.BAR,
        lambda: bar_figs.single_bar(sample_data.sales_last_30_days(), overview=True),
        bars.render_single_bar,
    ),
    ChartType(
        "single_bar_threshold", "Single Bar Threshold", ChartCategory.BAR,
        lambda: bar_figs.single_bar_threshold(sample_data.sales_last_30_days(), overview=True),
        bars.render_single_bar_threshold,
    ),
    ChartType(
        "threshold_bar", "Threshold Bar", ChartCategory.BAR,
        lambda: bar_figs.threshold_bar(sample_data.sales_last_30_days(), overview=True),
        bars.render_threshold_bar,
    ),
    ChartType(
        "two_bars", "Two Bars", ChartCategory.BAR,
        lambda: bar_figs.two_bars(sample_data.location_sales(), overview=True),
        bars.render_two_bars,
    ),
    ChartType(
        "pyramid", "Pyramid", ChartCategory.BAR,
        lambda: bar_figs.pyramid(sample_data.population_by_age(), overview=True),
        bars.render_pyramid,
    ),
    ChartType(
        "time_sheet", "Time Sheet", ChartCategory.BAR,
        lambda: bar_figs.time_sheet(sample_data.time_sheet_last_day(), overview=True),
        bars.render_time_sheet,
    ),
    ChartType(
        "sound_bars", "Sound Bars", ChartCategory.BAR,
        lambda: bar_figs.sound_bars(OVERVIEW_SAMPLES, overview=True),
        bars.render_sound_bars,
    ),
    ChartType(
        "scrolling_bar", "Scrolling Bar", ChartCategory.BAR,
        lambda: bar_figs.scrolling_bar(sample_data.wine_actions(), overview=True),
        bars.render_scrolling_bar,
    ),
    # Area
    ChartType(
        "area_simple", "Area Simple", ChartCategory.AREA,
        lambda: area_figs.area_simple(sample_data.sales_last_30_days(), overview=True),
        areas.render_area_simple,
    ),
    ChartType(
        "stacked_area", "Stacked Area", ChartCategory.AREA,
        lambda: area_figs.stacked_area(sample_data.location_sales(), overview=True),
        areas.render_stacked_area,
    ),
    # Range
    ChartType(
        "range_simple", "Range Simple", ChartCategory.RANGE,
        lambda: range_figs.range_simple(sample_data.sales_last_12_months(), overview=True),
        ranges.render_range_simple,
    ),
    ChartType(
        "heart_rate_range", "Heart Rate Range", ChartCategory.RANGE,
        lambda: range_figs.heart_rate_range(sample_data.heart_rate_last_week(), overview=True),
        ranges.render_heart_rate_range,
    ),
    ChartType(
        "candle_stick", "Candle Stick", ChartCategory.RANGE,
        lambda: range_figs.candle_stick(sample_data.stock_prices_first_7_months(), overview=True),
        ranges.render_candle_stick,
    ),
    # Heat map
    ChartType(
        "customizable_heat_map", "Customizable Heat Map", ChartCategory.HEAT_MAP,
        lambda: heatmap_figs.customizable_heat_map(grids.Grid(10, 10, seed=0).to_frame(), overview=True),
        heatmaps.render_customizable_heat_map,
    ),
    ChartType(
        "github_contributions", "GitHub Contributions", ChartCategory.HEAT_MAP,
        lambda: heatmap_figs.github_contributions(sample_data.github_contributions(), overview=True),
        heatmaps.render_github_contributions,
    ),
    ChartType(
        "multi_color_heat_map", "Multi-Color Heat Map", ChartCategory.HEAT_MAP,
        lambda: heatmap_figs.multi_color_heat_map(sample_data.heat_map_levels(), overview=True),
        heatmaps.render_multi_color_heat_map,
    ),
    # Point
    ChartType(
        "scatter", "Scatter", ChartCategory.POINT,
        lambda: point_figs.scatter(sample_data.location_sales(), overview=True),
        points.render_scatter,
    ),
    ChartType(
        "vector_field", "Vector Field", ChartCategory.POINT,
        lambda: point_figs.vector_field(grids.Grid(20, 20, seed=0), overview=True),
        points.render_vector_field,
    ),
]

_BY_ID = {c.id: c for c in CHARTS}


def all_charts() -> list[ChartType]:
    return list(CHARTS)


def charts_by_category() -> dict[ChartCategory, list[ChartType]]:
    """Charts grouped per category, categories in declaration order."""
    grouped: dict[ChartCategory, list[ChartType]] = {c: [] for c in ChartCategory}
    for chart in CHARTS:
        grouped[chart.category].append(chart)
    return grouped


def get_chart(chart_id: str) -> ChartType:
    try:
        return _BY_ID[chart_id]
    except KeyError:
        raise ChartNotFoundError(chart_id) from None


def parse_category(value: str) -> ChartCategory | None:
    """None means "all categories"."""
    value = (value or "").strip().lower()
    if value in ("", "all"):
        return None
    try:
        return ChartCategory(value)
    except ValueError:
        raise ValueError(f"Unknown chart category {value!r}; expected 'all' or one of {[c.value for c in ChartCategory]}") from None
