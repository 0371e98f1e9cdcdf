"""
Figure builders: customization values end up in the Plotly figure.
"""

import plotly.graph_objects as go
import pytest

from config import DETAIL_CHART_HEIGHT, PREVIEW_CHART_HEIGHT
from data import grids, sample_data
from data.transforms import segment_by_threshold
from figures import apple, areas, bars, heatmaps, lines, points, ranges
from figures.theme import INTERPOLATIONS, apply_plotly_theme, hex_to_rgba, line_shape


class TestTheme:
    """Shared styling helpers."""

    def test_interpolation_shapes(self):
        assert line_shape("linear") == "linear"
        assert line_shape("stepStart") == "hv"
        assert line_shape("stepCenter") == "hvh"
        assert line_shape("stepEnd") == "vh"
        assert {line_shape(n) for n in ("monotone", "catmullRom", "cardinal")} == {"spline"}

    def test_unknown_interpolation(self):
        with pytest.raises(ValueError):
            line_shape("bezier")

    def test_overview_vs_detail_height(self):
        assert apply_plotly_theme(go.Figure(), overview=True).layout.height == PREVIEW_CHART_HEIGHT
        assert apply_plotly_theme(go.Figure()).layout.height == DETAIL_CHART_HEIGHT

    def test_overview_hides_axes(self):
        fig = apply_plotly_theme(go.Figure(), overview=True)
        assert fig.layout.xaxis.visible is False
        assert fig.layout.yaxis.visible is False

    def test_hex_to_rgba(self):
        assert hex_to_rgba("#0A84FF", 0.5) == "rgba(10, 132, 255, 0.5)"


class TestBarFigures:
    """Bar chart builders."""

    def test_single_bar_threshold_colors(self):
        df = sample_data.sales_last_30_days()
        fig = bars.single_bar_threshold(df, threshold=200, below_color="#111111", above_color="#222222")
        colors = list(fig.data[0].marker.color)
        assert colors.count("#222222") == int((df["sales"] > 200).sum())

    def test_threshold_bar_one_trace_per_run(self):
        df = sample_data.sales_last_30_days()
        fig = bars.threshold_bar(df)
        assert len(fig.data) == len(segment_by_threshold(df))

    @pytest.mark.parametrize("stacked,mode", [(True, "stack"), (False, "group")])
    def test_two_bars_mode(self, stacked, mode):
        fig = bars.two_bars(sample_data.location_sales(), stacked=stacked)
        assert fig.layout.barmode == mode
        assert len(fig.data) == 2

    def test_two_bars_legend_toggle(self):
        assert bars.two_bars(sample_data.location_sales(), show_legend=False).layout.showlegend is False

    def test_pyramid_male_side_is_negative(self):
        fig = bars.pyramid(sample_data.population_by_age())
        male, female = fig.data
        assert all(x <= 0 for x in male.x)
        assert all(x >= 0 for x in female.x)

    def test_sound_bars(self):
        fig = bars.sound_bars([0.1, 1.9])
        assert tuple(fig.layout.yaxis.range) == (0, 2)
        assert len(fig.data[0].y) == 2

    def test_scrolling_bar_width(self):
        fig = bars.scrolling_bar(sample_data.wine_actions(), scroll_width=1200)
        assert fig.layout.width == 1200

    def test_scrolling_bar_single_flow(self):
        fig = bars.scrolling_bar(sample_data.wine_actions(sample_data.WINE_IN))
        assert len(fig.data) == 1

    def test_bar_fraction_clamped(self):
        assert bars.bar_fraction(40) == 1.0
        assert bars.bar_fraction(0) == 0.05


class TestLineAndAreaFigures:
    """Line and area builders."""

    def test_single_line_symbols(self):
        df = sample_data.sales_last_30_days()
        assert lines.single_line(df, show_symbols=True).data[0].mode == "lines+markers"
        assert lines.single_line(df, show_symbols=False).data[0].mode == "lines"

    @pytest.mark.parametrize("name", list(INTERPOLATIONS))
    def test_single_line_interpolation(self, name):
        fig = lines.single_line(sample_data.sales_last_30_days(), interpolation=name)
        assert fig.data[0].line.shape == INTERPOLATIONS[name]

    def test_lollipop_marks_selected_day(self):
        df = sample_data.sales_last_30_days()
        fig = lines.lollipop(df, selected_index=10)
        head = fig.data[-1]
        assert head.y[0] == df["sales"].iloc[10]

    def test_lollipop_out_of_range_selection(self):
        assert len(lines.lollipop(sample_data.sales_last_30_days(), selected_index=99).data) == 1

    def test_animating_line_frames(self):
        df = grids.cubic_samples()
        assert len(lines.animating_line(df).frames) == 0
        assert len(lines.animating_line(df, animate=True).frames) > 0

    def test_multi_line_one_trace_per_city(self):
        assert len(lines.multi_line(sample_data.location_sales()).data) == len(sample_data.CITIES)

    def test_area_gradient(self):
        df = sample_data.sales_last_30_days()
        assert areas.area_simple(df, show_gradient=True).data[0].fillgradient.type == "vertical"
        assert areas.area_simple(df, show_gradient=False).data[0].fillcolor is not None

    def test_stacked_area(self):
        fig = areas.stacked_area(sample_data.location_sales())
        assert {t.stackgroup for t in fig.data} == {"sales"}


class TestOtherFigures:
    """Apple, range, heat map and point builders."""

    def test_storage_title(self):
        assert apple.storage_title(sample_data.data_usage()) == "78.1 GB of 128 GB Used"

    def test_screen_time_stacks_categories(self):
        from data.transforms import make_day_values

        fig = apple.screen_time(make_day_values(sample_data.screen_time_week()))
        assert fig.layout.barmode == "stack"
        assert len(fig.data) == len(sample_data.SCREEN_TIME_CATEGORIES)

    def test_uv_max_annotation(self):
        fig = apple.uv_index(sample_data.hourly_uv_index())
        assert any("Max 9" in a.text for a in fig.layout.annotations)

    def test_range_bars_use_min_as_base(self):
        df = sample_data.sales_last_12_months()
        bar = ranges.range_simple(df).data[0]
        assert list(bar.base) == list(df["daily_min"])

    def test_range_min_max_points(self):
        df = sample_data.heart_rate_last_week()
        assert len(ranges.heart_rate_range(df, show_min_max=True).data) == 3

    def test_candle_stick_colors(self):
        fig = ranges.candle_stick(sample_data.stock_prices_first_7_months(), up_color="#000001", down_color="#000002")
        assert fig.data[0].increasing.line.color == "#000001"
        assert fig.data[0].decreasing.line.color == "#000002"

    def test_heat_map_color_toggle(self):
        frame = grids.Grid(4, 4, seed=1).to_frame()
        colored = heatmaps.customizable_heat_map(frame, show_colors=True).data[0].colorscale
        mono = heatmaps.customizable_heat_map(frame, show_colors=False).data[0].colorscale
        assert len(colored) == len(heatmaps.GRADIENT_COLORS)
        assert len(mono) == len(heatmaps.MONOTONE_COLORS)

    def test_multi_color_bins_in_range(self):
        fig = heatmaps.multi_color_heat_map(sample_data.heat_map_levels())
        assert set(fig.data[0].z) <= set(range(len(heatmaps.LEVEL_PALETTE)))

    def test_contributions_layout(self):
        df = sample_data.github_contributions()
        trace = heatmaps.github_contributions(df).data[0]
        assert max(trace.x) == 19
        assert set(trace.y) == set(range(7))

    def test_vector_field_one_arrow_per_point(self):
        grid = grids.Grid(20, 20, seed=0)
        marker = points.vector_field(grid, opacity=0.4).data[0].marker
        assert len(marker.angle) == 400
        assert marker.symbol == "arrow"
        assert marker.opacity == 0.4

    def test_scatter_point_size(self):
        fig = points.scatter(sample_data.location_sales(), point_size=14)
        assert all(t.marker.size == 14 for t in fig.data)
