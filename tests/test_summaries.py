"""
Unit tests for the non-visual chart summaries.
"""

import pandas as pd
import pytest

from data import sample_data, summaries
from data.summaries import CategoricalAxis, NumericAxis
from data.transforms import make_day_values


class TestSalesSummaries:
    """Sales series and location summaries."""

    def test_sales_series_bounds(self):
        s = summaries.for_sales_series(sample_data.sales_last_30_days())
        assert isinstance(s.y_axis, NumericAxis)
        assert (s.y_axis.lower, s.y_axis.upper) == (104, 250)
        assert len(s.series[0].points) == 30

    def test_sales_series_empty_defaults_to_zero(self):
        empty = sample_data.sales_last_30_days().iloc[0:0]
        s = summaries.for_sales_series(empty)
        assert (s.y_axis.lower, s.y_axis.upper) == (0.0, 0.0)
        assert s.to_frame().empty

    def test_location_series_spans_all_cities(self):
        s = summaries.for_location_series(sample_data.location_sales("last_30_days"))
        assert (s.y_axis.lower, s.y_axis.upper) == (42, 137)
        assert isinstance(s.x_axis, CategoricalAxis)
        assert len(s.x_axis.categories) == 7
        assert [series.name for series in s.series] == sample_data.CITIES

    def test_population_categories_sorted(self):
        s = summaries.for_population(sample_data.population_by_age())
        assert s.x_axis.categories == sorted(sample_data.AGE_RANGES)

    def test_month_ranges(self):
        s = summaries.for_month_ranges(sample_data.sales_last_12_months())
        df = sample_data.sales_last_12_months()
        assert s.y_axis.lower == df["daily_min"].min()
        assert s.y_axis.upper == df["daily_max"].max()


class TestOtherSummaries:
    """Stock, audio, screen time, UV and heart rate summaries."""

    def test_stock_prices_axes(self):
        df = sample_data.stock_prices_first_7_months()
        s = summaries.for_stock_prices(df)
        assert s.y_axis.lower == 0.0
        assert s.y_axis.upper == df["close"].max()
        assert [a.title for a in s.additional_axes] == ["Open", "High", "Low"]

    def test_audio_levels(self):
        s = summaries.for_audio_levels([0.5, 1.0, 2.0])
        assert (s.x_axis.lower, s.x_axis.upper) == (0.0, 3.0)
        assert (s.y_axis.lower, s.y_axis.upper) == (0.5, 2.0)
        assert [label for _, label in s.series[0].points] == ["25%", "50%", "100%"]

    def test_audio_levels_empty(self):
        s = summaries.for_audio_levels([])
        assert (s.y_axis.lower, s.y_axis.upper) == (0.0, 0.0)

    def test_screen_time_upper_is_max_daily_total(self):
        by_day = make_day_values(sample_data.screen_time_week())
        s = summaries.for_screen_time_week(by_day)
        assert s.y_axis.lower == 0.0
        assert s.y_axis.upper == pytest.approx(by_day.groupby("value_date")["duration"].sum().max() / 60)
        assert s.y_axis.value_label == "minutes"
        assert len(s.x_axis.categories) == 7

    def test_uv_and_heart_rate(self):
        uv = summaries.for_uv_index(sample_data.hourly_uv_index())
        assert uv.y_axis.upper == 9
        hr = summaries.for_heart_rate(sample_data.heart_rate_last_week())
        assert (hr.y_axis.lower, hr.y_axis.upper) == (80, 239)

    def test_screen_time_points_share_axis_unit(self):
        by_day = make_day_values(sample_data.screen_time_week())
        s = summaries.for_screen_time_week(by_day)
        for day in s.x_axis.categories:
            day_total = sum(v for series in s.series for d, v in series.points if d == day)
            # Per-category minutes are rounded, so allow one minute per category.
            assert day_total <= s.y_axis.upper + len(s.series)
        biggest_day = max(
            sum(v for series in s.series for d, v in series.points if d == day) for day in s.x_axis.categories
        )
        assert biggest_day == pytest.approx(s.y_axis.upper, abs=len(s.series))

    def test_heart_rate_days_in_date_order(self):
        df = sample_data.heart_rate_last_week()
        expected = [pd.Timestamp(d).strftime("%a %d") for d in sorted(df["weekday"].unique())]

        assert summaries.for_heart_rate(df).x_axis.categories == expected
        shuffled = df.iloc[::-1].reset_index(drop=True)
        assert summaries.for_heart_rate(shuffled).x_axis.categories == expected
        assert expected[:3] == ["Fri 01", "Sat 02", "Sun 03"]

    def test_to_frame_has_one_row_per_point(self):
        s = summaries.for_location_series(sample_data.location_sales())
        frame = s.to_frame()
        assert len(frame) == sum(len(series.points) for series in s.series)
        assert isinstance(s.axis_rows(), pd.DataFrame)
