"""
Unit tests for the pure data helpers behind the charts.
"""

import random
from datetime import datetime

import pandas as pd
import pytest

from data import sample_data
from data.transforms import (
    bin_index,
    daily_summaries,
    day_of_week,
    day_values,
    duration_description,
    event_at,
    event_middle,
    events_total_duration,
    format_duration,
    heart_rate_bounds,
    level_color,
    LEVEL_COLORS,
    make_day_values,
    nearest_hour,
    nearest_row,
    random_population,
    relative_week,
    segment_by_threshold,
    stacked_or_grouped,
    threshold_colors,
    value_bins,
)


def _series(values):
    return pd.DataFrame({"day": pd.date_range("2022-05-01", periods=len(values)), "sales": values})


class TestSegmentByThreshold:
    """Splitting a sales series into above/below runs."""

    def test_runs_split_on_crossings(self):
        segments = segment_by_threshold(_series([100, 200, 160, 140, 150]), threshold=150)
        assert [list(s["sales"]) for s in segments] == [[100], [200, 160], [140], [150]]

    def test_value_equal_to_threshold_counts_as_above(self):
        segments = segment_by_threshold(_series([150]), threshold=150)
        assert len(segments) == 1
        assert bool(segments[0]["above_threshold"].iloc[0]) is True

    def test_concatenation_reproduces_input(self):
        df = sample_data.sales_last_30_days()
        segments = segment_by_threshold(df)
        rebuilt = pd.concat(segments, ignore_index=True)
        assert list(rebuilt["sales"]) == list(df["sales"])
        assert list(rebuilt["day"]) == list(df["day"])

    def test_trailing_run_is_kept(self):
        segments = segment_by_threshold(_series([100, 100, 200, 210]), threshold=150)
        assert len(segments) == 2
        assert list(segments[-1]["sales"]) == [200, 210]

    def test_no_empty_segments(self):
        segments = segment_by_threshold(sample_data.sales_last_30_days())
        assert all(len(s) > 0 for s in segments)

    def test_single_side_is_one_segment(self):
        assert len(segment_by_threshold(_series([1, 2, 3]), threshold=150)) == 1

    def test_empty_series(self):
        assert segment_by_threshold(_series([])) == []

    def test_fill_colors(self):
        segments = segment_by_threshold(_series([100, 200]), threshold=150, below_color="#000000", above_color="#FFFFFF")
        assert segments[0]["fill_color"].iloc[0] == "#000000"
        assert segments[1]["fill_color"].iloc[0] == "#FFFFFF"

    def test_threshold_colors_strictly_above(self):
        colors = threshold_colors(pd.Series([149, 150, 151]), 150, "b", "a")
        assert colors == ["b", "b", "a"]


class TestScreenTime:
    """Bucketing hourly screen-time samples by day."""

    def test_total_duration_preserved(self):
        hourly = sample_data.screen_time_week()
        by_day = make_day_values(hourly)
        assert by_day["duration"].sum() == pytest.approx(hourly["duration"].sum())

    def test_buckets_are_start_of_day(self):
        by_day = make_day_values(sample_data.screen_time_week())
        assert (by_day["value_date"].dt.hour == 0).all()
        assert by_day["value_date"].dt.date.nunique() == 7

    def test_categories_follow_display_order(self):
        by_day = make_day_values(sample_data.screen_time_week())
        order = sample_data.SCREEN_TIME_CATEGORIES
        for _, group in by_day.groupby("value_date"):
            positions = [order.index(c) for c in group["category"]]
            assert positions == sorted(positions)

    def test_one_row_per_day_and_category(self):
        by_day = make_day_values(sample_data.screen_time_week())
        assert not by_day.duplicated(["value_date", "category"]).any()

    def test_empty_input(self):
        empty = pd.DataFrame(columns=["value_date", "category", "duration"])
        assert len(make_day_values(empty)) == 0

    def test_day_values_filters_one_day(self):
        hourly = sample_data.screen_time_week()
        sunday = day_values(hourly, datetime(2022, 6, 26, 15))
        assert len(sunday) > 0
        assert (sunday["value_date"].dt.day == 26).all()

    def test_daily_summaries(self):
        df = pd.DataFrame(
            {
                "value_date": [pd.Timestamp("2022-06-20")] * 2,
                "category": [sample_data.SOCIAL, sample_data.OTHER],
                "duration": [3900.0, 60.0],
            }
        )
        out = daily_summaries(df)
        assert len(out) == 1
        assert out["total_duration"].iloc[0] == 3960.0
        assert out["description"].iloc[0] == "Social: 1 hour 05 minutes and Other: 0 hours 01 minute"


class TestDurations:
    """Duration formatting and time-sheet totals."""

    def test_duration_description_plurals(self):
        assert duration_description(3600 + 5 * 60) == "1 hour 05 minutes"
        assert duration_description(2 * 3600 + 60) == "2 hours 01 minute"
        assert duration_description(0) == "0 hours 00 minutes"

    def test_format_duration(self):
        assert format_duration(7 * 3600 + 5 * 60) == "7h 05m"
        assert format_duration(0) == "0h 00m"

    def test_events_total_duration_last_day(self):
        # 4.5 + 5 + 6 + 8.5 + 3 + 5 + 4 hours
        assert events_total_duration(sample_data.time_sheet_last_day()) == "36h 00m"

    def test_events_total_duration_empty(self):
        empty = pd.DataFrame({"clock_in": pd.to_datetime([]), "clock_out": pd.to_datetime([])})
        assert events_total_duration(empty) == "0h 00m"

    def test_event_at(self):
        events = sample_data.time_sheet_last_day()
        hit = event_at(events, datetime(2022, 6, 13, 8, 0))
        assert hit is not None
        assert hit["department"] == "Bread"
        assert event_at(events, datetime(2022, 6, 13, 23, 0)) is None

    def test_event_middle(self):
        mid = event_middle(datetime(2022, 6, 13, 9, 0), datetime(2022, 6, 13, 17, 30))
        assert mid == pd.Timestamp("2022-06-13 13:15")


class TestLookups:
    """Nearest-row and calendar helpers."""

    def test_nearest_row(self):
        df = sample_data.hourly_uv_index()
        row = nearest_row(df, "date", datetime(2022, 6, 20, 10, 40))
        assert row["date"] == pd.Timestamp("2022-06-20 11:00")
        assert row["uv_index"] == 7

    def test_nearest_row_empty(self):
        assert nearest_row(pd.DataFrame({"date": []}), "date", datetime(2022, 1, 1)) is None

    def test_nearest_hour(self):
        assert nearest_hour(datetime(2022, 6, 20, 10, 29)) == datetime(2022, 6, 20, 10)
        assert nearest_hour(datetime(2022, 6, 20, 10, 30)) == datetime(2022, 6, 20, 11)

    def test_heart_rate_bounds(self):
        low, high, first, last = heart_rate_bounds(sample_data.heart_rate_last_week())
        assert (low, high) == (80, 239)
        assert first == pd.Timestamp("2022-07-01")
        assert last == pd.Timestamp("2022-07-07")

    def test_heart_rate_bounds_empty(self):
        empty = sample_data.heart_rate_last_week().iloc[0:0]
        assert heart_rate_bounds(empty) == (0, 0, None, None)

    def test_day_of_week_starts_sunday(self):
        assert day_of_week(datetime(2022, 6, 19)) == 0  # Sunday
        assert day_of_week(datetime(2022, 6, 18)) == 6  # Saturday

    def test_relative_week(self):
        first = datetime(2022, 6, 5)
        assert relative_week(datetime(2022, 6, 11), first) == 0
        assert relative_week(datetime(2022, 6, 18), first) == 1


class TestColorsAndBins:
    """Level colors and value bins."""

    @pytest.mark.parametrize(
        "value,color",
        [(0.0, "red"), (0.24, "red"), (0.25, "orange"), (0.5, "yellow"), (0.79, "yellow"), (0.8, "green"), (1.5, "green")],
    )
    def test_level_color(self, value, color):
        assert level_color(value) == LEVEL_COLORS[color]

    def test_value_bins_span(self):
        assert value_bins([0, 10], 4) == [-1.0, 2.0, 5.0, 8.0, 11.0]

    def test_value_bins_requires_count(self):
        with pytest.raises(ValueError):
            value_bins([1, 2], 0)

    def test_bin_index(self):
        edges = value_bins([0, 10], 4)
        assert bin_index(-1, edges) == 0
        assert bin_index(1.9, edges) == 0
        assert bin_index(5, edges) == 2
        assert bin_index(11, edges) == 3


class TestRandomData:
    """Randomized chart data."""

    def test_random_population_shape(self):
        df = random_population(random.Random(1))
        assert len(df) == 2 * len(sample_data.AGE_RANGES)
        assert df["percentage"].between(0, 99).all()

    def test_random_population_seeded(self):
        a = random_population(random.Random(5))
        b = random_population(random.Random(5))
        pd.testing.assert_frame_equal(a, b)

    def test_stacked_or_grouped(self):
        assert stacked_or_grouped(True) == "stack"
        assert stacked_or_grouped(False) == "group"
