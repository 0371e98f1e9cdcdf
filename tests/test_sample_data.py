"""
Invariants of the fixture tables.
"""

import pandas as pd
import pytest

from data import sample_data


class TestSales:
    """Sales fixtures."""

    def test_last_30_days(self):
        df = sample_data.sales_last_30_days()
        assert len(df) == 30
        assert df["day"].iloc[0] == pd.Timestamp("2022-05-08")
        assert df["day"].iloc[-1] == pd.Timestamp("2022-06-06")
        assert df["day"].is_monotonic_increasing

    def test_totals_and_average(self):
        total = sample_data.sales_last_30_days_total()
        assert total == sample_data.sales_last_30_days()["sales"].sum()
        assert sample_data.sales_last_30_days_average() == float(total // 30)

    def test_last_12_months(self):
        df = sample_data.sales_last_12_months()
        assert len(df) == 12
        assert (df["daily_min"] <= df["daily_average"]).all()
        assert (df["daily_average"] <= df["daily_max"]).all()
        assert sample_data.sales_last_12_months_total() == df["sales"].sum()

    def test_fresh_copies(self):
        df = sample_data.sales_last_30_days()
        df["sales"] = 0
        assert sample_data.sales_last_30_days()["sales"].sum() > 0

    def test_location_sales(self):
        for period in sample_data.LOCATION_PERIODS:
            df = sample_data.location_sales(period)
            assert len(df) == 14
            assert set(df["city"]) == set(sample_data.CITIES)

    def test_unknown_period(self):
        with pytest.raises(ValueError):
            sample_data.location_sales("last_decade")
        with pytest.raises(ValueError):
            sample_data.location_best("last_decade")

    def test_location_best_is_max(self):
        city, weekday, sales = sample_data.location_best("last_30_days")
        df = sample_data.location_sales("last_30_days")
        assert sales == df["sales"].max()
        assert city == "San Francisco"


class TestOtherFixtures:
    """Population, storage, health, wine and screen time fixtures."""

    def test_population(self):
        df = sample_data.population_by_age()
        assert len(df) == 20
        assert set(df["sex"]) == {"Male", "Female"}

    def test_data_usage_fits_device(self):
        assert sample_data.data_usage()["size"].sum() <= sample_data.DEVICE_CAPACITY_GB

    def test_ecg(self):
        samples = sample_data.ecg_sample()
        assert len(samples) == 1000
        assert all(isinstance(v, float) for v in samples)

    def test_heart_rate_ranges(self):
        df = sample_data.heart_rate_last_week()
        assert len(df) == 10
        assert (df["daily_min"] <= df["daily_max"]).all()

    def test_wine_actions_out_is_negative(self):
        df = sample_data.wine_actions()
        outs = df[df["in_out"] == sample_data.WINE_OUT]
        ins = df[df["in_out"] == sample_data.WINE_IN]
        assert (outs["actual"] < 0).all()
        assert (ins["actual"] > 0).all()
        assert (outs["actual"] == -outs["qty"]).all()

    def test_wine_flow_filter(self):
        assert set(sample_data.wine_actions(sample_data.WINE_IN)["in_out"]) == {sample_data.WINE_IN}
        assert len(sample_data.wine_actions(sample_data.WINE_OUT)) == 12
        with pytest.raises(ValueError):
            sample_data.wine_actions("sideways")

    def test_screen_time_week(self):
        df = sample_data.screen_time_week()
        assert len(df) == 279
        assert set(df["category"]) <= set(sample_data.SCREEN_TIME_CATEGORIES)
        assert (df["duration"] > 0).all()


class TestSyntheticFixtures:
    """Seeded synthetic tables."""

    def test_time_sheet_seeded_names(self):
        a = sample_data.time_sheet_last_week(seed=1)
        b = sample_data.time_sheet_last_week(seed=1)
        pd.testing.assert_frame_equal(a, b)

    def test_time_sheet_shifts(self):
        df = sample_data.time_sheet_last_week()
        assert (df["clock_out"] > df["clock_in"]).all()
        assert set(df["department"]) == set(sample_data.DEPARTMENTS)
        assert df["clock_in"].dt.date.nunique() == sample_data.TIME_SHEET_DAYS

    def test_stock_candles_are_consistent(self):
        df = sample_data.stock_prices()
        assert (df["low"] <= df[["open", "close"]].min(axis=1)).all()
        assert (df["high"] >= df[["open", "close"]].max(axis=1)).all()
        assert (df["timestamp"].dt.weekday < 5).all()

    def test_stock_first_7_months(self):
        df = sample_data.stock_prices_first_7_months()
        assert df["timestamp"].dt.month.max() == 7
        assert len(df) < len(sample_data.stock_prices())

    def test_stock_prices_seeded(self):
        pd.testing.assert_frame_equal(sample_data.stock_prices(seed=4), sample_data.stock_prices(seed=4))

    def test_hourly_uv(self):
        df = sample_data.hourly_uv_index()
        assert len(df) == 24
        assert df["uv_index"].between(0, sample_data.UV_INDEX_MAX).all()
        assert (df["date"].dt.date == sample_data.UV_REFERENCE_DAY).all()

    def test_github_contributions(self):
        df = sample_data.github_contributions()
        assert len(df) == 140
        assert df["date"].iloc[0].weekday() == 6  # Sunday
        assert df["date"].iloc[-1].date() == sample_data.CONTRIBUTIONS_END
        assert df["level"].between(0, 4).all()

    def test_heat_map_levels(self):
        df = sample_data.heat_map_levels()
        assert len(df) == 100
        assert df["value"].between(0, 1).all()
