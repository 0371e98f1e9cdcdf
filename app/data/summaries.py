from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import pandas as pd


@dataclass(frozen=True)
class NumericAxis:
    title: str
    lower: float
    upper: float
    value_label: str = ""


@dataclass(frozen=True)
class CategoricalAxis:
    title: str
    categories: list[str]


Axis = Union[NumericAxis, CategoricalAxis]


@dataclass(frozen=True)
class SeriesSummary:
    name: str
    points: list[tuple[Any, Any]]
    is_continuous: bool = False


@dataclass(frozen=True)
class ChartSummary:
    """
    Non-visual description of a chart: its axes and the data points of each series.
    Rendered as the "Data summary" table under every detail view.
    """

    title: str
    x_axis: Axis
    y_axis: Axis
    series: list[SeriesSummary]
    additional_axes: list[Axis] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for s in self.series:
            for x, y in s.points:
                rows.append({"series": s.name, self.x_axis.title: x, self.y_axis.title: y})
        return pd.DataFrame(rows, columns=["series", self.x_axis.title, self.y_axis.title])

    def axis_rows(self) -> pd.DataFrame:
        rows = []
        for role, axis in [("x", self.x_axis), ("y", self.y_axis)] + [("extra", a) for a in self.additional_axes]:
            if isinstance(axis, NumericAxis):
                extent = f"{axis.lower:g} to {axis.upper:g}"
            else:
                extent = ", ".join(axis.categories)
            rows.append({"axis": role, "title": axis.title, "extent": extent})
        return pd.DataFrame(rows)


def _bounds(values: pd.Series) -> tuple[float, float]:
    if len(values) == 0:
        return 0.0, 0.0
    return float(values.min()), float(values.max())


def _date_label(ts) -> str:
    return pd.Timestamp(ts).strftime("%Y-%m-%d")


def for_sales_series(df: pd.DataFrame, title: str = "Daily sales") -> ChartSummary:
    lo, hi = _bounds(df["sales"])
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Day", [_date_label(d) for d in df["day"]]),
        y_axis=NumericAxis("Sales", lo, hi, value_label="units sold"),
        series=[
            SeriesSummary("Sales", [(_date_label(d), int(s)) for d, s in zip(df["day"], df["sales"])])
        ],
    )


def for_location_series(df: pd.DataFrame, title: str = "Sales by location") -> ChartSummary:
    lo, hi = _bounds(df["sales"])
    weekdays = sorted(df["weekday"].unique()) if len(df) else []
    series = [
        SeriesSummary(
            str(city),
            [(pd.Timestamp(w).strftime("%A"), int(s)) for w, s in zip(group["weekday"], group["sales"])],
            is_continuous=True,
        )
        for city, group in df.groupby("city", sort=False)
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Weekday", [pd.Timestamp(w).strftime("%A") for w in weekdays]),
        y_axis=NumericAxis("Sales", lo, hi),
        series=series,
    )


def for_population(df: pd.DataFrame, title: str = "Population by age") -> ChartSummary:
    lo, hi = _bounds(df["percentage"])
    series = [
        SeriesSummary(str(sex), list(zip(group["age_range"], group["percentage"].astype(int))))
        for sex, group in df.groupby("sex", sort=False)
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Age range", sorted(df["age_range"].unique())),
        y_axis=NumericAxis("Population", lo, hi, value_label="%"),
        series=series,
    )


def for_month_ranges(df: pd.DataFrame, title: str = "Daily sales range per month") -> ChartSummary:
    lo = float(df["daily_min"].min()) if len(df) else 0.0
    hi = float(df["daily_max"].max()) if len(df) else 0.0
    points = [
        (pd.Timestamp(m).strftime("%b %Y"), f"{int(a)} to {int(b)}")
        for m, a, b in zip(df["month"], df["daily_min"], df["daily_max"])
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Month", [p[0] for p in points]),
        y_axis=NumericAxis("Daily sales", lo, hi),
        series=[SeriesSummary("Range", points)],
    )


def for_stock_prices(df: pd.DataFrame, title: str = "Stock price") -> ChartSummary:
    close_max = float(df["close"].max()) if len(df) else 0.0
    extras: list[Axis] = []
    for col in ["open", "high", "low"]:
        lo, hi = _bounds(df[col])
        extras.append(NumericAxis(col.capitalize(), lo, hi, value_label="USD"))
    points = [
        (_date_label(ts), f"open {o:.2f}, high {h:.2f}, low {l:.2f}, close {c:.2f}")
        for ts, o, h, l, c in zip(df["timestamp"], df["open"], df["high"], df["low"], df["close"])
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Date", [p[0] for p in points]),
        y_axis=NumericAxis("Close", 0.0, close_max, value_label="USD"),
        series=[SeriesSummary("Price", points)],
        additional_axes=extras,
    )


def for_audio_levels(levels: list[float], title: str = "Microphone level") -> ChartSummary:
    lo = float(min(levels)) if levels else 0.0
    hi = float(max(levels)) if levels else 0.0
    return ChartSummary(
        title=title,
        x_axis=NumericAxis("Sample", 0.0, float(len(levels))),
        y_axis=NumericAxis("Level", lo, hi),
        series=[SeriesSummary("Level", [(i, f"{level / 2:.0%}") for i, level in enumerate(levels)])],
    )


def for_screen_time_week(day_df: pd.DataFrame, title: str = "Screen time") -> ChartSummary:
    totals = day_df.groupby("value_date")["duration"].sum() if len(day_df) else pd.Series(dtype=float)
    hi = float(totals.max()) / 60 if len(totals) else 0.0
    series = [
        SeriesSummary(
            str(category),
            [(pd.Timestamp(d).strftime("%A"), round(float(s) / 60)) for d, s in zip(group["value_date"], group["duration"])],
        )
        for category, group in day_df.groupby("category", sort=False)
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Day", [pd.Timestamp(d).strftime("%A") for d in totals.index]),
        y_axis=NumericAxis("Duration", 0.0, hi, value_label="minutes"),
        series=series,
    )


def for_uv_index(df: pd.DataFrame, title: str = "UV index") -> ChartSummary:
    lo, hi = _bounds(df["uv_index"])
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Hour", [pd.Timestamp(d).strftime("%H:%M") for d in df["date"]]),
        y_axis=NumericAxis("UV index", lo, hi),
        series=[
            SeriesSummary(
                "UV index",
                [(pd.Timestamp(d).strftime("%H:%M"), int(v)) for d, v in zip(df["date"], df["uv_index"])],
                is_continuous=True,
            )
        ],
    )


def for_heart_rate(df: pd.DataFrame, title: str = "Heart rate") -> ChartSummary:
    lo = float(df["daily_min"].min()) if len(df) else 0.0
    hi = float(df["daily_max"].max()) if len(df) else 0.0
    ordered = df.sort_values("weekday")
    points = [
        (pd.Timestamp(d).strftime("%a %d"), f"{int(a)} to {int(b)} BPM")
        for d, a, b in zip(ordered["weekday"], ordered["daily_min"], ordered["daily_max"])
    ]
    return ChartSummary(
        title=title,
        x_axis=CategoricalAxis("Day", list(dict.fromkeys(p[0] for p in points))),
        y_axis=NumericAxis("Heart rate", lo, hi, value_label="BPM"),
        series=[SeriesSummary("Range", points)],
    )
