from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Optional

import pandas as pd

from data.sample_data import AGE_RANGES, SCREEN_TIME_CATEGORIES


DEFAULT_THRESHOLD = 150


# --- Threshold segmentation ---------------------------------------------------


def segment_by_threshold(
    df: pd.DataFrame,
    threshold: float = DEFAULT_THRESHOLD,
    below_color: str = "#0A84FF",
    above_color: str = "#FF9500",
    value_col: str = "sales",
) -> list[pd.DataFrame]:
    """
    Split a day-ordered series into contiguous runs on either side of `threshold`.

    A value equal to the threshold counts as above. Every input row lands in
    exactly one run and the runs concatenate back to the input, in order.
    Each run gets `above_threshold` and `fill_color` columns.
    """
    if len(df) == 0:
        return []

    segments: list[pd.DataFrame] = []
    start = 0
    last_above: Optional[bool] = None
    values = df[value_col].tolist()
    for i, value in enumerate(values):
        above = value >= threshold
        if last_above is not None and above != last_above:
            segments.append(df.iloc[start:i])
            start = i
        last_above = above
    segments.append(df.iloc[start:])

    out = []
    for seg in segments:
        seg = seg.copy()
        seg["above_threshold"] = seg[value_col] >= threshold
        seg["fill_color"] = seg["above_threshold"].map({True: above_color, False: below_color})
        out.append(seg.reset_index(drop=True))
    return out


def threshold_colors(values: pd.Series, threshold: float, below_color: str, above_color: str) -> list[str]:
    # Strictly-greater comparison, as drawn by the single-bar threshold chart.
    return [above_color if v > threshold else below_color for v in values]


# --- Screen time ----------------------------------------------------------------


def make_day_values(df: pd.DataFrame) -> pd.DataFrame:
    """Bucket hourly screen-time samples by calendar day and sum per category."""
    if len(df) == 0:
        return pd.DataFrame(columns=["value_date", "category", "duration"])

    out = df.copy()
    out["value_date"] = pd.to_datetime(out["value_date"]).dt.normalize()
    out = out.groupby(["value_date", "category"], as_index=False)["duration"].sum()
    order = {c: i for i, c in enumerate(SCREEN_TIME_CATEGORIES)}
    out["_order"] = out["category"].map(order).fillna(len(order))
    return out.sort_values(["value_date", "_order"]).drop(columns="_order").reset_index(drop=True)


def day_values(df: pd.DataFrame, day) -> pd.DataFrame:
    """Samples that fall on the same calendar day as `day`."""
    stamps = pd.to_datetime(df["value_date"])
    target = pd.Timestamp(day).normalize()
    return df[stamps.dt.normalize() == target].reset_index(drop=True)


def daily_summaries(df: pd.DataFrame) -> pd.DataFrame:
    """Per timestamp: total duration and a readable per-category breakdown."""
    rows = []
    for stamp, group in df.groupby("value_date", sort=True):
        parts = [f"{r.category}: {duration_description(r.duration)}" for r in group.itertuples()]
        rows.append(
            {
                "value_date": stamp,
                "total_duration": float(group["duration"].sum()),
                "description": _join_list(parts),
            }
        )
    return pd.DataFrame(rows, columns=["value_date", "total_duration", "description"])


def _join_list(parts: list[str]) -> str:
    if len(parts) <= 1:
        return "".join(parts)
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + f", and {parts[-1]}"


# --- Durations ------------------------------------------------------------------


def duration_description(seconds: float) -> str:
    hours = int(seconds // 3600)
    minutes = int((seconds // 60) % 60)
    h = "hour" if hours == 1 else "hours"
    m = "minute" if minutes == 1 else "minutes"
    return f"{hours} {h} {minutes:02d} {m}"


def format_duration(seconds: float) -> str:
    total_minutes = int(round(seconds / 60))
    return f"{total_minutes // 60}h {total_minutes % 60:02d}m"


def events_total_seconds(events: pd.DataFrame) -> float:
    if len(events) == 0:
        return 0.0
    return float((events["clock_out"] - events["clock_in"]).dt.total_seconds().sum())


def events_total_duration(events: pd.DataFrame) -> str:
    return format_duration(events_total_seconds(events))


def event_at(events: pd.DataFrame, when) -> Optional[pd.Series]:
    """First event whose [clock_in, clock_out] interval contains `when`."""
    when = pd.Timestamp(when)
    hits = events[(events["clock_in"] <= when) & (events["clock_out"] >= when)]
    if len(hits) == 0:
        return None
    return hits.iloc[0]


def event_middle(clock_in, clock_out) -> pd.Timestamp:
    clock_in = pd.Timestamp(clock_in)
    return clock_in + (pd.Timestamp(clock_out) - clock_in) / 2


# --- Lookups --------------------------------------------------------------------


def nearest_row(df: pd.DataFrame, column: str, when) -> Optional[pd.Series]:
    """Row whose `column` timestamp is closest to `when` (first on ties)."""
    if len(df) == 0:
        return None
    distance = (pd.to_datetime(df[column]) - pd.Timestamp(when)).abs()
    return df.loc[distance.idxmin()]


def nearest_hour(when: datetime) -> datetime:
    when = pd.Timestamp(when).to_pydatetime()
    base = when.replace(minute=0, second=0, microsecond=0)
    if when - base >= timedelta(minutes=30):
        base += timedelta(hours=1)
    return base


def heart_rate_bounds(df: pd.DataFrame) -> tuple[int, int, Optional[pd.Timestamp], Optional[pd.Timestamp]]:
    if len(df) == 0:
        return 0, 0, None, None
    return (
        int(df["daily_min"].min()),
        int(df["daily_max"].max()),
        pd.Timestamp(df["weekday"].min()),
        pd.Timestamp(df["weekday"].max()),
    )


def day_of_week(ts) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (pd.Timestamp(ts).weekday() + 1) % 7


def relative_week(ts, first) -> int:
    days_apart = (pd.Timestamp(ts).normalize() - pd.Timestamp(first).normalize()).days
    return days_apart // 7


# --- Colors + bins ----------------------------------------------------------------

LEVEL_COLORS = {"red": "#FF3B30", "orange": "#FF9500", "yellow": "#FFCC00", "green": "#34C759"}


def level_color(value: float) -> str:
    if value < 0.25:
        return LEVEL_COLORS["red"]
    elif value < 0.5:
        return LEVEL_COLORS["orange"]
    elif value < 0.8:
        return LEVEL_COLORS["yellow"]
    return LEVEL_COLORS["green"]


def value_bins(values, count: int) -> list[float]:
    """Edges of `count` equal-width bins spanning [min - 1, max + 1]."""
    if count < 1:
        raise ValueError("count must be at least 1")
    values = list(values)
    lo = (min(values) if values else 0) - 1
    hi = (max(values) if values else 0) + 1
    step = (hi - lo) / count
    return [lo + step * i for i in range(count + 1)]


def bin_index(value: float, edges: list[float]) -> int:
    for i in range(len(edges) - 1):
        if value < edges[i + 1]:
            return max(i, 0)
    return len(edges) - 2


# --- Random data ----------------------------------------------------------------


def random_population(rng: Optional[random.Random] = None) -> pd.DataFrame:
    rng = rng or random.Random()
    rows = [
        {"sex": sex, "age_range": age_range, "percentage": rng.randrange(0, 100)}
        for sex in ["Male", "Female"]
        for age_range in AGE_RANGES
    ]
    return pd.DataFrame(rows)


def stacked_or_grouped(show_stacked: bool) -> str:
    return "stack" if show_stacked else "group"
