from __future__ import annotations

import colorsys
import math
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class GridPoint:
    x: float
    y: float
    val: float

    def angle(self, degree_offset: float = 0.0, in_radians: bool = True) -> float:
        degrees = (self.val / 100) * 180 + 180 + degree_offset
        return math.radians(degrees) if in_radians else degrees

    def angle_color(self, hue_offset: float = 0.0) -> str:
        hue = (((self.val / 100) * 360 + hue_offset) / 360) % 1.0
        r, g, b = colorsys.hsv_to_rgb(hue, 1.0, 1.0)
        return "#{:02X}{:02X}{:02X}".format(round(r * 255), round(g * 255), round(b * 255))


class Grid:
    """
    Gradient grid of jittered values.

    Values rise from ~0 in the first cell to ~100 in the last, plus uniform
    noise in [-10, 10].
    """

    def __init__(self, num_rows: int, num_cols: int, seed: Optional[int] = None):
        if num_rows < 1 or num_cols < 1:
            raise ValueError(f"Grid needs at least one row and column, got {num_rows}x{num_cols}")
        self.num_rows = num_rows
        self.num_cols = num_cols

        rng = random.Random(seed)
        span = num_rows + num_cols - 2
        self.points: list[GridPoint] = []
        for row in range(num_rows):
            for col in range(num_cols):
                base = (row + col) * 100 / span if span else 0.0
                self.points.append(GridPoint(x=float(row), y=float(col), val=base + rng.uniform(-10, 10)))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([{"x": p.x, "y": p.y, "val": p.val} for p in self.points])


def diagonal_grid(num_rows: int, num_cols: int, seed: Optional[int] = None) -> pd.DataFrame:
    if num_rows < 1 or num_cols < 1:
        raise ValueError(f"Grid needs at least one row and column, got {num_rows}x{num_cols}")
    rng = random.Random(seed)
    rows = []
    for row in range(num_rows):
        for col in range(num_cols):
            val = 100 if row == col else rng.randint(0, 49)
            rows.append({"x": row, "y": col, "val": val})
    return pd.DataFrame(rows)


def line_sin_points(
    x_range: range = range(0, 101),
    random_range: tuple[int, int] = (-5, 5),
    rng: Optional[random.Random] = None,
) -> pd.DataFrame:
    rng = rng or random.Random()
    lo, hi = random_range
    return pd.DataFrame(
        [{"x": x, "y": math.sin(x * 0.2) * 100 + rng.randint(lo, hi)} for x in x_range]
    )


def plot_sin_points(
    x_range: range = range(0, 100),
    y_range: range = range(0, 5),
    random_range: tuple[int, int] = (-25, 25),
    rng: Optional[random.Random] = None,
) -> pd.DataFrame:
    """Scattered points around the sine curve: `len(y_range)` samples per x."""
    rng = rng or random.Random()
    lo, hi = random_range
    rows = []
    for x in x_range:
        for _ in y_range:
            rows.append({"x": x, "y": math.sin(x * 0.2) * 100 + rng.randint(lo, hi), "val": 0.2})
    return pd.DataFrame(rows)


def cubic_samples(step: float = 0.01) -> pd.DataFrame:
    count = int(round(2 / step)) + 1
    xs = np.round(np.linspace(-1.0, 1.0, count), 10)
    return pd.DataFrame({"x": xs, "y": xs ** 3})

