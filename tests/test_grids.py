"""
Unit tests for synthetic grids and sample curves.
"""

import math
import random

import pytest

from data.grids import Grid, GridPoint, cubic_samples, diagonal_grid, line_sin_points, plot_sin_points


class TestGrid:
    """Gradient grid generation."""

    def test_point_count_and_range(self):
        grid = Grid(3, 4, seed=1)
        assert len(grid.points) == 12
        for p in grid.points:
            base = (p.x + p.y) * 100 / 5
            assert base - 10 <= p.val <= base + 10

    def test_single_cell_has_no_zero_division(self):
        grid = Grid(1, 1, seed=1)
        assert len(grid.points) == 1
        assert -10 <= grid.points[0].val <= 10

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, -1)])
    def test_invalid_size(self, rows, cols):
        with pytest.raises(ValueError):
            Grid(rows, cols)

    def test_seeded_grids_match(self):
        assert Grid(5, 5, seed=9).points == Grid(5, 5, seed=9).points

    def test_to_frame(self):
        df = Grid(2, 3, seed=0).to_frame()
        assert list(df.columns) == ["x", "y", "val"]
        assert len(df) == 6

    def test_diagonal_grid(self):
        df = diagonal_grid(5, 5, seed=2)
        diagonal = df[df["x"] == df["y"]]
        rest = df[df["x"] != df["y"]]
        assert (diagonal["val"] == 100).all()
        assert rest["val"].between(0, 49).all()

    def test_diagonal_grid_invalid(self):
        with pytest.raises(ValueError):
            diagonal_grid(0, 1)


class TestGridPoint:
    """Angle and hue derived from a point's value."""

    def test_angle_degrees(self):
        assert GridPoint(0, 0, 0).angle(in_radians=False) == 180
        assert GridPoint(0, 0, 100).angle(in_radians=False) == 360
        assert GridPoint(0, 0, 50).angle(10, in_radians=False) == 280

    def test_angle_radians(self):
        assert GridPoint(0, 0, 0).angle() == pytest.approx(math.pi)

    def test_angle_color(self):
        assert GridPoint(0, 0, 0).angle_color() == "#FF0000"
        assert GridPoint(0, 0, 100).angle_color() == "#FF0000"
        assert GridPoint(0, 0, 0).angle_color(120) == "#00FF00"

    def test_angle_color_wraps_negative_offsets(self):
        assert GridPoint(0, 0, 0).angle_color(-360) == "#FF0000"


class TestCurves:
    """Sine and cubic sample series."""

    def test_line_sin_points_noise_bounded(self):
        df = line_sin_points(rng=random.Random(3))
        assert len(df) == 101
        for x, y in zip(df["x"], df["y"]):
            assert abs(y - math.sin(x * 0.2) * 100) <= 5 + 1e-9

    def test_plot_sin_points(self):
        df = plot_sin_points(rng=random.Random(3))
        assert len(df) == 100 * 5
        assert (df["val"] == 0.2).all()
        for x, y in zip(df["x"], df["y"]):
            assert abs(y - math.sin(x * 0.2) * 100) <= 25 + 1e-9

    def test_cubic_samples(self):
        df = cubic_samples()
        assert len(df) == 201
        assert df["x"].iloc[0] == -1.0
        assert df["x"].iloc[-1] == 1.0
        assert df["y"].tolist() == pytest.approx([x ** 3 for x in df["x"]])
