"""Tests for series.py module."""

import math

import pytest

from spiderchart import colors
from spiderchart.errors import ConfigurationError
from spiderchart.layout.geometry import axis_angles
from spiderchart.layout.primitives import FillPolygon, Layer, StrokePolygon
from spiderchart.layout.series import build_series_polygon, build_series_primitives
from spiderchart.model import Series


class TestBuildSeriesPolygon:
    """Tests for build_series_polygon function."""

    def test_one_vertex_per_axis(self, center):
        series = Series([1, 2, 3, 4], colors.argb(100, 0, 0, 255))
        polygon = build_series_polygon(series, axis_angles(4, 0), 4, 100, center)

        assert isinstance(polygon, FillPolygon)
        assert len(polygon.points) == 4
        assert polygon.layer == Layer.SERIES

    def test_fill_color_used_as_given(self, center):
        color = colors.argb(77, 10, 20, 30)
        polygon = build_series_polygon(Series([1, 1, 1], color), axis_angles(3, 0), 1, 10, center)
        assert polygon.color == color

    def test_radii_follow_values(self, center):
        series = Series([5, 10, 0], 0)
        polygon = build_series_polygon(series, axis_angles(3, 0), 10, 100, center)
        radii = [math.hypot(p.x - center.x, p.y - center.y) for p in polygon.points]
        assert radii == pytest.approx([50, 100, 0], abs=1e-9)

    def test_length_mismatch_rejected(self, center):
        with pytest.raises(ConfigurationError):
            build_series_polygon(Series([1, 2], 0), axis_angles(3, 0), 2, 100, center)


class TestBuildSeriesPrimitives:
    """Tests for build_series_primitives function."""

    def test_identical_series_not_deduplicated(self, center):
        """Two coincident series still give two fills so their alpha blends."""
        a = Series([3, 3, 3], colors.argb(100, 255, 0, 0))
        b = Series([3, 3, 3], colors.argb(100, 255, 0, 0))
        primitives = build_series_primitives([a, b], axis_angles(3, 0), 3, 50, center)

        fills = [p for p in primitives if isinstance(p, FillPolygon)]
        assert len(fills) == 2
        assert fills[0].points == fills[1].points

    def test_insertion_order_kept(self, center):
        red = Series([1, 2, 3], colors.rgb(255, 0, 0))
        blue = Series([3, 2, 1], colors.rgb(0, 0, 255))
        primitives = build_series_primitives([red, blue], axis_angles(3, 0), 3, 50, center)
        assert [p.color for p in primitives] == [red.fill_color, blue.fill_color]

    def test_no_stroke_by_default(self, center):
        primitives = build_series_primitives([Series([1, 2, 3], 0)], axis_angles(3, 0), 3, 50, center)
        assert not any(isinstance(p, StrokePolygon) for p in primitives)

    def test_stroke_follows_fill(self, center):
        series = Series([1, 2, 3], colors.argb(80, 0, 0, 255), stroke_color=colors.BLACK, stroke_width=2)
        fill, stroke = build_series_primitives([series], axis_angles(3, 0), 3, 50, center)

        assert isinstance(fill, FillPolygon)
        assert isinstance(stroke, StrokePolygon)
        assert stroke.points == fill.points
        assert stroke.width == 2
