"""Tests for labels.py module."""

import math

import pytest

from spiderchart.errors import ConfigurationError
from spiderchart.layout.geometry import axis_angles
from spiderchart.layout.labels import (
    horizontal_alignment,
    max_label_extent,
    measure_text,
    place_labels,
    vertical_alignment,
)
from spiderchart.layout.primitives import HAlign, VAlign


class TestAlignment:
    """Tests for the angle bucketing of label alignment."""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (270, HAlign.CENTER),  # top
            (90, HAlign.CENTER),  # bottom
            (273, HAlign.CENTER),
            (0, HAlign.LEFT),  # right side, text grows to the right
            (330, HAlign.LEFT),
            (180, HAlign.RIGHT),  # left side, text grows to the left
            (120, HAlign.RIGHT),
        ],
    )
    def test_horizontal(self, angle, expected):
        assert horizontal_alignment(angle) == expected

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0, VAlign.MIDDLE),
            (180, VAlign.MIDDLE),
            (358, VAlign.MIDDLE),
            (270, VAlign.BOTTOM),  # upper half, text above the anchor
            (200, VAlign.BOTTOM),
            (90, VAlign.TOP),  # lower half, text below the anchor
            (30, VAlign.TOP),
        ],
    )
    def test_vertical(self, angle, expected):
        assert vertical_alignment(angle) == expected

    def test_same_angle_same_alignment(self):
        """Bucketing is a pure function of the angle."""
        for angle in (0.0, 44.9, 95.0, 181.0, 269.999):
            assert horizontal_alignment(angle) == horizontal_alignment(angle)
            assert vertical_alignment(angle) == vertical_alignment(angle)


class TestMeasureText:
    """Tests for the text size estimate."""

    def test_width_scales_with_length(self):
        short_w, short_h = measure_text("ab", 10)
        long_w, long_h = measure_text("abcd", 10)
        assert long_w == pytest.approx(2 * short_w)
        assert short_h == long_h

    def test_extent_includes_margin(self):
        width, height = max_label_extent(["a", "abcd"], 10, 5)
        assert width == pytest.approx(measure_text("abcd", 10)[0] + 5)
        assert height == pytest.approx(measure_text("a", 10)[1] + 5)

    def test_no_labels(self):
        assert max_label_extent([], 10, 5) == (0.0, 0.0)


class TestPlaceLabels:
    """Tests for place_labels function."""

    def test_anchor_outside_outer_ring(self, center):
        """Anchors sit at outer_radius + margin along each axis."""
        labels = ["A", "B", "C", "D", "E"]
        angles = axis_angles(5, 270)
        placements = place_labels(labels, angles, 100, 8, center)

        assert [p.text for p in placements] == labels
        for placement, angle in zip(placements, angles):
            dx = placement.anchor.x - center.x
            dy = placement.anchor.y - center.y
            assert math.hypot(dx, dy) == pytest.approx(108)
            assert math.degrees(math.atan2(dy, dx)) % 360 == pytest.approx(angle)

    def test_top_label_centered_above(self, center):
        placements = place_labels(["Top", "R", "L"], axis_angles(3, 270), 100, 8, center)
        top = placements[0]
        assert top.h_align == HAlign.CENTER
        assert top.v_align == VAlign.BOTTOM

    def test_negative_margin_rejected(self, center):
        with pytest.raises(ConfigurationError) as excinfo:
            place_labels(["A", "B", "C"], axis_angles(3, 0), 100, -1, center)
        assert excinfo.value.field == "label_margin"

    def test_length_mismatch_rejected(self, center):
        with pytest.raises(ConfigurationError):
            place_labels(["A", "B"], axis_angles(3, 0), 100, 8, center)
