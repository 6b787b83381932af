"""Polar to Cartesian math for radar chart layout.

Coordinates are screen coordinates: origin at the top-left, y grows downwards.
An angle of 0 degrees points to 3 o'clock and angles increase clockwise, so a
rotation of 270 degrees puts the first axis at 12 o'clock.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import ConfigurationError
from .primitives import Point


@dataclass(frozen=True)
class Frame:
    """Center and outer radius of the chart on a surface."""

    center: Point
    outer_radius: float


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    normalized = angle % 360.0
    # A tiny negative input rounds up to exactly 360.0
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def axis_angles(n: int, rotation_angle: float) -> tuple[float, ...]:
    """Angle in degrees of each axis, first axis at ``rotation_angle``.

    Args:
        n: Number of axes.
        rotation_angle: Offset of the first axis in degrees.

    Returns:
        Tuple of n angles in [0, 360), equally spaced by 360 / n.
    """
    step = 360.0 / n
    return tuple(normalize_angle(rotation_angle + i * step) for i in range(n))


def radius_fraction(value: float, max_value: float) -> float:
    """Map a value onto [0, 1] of the outer radius.

    Values are clamped to [0, max_value]. A zero max_value maps everything to
    the center rather than dividing by zero.
    """
    if max_value <= 0:
        return 0.0
    return min(max(value, 0.0), max_value) / max_value


def polar_to_point(center: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``center`` along ``angle`` degrees."""
    theta = math.radians(angle)
    return Point(center.x + radius * math.cos(theta), center.y + radius * math.sin(theta))


def compute_vertex(
    axis_index: int,
    value: float,
    max_value: float,
    outer_radius: float,
    center: Point,
    rotation_angle: float,
    axis_count: int,
) -> Point:
    """Compute the vertex of one value on its axis.

    Args:
        axis_index: Index of the axis, 0-based.
        value: Value on that axis.
        max_value: Value that maps to the outer radius.
        outer_radius: Distance from center to the rim of the chart.
        center: Chart center.
        rotation_angle: Angle of the first axis in degrees.
        axis_count: Total number of axes.

    Returns:
        The (x, y) vertex.
    """
    angle = normalize_angle(rotation_angle + axis_index * (360.0 / axis_count))
    r = radius_fraction(value, max_value)
    return polar_to_point(center, r * outer_radius, angle)


def regular_polygon(angles: Sequence[float], center: Point, radius: float) -> tuple[Point, ...]:
    """Vertices of a regular polygon with one corner per axis angle."""
    return tuple(polar_to_point(center, radius, angle) for angle in angles)


def global_max_value(series) -> float:
    """Largest value across all axes of all series, or 0.0 if there are none.

    All series share this one scale so they stay visually comparable.
    """
    return max((v for entry in series for v in entry.values), default=0.0)


def compute_frame(
    width: float,
    height: float,
    label_extent: tuple[float, float] = (0.0, 0.0),
) -> Frame:
    """Fit the chart into a surface, leaving room for labels on every side.

    Args:
        width: Surface width.
        height: Surface height.
        label_extent: (width, height) reserved around the chart for labels,
            including the label margin.

    Returns:
        Frame centered on the surface.

    Raises:
        ConfigurationError: If the labels leave no room for the chart.
    """
    if width < 0 or height < 0:
        raise ConfigurationError(f"Surface size must be non-negative, got {width}x{height}", field="size")

    label_width, label_height = label_extent
    radius = min((width - label_width * 2) / 2, (height - label_height * 2) / 2)
    if radius < 0:
        raise ConfigurationError(
            f"Surface {width}x{height} is too small for the labels (outer radius {radius:.1f})",
            field="outer_radius",
        )
    return Frame(center=Point(width / 2, height / 2), outer_radius=radius)
