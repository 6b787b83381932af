"""Axis label placement."""

from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import ConfigurationError
from .geometry import polar_to_point
from .primitives import HAlign, Point, VAlign

# Axes within this many degrees of vertical get centered text,
# and within this many degrees of horizontal get vertically centered text.
ALIGN_TOLERANCE_DEG = 5.0

# Monospace estimate, no font backend is involved
CHAR_WIDTH_EM = 0.6
LINE_HEIGHT_EM = 1.4


@dataclass(frozen=True)
class LabelPlacement:
    text: str
    anchor: Point
    h_align: HAlign
    v_align: VAlign


def measure_text(text: str, font_size: float) -> tuple[float, float]:
    """Estimate the (width, height) of a single line of text."""
    return len(text) * font_size * CHAR_WIDTH_EM, font_size * LINE_HEIGHT_EM


def max_label_extent(labels: Sequence[str], font_size: float, margin: float) -> tuple[float, float]:
    """Widest and tallest label, each plus the margin.

    Returns (0, 0) when there are no labels.
    """
    if not labels:
        return 0.0, 0.0
    sizes = [measure_text(label, font_size) for label in labels]
    return (
        max(w for w, _ in sizes) + margin,
        max(h for _, h in sizes) + margin,
    )


def _distance_to(angle: float, target: float) -> float:
    diff = abs(angle - target) % 360.0
    return min(diff, 360.0 - diff)


def horizontal_alignment(angle: float) -> HAlign:
    """Bucket an axis angle (degrees, [0, 360)) into a text alignment."""
    if min(_distance_to(angle, 90.0), _distance_to(angle, 270.0)) <= ALIGN_TOLERANCE_DEG:
        return HAlign.CENTER
    if 90.0 < angle < 270.0:
        return HAlign.RIGHT
    return HAlign.LEFT


def vertical_alignment(angle: float) -> VAlign:
    """Bucket an axis angle (degrees, [0, 360)) into a vertical anchor."""
    if min(_distance_to(angle, 0.0), _distance_to(angle, 180.0)) <= ALIGN_TOLERANCE_DEG:
        return VAlign.MIDDLE
    if 180.0 < angle < 360.0:
        return VAlign.BOTTOM
    return VAlign.TOP


def place_labels(
    labels: Sequence[str],
    angles: Sequence[float],
    outer_radius: float,
    margin: float,
    center: Point,
) -> list[LabelPlacement]:
    """Anchor each label just outside the outer ring.

    Args:
        labels: Axis labels, in axis order.
        angles: Axis angles in degrees, same order as labels.
        outer_radius: Radius of the outermost ring.
        margin: Gap between the outer ring and the label anchor.
        center: Chart center.

    Returns:
        One placement per label.

    Raises:
        ConfigurationError: On a negative margin or radius, or when labels and
            angles differ in length.
    """
    if margin < 0:
        raise ConfigurationError(f"Label margin must be non-negative, got {margin}", field="label_margin")
    if outer_radius < 0:
        raise ConfigurationError(f"outer_radius must be non-negative, got {outer_radius}", field="outer_radius")
    if len(labels) != len(angles):
        raise ConfigurationError(
            f"Got {len(labels)} labels for {len(angles)} axes", field="labels"
        )

    placements = []
    for text, angle in zip(labels, angles):
        placements.append(
            LabelPlacement(
                text=text,
                anchor=polar_to_point(center, outer_radius + margin, angle),
                h_align=horizontal_alignment(angle),
                v_align=vertical_alignment(angle),
            )
        )
    return placements
