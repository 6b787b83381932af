"""Compose a complete chart into an ordered list of draw primitives."""

import logging
import warnings
from dataclasses import dataclass

from ..errors import DegenerateInputWarning
from ..model import ChartConfig, ChartData, validate_config, validate_data
from .geometry import Frame, axis_angles, compute_frame, global_max_value
from .labels import max_label_extent, place_labels
from .primitives import FillPolygon, Layer, LineSegment, Primitive, StrokePolygon, Text
from .series import build_series_primitives
from .web import build_web_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """Result of one render pass."""

    width: float
    height: float
    frame: Frame
    angles: tuple[float, ...]
    max_value: float
    series_count: int
    primitives: tuple[Primitive, ...]

    def by_layer(self, layer: Layer) -> list[Primitive]:
        return [p for p in self.primitives if p.layer == layer]


def compose_chart(data: ChartData, config: ChartConfig, width: float, height: float) -> Scene:
    """Lay out a chart and return its primitives in draw order.

    Order is background fill, rings from inner to outer, spokes, series in
    insertion order, then labels. Nothing is cached between calls.

    Args:
        data: Labels and series.
        config: Style and scalar settings.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        The composed Scene.

    Raises:
        ConfigurationError: If any input is invalid. Raised before any
            primitive is produced.
    """
    validate_config(config)
    validate_data(data.labels, data.series)

    n = data.axis_count
    font_size = config.label_size_px
    margin = config.label_margin_px

    if config.draw_labels:
        extent = max_label_extent(data.labels, font_size, margin)
    else:
        extent = (0.0, 0.0)
    frame = compute_frame(width, height, extent)
    center, radius = frame.center, frame.outer_radius

    angles = axis_angles(n, config.rotation_angle)
    max_value = config.max_value if config.max_value is not None else global_max_value(data.series)
    if max_value <= 0:
        warnings.warn(
            "All values are zero or negative; every series is drawn at the center point",
            DegenerateInputWarning,
            stacklevel=2,
        )

    grid = build_web_grid(n, config.rotation_angle, center, radius, config.resolved_ring_count(n))
    placements = place_labels(data.labels, angles, radius, margin, center) if config.draw_labels else []

    primitives: list[Primitive] = [
        FillPolygon(points=grid.background, color=config.web_background_color, layer=Layer.BACKGROUND)
    ]

    if config.draw_web:
        for ring in grid.rings[:-1]:
            primitives.append(
                StrokePolygon(ring, config.web_color, config.web_stroke_width_px, Layer.RING)
            )
    # The outer edge is drawn even with the web hidden
    primitives.append(
        StrokePolygon(grid.rings[-1], config.web_edge_color, config.web_edge_stroke_width_px, Layer.EDGE)
    )
    if config.draw_web:
        for start, end in grid.spokes:
            primitives.append(
                LineSegment(start, end, config.web_color, config.web_stroke_width_px, Layer.SPOKE)
            )

    primitives.extend(build_series_primitives(data.series, angles, max_value, radius, center))

    for placement in placements:
        primitives.append(
            Text(
                text=placement.text,
                anchor=placement.anchor,
                h_align=placement.h_align,
                v_align=placement.v_align,
                size=font_size,
                color=config.label_color,
            )
        )

    logger.debug(
        "Composed %d primitives for %d axes and %d series (radius %.1f)",
        len(primitives),
        n,
        len(data.series),
        radius,
    )
    return Scene(
        width=width,
        height=height,
        frame=frame,
        angles=angles,
        max_value=max_value,
        series_count=len(data.series),
        primitives=tuple(primitives),
    )
