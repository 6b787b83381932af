"""Series polygon construction."""

from collections.abc import Sequence

from ..errors import ConfigurationError
from ..model import Series
from .geometry import polar_to_point, radius_fraction
from .primitives import FillPolygon, Layer, Point, StrokePolygon


def series_vertices(
    series: Series,
    angles: Sequence[float],
    max_value: float,
    outer_radius: float,
    center: Point,
) -> tuple[Point, ...]:
    """One vertex per axis, in axis order."""
    if len(series.values) != len(angles):
        raise ConfigurationError(
            f"Series has {len(series.values)} values but there are {len(angles)} axes",
            field="series",
        )
    return tuple(
        polar_to_point(center, radius_fraction(value, max_value) * outer_radius, angle)
        for value, angle in zip(series.values, angles)
    )


def build_series_polygon(
    series: Series,
    angles: Sequence[float],
    max_value: float,
    outer_radius: float,
    center: Point,
) -> FillPolygon:
    """Filled polygon for one series.

    The polygon is implicitly closed: the last vertex connects back to the
    first. The fill color is used as given, alpha included.
    """
    points = series_vertices(series, angles, max_value, outer_radius, center)
    return FillPolygon(points=points, color=series.fill_color, layer=Layer.SERIES)


def build_series_primitives(
    series_list: Sequence[Series],
    angles: Sequence[float],
    max_value: float,
    outer_radius: float,
    center: Point,
) -> list[FillPolygon | StrokePolygon]:
    """Primitives for all series in insertion order.

    Later series are drawn on top of earlier ones. Coincident series are not
    merged, so overlapping translucent fills blend.
    """
    primitives: list[FillPolygon | StrokePolygon] = []
    for series in series_list:
        polygon = build_series_polygon(series, angles, max_value, outer_radius, center)
        primitives.append(polygon)
        if series.has_stroke:
            primitives.append(
                StrokePolygon(
                    points=polygon.points,
                    color=series.stroke_color,
                    width=series.stroke_width,
                    layer=Layer.SERIES,
                )
            )
    return primitives
