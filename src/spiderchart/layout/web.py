"""Web grid construction: concentric rings and spokes."""

from dataclasses import dataclass

from ..errors import ConfigurationError
from ..model import MIN_AXES
from .geometry import axis_angles, regular_polygon
from .primitives import Point


@dataclass(frozen=True)
class WebGrid:
    """Rings ordered from innermost to outermost, plus one spoke per axis."""

    rings: tuple[tuple[Point, ...], ...]
    spokes: tuple[tuple[Point, Point], ...]

    @property
    def background(self) -> tuple[Point, ...]:
        """Outermost ring, filled behind everything else."""
        return self.rings[-1]


def ring_radii(outer_radius: float, ring_count: int) -> list[float]:
    """Radii outer_radius * k / ring_count for k = 1..ring_count."""
    return [outer_radius * k / ring_count for k in range(1, ring_count + 1)]


def build_web_grid(
    n: int,
    rotation_angle: float,
    center: Point,
    outer_radius: float,
    ring_count: int,
) -> WebGrid:
    """Build the background web.

    Args:
        n: Number of axes.
        rotation_angle: Angle of the first axis in degrees.
        center: Chart center.
        outer_radius: Radius of the outermost ring.
        ring_count: Number of concentric rings.

    Returns:
        WebGrid with ``ring_count`` regular n-gons and n spokes.

    Raises:
        ConfigurationError: On fewer than 3 axes, a negative radius or a ring
            count below 1.
    """
    if n < MIN_AXES:
        raise ConfigurationError(f"A radar chart needs at least {MIN_AXES} axes, got {n}", field="labels")
    if outer_radius < 0:
        raise ConfigurationError(f"outer_radius must be non-negative, got {outer_radius}", field="outer_radius")
    if ring_count < 1:
        raise ConfigurationError(f"ring_count must be at least 1, got {ring_count}", field="ring_count")

    angles = axis_angles(n, rotation_angle)
    rings = tuple(regular_polygon(angles, center, r) for r in ring_radii(outer_radius, ring_count))
    spokes = tuple((center, vertex) for vertex in rings[-1])
    return WebGrid(rings=rings, spokes=spokes)
