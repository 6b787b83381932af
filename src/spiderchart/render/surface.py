"""Render surface interface and the in-order primitive dispatcher."""

from collections.abc import Iterable

from ..layout.primitives import (
    FillPolygon,
    HAlign,
    LineSegment,
    Point,
    Primitive,
    StrokePolygon,
    Text,
    VAlign,
)


class Surface:
    """A drawing target.

    Surfaces draw primitives exactly in the order they receive them; layering
    is decided by the layout, never by the surface.
    """

    def begin(self, width: float, height: float) -> None:
        """Start a new drawing of the given size, discarding any previous one."""
        raise NotImplementedError

    def fill_polygon(self, points: tuple[Point, ...], color: int) -> None:
        raise NotImplementedError

    def stroke_polygon(self, points: tuple[Point, ...], color: int, width: float) -> None:
        raise NotImplementedError

    def line(self, start: Point, end: Point, color: int, width: float) -> None:
        raise NotImplementedError

    def text(
        self,
        text: str,
        anchor: Point,
        h_align: HAlign,
        v_align: VAlign,
        size: float,
        color: int,
    ) -> None:
        raise NotImplementedError

    def draw(self, primitive: Primitive) -> None:
        """Draw one primitive by dispatching on its type.

        Raises:
            TypeError: If the primitive type is unknown.
        """
        if isinstance(primitive, FillPolygon):
            self.fill_polygon(primitive.points, primitive.color)
        elif isinstance(primitive, StrokePolygon):
            self.stroke_polygon(primitive.points, primitive.color, primitive.width)
        elif isinstance(primitive, LineSegment):
            self.line(primitive.start, primitive.end, primitive.color, primitive.width)
        elif isinstance(primitive, Text):
            self.text(
                primitive.text,
                primitive.anchor,
                primitive.h_align,
                primitive.v_align,
                primitive.size,
                primitive.color,
            )
        else:
            raise TypeError(f"Unknown primitive: {primitive!r}")

    def finish(self):
        """Complete the drawing and return whatever the surface produces."""
        return None


class RecordingSurface(Surface):
    """Keeps the primitives it receives, for hosts that draw themselves."""

    def __init__(self):
        self.width = 0.0
        self.height = 0.0
        self.primitives: list[Primitive] = []
        self.frames = 0

    def begin(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.primitives = []

    def draw(self, primitive: Primitive) -> None:
        if not isinstance(primitive, (FillPolygon, StrokePolygon, LineSegment, Text)):
            raise TypeError(f"Unknown primitive: {primitive!r}")
        self.primitives.append(primitive)

    def finish(self) -> list[Primitive]:
        self.frames += 1
        return list(self.primitives)


def emit(
    primitives: Iterable[Primitive],
    surface: Surface,
    width: float,
    height: float,
):
    """Forward primitives to a surface in order.

    Args:
        primitives: Primitives in draw order.
        surface: Target surface.
        width: Surface width.
        height: Surface height.

    Returns:
        Whatever ``surface.finish()`` returns.
    """
    surface.begin(width, height)
    for primitive in primitives:
        surface.draw(primitive)
    return surface.finish()
