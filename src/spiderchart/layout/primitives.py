"""Draw primitives emitted by a render pass."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union


class Point(NamedTuple):
    x: float
    y: float


class Layer(Enum):
    """Which part of the chart a primitive belongs to, in back-to-front order."""

    BACKGROUND = "background"
    RING = "ring"
    EDGE = "edge"  # outermost ring
    SPOKE = "spoke"
    SERIES = "series"
    LABEL = "label"


class HAlign(Enum):
    LEFT = "left"  # text extends to the right of the anchor
    CENTER = "center"
    RIGHT = "right"  # text extends to the left of the anchor


class VAlign(Enum):
    TOP = "top"  # text hangs below the anchor
    MIDDLE = "middle"
    BOTTOM = "bottom"  # text sits above the anchor


@dataclass(frozen=True)
class FillPolygon:
    points: tuple[Point, ...]
    color: int
    layer: Layer


@dataclass(frozen=True)
class StrokePolygon:
    points: tuple[Point, ...]
    color: int
    width: float
    layer: Layer


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point
    color: int
    width: float
    layer: Layer


@dataclass(frozen=True)
class Text:
    text: str
    anchor: Point
    h_align: HAlign
    v_align: VAlign
    size: float
    color: int
    layer: Layer = Layer.LABEL


Primitive = Union[FillPolygon, StrokePolygon, LineSegment, Text]


def _point(p: Point) -> list[float]:
    return [round(p.x, 4), round(p.y, 4)]


def primitive_to_dict(primitive: Primitive) -> dict:
    """Convert a primitive to a JSON-serializable dict."""
    if isinstance(primitive, FillPolygon):
        return {
            "type": "fill_polygon",
            "layer": primitive.layer.value,
            "points": [_point(p) for p in primitive.points],
            "color": f"#{primitive.color:08x}",
        }
    if isinstance(primitive, StrokePolygon):
        return {
            "type": "stroke_polygon",
            "layer": primitive.layer.value,
            "points": [_point(p) for p in primitive.points],
            "color": f"#{primitive.color:08x}",
            "width": primitive.width,
        }
    if isinstance(primitive, LineSegment):
        return {
            "type": "line",
            "layer": primitive.layer.value,
            "start": _point(primitive.start),
            "end": _point(primitive.end),
            "color": f"#{primitive.color:08x}",
            "width": primitive.width,
        }
    if isinstance(primitive, Text):
        return {
            "type": "text",
            "layer": primitive.layer.value,
            "text": primitive.text,
            "anchor": _point(primitive.anchor),
            "h_align": primitive.h_align.value,
            "v_align": primitive.v_align.value,
            "size": primitive.size,
            "color": f"#{primitive.color:08x}",
        }
    raise TypeError(f"Unknown primitive: {primitive!r}")


def primitives_to_dicts(primitives) -> list[dict]:
    return [primitive_to_dict(p) for p in primitives]
