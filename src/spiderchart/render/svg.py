"""Standalone SVG surface."""

from html import escape
from pathlib import Path

from .. import colors
from ..layout.primitives import HAlign, Point, VAlign
from .surface import Surface

TEXT_ANCHORS = {
    HAlign.LEFT: "start",
    HAlign.CENTER: "middle",
    HAlign.RIGHT: "end",
}

BASELINES = {
    VAlign.TOP: "hanging",
    VAlign.MIDDLE: "central",
    VAlign.BOTTOM: "alphabetic",
}


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _points_attr(points: tuple[Point, ...]) -> str:
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)


def _paint(attr: str, color: int) -> str:
    """Color attribute plus its opacity, e.g. fill="#ff0000" fill-opacity="0.5"."""
    return f'{attr}="{colors.to_hex(color)}" {attr}-opacity="{colors.opacity(color)}"'


class SvgSurface(Surface):
    """Builds an SVG document, optionally writing it to ``output_path``.

    Args:
        output_path: File to write on finish. If None, the document is only
            returned.
        font_family: Font family for labels.
    """

    def __init__(self, output_path: Path | None = None, font_family: str = "sans-serif"):
        self.output_path = output_path
        self.font_family = font_family
        self._elements: list[str] = []
        self._width = 0.0
        self._height = 0.0

    def begin(self, width: float, height: float) -> None:
        self._elements = []
        self._width = width
        self._height = height

    def fill_polygon(self, points, color):
        self._elements.append(
            f'  <polygon points="{_points_attr(points)}" {_paint("fill", color)} stroke="none"/>'
        )

    def stroke_polygon(self, points, color, width):
        self._elements.append(
            f'  <polygon points="{_points_attr(points)}" fill="none" '
            f'{_paint("stroke", color)} stroke-width="{_fmt(width)}" stroke-linejoin="round"/>'
        )

    def line(self, start, end, color, width):
        self._elements.append(
            f'  <line x1="{_fmt(start.x)}" y1="{_fmt(start.y)}" x2="{_fmt(end.x)}" y2="{_fmt(end.y)}" '
            f'{_paint("stroke", color)} stroke-width="{_fmt(width)}"/>'
        )

    def text(self, text, anchor, h_align, v_align, size, color):
        self._elements.append(
            f'  <text x="{_fmt(anchor.x)}" y="{_fmt(anchor.y)}" '
            f'text-anchor="{TEXT_ANCHORS[h_align]}" dominant-baseline="{BASELINES[v_align]}" '
            f'font-family="{escape(self.font_family)}" font-size="{_fmt(size)}" '
            f'{_paint("fill", color)}>{escape(text)}</text>'
        )

    def finish(self) -> str:
        width, height = _fmt(self._width), _fmt(self._height)
        svg = (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">\n' + "\n".join(self._elements) + "\n</svg>\n"
        )
        if self.output_path is not None:
            with open(self.output_path, "w") as f:
                f.write(svg)
        return svg
