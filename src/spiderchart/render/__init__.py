"""Render surfaces that receive draw primitives in order."""

from .matplotlib_canvas import MatplotlibSurface
from .pyvis_html import PyvisSurface, build_stroke_graph
from .surface import RecordingSurface, Surface, emit
from .svg import SvgSurface

__all__ = [
    "Surface",
    "RecordingSurface",
    "emit",
    "SvgSurface",
    "PyvisSurface",
    "build_stroke_graph",
    "MatplotlibSurface",
]
