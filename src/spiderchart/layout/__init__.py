"""Radar chart layout: geometry, web grid, labels and series polygons.

Everything in this package is pure: inputs in, primitives out.
"""

from .compose import Scene, compose_chart
from .geometry import Frame, axis_angles, compute_frame, compute_vertex, global_max_value
from .labels import LabelPlacement, measure_text, place_labels
from .primitives import (
    FillPolygon,
    HAlign,
    Layer,
    LineSegment,
    Point,
    StrokePolygon,
    Text,
    VAlign,
    primitives_to_dicts,
)
from .series import build_series_polygon
from .web import WebGrid, build_web_grid

__all__ = [
    "Point",
    "Layer",
    "HAlign",
    "VAlign",
    "FillPolygon",
    "StrokePolygon",
    "LineSegment",
    "Text",
    "primitives_to_dicts",
    "Frame",
    "axis_angles",
    "compute_vertex",
    "compute_frame",
    "global_max_value",
    "WebGrid",
    "build_web_grid",
    "LabelPlacement",
    "measure_text",
    "place_labels",
    "build_series_polygon",
    "Scene",
    "compose_chart",
]
