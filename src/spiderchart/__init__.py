"""Radar (spider) chart layout and rendering."""

from .errors import ConfigurationError, DegenerateInputWarning
from .layout import Scene, compose_chart
from .model import ChartConfig, ChartData, Series
from .widget import SpiderChart

__all__ = [
    "ConfigurationError",
    "DegenerateInputWarning",
    "ChartConfig",
    "ChartData",
    "Series",
    "Scene",
    "compose_chart",
    "SpiderChart",
]
