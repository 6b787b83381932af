"""Pytest fixtures for spiderchart tests."""

import pytest

from spiderchart import colors
from spiderchart.model import ChartConfig, ChartData, Series
from spiderchart.layout.primitives import Point


@pytest.fixture
def center() -> Point:
    return Point(200.0, 200.0)


@pytest.fixture
def abc_data() -> ChartData:
    """Three axes, one series: A=10, B=20, C=0."""
    return ChartData(
        labels=("A", "B", "C"),
        series=(Series(values=[10, 20, 0], fill_color=colors.argb(128, 255, 0, 0)),),
    )


@pytest.fixture
def sample_data() -> ChartData:
    """Six axes, two translucent series."""
    labels = ("ART0", "ART1", "ART2", "ART3", "ART4", "ART5")
    series = (
        Series(values=[45, 82, 76, 55, 55, 55], fill_color=colors.argb(125, 193, 230, 219)),
        Series(values=[85, 72, 41, 75, 75, 75], fill_color=colors.argb(125, 209, 217, 234)),
    )
    return ChartData(labels=labels, series=series)


@pytest.fixture
def sample_config() -> ChartConfig:
    """Styled config with a fixed 0..100 scale."""
    return ChartConfig(
        label_size=13,
        label_color=colors.GRAY,
        label_margin=10,
        web_color=colors.GRAY,
        web_background_color=colors.WHITE,
        web_stroke_width=1,
        web_edge_color=colors.BLACK,
        web_edge_stroke_width=1.5,
        max_value=100,
    )


@pytest.fixture
def chart_yaml(tmp_path):
    """A chart description file for CLI tests."""
    path = tmp_path / "chart.yaml"
    path.write_text(
        """
labels: [Speed, Power, Range, Cost]
series:
  - values: [3, 4, 2, 5]
    color: "#80FF0000"
  - values: [5, 1, 4, 2]
    color: "#800000FF"
    stroke_color: "#0000FF"
    stroke_width: 1.5
style:
  label_size: 12
  web_background_color: "#FFFFFF"
width: 300
height: 300
"""
    )
    return path
