"""Stateful chart widget with a setter-style API.

Setters only store values. ``refresh()`` snapshots them into an immutable
``ChartConfig`` and ``ChartData``, composes the scene and forwards it to the
surface. All validation happens in ``refresh()``, so the chart may be in an
inconsistent state between setter calls.

The widget is not thread-safe: set state and call ``refresh()`` from the same
thread.
"""

import dataclasses
from collections.abc import Sequence

from .layout.compose import Scene, compose_chart
from .model import ChartConfig, ChartData, Series
from .render.surface import Surface, emit


class SpiderChart:
    """Radar chart bound to a render surface.

    Args:
        surface: Where ``refresh()`` draws.
        width: Surface width in pixels.
        height: Surface height in pixels.
        config: Initial settings; defaults to ``ChartConfig()``.
    """

    def __init__(
        self,
        surface: Surface,
        width: float,
        height: float,
        config: ChartConfig | None = None,
    ):
        self.surface = surface
        self.width = width
        self.height = height
        self._config = config or ChartConfig()
        self._labels: list[str] = []
        self._series: list[Series] = []
        self.last_scene: Scene | None = None
        self.last_output = None

    def _update(self, **changes) -> None:
        self._config = dataclasses.replace(self._config, **changes)

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    @property
    def data(self) -> list[Series]:
        return list(self._series)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def set_labels(self, labels: Sequence[str]) -> None:
        self._labels = list(labels)

    def set_data(self, series: Sequence[Series]) -> None:
        self._series = list(series)

    def set_label_size(self, size: float) -> None:
        """Label font size in scaled pixels."""
        self._update(label_size=size)

    def set_label_color(self, color: int) -> None:
        """Label color as 0xAARRGGBB."""
        self._update(label_color=color)

    def set_label_margin_size(self, size: float) -> None:
        """Gap between the outer ring and the labels, in density pixels."""
        self._update(label_margin=size)

    def set_web_color(self, color: int) -> None:
        self._update(web_color=color)

    def set_web_background_color(self, color: int) -> None:
        self._update(web_background_color=color)

    def set_web_stroke_width(self, width: float) -> None:
        self._update(web_stroke_width=width)

    def set_web_edge_color(self, color: int) -> None:
        self._update(web_edge_color=color)

    def set_web_edge_stroke_width(self, width: float) -> None:
        self._update(web_edge_stroke_width=width)

    def set_rotation_angle(self, degrees: float) -> None:
        self._update(rotation_angle=degrees)

    def set_ring_count(self, count: int | None) -> None:
        """Number of web rings; None draws one ring per axis."""
        self._update(ring_count=count)

    def set_max_value(self, value: float | None) -> None:
        """Value mapped to the outer ring; None uses the largest value in the data."""
        self._update(max_value=value)

    def set_draw_web(self, enabled: bool) -> None:
        self._update(draw_web=enabled)

    def set_draw_labels(self, enabled: bool) -> None:
        self._update(draw_labels=enabled)

    def refresh(self) -> Scene:
        """Recompute the chart and draw it.

        Returns:
            The composed scene. The surface's own result is kept in
            ``last_output``.

        Raises:
            ConfigurationError: If the current state is invalid. Nothing is
                drawn in that case.
        """
        data = ChartData(labels=tuple(self._labels), series=tuple(self._series))
        scene = compose_chart(data, self._config, self.width, self.height)
        self.last_output = emit(scene.primitives, self.surface, scene.width, scene.height)
        self.last_scene = scene
        return scene
