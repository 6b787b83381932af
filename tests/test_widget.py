"""Tests for the SpiderChart widget."""

import pytest

from spiderchart import colors
from spiderchart.errors import ConfigurationError
from spiderchart.layout.primitives import Layer
from spiderchart.model import Series
from spiderchart.render import RecordingSurface, SvgSurface
from spiderchart.widget import SpiderChart


@pytest.fixture
def chart() -> SpiderChart:
    """Widget configured like the sample host activity."""
    chart = SpiderChart(RecordingSurface(), 480, 480)
    chart.set_label_size(13)
    chart.set_label_color(colors.GRAY)
    chart.set_label_margin_size(10)
    chart.set_web_color(colors.GRAY)
    chart.set_web_background_color(colors.WHITE)
    chart.set_web_stroke_width(1)
    chart.set_web_edge_color(colors.BLACK)
    chart.set_web_edge_stroke_width(1.5)
    chart.set_rotation_angle(270)
    chart.set_labels(["ART0", "ART1", "ART2", "ART3", "ART4", "ART5"])
    chart.set_data(
        [
            Series([45, 82, 76, 55, 55, 55], colors.argb(125, 193, 230, 219)),
            Series([85, 72, 41, 75, 75, 75], colors.argb(125, 209, 217, 234)),
        ]
    )
    return chart


class TestSetters:
    """Setters only store state."""

    def test_setters_update_config(self, chart):
        config = chart.config
        assert config.label_size == 13
        assert config.label_margin == 10
        assert config.web_background_color == colors.WHITE
        assert config.web_edge_stroke_width == 1.5
        assert config.rotation_angle == 270

    def test_invalid_setter_value_is_deferred(self, chart):
        """A bad value is accepted by the setter and rejected by refresh()."""
        chart.set_web_stroke_width(-2)
        with pytest.raises(ConfigurationError) as excinfo:
            chart.refresh()
        assert excinfo.value.field == "web_stroke_width"

    def test_labels_copied(self, chart):
        labels = ["a", "b", "c"]
        chart.set_labels(labels)
        labels.append("d")
        assert chart.labels == ["a", "b", "c"]


class TestRefresh:
    """Tests for refresh()."""

    def test_draws_to_surface(self, chart):
        scene = chart.refresh()

        assert chart.surface.primitives == list(scene.primitives)
        assert chart.surface.width == 480
        assert chart.last_scene is scene

    def test_refresh_twice_is_identical(self, chart):
        first = chart.refresh()
        first_drawn = list(chart.surface.primitives)
        second = chart.refresh()

        assert first.primitives == second.primitives
        assert chart.surface.primitives == first_drawn
        assert chart.surface.frames == 2

    def test_invalid_state_draws_nothing(self):
        surface = RecordingSurface()
        chart = SpiderChart(surface, 300, 300)
        chart.set_labels(["a", "b"])
        chart.set_data([Series([1, 2], colors.BLACK)])

        with pytest.raises(ConfigurationError):
            chart.refresh()
        assert surface.frames == 0
        assert surface.primitives == []

    @pytest.mark.parametrize(
        "series, setter, field_name",
        [
            (Series([1, 2, 3], fill_color="#ff0000"), None, "fill_color"),
            (Series([1, 2, 3], colors.BLACK), ("set_label_color", -5), "label_color"),
            (Series([1, 2, 3], colors.BLACK), ("set_ring_count", 2.5), "ring_count"),
        ],
    )
    def test_bad_values_draw_nothing(self, series, setter, field_name):
        surface = RecordingSurface()
        chart = SpiderChart(surface, 300, 300)
        chart.set_labels(["a", "b", "c"])
        chart.set_data([series])
        if setter:
            name, value = setter
            getattr(chart, name)(value)

        with pytest.raises(ConfigurationError) as excinfo:
            chart.refresh()
        assert excinfo.value.field == field_name
        assert surface.frames == 0
        assert chart.last_scene is None

    def test_empty_chart_rejected(self):
        chart = SpiderChart(RecordingSurface(), 300, 300)
        with pytest.raises(ConfigurationError):
            chart.refresh()

    def test_toggles(self, chart):
        chart.set_draw_web(False)
        chart.set_draw_labels(False)
        scene = chart.refresh()

        assert scene.by_layer(Layer.SPOKE) == []
        assert scene.by_layer(Layer.LABEL) == []

    def test_ring_count_and_max_value(self, chart):
        chart.set_ring_count(4)
        chart.set_max_value(100)
        scene = chart.refresh()

        assert len(scene.by_layer(Layer.RING)) == 3
        assert scene.max_value == 100

    def test_resize(self, chart):
        small = chart.refresh().frame.outer_radius
        chart.set_size(960, 960)
        large = chart.refresh().frame.outer_radius
        assert large > small

    def test_svg_surface_output(self, chart, tmp_path):
        output = tmp_path / "chart.svg"
        chart.surface = SvgSurface(output)
        chart.refresh()

        assert output.exists()
        assert chart.last_output == output.read_text()
