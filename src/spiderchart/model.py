"""Chart data and configuration values."""

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass, field, fields

from . import colors
from .errors import ConfigurationError

MIN_AXES = 3


@dataclass(frozen=True)
class Series:
    """One dataset drawn as a closed polygon over the axes.

    Values are copied into a tuple so the host can mutate its own list between
    renders without affecting a snapshot.
    """

    values: tuple[float, ...]
    fill_color: int
    stroke_color: int | None = None
    stroke_width: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    @property
    def has_stroke(self) -> bool:
        return self.stroke_color is not None and self.stroke_width > 0


@dataclass(frozen=True)
class ChartConfig:
    """Scalar and style settings for one render pass.

    Sizes are in density-independent units: stroke widths and the label margin
    are multiplied by ``density``, the label size by ``scaled_density``.
    """

    label_size: float = 12.0
    label_color: int = colors.DKGRAY
    label_margin: float = 8.0
    web_color: int = colors.LTGRAY
    web_background_color: int = colors.TRANSPARENT
    web_stroke_width: float = 0.5
    web_edge_color: int = colors.DKGRAY
    web_edge_stroke_width: float = 0.8
    rotation_angle: float = 270.0  # first axis points up
    ring_count: int | None = None  # None: one ring per axis
    max_value: float | None = None  # None: global maximum across all series
    draw_web: bool = True
    draw_labels: bool = True
    density: float = 1.0
    scaled_density: float = 1.0

    @property
    def label_size_px(self) -> float:
        return self.label_size * self.scaled_density

    @property
    def label_margin_px(self) -> float:
        return self.label_margin * self.density

    @property
    def web_stroke_width_px(self) -> float:
        return self.web_stroke_width * self.density

    @property
    def web_edge_stroke_width_px(self) -> float:
        return self.web_edge_stroke_width * self.density

    def resolved_ring_count(self, axis_count: int) -> int:
        return self.ring_count if self.ring_count is not None else axis_count

    @classmethod
    def from_dict(cls, data: dict) -> "ChartConfig":
        """Build a config from a mapping such as a YAML ``style`` section.

        Keys may use dashes or underscores. Color fields accept integers or
        hex strings.

        Raises:
            ConfigurationError: On unknown keys or unparsable colors.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"Unknown style setting: {key}", field=name)
            if name.endswith("_color"):
                try:
                    value = colors.parse_color(value)
                except ValueError as err:
                    raise ConfigurationError(str(err), field=name) from err
            kwargs[name] = value
        return cls(**kwargs)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_color(value, name: str, owner: str = "") -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFFFFFFFF:
        raise ConfigurationError(
            f"{owner}{name} must be a 0xAARRGGBB integer, got {value!r}", field=name
        )


def _check_non_negative(config: ChartConfig, name: str) -> None:
    value = getattr(config, name)
    if not _is_number(value) or not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}", field=name)


def validate_config(config: ChartConfig) -> None:
    """Check scalar settings.

    Raises:
        ConfigurationError: Naming the first violated setting.
    """
    for name in ("label_size", "label_margin", "web_stroke_width", "web_edge_stroke_width"):
        _check_non_negative(config, name)
    for name in ("density", "scaled_density"):
        value = getattr(config, name)
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value!r}", field=name)
    for name in ("label_color", "web_color", "web_background_color", "web_edge_color"):
        _check_color(getattr(config, name), name)
    if not _is_number(config.rotation_angle) or not math.isfinite(config.rotation_angle):
        raise ConfigurationError(
            f"rotation_angle must be a finite number, got {config.rotation_angle!r}",
            field="rotation_angle",
        )
    if config.ring_count is not None:
        if isinstance(config.ring_count, bool) or not isinstance(config.ring_count, int):
            raise ConfigurationError(
                f"ring_count must be an integer, got {config.ring_count!r}", field="ring_count"
            )
        if config.ring_count < 1:
            raise ConfigurationError(
                f"ring_count must be at least 1, got {config.ring_count}", field="ring_count"
            )
    if config.max_value is not None:
        if not _is_number(config.max_value) or not math.isfinite(config.max_value) or config.max_value < 0:
            raise ConfigurationError(
                f"max_value must be a non-negative number, got {config.max_value!r}",
                field="max_value",
            )
    for name in ("draw_web", "draw_labels"):
        value = getattr(config, name)
        if not isinstance(value, bool):
            raise ConfigurationError(f"{name} must be true or false, got {value!r}", field=name)


def validate_data(labels: Sequence[str], series: Sequence[Series]) -> None:
    """Check labels against series.

    Raises:
        ConfigurationError: Naming the first violated invariant.
    """
    if not labels and series:
        raise ConfigurationError("Series were given without labels", field="labels")
    if labels and not series:
        raise ConfigurationError("Labels were given without any series", field="series")
    if len(labels) < MIN_AXES:
        raise ConfigurationError(
            f"A radar chart needs at least {MIN_AXES} axes, got {len(labels)}",
            field="labels",
        )
    for i, label in enumerate(labels):
        if not isinstance(label, str):
            raise ConfigurationError(f"Label {i} is not a string: {label!r}", field="labels")

    n = len(labels)
    for i, entry in enumerate(series):
        if len(entry.values) != n:
            raise ConfigurationError(
                f"Series {i} has {len(entry.values)} values but there are {n} axes",
                field="series",
            )
        for value in entry.values:
            if not math.isfinite(value):
                raise ConfigurationError(f"Series {i} contains non-finite value {value}", field="series")
        if not _is_number(entry.stroke_width) or entry.stroke_width < 0:
            raise ConfigurationError(
                f"Series {i} has invalid stroke width {entry.stroke_width!r}", field="stroke_width"
            )
        _check_color(entry.fill_color, "fill_color", owner=f"Series {i} ")
        if entry.stroke_color is not None:
            _check_color(entry.stroke_color, "stroke_color", owner=f"Series {i} ")


@dataclass(frozen=True)
class ChartData:
    """Labels plus series for one render pass."""

    labels: tuple[str, ...] = ()
    series: tuple[Series, ...] = field(default_factory=tuple)

    @property
    def axis_count(self) -> int:
        return len(self.labels)
