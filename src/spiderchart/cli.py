"""CLI for spiderchart."""

import argparse
import json
import warnings
from pathlib import Path

import yaml

from .colors import parse_color
from .errors import ConfigurationError, DegenerateInputWarning
from .layout import compose_chart, primitives_to_dicts
from .model import ChartConfig, ChartData, Series
from .render import MatplotlibSurface, PyvisSurface, SvgSurface, emit

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400

FORMATS = ("svg", "html", "png", "pdf")


def load_config(config_path: Path) -> dict:
    """Load a chart description from a YAML file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Dictionary of configuration values (empty for an empty file).
    """
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def parse_series(entries: list) -> list[Series]:
    """Build Series from the ``series`` section of a config file.

    Each entry is a mapping with ``values`` and ``color`` and optionally
    ``stroke_color`` and ``stroke_width``.

    Raises:
        ConfigurationError: If an entry is malformed.
    """
    series = []
    for i, entry in enumerate(entries or []):
        if not isinstance(entry, dict) or "values" not in entry or "color" not in entry:
            raise ConfigurationError(f"Series {i} needs 'values' and 'color'", field="series")
        try:
            stroke_color = entry.get("stroke_color", entry.get("stroke-color"))
            series.append(
                Series(
                    values=entry["values"],
                    fill_color=parse_color(entry["color"]),
                    stroke_color=parse_color(stroke_color) if stroke_color is not None else None,
                    stroke_width=float(entry.get("stroke_width", entry.get("stroke-width", 0.0))),
                )
            )
        except (TypeError, ValueError) as err:
            raise ConfigurationError(f"Series {i}: {err}", field="series") from err
    return series


def chart_from_config(config: dict) -> tuple[ChartData, ChartConfig]:
    """Build chart data and style from a loaded config mapping."""
    labels = config.get("labels") or []
    for i, label in enumerate(labels):
        if isinstance(label, bool) or not isinstance(label, (str, int, float)):
            raise ConfigurationError(f"Label {i} must be text or a number, got {label!r}", field="labels")
    data = ChartData(
        labels=tuple(str(label) for label in labels),
        series=tuple(parse_series(config.get("series"))),
    )
    style = ChartConfig.from_dict(config.get("style") or {})
    return data, style


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--config", type=Path, required=True, help="Path to YAML chart file")
    parser.add_argument("--width", type=float, help=f"Surface width (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=float, help=f"Surface height (default: {DEFAULT_HEIGHT})")
    parser.add_argument(
        "--rotation",
        type=float,
        help="Angle of the first axis in degrees, clockwise from 3 o'clock",
    )


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict:
    """Load the config file and merge command-line overrides into it."""
    if not args.config.exists():
        parser.error(f"config file not found: {args.config}")
    config = load_config(args.config)
    if not isinstance(config, dict):
        parser.error(f"{args.config} must contain a mapping")

    if args.width is None:
        args.width = float(config.get("width", DEFAULT_WIDTH))
    if args.height is None:
        args.height = float(config.get("height", DEFAULT_HEIGHT))
    if args.rotation is not None:
        config.setdefault("style", {})
        config["style"] = dict(config["style"] or {}, rotation_angle=args.rotation)
    return config


def compose_from_args(args: argparse.Namespace, parser: argparse.ArgumentParser):
    """Compose the scene described by the config file, reporting problems."""
    config = resolve_common_args(args, parser)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DegenerateInputWarning)
        try:
            data, style = chart_from_config(config)
            scene = compose_chart(data, style, args.width, args.height)
        except ConfigurationError as err:
            where = f" ({err.field})" if err.field else ""
            parser.error(f"invalid chart configuration{where}: {err}")
    for warning in caught:
        print(f"Warning: {warning.message}")
    return config, scene


def output_format(output: Path, requested: str | None) -> str:
    """Pick the output format from --format or the file suffix."""
    if requested:
        return requested
    suffix = output.suffix.lower().lstrip(".")
    if suffix in ("htm", "html"):
        return "html"
    return suffix if suffix in FORMATS else "svg"


def cmd_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Render the chart to a file."""
    config, scene = compose_from_args(args, parser)

    if args.output is None:
        args.output = Path(config.get("output", "chart.svg"))
    fmt = output_format(args.output, args.format or config.get("format"))
    if fmt not in FORMATS:
        parser.error(f"unsupported format: {fmt}")

    if fmt == "svg":
        surface = SvgSurface(args.output)
    elif fmt == "html":
        surface = PyvisSurface(args.output)
    else:
        surface = MatplotlibSurface(args.output, dpi=args.dpi)

    emit(scene.primitives, surface, scene.width, scene.height)
    print(f"Rendered {len(scene.angles)} axes, {scene.series_count} series")
    print(f"Wrote {args.output}")


def cmd_inspect(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Dump the primitive list as JSON."""
    _, scene = compose_from_args(args, parser)

    result = {
        "width": scene.width,
        "height": scene.height,
        "center": list(scene.frame.center),
        "outer_radius": scene.frame.outer_radius,
        "angles": list(scene.angles),
        "max_value": scene.max_value,
        "primitives": primitives_to_dicts(scene.primitives),
    }
    text = json.dumps(result, indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(text + "\n")
        print(f"Wrote {args.output}")
    else:
        print(text)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the spiderchart CLI."""
    parser = argparse.ArgumentParser(description="Render radar (spider) charts")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a chart to SVG, HTML, PNG or PDF")
    add_common_args(render_parser)
    render_parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: 'output' from the config, else chart.svg)",
    )
    render_parser.add_argument(
        "--format",
        choices=FORMATS,
        help="Output format (default: from the output file suffix)",
    )
    render_parser.add_argument(
        "--dpi",
        type=int,
        default=100,
        help="Resolution for PNG/PDF output (default: 100)",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Print the draw primitives as JSON")
    add_common_args(inspect_parser)
    inspect_parser.add_argument("--output", type=Path, help="Write JSON here instead of stdout")

    args = parser.parse_args(argv)

    if args.command == "render":
        cmd_render(args, render_parser)
    elif args.command == "inspect":
        cmd_inspect(args, inspect_parser)
    else:
        # No subcommand provided - show help
        parser.print_help()


if __name__ == "__main__":
    main()
