"""Matplotlib surface for PNG, PDF and other file formats."""

from pathlib import Path

from .. import colors
from ..layout.primitives import HAlign, VAlign
from .surface import Surface

HA = {HAlign.LEFT: "left", HAlign.CENTER: "center", HAlign.RIGHT: "right"}
VA = {VAlign.TOP: "top", VAlign.MIDDLE: "center", VAlign.BOTTOM: "bottom"}

POINTS_PER_INCH = 72


class MatplotlibSurface(Surface):
    """Draws onto a matplotlib figure sized in pixels.

    Every artist gets an increasing zorder, so matplotlib's per-artist default
    layering never changes the order primitives were emitted in.

    Args:
        output_path: File to save on finish; the format follows the suffix.
            If None, the figure is returned open and the caller closes it.
        dpi: Pixels per inch used to size the figure and convert stroke
            widths and font sizes to points.
    """

    def __init__(self, output_path: Path | None = None, dpi: int = 100):
        self.output_path = output_path
        self.dpi = dpi
        self.figure = None
        self._ax = None
        self._zorder = 0

    def _px_to_pt(self, pixels: float) -> float:
        return pixels * POINTS_PER_INCH / self.dpi

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    def begin(self, width: float, height: float) -> None:
        import matplotlib.pyplot as plt

        self._zorder = 0
        self.figure = plt.figure(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        self._ax = self.figure.add_axes([0, 0, 1, 1])
        self._ax.set_xlim(0, width)
        self._ax.set_ylim(height, 0)  # screen coordinates, y down
        self._ax.axis("off")

    def fill_polygon(self, points, color):
        from matplotlib.patches import Polygon

        self._ax.add_patch(
            Polygon(
                [tuple(p) for p in points],
                closed=True,
                facecolor=colors.to_rgba_floats(color),
                edgecolor="none",
                zorder=self._next_zorder(),
            )
        )

    def stroke_polygon(self, points, color, width):
        from matplotlib.patches import Polygon

        self._ax.add_patch(
            Polygon(
                [tuple(p) for p in points],
                closed=True,
                fill=False,
                edgecolor=colors.to_rgba_floats(color),
                linewidth=self._px_to_pt(width),
                joinstyle="round",
                zorder=self._next_zorder(),
            )
        )

    def line(self, start, end, color, width):
        self._ax.plot(
            [start.x, end.x],
            [start.y, end.y],
            color=colors.to_rgba_floats(color),
            linewidth=self._px_to_pt(width),
            solid_capstyle="butt",
            zorder=self._next_zorder(),
        )

    def text(self, text, anchor, h_align, v_align, size, color):
        self._ax.text(
            anchor.x,
            anchor.y,
            text,
            ha=HA[h_align],
            va=VA[v_align],
            fontsize=self._px_to_pt(size),
            color=colors.to_rgba_floats(color),
            zorder=self._next_zorder(),
        )

    def finish(self):
        if self.output_path is None:
            return self.figure

        import matplotlib.pyplot as plt

        self.figure.savefig(self.output_path, dpi=self.dpi, transparent=True)
        plt.close(self.figure)
        self.figure = None
        return Path(self.output_path)
