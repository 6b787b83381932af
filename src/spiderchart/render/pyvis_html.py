"""Interactive HTML surface using pyvis.

Strokes become fixed-position vis-network edges between shared vertices, so
the web can be zoomed, dragged and hovered. Fills and text are painted onto
the network canvas by an injected script. To keep the draw order intact the
primitive stream is split into three parts:

- prefix: everything before the first stroke, painted in ``beforeDrawing``
- edge run: the first contiguous run of strokes, drawn as network edges
- suffix: everything after it, painted in ``afterDrawing``
"""

import json
from pathlib import Path

import networkx as nx

from .. import colors
from ..layout.primitives import Point
from .surface import Surface


def vertex_id(point: Point) -> str:
    """Node id for a vertex; points closer than 0.01 px share a node."""
    return f"{point.x:.2f},{point.y:.2f}"


def build_stroke_graph(strokes: list[dict]) -> nx.MultiGraph:
    """Build the stroke mesh as a graph of shared vertices.

    Args:
        strokes: Stroke ops with "points" (a closed polygon if "closed" is
            true, otherwise a single segment), "color" and "width".

    Returns:
        MultiGraph with one node per distinct vertex (attributes x, y) and one
        edge per drawn segment (attributes color, width, order). Zero-length
        segments are dropped.
    """
    graph = nx.MultiGraph()
    order = 0
    for stroke in strokes:
        points = [Point(*p) for p in stroke["points"]]
        if stroke.get("closed"):
            segments = list(zip(points, points[1:] + points[:1]))
        else:
            segments = list(zip(points, points[1:]))

        for start, end in segments:
            u, v = vertex_id(start), vertex_id(end)
            if u == v:
                continue
            graph.add_node(u, x=start.x, y=start.y)
            graph.add_node(v, x=end.x, y=end.y)
            graph.add_edge(u, v, color=stroke["color"], width=stroke["width"], order=order)
            order += 1
    return graph


class PyvisSurface(Surface):
    """Writes the chart as an interactive HTML page.

    Args:
        output_path: HTML file to write.
        bgcolor: Page background color.
    """

    def __init__(self, output_path: Path, bgcolor: str = "#ffffff"):
        self.output_path = Path(output_path)
        self.bgcolor = bgcolor
        self._ops: list[dict] = []
        self._width = 0.0
        self._height = 0.0

    def begin(self, width: float, height: float) -> None:
        self._ops = []
        self._width = width
        self._height = height

    def fill_polygon(self, points, color):
        self._ops.append(
            {"op": "fill", "points": [list(p) for p in points], "color": colors.to_css(color)}
        )

    def stroke_polygon(self, points, color, width):
        self._ops.append(
            {
                "op": "stroke",
                "closed": True,
                "points": [list(p) for p in points],
                "color": colors.to_css(color),
                "width": width,
            }
        )

    def line(self, start, end, color, width):
        self._ops.append(
            {
                "op": "stroke",
                "closed": False,
                "points": [list(start), list(end)],
                "color": colors.to_css(color),
                "width": width,
            }
        )

    def text(self, text, anchor, h_align, v_align, size, color):
        self._ops.append(
            {
                "op": "text",
                "text": text,
                "x": anchor.x,
                "y": anchor.y,
                "align": h_align.value,
                "baseline": v_align.value,
                "size": size,
                "color": colors.to_css(color),
            }
        )

    def split_ops(self) -> tuple[list[dict], list[dict], list[dict]]:
        """Split recorded ops into (prefix, edge run, suffix)."""
        first = next((i for i, op in enumerate(self._ops) if op["op"] == "stroke"), len(self._ops))
        end = first
        while end < len(self._ops) and self._ops[end]["op"] == "stroke":
            end += 1
        return self._ops[:first], self._ops[first:end], self._ops[end:]

    def finish(self) -> Path:
        from pyvis.network import Network

        prefix, edge_run, suffix = self.split_ops()
        graph = build_stroke_graph(edge_run)

        # directed=True keeps parallel edges; arrows are switched off below
        net = Network(
            height="100vh",
            width="100%",
            bgcolor=self.bgcolor,
            directed=True,
            cdn_resources="remote",
        )
        net.toggle_physics(False)

        # Invisible corner nodes make the initial view fit the whole surface
        corners = [(0, 0), (self._width, 0), (self._width, self._height), (0, self._height)]
        for i, (x, y) in enumerate(corners):
            net.add_node(
                f"__corner_{i}__",
                label=" ",
                x=x,
                y=y,
                fixed=True,
                shape="dot",
                size=0.1,
                color="rgba(0,0,0,0)",
            )

        for node, attrs in graph.nodes(data=True):
            net.add_node(
                node,
                label=" ",
                title=f"({attrs['x']:.1f}, {attrs['y']:.1f})",
                x=attrs["x"],
                y=attrs["y"],
                fixed=True,
                shape="dot",
                size=1,
                color="rgba(0,0,0,0)",
            )

        edges = sorted(graph.edges(data=True), key=lambda e: e[2]["order"])
        for u, v, attrs in edges:
            net.add_edge(u, v, color=attrs["color"], width=attrs["width"])

        net.set_options("""
        {
            "physics": {"enabled": false},
            "interaction": {
                "navigationButtons": true,
                "zoomView": true,
                "dragView": true,
                "dragNodes": false,
                "hover": true,
                "tooltipDelay": 100
            },
            "edges": {
                "arrows": {"to": {"enabled": false}},
                "smooth": {"enabled": false},
                "selectionWidth": 0,
                "hoverWidth": 0.5
            },
            "nodes": {"borderWidth": 0}
        }
        """)

        net.save_graph(str(self.output_path))
        _inject_paint_script(self.output_path, prefix, suffix)
        return self.output_path


def _inject_paint_script(output_file: Path, prefix: list[dict], suffix: list[dict]) -> None:
    """Inject the script that paints fills and text onto the network canvas.

    Args:
        output_file: Path to the HTML file to modify.
        prefix: Ops painted before the network draws its edges.
        suffix: Ops painted after the network has drawn.
    """
    with open(output_file, "r") as f:
        html = f.read()

    # Keep label text from closing the script element
    prefix_json = json.dumps(prefix).replace("</", "<\\/")
    suffix_json = json.dumps(suffix).replace("</", "<\\/")

    custom_script = f"""
    <script type="text/javascript">
    var prefixOps = {prefix_json};
    var suffixOps = {suffix_json};

    function paintOp(ctx, op) {{
        ctx.save();
        if (op.op === 'fill' || op.op === 'stroke') {{
            ctx.beginPath();
            op.points.forEach(function(p, i) {{
                if (i === 0) {{
                    ctx.moveTo(p[0], p[1]);
                }} else {{
                    ctx.lineTo(p[0], p[1]);
                }}
            }});
            if (op.op === 'fill' || op.closed) {{
                ctx.closePath();
            }}
            if (op.op === 'fill') {{
                ctx.fillStyle = op.color;
                ctx.fill();
            }} else {{
                ctx.strokeStyle = op.color;
                ctx.lineWidth = op.width;
                ctx.lineJoin = 'round';
                ctx.stroke();
            }}
        }} else if (op.op === 'text') {{
            ctx.font = op.size + 'px sans-serif';
            ctx.fillStyle = op.color;
            ctx.textAlign = op.align;
            ctx.textBaseline = op.baseline;
            ctx.fillText(op.text, op.x, op.y);
        }}
        ctx.restore();
    }}

    document.addEventListener('DOMContentLoaded', function() {{
        // Give vis.js time to initialize
        setTimeout(function() {{
            if (typeof network === 'undefined') return;
            network.on('beforeDrawing', function(ctx) {{
                prefixOps.forEach(function(op) {{ paintOp(ctx, op); }});
            }});
            network.on('afterDrawing', function(ctx) {{
                suffixOps.forEach(function(op) {{ paintOp(ctx, op); }});
            }});
            var style = document.createElement('style');
            style.textContent = 'html, body {{ margin: 0; padding: 0; overflow: hidden; }}';
            document.head.appendChild(style);
            network.redraw();
        }}, 500);
    }});
    </script>
    """

    html = html.replace("</body>", custom_script + "</body>")

    with open(output_file, "w") as f:
        f.write(html)
