"""Flowchart SVG rendering."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from ..render.primitives import FONT, escape_html, heading, svg_document
from ..render.themes import ThemeColors, get_theme
from ..utils.logging import get_logger
from .layout import NodePosition, layout_flowchart
from .model import FlowchartConfig, FlowEdge, FlowNode

logger = get_logger(__name__)

IO_SKEW = 15
CYLINDER_RY = 8


def _node_shape(node_type: str, pos: NodePosition, colors: ThemeColors) -> tuple[str, str]:
    """Return (accent color, shape markup) for a node type."""
    x, y, w, h = pos.x, pos.y, pos.width, pos.height
    cx, cy = pos.cx, pos.cy

    if node_type == "start":
        color = colors.green
        return color, (
            f'<ellipse cx="{cx}" cy="{cy}" rx="{w / 2}" ry="{h / 2}" fill="{colors.card}" '
            f'stroke="{color}" stroke-width="2"/>'
        )
    if node_type == "end":
        color = colors.red
        return color, (
            f'<ellipse cx="{cx}" cy="{cy}" rx="{w / 2}" ry="{h / 2}" fill="{colors.card}" '
            f'stroke="{color}" stroke-width="3"/>'
        )
    if node_type == "decision":
        color = colors.orange
        return color, (
            f'<polygon points="{cx},{y} {x + w},{cy} {cx},{y + h} {x},{cy}" '
            f'fill="{colors.card}" stroke="{color}" stroke-width="2"/>'
        )
    if node_type == "io":
        color = colors.cyan
        return color, (
            f'<polygon points="{x + IO_SKEW},{y} {x + w},{y} {x + w - IO_SKEW},{y + h} {x},{y + h}" '
            f'fill="{colors.card}" stroke="{color}" stroke-width="2"/>'
        )
    if node_type == "subprocess":
        color = colors.purple
        return color, (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="4" fill="{colors.card}" '
            f'stroke="{color}" stroke-width="2"/>\n'
            f'        <line x1="{x + 10}" y1="{y}" x2="{x + 10}" y2="{y + h}" stroke="{color}" stroke-width="1"/>\n'
            f'        <line x1="{x + w - 10}" y1="{y}" x2="{x + w - 10}" y2="{y + h}" stroke="{color}" stroke-width="1"/>'
        )
    if node_type == "database":
        color = colors.purple
        ry = CYLINDER_RY
        return color, (
            f'<ellipse cx="{cx}" cy="{y + ry}" rx="{w / 2}" ry="{ry}" fill="{colors.card}" '
            f'stroke="{color}" stroke-width="2"/>\n'
            f'        <path d="M{x},{y + ry} L{x},{y + h - ry} Q{cx},{y + h + ry} {x + w},{y + h - ry} '
            f'L{x + w},{y + ry}" fill="{colors.card}" stroke="{color}" stroke-width="2"/>'
        )
    if node_type == "delay":
        color = colors.muted
        return color, (
            f'<path d="M{x},{y} L{x + w - 20},{y} Q{x + w},{cy} {x + w - 20},{y + h} L{x},{y + h} Z" '
            f'fill="{colors.card}" stroke="{color}" stroke-width="2"/>'
        )

    color = colors.blue
    return color, (
        f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="8" fill="{colors.card}" '
        f'stroke="{color}" stroke-width="2"/>'
    )


def render_node(node: FlowNode, pos: NodePosition, colors: ThemeColors) -> str:
    _, shape = _node_shape(node.type, pos, colors)
    cx, cy = pos.cx, pos.cy
    label_y = cy - 6 if node.sublabel else cy + 4
    sublabel = ""
    if node.sublabel:
        sublabel = (
            f'<text x="{cx}" y="{cy + 12}" text-anchor="middle" fill="{colors.muted}" '
            f'font-size="10" font-family="{FONT}">{escape_html(node.sublabel[:20])}</text>'
        )
    return f"""
    <g class="node" data-id="{escape_html(node.id)}">
      {shape}
      <text x="{cx}" y="{label_y}" text-anchor="middle" fill="{colors.text}" font-size="11" font-family="{FONT}">{escape_html(node.label[:15])}</text>
      {sublabel}
    </g>
  """


def _edge_style(edge_type: str, colors: ThemeColors) -> tuple[str, str]:
    if edge_type == "yes":
        return colors.green, ""
    if edge_type == "no":
        return colors.red, ""
    if edge_type == "error":
        return colors.red, 'stroke-dasharray="4,2"'
    return colors.muted, ""


def edge_path(from_pos: NodePosition, to_pos: NodePosition, direction: str) -> tuple[str, float, float]:
    """Return (path data, label x, label y) for an edge between two placed nodes.

    Aligned endpoints get a straight segment; otherwise an elbow that turns at
    the midpoint of the primary axis.
    """
    if direction == "LR":
        x1, y1 = from_pos.x + from_pos.width, from_pos.cy
        x2, y2 = to_pos.x, to_pos.cy
    else:
        x1, y1 = from_pos.cx, from_pos.y + from_pos.height
        x2, y2 = to_pos.cx, to_pos.y

    if abs(x1 - x2) < 5 or abs(y1 - y2) < 5:
        path = f"M{x1},{y1} L{x2},{y2}"
    elif direction == "LR":
        mid_x = (x1 + x2) / 2
        path = f"M{x1},{y1} L{mid_x},{y1} L{mid_x},{y2} L{x2},{y2}"
    else:
        mid_y = (y1 + y2) / 2
        path = f"M{x1},{y1} L{x1},{mid_y} L{x2},{mid_y} L{x2},{y2}"
    return path, (x1 + x2) / 2, (y1 + y2) / 2


def render_edge(
    edge: FlowEdge,
    from_pos: NodePosition,
    to_pos: NodePosition,
    direction: str,
    colors: ThemeColors,
    index: int,
) -> str:
    color, dash = _edge_style(edge.type, colors)
    marker_id = f"flowArrow{index}"
    path, lx, ly = edge_path(from_pos, to_pos, direction)

    label = ""
    if edge.label:
        label = (
            f'\n    <rect x="{lx - 15}" y="{ly - 10}" width="30" height="16" rx="3" fill="{colors.card}"/>'
            f'\n    <text x="{lx}" y="{ly + 3}" text-anchor="middle" fill="{color}" font-size="10" '
            f'font-family="{FONT}">{escape_html(edge.label)}</text>'
        )

    return f"""
    <defs>
      <marker id="{marker_id}" markerWidth="10" markerHeight="10" refX="9" refY="5" orient="auto">
        <path d="M0,0 L10,5 L0,10 Z" fill="{color}"/>
      </marker>
    </defs>
    <path d="{path}" fill="none" stroke="{color}" stroke-width="2" {dash} marker-end="url(#{marker_id})"/>{label}
  """


def generate_flowchart(config: Union[FlowchartConfig, Mapping[str, Any]]) -> str:
    """Generate a flowchart SVG from a config object or a raw mapping."""
    if not isinstance(config, FlowchartConfig):
        config = FlowchartConfig.from_dict(dict(config))

    colors = get_theme(config.theme).colors
    positions: Dict[str, NodePosition] = layout_flowchart(
        config.nodes, config.edges, config.direction, config.width, config.height
    )

    edge_parts = []
    dropped = 0
    for idx, edge in enumerate(config.edges):
        from_pos = positions.get(edge.from_id)
        to_pos = positions.get(edge.to_id)
        if from_pos is None or to_pos is None:
            dropped += 1
            continue
        edge_parts.append(render_edge(edge, from_pos, to_pos, config.direction, colors, idx))

    node_parts = [
        render_node(node, positions[node.id], colors)
        for node in config.nodes
        if node.id in positions
    ]

    logger.debug(
        "Flowchart placed=%s/%s nodes edges_dropped=%s",
        len(positions),
        len(config.nodes),
        dropped,
    )

    content = "\n  ".join(
        [heading(config.title, config.width, 35, colors), "".join(edge_parts), "".join(node_parts)]
    )
    return svg_document(config.width, config.height, colors, content)
