"""Sequence diagram SVG rendering."""

from __future__ import annotations

from typing import Any, Mapping, Union

from ..render.primitives import FONT, escape_html, heading, svg_document
from ..render.themes import ThemeColors, get_theme
from ..utils.logging import get_logger
from .layout import MessageRow, layout_sequence
from .model import Participant, SequenceDiagramConfig

logger = get_logger(__name__)

BOX_WIDTH = 100
BOX_HEIGHT = 50
LOOP_WIDTH = 40
LOOP_HEIGHT = 30
CHAR_WIDTH = 7


def render_participant(p: Participant, x: float, y: float, colors: ThemeColors) -> str:
    half = BOX_WIDTH / 2
    if p.type == "actor":
        color = colors.cyan
        shape = f"""
        <circle cx="{x}" cy="{y - 25}" r="10" fill="none" stroke="{color}" stroke-width="2"/>
        <line x1="{x}" y1="{y - 15}" x2="{x}" y2="{y + 5}" stroke="{color}" stroke-width="2"/>
        <line x1="{x - 15}" y1="{y - 8}" x2="{x + 15}" y2="{y - 8}" stroke="{color}" stroke-width="2"/>
        <line x1="{x}" y1="{y + 5}" x2="{x - 12}" y2="{y + 20}" stroke="{color}" stroke-width="2"/>
        <line x1="{x}" y1="{y + 5}" x2="{x + 12}" y2="{y + 20}" stroke="{color}" stroke-width="2"/>"""
    elif p.type == "database":
        color = colors.purple
        shape = f"""
        <ellipse cx="{x}" cy="{y - 20}" rx="{half - 10}" ry="8" fill="{colors.card}" stroke="{color}" stroke-width="2"/>
        <path d="M{x - half + 10},{y - 20} L{x - half + 10},{y + 10} Q{x},{y + 25} {x + half - 10},{y + 10} L{x + half - 10},{y - 20}" fill="{colors.card}" stroke="{color}" stroke-width="2"/>"""
    elif p.type == "queue":
        color = colors.orange
        slots = "".join(
            f'\n        <line x1="{x + dx}" y1="{y - 10}" x2="{x + dx}" y2="{y + 5}" stroke="{color}" stroke-width="1.5"/>'
            for dx in (-15, 0, 15)
        )
        shape = (
            f'\n        <rect x="{x - half + 5}" y="{y - 20}" width="{BOX_WIDTH - 10}" height="35" rx="4" '
            f'fill="{colors.card}" stroke="{color}" stroke-width="2"/>{slots}'
        )
    else:
        color = colors.muted if p.type == "external" else colors.blue
        dash = ' stroke-dasharray="5,3"' if p.type == "external" else ""
        shape = (
            f'\n        <rect x="{x - half + 5}" y="{y - 25}" width="{BOX_WIDTH - 10}" height="{BOX_HEIGHT}" '
            f'rx="8" fill="{colors.card}" stroke="{color}" stroke-width="2"{dash}/>'
        )

    return f"""
    <g class="participant" data-id="{escape_html(p.id)}">{shape}
      <text x="{x}" y="{y + 40}" text-anchor="middle" fill="{colors.text}" font-size="11" font-family="{FONT}" font-weight="500">{escape_html(p.name)}</text>
    </g>
  """


def _message_style(message_type: str, colors: ThemeColors) -> tuple[str, str, bool]:
    """Return (color, dash attribute, open arrowhead)."""
    if message_type == "async":
        return colors.cyan, 'stroke-dasharray="6,3"', False
    if message_type == "reply":
        return colors.green, 'stroke-dasharray="4,2"', True
    if message_type == "self":
        return colors.orange, "", False
    return colors.text, "", False


def _marker(marker_id: str, color: str, open_head: bool) -> str:
    head = (
        f'<path d="M0,0 L10,5 L0,10" fill="none" stroke="{color}" stroke-width="2"/>'
        if open_head
        else f'<path d="M0,0 L10,5 L0,10 Z" fill="{color}"/>'
    )
    return (
        f'\n    <defs>\n      <marker id="{marker_id}" markerWidth="10" markerHeight="10" '
        f'refX="9" refY="5" orient="auto">\n        {head}\n      </marker>\n    </defs>'
    )


def render_message(row: MessageRow, colors: ThemeColors, index: int) -> str:
    msg = row.message
    color, dash, open_head = _message_style(msg.type, colors)
    marker_id = f"{'openArrow' if open_head else 'arrow'}{index}"
    text = escape_html(msg.text)
    text_width = len(msg.text) * CHAR_WIDTH + 16
    y = row.y

    if msg.is_self:
        x = row.from_x
        return (
            _marker(marker_id, color, open_head)
            + f'\n    <path d="M{x},{y} L{x + LOOP_WIDTH},{y} L{x + LOOP_WIDTH},{y + LOOP_HEIGHT} L{x + 5},{y + LOOP_HEIGHT}" '
            f'fill="none" stroke="{color}" stroke-width="2" {dash} marker-end="url(#{marker_id})"/>'
            f'\n    <rect x="{x + LOOP_WIDTH + 5}" y="{y - 10}" width="{text_width}" height="20" rx="4" fill="{colors.card}"/>'
            f'\n    <text x="{x + LOOP_WIDTH + 13}" y="{y + 4}" fill="{colors.text}" font-size="11" '
            f'font-family="{FONT}">{text}</text>\n  '
        )

    step = 1 if row.to_x > row.from_x else -1
    text_x = (row.from_x + row.to_x) / 2
    note = ""
    if msg.note:
        note_y = y + 20
        note = (
            f'\n    <rect x="{text_x - 60}" y="{note_y}" width="120" height="24" rx="4" '
            f'fill="{colors.elevated}" stroke="{colors.border}"/>'
            f'\n    <text x="{text_x}" y="{note_y + 16}" text-anchor="middle" fill="{colors.muted}" '
            f'font-size="10" font-family="{FONT}" font-style="italic">{escape_html(msg.note[:18])}</text>'
        )

    return (
        _marker(marker_id, color, open_head)
        + f'\n    <line x1="{row.from_x}" y1="{y}" x2="{row.to_x - step * 10}" y2="{y}" stroke="{color}" '
        f'stroke-width="2" {dash} marker-end="url(#{marker_id})"/>'
        f'\n    <rect x="{text_x - text_width / 2}" y="{y - 18}" width="{text_width}" height="20" rx="4" fill="{colors.card}"/>'
        f'\n    <text x="{text_x}" y="{y - 4}" text-anchor="middle" fill="{colors.text}" font-size="11" '
        f'font-family="{FONT}">{text}</text>{note}\n  '
    )


def generate_sequence_diagram(config: Union[SequenceDiagramConfig, Mapping[str, Any]]) -> str:
    """Generate a sequence diagram SVG; the canvas grows to fit every message row."""
    if not isinstance(config, SequenceDiagramConfig):
        config = SequenceDiagramConfig.from_dict(dict(config))

    colors = get_theme(config.theme).colors
    layout = layout_sequence(config.participants, config.messages, config.width, config.height)

    lifelines = "".join(
        f'<line x1="{x}" y1="{layout.header_y + 50}" x2="{x}" y2="{layout.lifeline_end_y}" '
        f'stroke="{colors.border}" stroke-width="1" stroke-dasharray="4,4"/>'
        for x in layout.columns
    )
    participants = "".join(
        render_participant(p, x, layout.header_y, colors)
        for p, x in zip(config.participants, layout.columns)
    )
    messages = "".join(
        render_message(row, colors, idx) for idx, row in enumerate(layout.rows)
    )

    logger.debug(
        "Sequence participants=%s messages=%s height=%s",
        len(config.participants),
        len(config.messages),
        layout.height,
    )

    content = "\n  ".join(
        [heading(config.title, config.width, 35, colors), lifelines, participants, messages]
    )
    return svg_document(config.width, layout.height, colors, content)
