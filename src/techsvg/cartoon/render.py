"""Cartoon strip SVG rendering."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from ..render.primitives import FONT, escape_html, heading, svg_document
from ..render.themes import ThemeColors, get_theme
from ..utils.logging import get_logger
from .characters import Character, create_character, render_character
from .layout import (
    BUBBLE_CHAR_WIDTH,
    BubblePlacement,
    calculate_grid,
    compose_panel,
    wrap_bubble_text,
)
from .model import CartoonPanel, CartoonStripConfig, DialogLine

logger = get_logger(__name__)

BUBBLE_LINE_HEIGHT = 15
BUBBLE_PAD_X = 12
BUBBLE_PAD_Y = 8
TAIL_HEIGHT = 10
TITLE_Y = 28


def render_speech_bubble(
    x: float,
    y: float,
    line: DialogLine,
    max_width: float,
    colors: ThemeColors,
) -> str:
    """Render a bubble whose top edge is at ``y``, centered on ``x``.

    Shouts are filled orange with white text. Thoughts get a dashed outline
    and a trail of small circles instead of a pointed tail.
    """
    lines = wrap_bubble_text(line.text, max_width)
    longest = max((len(text) for text in lines), default=0)
    width = min(max_width, longest * BUBBLE_CHAR_WIDTH + BUBBLE_PAD_X * 2)
    height = len(lines) * BUBBLE_LINE_HEIGHT + BUBBLE_PAD_Y * 2
    left = x - width / 2
    bottom = y + height

    if line.type == "shout":
        fill, stroke, text_color = colors.orange, colors.orange, "#fff"
    else:
        fill, stroke, text_color = colors.card, colors.border, colors.text

    if line.type == "thought":
        outline = (
            f'<rect x="{left}" y="{y}" width="{width}" height="{height}" rx="{height / 2}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="2" stroke-dasharray="4,3"/>'
        )
        tail = (
            f'\n      <circle cx="{x}" cy="{bottom + 6}" r="4" fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
            f'\n      <circle cx="{x + 4}" cy="{bottom + 14}" r="2.5" fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
    else:
        outline = (
            f'<rect x="{left}" y="{y}" width="{width}" height="{height}" rx="10" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="2"/>'
        )
        tail = (
            f'\n      <polygon points="{x - 8},{bottom - 1} {x + 8},{bottom - 1} {x},{bottom + TAIL_HEIGHT}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="2"/>'
            f'\n      <rect x="{x - 7}" y="{bottom - 3}" width="14" height="4" fill="{fill}"/>'
        )

    text = "".join(
        f'\n      <text x="{x}" y="{y + BUBBLE_PAD_Y + 11 + i * BUBBLE_LINE_HEIGHT}" text-anchor="middle" '
        f'fill="{text_color}" font-size="12" font-weight="600" font-family="{FONT}">{escape_html(t)}</text>'
        for i, t in enumerate(lines)
    )

    return f"""
    <g class="speech-bubble" data-type="{line.type}">
      {outline}{tail}{text}
    </g>"""


def render_panel(
    panel: CartoonPanel,
    cast: Dict[str, Character],
    x: float,
    y: float,
    width: float,
    height: float,
    colors: ThemeColors,
) -> str:
    composition = compose_panel(panel, cast.keys(), x, y, width, height)
    if composition.dropped_lines:
        logger.debug("Panel at (%s, %s) dropped %s dialogue lines", x, y, composition.dropped_lines)

    parts = [
        f'<rect x="{x}" y="{y}" width="{width}" height="{height}" rx="6" '
        f'fill="{colors.elevated}" stroke="{colors.border}" stroke-width="2"/>'
    ]
    if panel.caption:
        parts.append(
            f'<text x="{x + width / 2}" y="{y + 14}" text-anchor="middle" fill="{colors.muted}" '
            f'font-size="9" font-weight="bold" font-family="{FONT}">{escape_html(panel.caption)}</text>'
        )
    for placement in composition.characters:
        parts.append(
            render_character(
                placement.x,
                placement.y,
                cast[placement.character_id],
                placement.emotion,
                placement.scale,
                placement.facing,
            )
        )
    parts.extend(_bubble(b, colors) for b in composition.bubbles)

    return '\n  <g class="panel">\n    ' + "\n    ".join(parts) + "\n  </g>"


def _bubble(placement: BubblePlacement, colors: ThemeColors) -> str:
    return render_speech_bubble(
        placement.x, placement.y, placement.line, placement.max_width, colors
    )


def build_cast(config: CartoonStripConfig) -> Dict[str, Character]:
    """Turn character definitions into renderable characters.

    A preset wins over an inline style; with neither the default preset is used.
    """
    cast: Dict[str, Character] = {}
    for char_id, definition in config.characters.items():
        source: Any = definition.preset or definition.style
        cast[char_id] = create_character(char_id, definition.name, source)
    return cast


def generate_cartoon_strip(config: Union[CartoonStripConfig, Mapping[str, Any]]) -> str:
    """Generate a multi-panel cartoon strip SVG."""
    if not isinstance(config, CartoonStripConfig):
        config = CartoonStripConfig.from_dict(dict(config))

    colors = get_theme(config.theme).colors
    cast = build_cast(config)
    grid = calculate_grid(len(config.panels), config.layout, config.width, config.height)
    has_title = bool(config.title)

    panels = []
    for idx, panel in enumerate(config.panels):
        px, py = grid.panel_origin(idx, has_title)
        panels.append(
            render_panel(panel, cast, px, py, grid.panel_width, grid.panel_height, colors)
        )

    logger.debug(
        "Cartoon panels=%s grid=%sx%s characters=%s",
        len(config.panels),
        grid.cols,
        grid.rows,
        len(cast),
    )

    content = "\n  ".join([heading(config.title, config.width, TITLE_Y, colors), *panels])
    return svg_document(config.width, config.height, colors, content)
