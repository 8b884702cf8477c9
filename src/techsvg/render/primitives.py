"""SVG primitive components for building illustrations.

Every function here returns an SVG fragment string. Positions are absolute
canvas coordinates; labels are clamped to fixed character budgets because
there are no font metrics to measure against.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .icons import ICONS
from .themes import ThemeColors

FONT = "'SF Mono', Menlo, Monaco, 'Courier New', monospace"

ELLIPSIS = "..."


@dataclass(frozen=True)
class CodeLine:
    """One line of a code snippet; `hl` highlights it."""

    t: str
    hl: bool = False


@dataclass(frozen=True)
class TerminalLine:
    """One line of terminal output, optionally marked as error or success."""

    t: str
    err: bool = False
    ok: bool = False


def escape_html(text: Optional[object]) -> str:
    if text is None:
        return ""
    return html.escape(str(text), quote=False)


def wrap_words(text: str, max_chars: int) -> List[str]:
    """Greedy word wrap against a character budget.

    Words are accumulated onto the current line while the joined line stays
    within `max_chars`. A single word longer than the budget occupies its own
    line unbroken.
    """
    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}".strip()
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def clamp_lines(lines: Sequence[str], max_lines: int, keep_chars: int) -> List[str]:
    """Keep at most `max_lines`; the last kept line is cut and ends in an ellipsis."""
    if len(lines) <= max_lines:
        return list(lines)
    clamped = list(lines[:max_lines])
    clamped[-1] = clamped[-1][:keep_chars] + ELLIPSIS
    return clamped


def icon(name: str, x: float, y: float, size: float, color: str) -> str:
    """Render an icon centered on (x, y); unknown names render nothing."""
    path = ICONS.get(name)
    if not path:
        return ""
    scale = size / 24
    return (
        f'<g transform="translate({x - size / 2}, {y - size / 2}) scale({scale})">\n'
        f'    <path d="{path}" fill="none" stroke="{color}" stroke-width="2" '
        f'stroke-linecap="round" stroke-linejoin="round"/>\n'
        f"  </g>"
    )


def card(
    x: float,
    y: float,
    w: float,
    h: float,
    icon_name: str,
    label: str,
    colors: ThemeColors,
    accent_color: Optional[str] = None,
    sublabel: Optional[str] = None,
) -> str:
    color = accent_color or colors.blue
    icon_y = y + h / 2 - (8 if sublabel else 0)
    parts = [
        f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="12" fill="{colors.card}" '
        f'stroke="{color}" stroke-width="2"/>',
        icon(icon_name, x + w / 2, icon_y, min(w, h) * 0.35, color),
        f'<text x="{x + w / 2}" y="{y + h - 16}" text-anchor="middle" fill="{colors.text}" '
        f'font-size="12" font-family="{FONT}">{escape_html(label[:12])}</text>',
    ]
    if sublabel:
        parts.append(
            f'<text x="{x + w / 2}" y="{y + h - 4}" text-anchor="middle" fill="{colors.muted}" '
            f'font-size="10" font-family="{FONT}">{escape_html(sublabel[:15])}</text>'
        )
    return "\n  " + "\n  ".join(parts) + "\n"


def metric(
    x: float,
    y: float,
    label: str,
    value: str,
    colors: ThemeColors,
    unit: str = "",
    accent_color: Optional[str] = None,
) -> str:
    color = accent_color or colors.blue
    return (
        f'\n  <rect x="{x}" y="{y}" width="110" height="60" rx="8" fill="{colors.card}" '
        f'stroke="{colors.border}"/>'
        f'\n  <text x="{x + 55}" y="{y + 22}" text-anchor="middle" fill="{colors.muted}" '
        f'font-size="11" font-family="{FONT}">{escape_html(label[:12])}</text>'
        f'\n  <text x="{x + 55}" y="{y + 46}" text-anchor="middle" fill="{color}" '
        f'font-size="18" font-family="{FONT}">{escape_html(value)}'
        f'<tspan fill="{colors.muted}" font-size="11">{escape_html(unit)}</tspan></text>\n'
    )


def status(x: float, y: float, state: str, text: str, colors: ThemeColors) -> str:
    """Status dot with a caption; `state` is one of ok, warn, error, info."""
    state_colors = {
        "ok": colors.green,
        "warn": colors.orange,
        "error": colors.red,
        "info": colors.cyan,
    }
    color = state_colors.get(state, colors.muted)
    return (
        f'\n  <circle cx="{x}" cy="{y}" r="6" fill="{color}"/>'
        f'\n  <text x="{x + 14}" y="{y + 4}" fill="{colors.text}" font-size="11" '
        f'font-family="{FONT}">{escape_html(text[:30])}</text>'
    )


def arrow(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: str,
    label: str = "",
    dashed: bool = False,
    colors: Optional[ThemeColors] = None,
) -> str:
    """Straight connector with its own arrowhead marker and an optional label chip."""
    mx = (x1 + x2) / 2
    my = (y1 + y2) / 2
    dash = 'stroke-dasharray="6 4"' if dashed else ""
    marker_id = f"ah{x1}-{y1}-{x2}-{y2}".replace(".", "_")
    card_bg = colors.card if colors else "#161b22"
    muted = colors.muted if colors else "#8b949e"

    out = (
        f'\n  <defs><marker id="{marker_id}" markerWidth="8" markerHeight="8" refX="7" refY="4" orient="auto">'
        f'\n    <path d="M0,0 L8,4 L0,8 Z" fill="{color}"/>'
        f"\n  </marker></defs>"
        f'\n  <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke="{color}" stroke-width="2" {dash} '
        f'marker-end="url(#{marker_id})"/>'
    )
    if label:
        out += (
            f'\n  <rect x="{mx - 25}" y="{my - 10}" width="50" height="20" rx="4" fill="{card_bg}"/>'
            f'\n  <text x="{mx}" y="{my + 4}" text-anchor="middle" fill="{muted}" font-size="10" '
            f'font-family="{FONT}">{escape_html(label[:8])}</text>'
        )
    return out


def code_snippet(
    x: float,
    y: float,
    w: float,
    h: float,
    lines: Iterable[CodeLine],
    colors: ThemeColors,
    title: str = "code.ts",
) -> str:
    body = "".join(
        f'<text x="{x + 12}" y="{y + 48 + i * 18}" fill="{colors.cyan if line.hl else colors.text}" '
        f'font-size="11" font-family="{FONT}">{escape_html(line.t[:32])}</text>'
        for i, line in enumerate(list(lines)[:5])
    )
    return (
        f'\n  <rect x="{x}" y="{y}" width="{w}" height="{h}" rx="8" fill="{colors.elevated}" stroke="{colors.border}"/>'
        f'\n  <rect x="{x}" y="{y}" width="{w}" height="28" rx="8" fill="{colors.card}"/>'
        f'\n  <circle cx="{x + 16}" cy="{y + 14}" r="5" fill="{colors.red}" opacity="0.8"/>'
        f'\n  <circle cx="{x + 32}" cy="{y + 14}" r="5" fill="{colors.orange}" opacity="0.8"/>'
        f'\n  <circle cx="{x + 48}" cy="{y + 14}" r="5" fill="{colors.green}" opacity="0.8"/>'
        f'\n  <text x="{x + w / 2}" y="{y + 18}" text-anchor="middle" fill="{colors.dim}" font-size="10" '
        f'font-family="{FONT}">{escape_html(title[:20])}</text>'
        f"\n  {body}\n"
    )


def terminal_block(
    x: float,
    y: float,
    w: float,
    h: float,
    lines: Iterable[TerminalLine],
    colors: ThemeColors,
) -> str:
    rows = []
    for i, line in enumerate(list(lines)[:4]):
        color = colors.red if line.err else colors.green if line.ok else colors.text
        rows.append(
            f'<text x="{x + 12}" y="{y + 44 + i * 18}" fill="{color}" font-size="11" '
            f'font-family="{FONT}">{escape_html(line.t[:35])}</text>'
        )
    return (
        f'\n  <rect x="{x}" y="{y}" width="{w}" height="{h}" rx="8" fill="{colors.bg}" stroke="{colors.green}"/>'
        f'\n  <text x="{x + 12}" y="{y + 20}" fill="{colors.green}" font-size="11" font-family="{FONT}">$ terminal</text>'
        f"\n  {''.join(rows)}\n"
    )


def title_bar(text: str, width: float, height: float, colors: ThemeColors) -> str:
    """Caption box along the bottom edge, wrapped to at most two lines."""
    max_chars = 60
    lines = clamp_lines(wrap_words(text, max_chars), 2, max_chars - len(ELLIPSIS))

    box_height = 36 if len(lines) <= 1 else 50
    start_y = height - box_height - 8
    rows = "".join(
        f'<text x="{width / 2}" y="{start_y + 22 + i * 16}" text-anchor="middle" fill="{colors.text}" '
        f'font-size="11" font-family="{FONT}">{escape_html(line)}</text>'
        for i, line in enumerate(lines)
    )
    return (
        f'\n  <rect x="30" y="{start_y}" width="{width - 60}" height="{box_height}" rx="8" '
        f'fill="{colors.card}" stroke="{colors.border}"/>'
        f"\n  {rows}"
    )


def heading(text: str, width: float, y: float, colors: ThemeColors) -> str:
    """Bold centered diagram title; empty text renders nothing."""
    if not text:
        return ""
    return (
        f'<text x="{width / 2}" y="{y}" text-anchor="middle" fill="{colors.text}" font-size="16" '
        f'font-weight="bold" font-family="{FONT}">{escape_html(text)}</text>'
    )


def svg_document(width: float, height: float, colors: ThemeColors, content: str) -> str:
    """Wrap fragments in a standalone SVG document with the gradient background."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
  <defs>
    <linearGradient id="bg" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="{colors.bg}"/>
      <stop offset="100%" stop-color="{colors.card}"/>
    </linearGradient>
  </defs>
  <rect width="{width}" height="{height}" fill="url(#bg)"/>
  {content}
</svg>"""
