"""Theme tables, icon paths and SVG primitive renderers."""

from .icons import ICONS, get_icon_names
from .primitives import (
    CodeLine,
    TerminalLine,
    arrow,
    card,
    code_snippet,
    escape_html,
    icon,
    metric,
    status,
    svg_document,
    terminal_block,
    title_bar,
    wrap_words,
)
from .themes import THEMES, Theme, ThemeColors, get_theme

__all__ = [
    "ICONS",
    "get_icon_names",
    "CodeLine",
    "TerminalLine",
    "arrow",
    "card",
    "code_snippet",
    "escape_html",
    "icon",
    "metric",
    "status",
    "svg_document",
    "terminal_block",
    "title_bar",
    "wrap_words",
    "THEMES",
    "Theme",
    "ThemeColors",
    "get_theme",
]
