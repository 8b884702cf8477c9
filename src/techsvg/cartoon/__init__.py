"""Multi-panel cartoon strips with developer characters."""

from .characters import (
    CHARACTER_PRESETS,
    EMOTIONS,
    Character,
    CharacterStyle,
    create_character,
    get_character_presets,
    get_emotions,
    render_character,
)
from .layout import GridLayout, calculate_grid, compose_panel, wrap_bubble_text
from .model import BUBBLE_TYPES, CartoonPanel, CartoonStripConfig, CharacterDef, DialogLine
from .render import generate_cartoon_strip, render_speech_bubble

__all__ = [
    "BUBBLE_TYPES",
    "CHARACTER_PRESETS",
    "EMOTIONS",
    "CartoonPanel",
    "CartoonStripConfig",
    "Character",
    "CharacterDef",
    "CharacterStyle",
    "DialogLine",
    "GridLayout",
    "calculate_grid",
    "compose_panel",
    "create_character",
    "generate_cartoon_strip",
    "get_character_presets",
    "get_emotions",
    "render_character",
    "render_speech_bubble",
    "wrap_bubble_text",
]
