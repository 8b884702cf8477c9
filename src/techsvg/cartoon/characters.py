"""Cartoon characters: presets, emotions and the figure renderer.

A character is drawn around its head center at (0, 0) in local units: head
radius 16, body from y=20 to y=55, name tag at y=65. ``render_character``
translates and scales that figure onto the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from ..render.primitives import escape_html

EMOTIONS = (
    "neutral",
    "happy",
    "sad",
    "angry",
    "surprised",
    "thinking",
    "confused",
    "excited",
    "worried",
)
HAIR_STYLES = ("short", "long", "bald", "spiky", "curly")
ACCESSORIES = ("none", "glasses", "hat", "headphones")

HEAD_TOP = 36
FEET = 85
FIGURE_HEIGHT = 170

INK = "#374151"


@dataclass(frozen=True)
class CharacterStyle:
    primary: str
    secondary: str
    skin: str
    hair_style: str = "short"
    accessory: str = "none"


@dataclass(frozen=True)
class Character:
    id: str
    name: str
    style: CharacterStyle


CHARACTER_PRESETS: Dict[str, CharacterStyle] = {
    "dev1": CharacterStyle("#6366f1", "#3b82f6", "#fcd5b8", "short", "glasses"),
    "dev2": CharacterStyle("#8b5cf6", "#10b981", "#d4a574", "curly", "none"),
    "dev3": CharacterStyle("#f59e0b", "#ef4444", "#fce7d6", "long", "headphones"),
    "dev4": CharacterStyle("#1f2937", "#6366f1", "#8d6e4c", "spiky", "none"),
    "dev5": CharacterStyle("#ec4899", "#8b5cf6", "#fcd5b8", "short", "hat"),
    "robot": CharacterStyle("#6b7280", "#3b82f6", "#d1d5db", "bald", "none"),
}

DEFAULT_PRESET = "dev1"

# eyes, mouth, eyebrows path data in face-local units
_FEATURES: Dict[str, Dict[str, str]] = {
    "neutral": {
        "eyes": "M-6,-2 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0 M2,-2 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0",
        "mouth": "M-4,6 Q0,8 4,6",
        "eyebrows": "M-7,-6 L-3,-6 M3,-6 L7,-6",
    },
    "happy": {
        "eyes": "M-6,-2 Q-4,-4 -2,-2 M2,-2 Q4,-4 6,-2",
        "mouth": "M-5,5 Q0,10 5,5",
        "eyebrows": "M-7,-7 L-3,-5 M3,-5 L7,-7",
    },
    "sad": {
        "eyes": "M-6,-1 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0 M2,-1 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0",
        "mouth": "M-4,8 Q0,5 4,8",
        "eyebrows": "M-7,-5 L-3,-7 M3,-7 L7,-5",
    },
    "angry": {
        "eyes": "M-6,-2 a1.5,1.5 0 1,0 3,0 a1.5,1.5 0 1,0 -3,0 M3,-2 a1.5,1.5 0 1,0 3,0 a1.5,1.5 0 1,0 -3,0",
        "mouth": "M-4,7 L0,5 L4,7",
        "eyebrows": "M-7,-4 L-3,-7 M3,-7 L7,-4",
    },
    "surprised": {
        "eyes": "M-6,-2 a3,3 0 1,0 6,0 a3,3 0 1,0 -6,0 M2,-2 a3,3 0 1,0 6,0 a3,3 0 1,0 -6,0",
        "mouth": "M-2,6 a3,3 0 1,0 6,0 a3,3 0 1,0 -6,0",
        "eyebrows": "M-7,-8 L-3,-8 M3,-8 L7,-8",
    },
    "thinking": {
        "eyes": "M-6,-2 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0 M2,-1 L6,-3",
        "mouth": "M-3,7 Q2,7 4,5",
        "eyebrows": "M-7,-6 L-3,-6 M3,-7 L7,-5",
    },
    "confused": {
        "eyes": "M-6,-2 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0 M2,-2 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0",
        "mouth": "M-3,6 Q0,8 3,6 Q4,5 5,6",
        "eyebrows": "M-7,-5 L-3,-7 M3,-6 L7,-6",
    },
    "excited": {
        "eyes": "M-7,-2 L-5,0 L-3,-2 M3,-2 L5,0 L7,-2",
        "mouth": "M-5,4 Q0,11 5,4",
        "eyebrows": "M-7,-8 L-3,-6 M3,-6 L7,-8",
    },
    "worried": {
        "eyes": "M-6,-1 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0 M2,-1 a2,2 0 1,0 4,0 a2,2 0 1,0 -4,0",
        "mouth": "M-4,7 Q0,6 4,7",
        "eyebrows": "M-7,-5 Q-5,-7 -3,-5 M3,-5 Q5,-7 7,-5",
    },
}


def _hair(style: CharacterStyle, s: float) -> str:
    color = style.primary
    cap = f'<ellipse cx="0" cy="{-18 * s}" rx="{14 * s}" ry="{10 * s}" fill="{color}"/>'
    if style.hair_style == "bald":
        return ""
    if style.hair_style == "long":
        return (
            cap
            + f'\n    <path d="M{-14 * s},{-12 * s} Q{-16 * s},{5 * s} {-10 * s},{15 * s}" stroke="{color}" '
            f'stroke-width="{6 * s}" fill="none" stroke-linecap="round"/>'
            + f'\n    <path d="M{14 * s},{-12 * s} Q{16 * s},{5 * s} {10 * s},{15 * s}" stroke="{color}" '
            f'stroke-width="{6 * s}" fill="none" stroke-linecap="round"/>'
        )
    if style.hair_style == "spiky":
        return (
            f'<path d="M{-10 * s},{-20 * s} L{-8 * s},{-30 * s} L{-4 * s},{-22 * s} L0,{-32 * s} '
            f'L{4 * s},{-22 * s} L{8 * s},{-30 * s} L{10 * s},{-20 * s}" fill="{color}"/>'
        )
    if style.hair_style == "curly":
        curls = ((-8, -22, 6), (0, -24, 6), (8, -22, 6), (-12, -16, 5), (12, -16, 5))
        return "\n    ".join(
            f'<circle cx="{cx * s}" cy="{cy * s}" r="{r * s}" fill="{color}"/>' for cx, cy, r in curls
        )
    return cap


def _accessory(style: CharacterStyle, s: float) -> str:
    if style.accessory == "glasses":
        return (
            f'<rect x="{-9 * s}" y="{-6 * s}" width="{8 * s}" height="{6 * s}" rx="{s}" fill="none" '
            f'stroke="{INK}" stroke-width="{1.5 * s}"/>'
            f'\n    <rect x="{s}" y="{-6 * s}" width="{8 * s}" height="{6 * s}" rx="{s}" fill="none" '
            f'stroke="{INK}" stroke-width="{1.5 * s}"/>'
            f'\n    <line x1="{-s}" y1="{-3 * s}" x2="{s}" y2="{-3 * s}" stroke="{INK}" stroke-width="{1.5 * s}"/>'
        )
    if style.accessory == "hat":
        return (
            f'<rect x="{-12 * s}" y="{-28 * s}" width="{24 * s}" height="{4 * s}" rx="{s}" fill="{style.primary}"/>'
            f'\n    <rect x="{-8 * s}" y="{-38 * s}" width="{16 * s}" height="{12 * s}" rx="{2 * s}" fill="{style.primary}"/>'
        )
    if style.accessory == "headphones":
        return (
            f'<path d="M{-14 * s},{-8 * s} Q{-16 * s},{-25 * s} 0,{-28 * s} Q{16 * s},{-25 * s} {14 * s},{-8 * s}" '
            f'stroke="{INK}" stroke-width="{3 * s}" fill="none"/>'
            f'\n    <rect x="{-17 * s}" y="{-12 * s}" width="{6 * s}" height="{10 * s}" rx="{2 * s}" fill="{INK}"/>'
            f'\n    <rect x="{11 * s}" y="{-12 * s}" width="{6 * s}" height="{10 * s}" rx="{2 * s}" fill="{INK}"/>'
        )
    return ""


def render_character(
    x: float,
    y: float,
    character: Character,
    emotion: str = "neutral",
    scale: float = 1,
    facing: str = "right",
) -> str:
    """Render a character with its head centered on (x, y)."""
    s = scale
    style = character.style
    features = _FEATURES.get(emotion, _FEATURES["neutral"])
    flip = -1 if facing == "left" else 1

    return f"""
  <g class="character" data-id="{escape_html(character.id)}" transform="translate({x}, {y}) scale({flip * s}, {s})">
    <rect x="{-15 * s}" y="{20 * s}" width="{30 * s}" height="{35 * s}" rx="{8 * s}" fill="{style.secondary}"/>
    <circle cx="0" cy="0" r="{16 * s}" fill="{style.skin}"/>
    {_hair(style, s)}
    <g transform="scale({s})">
      <path d="{features['eyebrows']}" stroke="{INK}" stroke-width="2" fill="none" stroke-linecap="round"/>
      <path d="{features['eyes']}" fill="{INK}"/>
      <path d="{features['mouth']}" stroke="{INK}" stroke-width="2" fill="none" stroke-linecap="round"/>
    </g>
    {_accessory(style, s)}
    <text x="0" y="{65 * s}" text-anchor="middle" fill="#9ca3af" font-size="{10 * s}" font-family="'SF Mono', monospace">{escape_html(character.name)}</text>
  </g>"""


def resolve_style(
    preset_or_style: Union[str, CharacterStyle, Mapping[str, Any], None] = DEFAULT_PRESET,
) -> CharacterStyle:
    """Resolve a preset name, a style object, or a partial style mapping.

    Unknown preset names fall back to ``dev1``. A mapping overrides ``dev1``
    field by field and accepts either ``hair_style`` or ``hairStyle``.
    """
    base = CHARACTER_PRESETS[DEFAULT_PRESET]
    if isinstance(preset_or_style, CharacterStyle):
        return preset_or_style
    if isinstance(preset_or_style, str):
        return CHARACTER_PRESETS.get(preset_or_style, base)
    if not preset_or_style:
        return base

    overrides: Dict[str, str] = {}
    for key in ("primary", "secondary", "skin"):
        if preset_or_style.get(key):
            overrides[key] = str(preset_or_style[key])
    hair = preset_or_style.get("hair_style") or preset_or_style.get("hairStyle")
    if hair in HAIR_STYLES:
        overrides["hair_style"] = hair
    accessory = preset_or_style.get("accessory")
    if accessory in ACCESSORIES:
        overrides["accessory"] = accessory
    return replace(base, **overrides)


def create_character(
    id: str,
    name: str,
    preset_or_style: Union[str, CharacterStyle, Mapping[str, Any], None] = DEFAULT_PRESET,
) -> Character:
    return Character(id=id, name=name, style=resolve_style(preset_or_style))


def get_character_presets() -> List[str]:
    return list(CHARACTER_PRESETS)


def get_emotions() -> List[str]:
    return list(EMOTIONS)


def normalize_emotion(value: Any) -> Optional[str]:
    """Lower-case a known emotion name; anything else becomes None."""
    if not value:
        return None
    emotion = str(value).lower()
    return emotion if emotion in EMOTIONS else None
