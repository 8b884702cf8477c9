"""YAML/JSON descriptions of scenes and cartoon strips.

A description is a mapping with ``type: scene`` or ``type: cartoon``. Parsing
validates structure only; anything optional is left for the generators to
normalize.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

import yaml

from ..cartoon import CartoonStripConfig, generate_cartoon_strip
from ..core.exceptions import DescriptionError, DescriptionParseError
from ..generator import DEFAULT_HEIGHT, DEFAULT_WIDTH, GenerateOptions, generate_svg
from ..utils.logging import get_logger

logger = get_logger(__name__)

DESCRIPTION_TYPES = ("scene", "cartoon")


def _require_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _validate_dimensions(desc: Mapping[str, Any]) -> None:
    for key in ("width", "height"):
        value = desc.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise DescriptionError(
                f'Invalid description: "{key}" must be a positive integer',
                context={key: value},
            )


def validate_description(desc: Any) -> None:
    """Raise ``DescriptionError`` naming the first missing or invalid field."""
    if not isinstance(desc, Mapping):
        raise DescriptionError("Invalid description: must be an object")

    desc_type = desc.get("type")
    if not desc_type:
        raise DescriptionError(
            'Invalid description: missing "type" field (must be "scene" or "cartoon")'
        )
    if desc_type not in DESCRIPTION_TYPES:
        raise DescriptionError(
            f'Invalid description type: "{desc_type}" (must be "scene" or "cartoon")',
            context={"type": desc_type},
        )
    _validate_dimensions(desc)

    if desc_type == "scene":
        if not _require_text(desc.get("title")):
            raise DescriptionError('Invalid scene description: missing or invalid "title" field')
        return

    if not isinstance(desc.get("characters"), Mapping):
        raise DescriptionError('Invalid cartoon description: missing "characters" field')
    panels = desc.get("panels")
    if not isinstance(panels, list) or not panels:
        raise DescriptionError('Invalid cartoon description: missing or empty "panels" array')

    for i, panel in enumerate(panels):
        if not isinstance(panel, Mapping) or not isinstance(panel.get("characters"), list):
            raise DescriptionError(
                f'Invalid panel {i}: missing "characters" array', context={"panel": i}
            )
        if not isinstance(panel.get("dialogue"), list):
            raise DescriptionError(
                f'Invalid panel {i}: missing "dialogue" array', context={"panel": i}
            )
        for j, line in enumerate(panel["dialogue"]):
            line = line if isinstance(line, Mapping) else {}
            if not _require_text(line.get("character")):
                raise DescriptionError(
                    f'Invalid dialogue in panel {i}, line {j}: missing "character" field',
                    context={"panel": i, "line": j},
                )
            if not _require_text(line.get("text")):
                raise DescriptionError(
                    f'Invalid dialogue in panel {i}, line {j}: missing "text" field',
                    context={"panel": i, "line": j},
                )


def parse_yaml(source: str) -> Dict[str, Any]:
    try:
        parsed = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise DescriptionParseError(f"Invalid YAML: {exc}") from exc
    validate_description(parsed)
    return parsed


def parse_json(source: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(source)
    except json.JSONDecodeError as exc:
        raise DescriptionParseError(
            f"Invalid JSON: {exc.msg}", context={"line": exc.lineno, "column": exc.colno}
        ) from exc
    validate_description(parsed)
    return parsed


def generate_from_description(desc: Mapping[str, Any]) -> str:
    """Render a validated description to an SVG string."""
    validate_description(desc)
    logger.debug("Generating from description type=%s", desc["type"])

    if desc["type"] == "scene":
        options = GenerateOptions(
            width=int(desc.get("width") or DEFAULT_WIDTH),
            height=int(desc.get("height") or DEFAULT_HEIGHT),
            theme=desc.get("theme"),
            scene=desc.get("scene"),
        )
        return generate_svg(desc["title"], str(desc.get("content") or ""), options).svg

    return generate_cartoon_strip(CartoonStripConfig.from_dict(desc))


def generate_from_yaml(source: str) -> str:
    return generate_from_description(parse_yaml(source))


def generate_from_json(source: str) -> str:
    return generate_from_description(parse_json(source))


SCENE_YAML_EXAMPLE = """\
type: scene
title: "Database Migration Strategy"
content: "PostgreSQL replication and failover"
scene: database
theme: github-dark
width: 700
height: 420"""

CARTOON_YAML_EXAMPLE = """\
type: cartoon
title: "The Code Review"
theme: github-dark
width: 800
height: 500
layout: "2x1"

characters:
  alice:
    name: Alice
    preset: dev1
  bob:
    name: Bob
    preset: dev2

panels:
  - characters: [alice, bob]
    caption: "Monday morning..."
    dialogue:
      - character: alice
        text: "Did you see the PR I submitted?"
        emotion: neutral
      - character: bob
        text: "The one with 2000 lines?"
        emotion: surprised

  - characters: [alice, bob]
    caption: "Later..."
    dialogue:
      - character: bob
        text: "Maybe we should split this up?"
        emotion: thinking
      - character: alice
        text: "Good idea!"
        emotion: happy"""

CARTOON_JSON_EXAMPLE = json.dumps(
    {
        "type": "cartoon",
        "title": "Debugging Session",
        "theme": "dracula",
        "width": 800,
        "height": 400,
        "layout": "2x1",
        "characters": {
            "dev": {"name": "Dev", "preset": "dev1"},
            "rubber": {"name": "Rubber Duck", "preset": "robot"},
        },
        "panels": [
            {
                "characters": ["dev", "rubber"],
                "dialogue": [
                    {"character": "dev", "text": "Why isn't this working?!", "emotion": "angry"},
                    {"character": "rubber", "text": "...", "emotion": "neutral"},
                ],
            },
            {
                "characters": ["dev", "rubber"],
                "dialogue": [
                    {"character": "dev", "text": "Oh wait, I see it now!", "emotion": "excited"},
                    {"character": "rubber", "text": "...", "emotion": "neutral"},
                ],
            },
        ],
    },
    indent=2,
)
