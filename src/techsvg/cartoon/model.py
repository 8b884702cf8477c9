"""Cartoon strip schema and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .characters import normalize_emotion

BUBBLE_TYPES = ("speech", "thought", "shout")


@dataclass(frozen=True)
class DialogLine:
    character: str
    text: str
    emotion: Optional[str] = None
    type: str = "speech"


@dataclass(frozen=True)
class CartoonPanel:
    characters: List[str] = field(default_factory=list)
    dialogue: List[DialogLine] = field(default_factory=list)
    caption: Optional[str] = None


@dataclass(frozen=True)
class CharacterDef:
    name: str
    preset: Optional[str] = None
    style: Optional[Mapping[str, Any]] = None


@dataclass
class CartoonStripConfig:
    characters: Dict[str, CharacterDef] = field(default_factory=dict)
    panels: List[CartoonPanel] = field(default_factory=list)
    layout: str = "auto"
    title: str = ""
    theme: Optional[str] = None
    width: int = 800
    height: int = 600

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CartoonStripConfig":
        characters: Dict[str, CharacterDef] = {}
        for char_id, raw in (data.get("characters") or {}).items():
            if isinstance(raw, str):
                characters[str(char_id)] = CharacterDef(name=raw)
                continue
            if not isinstance(raw, Mapping):
                continue
            style = raw.get("style")
            characters[str(char_id)] = CharacterDef(
                name=str(raw.get("name") or char_id),
                preset=str(raw["preset"]) if raw.get("preset") else None,
                style=style if isinstance(style, Mapping) else None,
            )

        panels: List[CartoonPanel] = []
        for raw_panel in data.get("panels") or []:
            if not isinstance(raw_panel, Mapping):
                continue
            dialogue: List[DialogLine] = []
            for raw_line in raw_panel.get("dialogue") or []:
                if not isinstance(raw_line, Mapping):
                    continue
                bubble_type = str(raw_line.get("type") or "speech").lower()
                if bubble_type not in BUBBLE_TYPES:
                    bubble_type = "speech"
                dialogue.append(
                    DialogLine(
                        character=str(raw_line.get("character") or ""),
                        text=str(raw_line.get("text") or ""),
                        emotion=normalize_emotion(raw_line.get("emotion")),
                        type=bubble_type,
                    )
                )
            caption = raw_panel.get("caption")
            panels.append(
                CartoonPanel(
                    characters=[str(c) for c in raw_panel.get("characters") or []],
                    dialogue=dialogue,
                    caption=str(caption) if caption else None,
                )
            )

        theme = data.get("theme")
        return cls(
            characters=characters,
            panels=panels,
            layout=str(data.get("layout") or "auto"),
            title=str(data.get("title") or ""),
            theme=str(theme) if theme else None,
            width=int(data.get("width") or 800),
            height=int(data.get("height") or 600),
        )
