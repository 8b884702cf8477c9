"""Sequence diagram schema and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PARTICIPANT_TYPES = ("actor", "service", "database", "queue", "external")
MESSAGE_TYPES = ("sync", "async", "reply", "self")


@dataclass(frozen=True)
class Participant:
    id: str
    name: str
    type: str = "service"


@dataclass(frozen=True)
class Message:
    from_id: str
    to_id: str
    text: str
    type: str = "sync"
    note: Optional[str] = None

    @property
    def is_self(self) -> bool:
        return self.from_id == self.to_id or self.type == "self"


@dataclass
class SequenceDiagramConfig:
    participants: List[Participant] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)
    title: str = ""
    theme: Optional[str] = None
    width: int = 800
    height: int = 600

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SequenceDiagramConfig":
        participants: List[Participant] = []
        for idx, raw in enumerate(data.get("participants") or []):
            if not isinstance(raw, dict):
                continue
            participant_id = str(raw.get("id") or f"p{idx + 1}")
            participant_type = str(raw.get("type") or "service").lower()
            if participant_type not in PARTICIPANT_TYPES:
                participant_type = "service"
            participants.append(
                Participant(
                    id=participant_id,
                    name=str(raw.get("name") or participant_id),
                    type=participant_type,
                )
            )

        messages: List[Message] = []
        for raw in data.get("messages") or []:
            if not isinstance(raw, dict):
                continue
            message_type = str(raw.get("type") or "sync").lower()
            if message_type not in MESSAGE_TYPES:
                message_type = "sync"
            note = raw.get("note")
            messages.append(
                Message(
                    from_id=str(raw.get("from") or ""),
                    to_id=str(raw.get("to") or ""),
                    text=str(raw.get("text") or ""),
                    type=message_type,
                    note=str(note) if note else None,
                )
            )

        theme = data.get("theme")
        return cls(
            participants=participants,
            messages=messages,
            title=str(data.get("title") or ""),
            theme=str(theme) if theme else None,
            width=int(data.get("width") or 800),
            height=int(data.get("height") or 600),
        )
