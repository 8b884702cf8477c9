"""Flowchart schema and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NODE_TYPES = ("start", "end", "process", "decision", "io", "subprocess", "database", "delay")
EDGE_TYPES = ("default", "yes", "no", "error")
DIRECTIONS = ("TB", "LR")


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class FlowNode:
    id: str
    type: str = "process"
    label: str = ""
    sublabel: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "type": self.type, "label": self.label}
        if self.sublabel:
            data["sublabel"] = self.sublabel
        return data


@dataclass(frozen=True)
class FlowEdge:
    from_id: str
    to_id: str
    label: Optional[str] = None
    type: str = "default"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"from": self.from_id, "to": self.to_id, "type": self.type}
        if self.label:
            data["label"] = self.label
        return data


@dataclass
class FlowchartConfig:
    nodes: List[FlowNode] = field(default_factory=list)
    edges: List[FlowEdge] = field(default_factory=list)
    direction: str = "TB"
    title: str = ""
    theme: Optional[str] = None
    width: int = 800
    height: int = 600

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "direction": self.direction,
            "theme": self.theme,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowchartConfig":
        """Build a config from a raw mapping.

        Unknown node/edge types fall back to ``process``/``default``. Edges are
        kept even when they name unknown nodes; layout and rendering skip them.
        """
        nodes: List[FlowNode] = []
        for idx, node in enumerate(data.get("nodes") or []):
            if not isinstance(node, dict):
                continue
            node_type = str(node.get("type") or "process").lower()
            if node_type not in NODE_TYPES:
                node_type = "process"
            nodes.append(
                FlowNode(
                    id=str(node.get("id") or f"n{idx + 1}"),
                    type=node_type,
                    label=str(node.get("label") or ""),
                    sublabel=_optional_str(node.get("sublabel")),
                )
            )

        edges: List[FlowEdge] = []
        for edge in data.get("edges") or []:
            if not isinstance(edge, dict):
                continue
            source = edge.get("from") or edge.get("source")
            target = edge.get("to") or edge.get("target")
            if not source or not target:
                continue
            edge_type = str(edge.get("type") or "default").lower()
            if edge_type not in EDGE_TYPES:
                edge_type = "default"
            edges.append(
                FlowEdge(
                    from_id=str(source),
                    to_id=str(target),
                    label=_optional_str(edge.get("label")),
                    type=edge_type,
                )
            )

        direction = str(data.get("direction") or "TB").upper()
        if direction not in DIRECTIONS:
            direction = "TB"

        return cls(
            nodes=nodes,
            edges=edges,
            direction=direction,
            title=str(data.get("title") or ""),
            theme=_optional_str(data.get("theme")),
            width=int(data.get("width") or 800),
            height=int(data.get("height") or 600),
        )
