"""Flowchart level layout.

Nodes are leveled by a breadth-first walk from every root at once; the first
visit fixes a node's level, so a node reachable by both a short and a long
path stays on the shallower level. Nodes no root reaches are left unplaced.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Tuple

from .model import FlowEdge, FlowNode

LEVEL_OFFSET = 80

# (node_width, node_height, h_spacing, v_spacing) per direction
SIZES: Dict[str, Tuple[int, int, int, int]] = {
    "TB": (120, 50, 40, 80),
    "LR": (100, 60, 60, 40),
}


@dataclass(frozen=True)
class NodePosition:
    x: float
    y: float
    width: float
    height: float

    @property
    def cx(self) -> float:
        return self.x + self.width / 2

    @property
    def cy(self) -> float:
        return self.y + self.height / 2


def _known_edges(nodes: Iterable[FlowNode], edges: Iterable[FlowEdge]) -> List[FlowEdge]:
    ids = {node.id for node in nodes}
    return [edge for edge in edges if edge.from_id in ids and edge.to_id in ids]


def _children(nodes: List[FlowNode], edges: List[FlowEdge]) -> Dict[str, List[str]]:
    children: Dict[str, List[str]] = {node.id: [] for node in nodes}
    for edge in edges:
        children[edge.from_id].append(edge.to_id)
    return children


def _parents(nodes: List[FlowNode], edges: List[FlowEdge]) -> Dict[str, List[str]]:
    parents: Dict[str, List[str]] = {node.id: [] for node in nodes}
    for edge in edges:
        parents[edge.to_id].append(edge.from_id)
    return parents


def find_roots(nodes: List[FlowNode], edges: List[FlowEdge]) -> List[str]:
    """Ids of nodes with no incoming edge, in node order."""
    parents = _parents(nodes, _known_edges(nodes, edges))
    return [node.id for node in nodes if not parents[node.id]]


def assign_levels(nodes: List[FlowNode], edges: List[FlowEdge]) -> Dict[str, int]:
    """Map each root-reachable node id to its BFS level (insertion order = visit order)."""
    known = _known_edges(nodes, edges)
    children = _children(nodes, known)
    parents = _parents(nodes, known)

    queue: Deque[Tuple[str, int]] = deque(
        (node.id, 0) for node in nodes if not parents[node.id]
    )
    levels: Dict[str, int] = {}
    while queue:
        node_id, level = queue.popleft()
        if node_id in levels:
            continue
        levels[node_id] = level
        for child_id in children[node_id]:
            if child_id not in levels:
                queue.append((child_id, level + 1))
    return levels


def group_levels(levels: Dict[str, int]) -> Dict[int, List[str]]:
    level_map: Dict[int, List[str]] = {}
    for node_id, level in levels.items():
        level_map.setdefault(level, []).append(node_id)
    return level_map


def layout_flowchart(
    nodes: List[FlowNode],
    edges: List[FlowEdge],
    direction: str = "TB",
    width: float = 800,
    height: float = 600,
) -> Dict[str, NodePosition]:
    """Return a position for every node reachable from a root.

    Each level is centered along the transverse axis (horizontal for ``TB``,
    vertical for ``LR``); successive levels step along the primary axis by one
    node size plus spacing.
    """
    node_w, node_h, h_spacing, v_spacing = SIZES.get(direction, SIZES["TB"])
    positions: Dict[str, NodePosition] = {}

    for level, node_ids in group_levels(assign_levels(nodes, edges)).items():
        count = len(node_ids)
        if direction == "LR":
            total_height = count * node_h + (count - 1) * v_spacing
            start_y = (height - total_height) / 2
            x = LEVEL_OFFSET + level * (node_w + h_spacing)
            for idx, node_id in enumerate(node_ids):
                positions[node_id] = NodePosition(
                    x=x, y=start_y + idx * (node_h + v_spacing), width=node_w, height=node_h
                )
        else:
            total_width = count * node_w + (count - 1) * h_spacing
            start_x = (width - total_width) / 2
            y = LEVEL_OFFSET + level * (node_h + v_spacing)
            for idx, node_id in enumerate(node_ids):
                positions[node_id] = NodePosition(
                    x=start_x + idx * (node_w + h_spacing), y=y, width=node_w, height=node_h
                )

    return positions
