"""Flowchart domain models, layout and rendering."""

from .model import FlowchartConfig, FlowEdge, FlowNode
from .layout import NodePosition, assign_levels, find_roots, layout_flowchart
from .render import generate_flowchart

__all__ = [
    "FlowchartConfig",
    "FlowEdge",
    "FlowNode",
    "NodePosition",
    "assign_levels",
    "find_roots",
    "layout_flowchart",
    "generate_flowchart",
]
