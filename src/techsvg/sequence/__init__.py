"""UML-style sequence diagrams."""

from .model import Message, Participant, SequenceDiagramConfig
from .layout import SequenceLayout, layout_sequence
from .render import generate_sequence_diagram

__all__ = [
    "Message",
    "Participant",
    "SequenceDiagramConfig",
    "SequenceLayout",
    "layout_sequence",
    "generate_sequence_diagram",
]
