"""Lane layout for sequence diagrams.

Participants get evenly spaced columns; every message gets its own fixed-height
row in array order, whatever the distance between sender and receiver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .model import Message, Participant

HEADER_Y = 80
FIRST_ROW_Y = 160
ROW_HEIGHT = 60
LIFELINE_TAIL = 40
BOTTOM_MARGIN = 40


@dataclass(frozen=True)
class MessageRow:
    message: Message
    from_x: float
    to_x: float
    y: float


@dataclass(frozen=True)
class SequenceLayout:
    # x of each participant, by position in the participant list
    columns: List[float]
    lanes: Dict[str, float]
    rows: List[MessageRow]
    header_y: float
    lifeline_end_y: float
    height: float


def column_positions(participants: List[Participant], width: float) -> List[float]:
    spacing = width / (len(participants) + 1)
    return [spacing * (idx + 1) for idx in range(len(participants))]


def lane_positions(participants: List[Participant], width: float) -> Dict[str, float]:
    """Map participant id to lane x; a repeated id resolves to its first lane."""
    lanes: Dict[str, float] = {}
    for p, x in zip(participants, column_positions(participants, width)):
        lanes.setdefault(p.id, x)
    return lanes


def message_y(index: int) -> float:
    return FIRST_ROW_Y + index * ROW_HEIGHT


def layout_sequence(
    participants: List[Participant],
    messages: List[Message],
    width: float = 800,
    height: float = 600,
) -> SequenceLayout:
    """Place lanes and message rows; the configured height is only a floor.

    An unknown sender sits at x=0 and an unknown receiver falls back to the
    sender's lane, so a bad reference degrades into a short stub.
    """
    columns = column_positions(participants, width)
    lanes = lane_positions(participants, width)
    rows: List[MessageRow] = []
    for idx, message in enumerate(messages):
        from_x = lanes.get(message.from_id, 0)
        to_x = lanes.get(message.to_id, from_x)
        rows.append(MessageRow(message=message, from_x=from_x, to_x=to_x, y=message_y(idx)))

    lifeline_end_y = FIRST_ROW_Y + len(messages) * ROW_HEIGHT + LIFELINE_TAIL
    return SequenceLayout(
        columns=columns,
        lanes=lanes,
        rows=rows,
        header_y=HEADER_Y,
        lifeline_end_y=lifeline_end_y,
        height=max(height, lifeline_end_y + BOTTOM_MARGIN),
    )
