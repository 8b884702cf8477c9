"""Grid layout for cartoon strips and per-panel composition.

The grid splits the canvas into equal panels. Inside a panel, characters stand
on an evenly spaced baseline near the bottom and each character's speech
bubbles stack top-down in the band between the caption and that character's
head. Bubbles that no longer fit above the head are dropped.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Collection, Dict, List, Tuple

from ..render.primitives import clamp_lines, wrap_words
from .characters import FEET, FIGURE_HEIGHT, HEAD_TOP
from .model import CartoonPanel, DialogLine

GAP = 10
TITLE_ROW = 40
TITLE_TOP = 45

LAYOUT_PATTERN = re.compile(r"(\d+)x(\d+)")

BUBBLE_CHAR_WIDTH = 7.5
MAX_BUBBLE_LINES = 3
MIN_TRUNCATED_CHARS = 8
MAX_BUBBLE_SPACING = 50
MAX_CHARACTER_SCALE = 1.2


@dataclass(frozen=True)
class GridLayout:
    cols: int
    rows: int
    panel_width: float
    panel_height: float

    def panel_origin(self, index: int, has_title: bool) -> Tuple[float, float]:
        col = index % self.cols
        row = index // self.cols
        top = TITLE_TOP if has_title else GAP
        return (
            GAP + col * (self.panel_width + GAP),
            top + row * (self.panel_height + GAP),
        )


def _grid_shape(panel_count: int, layout: str) -> Tuple[int, int]:
    if layout == "auto":
        if panel_count <= 2:
            cols = max(panel_count, 1)
            return cols, 1
        if panel_count <= 4:
            cols = 2
        elif panel_count <= 6:
            cols = 3
        else:
            cols = 4
        return cols, math.ceil(panel_count / cols)

    match = LAYOUT_PATTERN.search(layout or "")
    if match:
        return max(int(match.group(1)), 1), max(int(match.group(2)), 1)
    return 2, max(math.ceil(panel_count / 2), 1)


def calculate_grid(
    panel_count: int,
    layout: str,
    total_width: float,
    total_height: float,
) -> GridLayout:
    """Resolve ``auto`` or ``"<cols>x<rows>"`` into a grid and per-panel size.

    ``auto`` uses as many columns as panels up to 2, then 2 columns up to 4
    panels, 3 up to 6 and 4 beyond. Strings that do not parse fall back to two
    columns.
    """
    cols, rows = _grid_shape(panel_count, layout)
    panel_width = (total_width - GAP * (cols + 1)) / cols
    panel_height = (total_height - GAP * (rows + 1) - TITLE_ROW) / rows
    return GridLayout(cols=cols, rows=rows, panel_width=panel_width, panel_height=panel_height)


def bubble_chars_per_line(max_width: float) -> int:
    return int(max_width // BUBBLE_CHAR_WIDTH)


def wrap_bubble_text(text: str, max_width: float) -> List[str]:
    """Wrap bubble text to at most three lines.

    When the text needs a fourth line the third one is cut and ends in "...".
    """
    chars = bubble_chars_per_line(max_width)
    lines = wrap_words(text, chars)
    return clamp_lines(lines, MAX_BUBBLE_LINES, max(chars - 3, MIN_TRUNCATED_CHARS))


@dataclass(frozen=True)
class CharacterPlacement:
    character_id: str
    x: float
    y: float
    scale: float
    facing: str
    emotion: str


@dataclass(frozen=True)
class BubblePlacement:
    line: DialogLine
    x: float
    y: float
    max_width: float


@dataclass
class PanelComposition:
    characters: List[CharacterPlacement] = field(default_factory=list)
    bubbles: List[BubblePlacement] = field(default_factory=list)
    dropped_lines: int = 0


def caption_height(panel: CartoonPanel) -> float:
    return 18 if panel.caption else 4


def compose_panel(
    panel: CartoonPanel,
    known_characters: Collection[str],
    x: float,
    y: float,
    width: float,
    height: float,
) -> PanelComposition:
    """Place characters and speech bubbles inside one panel.

    Characters the strip does not define are skipped, and so is any dialogue
    spoken by someone not standing in the panel.
    """
    composition = PanelComposition()
    present = [cid for cid in panel.characters if cid in known_characters]
    count = len(present)

    top_band = caption_height(panel)
    available_height = height - top_band - 20
    scale = min(MAX_CHARACTER_SCALE, available_height * 0.65 / FIGURE_HEIGHT)
    char_y = y + height - 30 - FEET * scale
    spacing = width / (count + 1)
    bubble_width = min(width * 0.45, 200)

    lines_by_char: Dict[str, List[DialogLine]] = {}
    for line in panel.dialogue:
        lines_by_char.setdefault(line.character, []).append(line)

    for idx, char_id in enumerate(present):
        char_x = x + spacing * (idx + 1)
        facing = "right" if count <= 1 or idx < count / 2 else "left"
        lines = lines_by_char.get(char_id, [])
        composition.characters.append(
            CharacterPlacement(
                character_id=char_id,
                x=char_x,
                y=char_y,
                scale=scale,
                facing=facing,
                emotion=(lines[0].emotion if lines and lines[0].emotion else "neutral"),
            )
        )

        bubble_top = y + top_band + 15
        head_top = char_y - HEAD_TOP * scale
        band = max(head_top - bubble_top - 20, 0)
        step = min(MAX_BUBBLE_SPACING, band / max(len(lines), 1))
        for line_idx, line in enumerate(lines):
            bubble_y = bubble_top + line_idx * step
            if bubble_y < head_top - 30:
                composition.bubbles.append(
                    BubblePlacement(line=line, x=char_x, y=bubble_y, max_width=bubble_width)
                )

    composition.dropped_lines = len(panel.dialogue) - len(composition.bubbles)
    return composition
