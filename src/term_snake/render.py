"""Text rendering of the occupancy projection."""

from __future__ import annotations

import curses
import sys
from typing import Protocol, TextIO

import numpy as np

from term_snake.grid import CellType

WALL_CHAR = "H"
INSTRUCTIONS = "Use arrow keys to turn snake. Space pauses, ESC quits."

CELL_CHARS: dict[CellType, str] = {
    CellType.EMPTY: " ",
    CellType.SNAKE: "o",
    CellType.APPLE: "b",
}

# Lookup table indexed by CellType value.
_CHAR_TABLE = np.array([CELL_CHARS[c] for c in sorted(CellType)])


class Renderer(Protocol):
    def render(self, occupancy: np.ndarray, score: int) -> None: ...


def render_lines(occupancy: np.ndarray, score: int) -> list[str]:
    """Lay out one frame: score header, walled board, instructions."""
    width = occupancy.shape[1]
    border = WALL_CHAR * (width + 2)
    chars = _CHAR_TABLE[occupancy]
    lines = [f"Snake game    Your score: {score}", border]
    lines.extend(WALL_CHAR + "".join(row) + WALL_CHAR for row in chars)
    lines.append(border)
    lines.append("")
    lines.append(INSTRUCTIONS)
    return lines


class TextRenderer:
    """Writes frames to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.frames = 0

    def render(self, occupancy: np.ndarray, score: int) -> None:
        self.stream.write("\n".join(render_lines(occupancy, score)) + "\n")
        self.stream.flush()
        self.frames += 1


class CursesRenderer:
    """Redraws the frame in a curses window on every tick."""

    def __init__(self, window: curses.window) -> None:
        self.window = window

    def render(self, occupancy: np.ndarray, score: int) -> None:
        self.window.erase()
        for row, line in enumerate(render_lines(occupancy, score)):
            try:
                self.window.addstr(row, 0, line)
            except curses.error:
                # Terminal too small for the full frame; keep what fits.
                break
        self.window.refresh()
