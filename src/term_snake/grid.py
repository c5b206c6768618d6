"""Grid bounds and the per-tick occupancy projection."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    APPLE = 2


class Grid:
    """Fixed-size game board.

    The grid owns no game state of its own: :meth:`project` rebuilds the
    occupancy array from the snake segments and the apple every tick.
    Coordinates are ``(x, y)`` pairs; the array is indexed ``[y, x]``.
    """

    def __init__(self, width: int = 20, height: int = 14) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @property
    def capacity(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def project(
        self,
        segments: Iterable[tuple[int, int]],
        apple: tuple[int, int] | None,
    ) -> np.ndarray:
        """Rebuild the occupancy array from live state and return it.

        The apple is painted first so a segment sharing its cell wins.
        Out-of-bounds segments (a head that just left the board) are skipped.
        """
        self.clear()
        if apple is not None:
            self.set(apple[0], apple[1], CellType.APPLE)
        for x, y in segments:
            if self.in_bounds(x, y):
                self.set(x, y, CellType.SNAKE)
        return self.cells

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
