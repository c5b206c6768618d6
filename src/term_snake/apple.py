"""Apple placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.grid import Grid
    from term_snake.snake import Snake

logger = logging.getLogger(__name__)


class ApplePlacer:
    """Finds a free cell for the next apple.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Sampling is plain rejection sampling over the whole board: it never
    falls back to enumerating free cells.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, snake: Snake, grid: Grid) -> tuple[int, int] | None:
        """Return a cell not covered by any live segment.

        Returns ``None`` without sampling when the snake is long enough to
        cover the whole board.
        """
        if snake.target_length == grid.width * grid.height:
            logger.info(
                "Board full: target length %d fills the %dx%d grid.",
                snake.target_length, grid.width, grid.height,
            )
            return None

        attempts = 0
        while True:
            attempts += 1
            x = int(self.rng.integers(grid.width))
            y = int(self.rng.integers(grid.height))
            if not snake.occupies(x, y):
                logger.debug(
                    "Apple placed at (%d, %d) after %d attempt(s).",
                    x, y, attempts,
                )
                return x, y


def place_apple(
    snake: Snake,
    grid: Grid,
    rng: np.random.Generator | None = None,
) -> tuple[int, int] | None:
    """Convenience wrapper around :meth:`ApplePlacer.place`."""
    return ApplePlacer(rng).place(snake, grid)
