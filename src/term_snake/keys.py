"""Decoded keyboard input."""

from __future__ import annotations

import enum

from term_snake.snake import Direction


class Key(enum.Enum):
    """Keys the game reacts to."""

    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    SPACE = "space"

    @property
    def direction(self) -> Direction | None:
        """Heading requested by an arrow key, else ``None``."""
        return _KEY_DIRECTIONS.get(self)


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}
