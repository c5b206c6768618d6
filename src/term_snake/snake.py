"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections.abc import Iterator

import numpy as np


class Axis(enum.Enum):
    """Movement axis of a direction."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def axis(self) -> Axis:
        return Axis.HORIZONTAL if self.value[1] == 0 else Axis.VERTICAL


class Snake:
    """A snake stored in a fixed-capacity ring buffer of (x, y) segments.

    ``positions[head]`` is the frontmost segment and ``positions[tail]`` the
    rearmost one. Both indices wrap modulo ``capacity``. Growth is deferred:
    the tail only follows the head once ``current_length`` exceeds
    ``target_length``, so a short snake flows in behind its head.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        capacity: int,
        direction: Direction = Direction.LEFT,
        target_length: int = 1,
    ) -> None:
        if capacity < 1:
            raise ValueError("Snake capacity must be at least 1.")
        if target_length < 1:
            raise ValueError("Snake target length must be at least 1.")
        self.capacity = capacity
        self.positions = np.zeros((capacity, 2), dtype=np.int64)
        self.positions[0] = (start_x, start_y)
        self.head = 0
        self.tail = 0
        self.current_length = 1
        self.target_length = target_length
        self.direction = direction

    @property
    def head_position(self) -> tuple[int, int]:
        """Return the head coordinate."""
        x, y = self.positions[self.head]
        return int(x), int(y)

    def turn(self, direction: Direction) -> bool:
        """Change heading, accepting only 90° turns.

        Requests along the current axis (straight ahead or a 180° reversal)
        are ignored. Returns whether the heading changed.
        """
        if direction.axis == self.direction.axis:
            return False
        self.direction = direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head_position
        return x + dx, y + dy

    def advance(self) -> tuple[int, int]:
        """Move the snake one step forward and return the new head.

        No bounds or collision checks happen here; the new head may be off
        the board or on top of the body.
        """
        new_head = self.next_head()
        self.head = (self.head + 1) % self.capacity
        self.positions[self.head] = new_head
        self.current_length += 1
        if self.current_length > self.target_length:
            self.tail = (self.tail + 1) % self.capacity
            self.current_length -= 1
        self._check_invariants()
        return new_head

    def grow(self, segments: int = 1) -> None:
        """Raise the target length; the body catches up on later ticks."""
        self.target_length += segments

    def segments(self) -> Iterator[tuple[int, int]]:
        """Yield live segments from tail to head, walking the ring."""
        for idx in self._indices():
            x, y = self.positions[idx]
            yield int(x), int(y)

    def body_segments(self) -> Iterator[tuple[int, int]]:
        """Yield live segments from tail to head, excluding the head."""
        for idx in self._indices():
            if idx == self.head:
                return
            x, y = self.positions[idx]
            yield int(x), int(y)

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return any(seg == (x, y) for seg in self.segments())

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other live segment."""
        head = self.head_position
        return any(seg == head for seg in self.body_segments())

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.segments()],
            "direction": self.direction.name.lower(),
            "head": self.head,
            "tail": self.tail,
            "current_length": self.current_length,
            "target_length": self.target_length,
        }

    def _indices(self) -> Iterator[int]:
        if self.head >= self.tail:
            yield from range(self.tail, self.head + 1)
        else:
            yield from range(self.tail, self.capacity)
            yield from range(0, self.head + 1)

    def _check_invariants(self) -> None:
        assert 0 <= self.head < self.capacity
        assert 0 <= self.tail < self.capacity
        assert self.current_length == (
            (self.head - self.tail + self.capacity) % self.capacity + 1
        )
