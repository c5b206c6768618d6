"""Tick-based game engine composing grid, snake, and apple logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from term_snake.apple import ApplePlacer
from term_snake.config import GameConfig
from term_snake.grid import Grid
from term_snake.keys import Key
from term_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

APPLE_SCORE = 10


class GameState(enum.Enum):
    """Lifecycle of a single game. ``GAME_OVER`` is terminal."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(enum.Enum):
    """What ended the game."""

    ESCAPE = "escape"
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


class TickOutcome(enum.Enum):
    """Result of one call to :meth:`GameEngine.step`."""

    CONTINUE = "continue"
    ATE_APPLE = "ate_apple"
    COLLISION = "collision"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine exclusively owns the grid, snake, apple, and score. Each call
    to :meth:`step` advances the game by one tick and rebuilds the occupancy
    projection handed to the renderer.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        placer: ApplePlacer | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(width=self.config.width, height=self.config.height)
        self.rng = np.random.default_rng(self.config.seed)
        self.placer = placer if placer is not None else ApplePlacer(self.rng)

        start_x, start_y = self.config.start
        self.snake = Snake(
            start_x,
            start_y,
            capacity=self.grid.capacity,
            direction=Direction.LEFT,
            target_length=self.config.initial_target_length,
        )

        self.apple: tuple[int, int] | None = None
        self.score = 0
        self.tick = 0
        self.state = GameState.RUNNING
        self.reason: GameOverReason | None = None
        self.paused = False
        self._pending_direction: Direction | None = None

        self.grid.project(self.snake.segments(), self.apple)

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def occupancy(self) -> np.ndarray:
        """Occupancy projection as of the last tick."""
        return self.grid.cells

    def handle_key(self, key: Key) -> None:
        """Apply one decoded key press."""
        if self.game_over or key is Key.NONE:
            return
        if key is Key.ESCAPE:
            self._end(GameOverReason.ESCAPE)
        elif key is Key.SPACE:
            self.paused = not self.paused
            logger.debug("Paused: %s", self.paused)
        elif key.direction is not None:
            # Latest request wins; the turn is validated when applied.
            self._pending_direction = key.direction

    def step(self) -> TickOutcome:
        """Advance the game by one tick."""
        if self.game_over:
            return TickOutcome.GAME_OVER
        if self.paused:
            return TickOutcome.PAUSED

        if self._pending_direction is not None:
            self.snake.turn(self._pending_direction)
            self._pending_direction = None

        head_x, head_y = self.snake.advance()
        self.tick += 1

        outcome = self._check_collisions(head_x, head_y)
        if outcome is TickOutcome.ATE_APPLE:
            self.snake.grow()
            self.score += APPLE_SCORE
            self.apple = None
            logger.debug(
                "Apple eaten at (%d, %d); score %d.", head_x, head_y, self.score,
            )

        if not self.game_over and self.apple is None:
            self.apple = self.placer.place(self.snake, self.grid)
            if self.apple is None:
                self._end(GameOverReason.BOARD_FULL)

        self.grid.project(self.snake.segments(), self.apple)
        return outcome

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "state": self.state.value,
            "reason": self.reason.value if self.reason is not None else None,
            "paused": self.paused,
            "apple": list(self.apple) if self.apple is not None else None,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
        }

    def _check_collisions(self, x: int, y: int) -> TickOutcome:
        # Bounds first: later checks assume an on-board head.
        if not self.grid.in_bounds(x, y):
            self._end(GameOverReason.WALL)
            return TickOutcome.COLLISION
        if self.snake.self_collision():
            self._end(GameOverReason.SELF)
            return TickOutcome.COLLISION
        if self.apple == (x, y):
            return TickOutcome.ATE_APPLE
        return TickOutcome.CONTINUE

    def _end(self, reason: GameOverReason) -> None:
        """Mark the game as over."""
        self.state = GameState.GAME_OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.tick, self.score,
        )
