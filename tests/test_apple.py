"""Tests for apple placement."""

import numpy as np

from term_snake.apple import ApplePlacer, place_apple
from term_snake.grid import Grid
from term_snake.snake import Direction, Snake


class _ExplodingRng:
    """Fails the test if placement samples at all."""

    def integers(self, *args, **kwargs):
        raise AssertionError("placement should not sample")


def _serpentine_snake() -> Snake:
    """A 4x4 board covered by the snake except for (0, 3)."""
    snake = Snake(0, 0, capacity=16, direction=Direction.RIGHT, target_length=15)
    moves = (
        [Direction.RIGHT] * 3 + [Direction.DOWN]
        + [Direction.LEFT] * 3 + [Direction.DOWN]
        + [Direction.RIGHT] * 3 + [Direction.DOWN]
        + [Direction.LEFT] * 2
    )
    for direction in moves:
        snake.turn(direction)
        snake.advance()
    return snake


class TestBoardFull:
    def test_returns_none_when_target_fills_board(self):
        grid = Grid(width=4, height=4)
        snake = Snake(2, 2, capacity=16, target_length=16)
        assert ApplePlacer(rng=_ExplodingRng()).place(snake, grid) is None

    def test_uses_target_not_current_length(self):
        grid = Grid(width=4, height=4)
        snake = Snake(2, 2, capacity=16, target_length=1)
        snake.grow(15)
        assert snake.current_length == 1
        assert ApplePlacer(rng=_ExplodingRng()).place(snake, grid) is None


class TestPlacement:
    def test_finds_the_only_free_cell(self):
        grid = Grid(width=4, height=4)
        snake = _serpentine_snake()
        assert snake.current_length == 15
        for seed in range(5):
            placer = ApplePlacer(rng=np.random.default_rng(seed))
            assert placer.place(snake, grid) == (0, 3)

    def test_never_on_snake_and_in_bounds(self):
        grid = Grid(width=20, height=14)
        snake = Snake(10, 7, capacity=grid.capacity, target_length=30)
        for direction in [Direction.LEFT] * 8 + [Direction.DOWN] * 5 + [Direction.RIGHT] * 12:
            snake.turn(direction)
            snake.advance()
        body = set(snake.segments())
        placer = ApplePlacer(rng=np.random.default_rng(3))
        for _ in range(200):
            x, y = placer.place(snake, grid)
            assert grid.in_bounds(x, y)
            assert (x, y) not in body

    def test_deterministic_with_seed(self):
        grid = Grid(width=20, height=14)
        snake = Snake(10, 7, capacity=grid.capacity)
        first = ApplePlacer(rng=np.random.default_rng(42)).place(snake, grid)
        second = ApplePlacer(rng=np.random.default_rng(42)).place(snake, grid)
        assert first == second

    def test_place_apple_helper(self):
        grid = Grid(width=4, height=4)
        snake = _serpentine_snake()
        assert place_apple(snake, grid, np.random.default_rng(0)) == (0, 3)

    def test_default_rng(self):
        placer = ApplePlacer()
        assert isinstance(placer.rng, np.random.Generator)
