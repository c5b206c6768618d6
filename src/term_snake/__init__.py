"""Term Snake — terminal snake game engine."""

from term_snake.apple import ApplePlacer, place_apple
from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GameOverReason, GameState, TickOutcome
from term_snake.grid import CellType, Grid
from term_snake.keys import Key
from term_snake.leaderboard import Leaderboard, ScoreRecord
from term_snake.snake import Direction, Snake

__all__ = [
    "ApplePlacer",
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameState",
    "Grid",
    "Key",
    "Leaderboard",
    "ScoreRecord",
    "Snake",
    "TickOutcome",
    "place_apple",
]
