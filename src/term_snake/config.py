"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LEADERBOARD_PATH = "~/.term_snake/leaderboard.json"


@dataclass(frozen=True)
class GameConfig:
    """Board size, pacing, and persistence settings for one game.

    Supports JSON serialization so a setup can be shared and replayed.
    """

    # Board
    width: int = 20
    height: int = 14

    # Snake
    initial_target_length: int = 4

    # Pacing
    tick_interval: float = 1 / 6

    # Randomness
    seed: int | None = None

    # Paths
    leaderboard_path: str = DEFAULT_LEADERBOARD_PATH

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must be positive.")
        if self.width * self.height <= 1:
            raise ValueError(
                "the board must hold more than one cell; increase width or height."
            )
        if self.initial_target_length < 1:
            raise ValueError("initial_target_length must be at least 1.")
        if self.initial_target_length > self.width * self.height:
            raise ValueError(
                "initial_target_length does not fit the configured board."
            )
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

    @property
    def start(self) -> tuple[int, int]:
        """Initial head coordinate, centred on the board."""
        return self.width // 2, self.height // 2

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
