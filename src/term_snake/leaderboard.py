"""Top-10 leaderboard persisted as JSON."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

NAME_WIDTH = 16
MAX_RECORDS = 10


class LeaderboardError(ValueError):
    """Raised when a leaderboard file cannot be parsed."""


class ScoreRecord(BaseModel):
    """One leaderboard entry."""

    name: str = Field(min_length=1, max_length=NAME_WIDTH)
    score: int = Field(ge=0)


class Leaderboard(BaseModel):
    """Best scores, highest first.

    An equal score never displaces an entry that is already on the board.
    """

    records: list[ScoreRecord] = Field(default_factory=list, max_length=MAX_RECORDS)

    def qualifies(self, score: int) -> bool:
        """Return True if *score* would earn a place on the board."""
        if len(self.records) < MAX_RECORDS:
            return True
        return score > self.records[-1].score

    def submit(self, name: str, score: int) -> int | None:
        """Insert a score and return its 1-based rank, or None if it missed."""
        if not self.qualifies(score):
            return None
        record = ScoreRecord(name=name.strip()[:NAME_WIDTH], score=score)
        rank = next(
            (i for i, r in enumerate(self.records) if r.score < score),
            len(self.records),
        )
        self.records.insert(rank, record)
        del self.records[MAX_RECORDS:]
        logger.info(
            "%s entered the leaderboard at #%d with %d.", record.name, rank + 1, score,
        )
        return rank + 1

    def format_lines(self) -> list[str]:
        """Render the board as aligned text lines."""
        if not self.records:
            return ["No scores yet."]
        return [
            f"{i:>2}. {r.name:<{NAME_WIDTH}} {r.score:>6}"
            for i, r in enumerate(self.records, start=1)
        ]

    @classmethod
    def load(cls, path: str | Path) -> Leaderboard:
        """Read a leaderboard file; a missing file is an empty board."""
        p = Path(path).expanduser()
        if not p.exists():
            logger.debug("No leaderboard at %s; starting empty.", p)
            return cls()
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LeaderboardError(f"Unreadable leaderboard file {p}: {exc}") from exc
        try:
            board = cls.model_validate_json(text)
        except ValidationError as exc:
            raise LeaderboardError(f"Malformed leaderboard file {p}: {exc}") from exc
        board.records.sort(key=lambda r: r.score, reverse=True)
        return board

    def save(self, path: str | Path) -> None:
        """Write the board as JSON, replacing the previous file."""
        p = Path(path).expanduser()
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_name(p.name + ".tmp")
        tmp.write_text(self.model_dump_json(indent=2) + "\n")
        tmp.replace(p)
        logger.info("Leaderboard saved to %s", p)
