"""Command-line entry point for Term Snake."""

from __future__ import annotations

import argparse
import curses
import dataclasses
import logging
import sys

from term_snake.config import GameConfig
from term_snake.leaderboard import Leaderboard, LeaderboardError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Snake in the terminal, with a local top-10 leaderboard.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr).",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play a game in the terminal.")
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    play_p.add_argument("--width", type=int, default=None)
    play_p.add_argument("--height", type=int, default=None)
    play_p.add_argument(
        "--length", type=int, default=None,
        help="Initial target length of the snake.",
    )
    play_p.add_argument(
        "--tick-interval", type=float, default=None,
        help="Seconds between game ticks.",
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--leaderboard", type=str, default=None)
    play_p.add_argument(
        "--name", type=str, default="player",
        help="Name recorded on the leaderboard.",
    )

    # --- scores ---
    scores_p = sub.add_parser("scores", help="Show the leaderboard.")
    scores_p.add_argument("--leaderboard", type=str, default=None)

    return parser


def _build_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace,
) -> GameConfig:
    flag_map = {
        "width": "width",
        "height": "height",
        "length": "initial_target_length",
        "tick_interval": "tick_interval",
        "seed": "seed",
        "leaderboard": "leaderboard_path",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        return dataclasses.replace(config, **overrides)
    except (OSError, ValueError, TypeError) as exc:
        parser.error(str(exc))


def _load_leaderboard(path: str) -> Leaderboard:
    try:
        return Leaderboard.load(path)
    except LeaderboardError as exc:
        logger.warning("%s; starting with an empty leaderboard.", exc)
        return Leaderboard()


def _play_curses(config: GameConfig) -> int:
    from term_snake.engine import GameEngine
    from term_snake.loop import run_game
    from term_snake.render import CursesRenderer
    from term_snake.terminal import CursesInput, setup_terminal

    def _session(window: curses.window) -> int:
        setup_terminal()
        engine = GameEngine(config)
        return run_game(engine, CursesInput(window), CursesRenderer(window))

    return curses.wrapper(_session)


def _run_play(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if not args.name.strip():
        parser.error("--name must not be blank.")
    config = _build_config(parser, args)
    score = _play_curses(config)

    print("GAME OVER!")  # noqa: T201
    print(f"Your score is: {score}")  # noqa: T201

    board = _load_leaderboard(config.leaderboard_path)
    rank = board.submit(args.name, score)
    if rank is not None:
        board.save(config.leaderboard_path)
        print(f"New leaderboard entry: #{rank}")  # noqa: T201
    for line in board.format_lines():
        print(line)  # noqa: T201
    return 0


def _run_scores(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    path = args.leaderboard or GameConfig().leaderboard_path
    for line in _load_leaderboard(path).format_lines():
        print(line)  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "scores": _run_scores,
    }
    return handlers[args.command](parser, args)


if __name__ == "__main__":
    sys.exit(main())
