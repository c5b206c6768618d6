"""Single-threaded polling game loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from term_snake.engine import TickOutcome

if TYPE_CHECKING:
    from term_snake.engine import GameEngine
    from term_snake.render import Renderer
    from term_snake.terminal import InputSource

logger = logging.getLogger(__name__)


def run_game(
    engine: GameEngine,
    source: InputSource,
    renderer: Renderer,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Drive *engine* until the game ends and return the final score.

    Input is polled on every iteration without blocking. A tick runs only
    once ``engine.config.tick_interval`` seconds have elapsed since the last
    one; a slow iteration skips ticks instead of queueing them.
    """
    interval = engine.config.tick_interval
    renderer.render(engine.occupancy, engine.score)
    last_tick = clock()
    iterations = 0

    while not engine.game_over:
        iterations += 1
        engine.handle_key(source.poll())
        if engine.game_over:
            break

        now = clock()
        if now - last_tick < interval:
            continue
        last_tick = now

        if engine.step() in (TickOutcome.PAUSED, TickOutcome.GAME_OVER):
            continue
        renderer.render(engine.occupancy, engine.score)

    logger.info(
        "Loop finished after %d iteration(s), %d tick(s); score %d.",
        iterations, engine.tick, engine.score,
    )
    return engine.score
