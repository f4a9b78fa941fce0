# scheduler.py
from __future__ import annotations

import asyncio
import logging
import weakref
from typing import Awaitable, Callable, Optional

from .game import SnakeGame

logger = logging.getLogger(__name__)


async def run_tick_loop(
    game: SnakeGame,
    on_tick: Optional[Callable[[], None]] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> int:
    """
    Drive `game` forever: wait tick_delay(), then tick(), and repeat.

    Only a weak reference to the game is kept, so the loop stops on its
    own once the owner drops the game. That is checked both before the
    wait and before the tick, and ends the loop quietly.
    on_tick is called after every tick that changed the state.

    Returns the number of ticks delivered.
    """
    handle = weakref.ref(game)
    del game
    ticks = 0

    while True:
        game = handle()
        if game is None:
            break
        delay = game.tick_delay().total_seconds()
        del game

        await sleep(delay)

        game = handle()
        if game is None:
            break
        changed = game.tick()
        del game
        ticks += 1

        if changed and on_tick is not None:
            on_tick()

    logger.debug(f"Tick loop stopped after {ticks} ticks: game is gone")
    return ticks
