# main.py
import argparse
import asyncio
import contextlib
import logging
from dataclasses import replace

import pygame  # type: ignore

from .config import CFG, FPS
from .game import Intent, SnakeGame
from .scheduler import run_tick_loop
from .view import draw_game, window_size

KEY_TO_INTENT = {
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_w: Intent.MOVE_UP,
    pygame.K_s: Intent.MOVE_DOWN,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_d: Intent.MOVE_RIGHT,
    pygame.K_SPACE: Intent.TOGGLE_PAUSE,
    pygame.K_RETURN: Intent.RESTART,
    pygame.K_KP_ENTER: Intent.RESTART,
    pygame.K_ESCAPE: Intent.QUIT,
}


def handle_input(game: SnakeGame) -> bool:
    """Process events and forward intents to the game. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            intent = KEY_TO_INTENT.get(event.key)
            if intent is Intent.QUIT:
                return False
            if intent is not None:
                game.apply(intent)
    return True


async def play(game: SnakeGame, screen: pygame.Surface, font: pygame.font.Font) -> None:
    """Frame loop; the tick loop runs beside it on the same event loop."""
    ticker = asyncio.create_task(run_tick_loop(game))
    try:
        while handle_input(game):
            draw_game(screen, font, game.snapshot())
            pygame.display.flip()
            await asyncio.sleep(1 / FPS)
    finally:
        ticker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await ticker


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--width", type=int, default=CFG.board_width,
                        help="Board width in cells.")
    parser.add_argument("--height", type=int, default=CFG.board_height,
                        help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (random if omitted).")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = replace(CFG, board_width=args.width, board_height=args.height, seed=args.seed)
    game = SnakeGame(config)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(*game.board_dimensions))
    pygame.display.set_caption("Snake")
    try:
        asyncio.run(play(game, screen, font))
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
