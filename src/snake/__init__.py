# src/snake/__init__.py
"""Snake game engine, tick scheduler and pygame front end."""

from src.snake.config import CFG, Config
from src.snake.grid import Cell, Direction, contains
from src.snake.game import GameStatus, Intent, SnakeGame, Snapshot
from src.snake.scheduler import run_tick_loop

__all__ = [
    "CFG", "Config",
    "Cell", "Direction", "contains",
    "GameStatus", "Intent", "SnakeGame", "Snapshot",
    "run_tick_loop",
]
