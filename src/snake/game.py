# game.py
from __future__ import annotations

import enum
import logging
import random
from collections import deque
from dataclasses import dataclass
from datetime import timedelta
from typing import Deque, Optional, Tuple

import numpy as np  # type: ignore

from .config import CFG, Config
from .food import spawn_food
from .grid import Cell, CellType, Direction, contains, occupancy

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Intent(enum.Enum):
    """Commands the front end can send to the engine."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"


_TURNS = {
    Intent.MOVE_UP: Direction.UP,
    Intent.MOVE_DOWN: Direction.DOWN,
    Intent.MOVE_LEFT: Direction.LEFT,
    Intent.MOVE_RIGHT: Direction.RIGHT,
}

_BOARD_CHARS = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "S",
    CellType.HEAD: "H",
    CellType.FOOD: "F",
}


# ---------- Helpers ----------
def build_initial_snake(width: int, height: int, length: int) -> Deque[Cell]:
    """Horizontal snake with its head at the board centre, facing right."""
    start_x, start_y = width // 2, height // 2
    return deque(Cell(start_x - offset, start_y) for offset in range(length))


def compute_tick_delay_ms(score: int, config: Config) -> int:
    speedup = (score // config.foods_per_speedup) * config.speed_step_ms
    return max(config.base_tick_ms - speedup, config.min_tick_ms)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the engine state, taken once per frame."""

    status: GameStatus
    score: int
    high_score: int
    snake: Tuple[Cell, ...]   # head at index 0
    food: Optional[Cell]
    width: int
    height: int
    direction: Direction
    tick_delay_ms: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def to_grid(self) -> np.ndarray:
        """(height, width) int8 array of CellType codes."""
        grid = occupancy(self.snake, self.width, self.height)
        if self.food is not None:
            grid[self.food.y, self.food.x] = CellType.FOOD
        hx, hy = self.head
        if contains(self.head, self.width, self.height):
            grid[hy, hx] = CellType.HEAD
        return grid

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Rows are printed top (y = 0) to bottom.
        """
        grid = self.to_grid()
        return "\n".join(
            "".join(_BOARD_CHARS[CellType(code)] for code in row) for row in grid
        )


# ---------- Engine ----------
class SnakeGame:
    """
    Authoritative single-player snake simulation.

    The front end submits intents (turn, toggle_pause, restart) and a
    scheduler calls tick() on a cadence taken from tick_delay(). Every
    intent returns True when it changed the state, so the caller knows
    whether a redraw is due.
    """

    def __init__(self, config: Config = CFG, seed: Optional[int] = None):
        self.config = config
        self.rng = random.Random(config.seed if seed is None else seed)
        self.width = config.board_width
        self.height = config.board_height
        self._high_score = 0
        self._reset()

    # ----- queries -----
    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def snake_cells(self) -> Tuple[Cell, ...]:
        return tuple(self._snake)

    @property
    def food_cell(self) -> Optional[Cell]:
        return self._food

    @property
    def board_dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def tick_delay_ms(self) -> int:
        return compute_tick_delay_ms(self._score, self.config)

    def tick_delay(self) -> timedelta:
        return timedelta(milliseconds=self.tick_delay_ms())

    def snapshot(self) -> Snapshot:
        return Snapshot(
            status=self._status,
            score=self._score,
            high_score=self._high_score,
            snake=tuple(self._snake),
            food=self._food,
            width=self.width,
            height=self.height,
            direction=self._direction,
            tick_delay_ms=self.tick_delay_ms(),
        )

    # ----- intents -----
    def turn(self, direction: Direction) -> bool:
        """Queue a heading for the next tick; 180° turns are dropped."""
        if self._status in (GameStatus.READY, GameStatus.GAME_OVER):
            return False
        if direction.is_opposite(self._direction) and len(self._snake) > 1:
            return False
        self._next_direction = direction
        return True

    def toggle_pause(self) -> bool:
        if self._status is GameStatus.RUNNING:
            self._status = GameStatus.PAUSED
        elif self._status is GameStatus.PAUSED:
            self._status = GameStatus.RUNNING
        else:
            return False
        logger.debug(f"Game {self._status.value}")
        return True

    def restart(self) -> bool:
        """Start from READY, otherwise throw the current game away and start over."""
        if self._status is not GameStatus.READY:
            self._reset()
            logger.info("Game restarted")
        else:
            logger.info("Game started")
        self._status = GameStatus.RUNNING
        return True

    def apply(self, intent: Intent) -> bool:
        if intent in _TURNS:
            return self.turn(_TURNS[intent])
        if intent is Intent.TOGGLE_PAUSE:
            return self.toggle_pause()
        if intent is Intent.RESTART:
            return self.restart()
        return False

    def tick(self) -> bool:
        """
        Advance the game by one cell. Only runs while RUNNING.
        Returns True if anything changed.
        """
        if self._status is not GameStatus.RUNNING:
            return False

        # Commit direction once per tick
        self._direction = self._next_direction
        new_head = self._snake[0].offset(self._direction)

        # Checked against the pre-tick body, so the tail still blocks
        if not contains(new_head, self.width, self.height):
            self._end("wall")
            return True
        if new_head in self._snake:
            self._end("self")
            return True

        self._snake.appendleft(new_head)
        if new_head == self._food:
            self._score += 1
            self._high_score = max(self._high_score, self._score)
            self._food = spawn_food(self._snake, self.width, self.height, self.rng)
            logger.debug(f"Food eaten at {tuple(new_head)}, score={self._score}")
            if self._food is None:
                self._end("board full")
        else:
            self._snake.pop()
        return True

    # ----- internals -----
    def _reset(self) -> None:
        self._snake = build_initial_snake(
            self.width, self.height, self.config.initial_length
        )
        self._direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._score = 0
        self._food = spawn_food(self._snake, self.width, self.height, self.rng)
        self._status = GameStatus.READY

    def _end(self, reason: str) -> None:
        self._status = GameStatus.GAME_OVER
        logger.info(f"Game over ({reason}): score={self._score}, best={self._high_score}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n" + self.snapshot().print_board())
