"""Tests for food placement."""

import random

from src.snake.food import free_cells, spawn_food
from src.snake.grid import Cell, contains


def test_food_never_lands_on_snake():
    snake = [Cell(x, 0) for x in range(5)] + [Cell(x, 1) for x in range(5)]
    for seed in range(50):
        food = spawn_food(snake, 5, 3, random.Random(seed))
        assert food is not None
        assert food not in snake
        assert contains(food, 5, 3)


def test_same_seed_same_food():
    snake = [Cell(2, 2), Cell(1, 2)]
    a = spawn_food(snake, 10, 10, random.Random(7))
    b = spawn_food(snake, 10, 10, random.Random(7))
    assert a == b


def test_fallback_scan_finds_the_last_free_cell():
    """With random draws disabled the exhaustive scan still finds the gap."""
    snake = [Cell(x, y) for y in range(3) for x in range(3) if (x, y) != (2, 1)]
    food = spawn_food(snake, 3, 3, random.Random(0), max_attempts=0)
    assert food == Cell(2, 1)
    assert isinstance(food.x, int)


def test_full_board_has_no_food():
    snake = [Cell(x, y) for y in range(2) for x in range(2)]
    assert spawn_food(snake, 2, 2, random.Random(0)) is None


def test_free_cells_lists_xy_pairs():
    cells = free_cells([Cell(0, 0), Cell(1, 0)], 2, 2)
    assert sorted(map(tuple, cells.tolist())) == [(0, 1), (1, 1)]
