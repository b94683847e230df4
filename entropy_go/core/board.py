from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

BOARD_SIZE = 9
NUM_POINTS = BOARD_SIZE * BOARD_SIZE
EMPTY = 0
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

Point = Tuple[int, int]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def neighbors(row: int, col: int) -> Iterator[Point]:
    """Yield the on-board orthogonal neighbours of (row, col)."""
    for dr, dc in DIRECTIONS:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc):
            yield nr, nc


def point_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def index_point(index: int) -> Point:
    return divmod(index, BOARD_SIZE)


def empty_board() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

