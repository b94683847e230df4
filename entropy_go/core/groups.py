from __future__ import annotations

from typing import Iterable, Set

import numpy as np

from .board import EMPTY, NUM_POINTS, Point, neighbors, point_index


def group_of(board: np.ndarray, point: Point) -> Set[Point]:
    """Return the 4-connected same-colour group containing ``point``.

    An empty point yields an empty set. The walk uses an explicit stack and a
    row-major visited array, so board size never hits recursion limits.
    """
    row, col = point
    color = board[row, col]
    if color == EMPTY:
        return set()

    visited = np.zeros(NUM_POINTS, dtype=bool)
    visited[point_index(row, col)] = True
    stack = [(row, col)]
    group: Set[Point] = set()
    while stack:
        r, c = stack.pop()
        group.add((r, c))
        for nr, nc in neighbors(r, c):
            idx = point_index(nr, nc)
            if not visited[idx] and board[nr, nc] == color:
                visited[idx] = True
                stack.append((nr, nc))
    return group


def liberty_points(board: np.ndarray, group: Iterable[Point]) -> Set[Point]:
    liberties: Set[Point] = set()
    for r, c in group:
        for nr, nc in neighbors(r, c):
            if board[nr, nc] == EMPTY:
                liberties.add((nr, nc))
    return liberties


def liberties_of(board: np.ndarray, group: Iterable[Point]) -> int:
    return len(liberty_points(board, group))
