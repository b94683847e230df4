"""Empty-region analysis and petrification of territory boundaries.

The board edge is a wall: a region touching the edge is judged only on the
stones around it, exactly like an interior region. Regions bigger than
``MAX_TERRITORY_SIZE`` are open board and never count as territory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Set

import numpy as np

from .board import BOARD_SIZE, EMPTY, NUM_POINTS, Point, neighbors, point_index

LOGGER = logging.getLogger(__name__)

MAX_TERRITORY_SIZE = 30


@dataclass(frozen=True)
class Region:
    points: FrozenSet[Point]
    boundary: FrozenSet[Point]
    boundary_colors: FrozenSet[int]

    @property
    def size(self) -> int:
        return len(self.points)

    @property
    def owner(self) -> int:
        """Colour value owning this region, or EMPTY when it is not territory."""
        if self.size > MAX_TERRITORY_SIZE or len(self.boundary_colors) != 1:
            return EMPTY
        return next(iter(self.boundary_colors))


def _explore_region(board: np.ndarray, start: Point, visited: np.ndarray) -> Region:
    row, col = start
    visited[point_index(row, col)] = True
    stack = [start]
    points: Set[Point] = set()
    boundary: Set[Point] = set()
    colors: Set[int] = set()
    while stack:
        r, c = stack.pop()
        points.add((r, c))
        for nr, nc in neighbors(r, c):
            value = int(board[nr, nc])
            if value == EMPTY:
                idx = point_index(nr, nc)
                if not visited[idx]:
                    visited[idx] = True
                    stack.append((nr, nc))
            else:
                boundary.add((nr, nc))
                colors.add(value)
    return Region(frozenset(points), frozenset(boundary), frozenset(colors))


def find_regions(board: np.ndarray) -> List[Region]:
    """Partition the empty points into maximal regions, scanning row-major."""
    visited = np.zeros(NUM_POINTS, dtype=bool)
    regions: List[Region] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row, col] != EMPTY or visited[point_index(row, col)]:
                continue
            regions.append(_explore_region(board, (row, col), visited))
    return regions


def find_petrified_stones(board: np.ndarray) -> Set[Point]:
    petrified: Set[Point] = set()
    for region in find_regions(board):
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(
                "region of %d points, boundary colours %s",
                region.size,
                sorted(region.boundary_colors),
            )
        owner = region.owner
        if owner == EMPTY:
            continue
        # A single boundary colour means every boundary stone belongs to the owner.
        petrified.update(region.boundary)
    return petrified
