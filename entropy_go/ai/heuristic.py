"""Single-ply move scoring for the built-in opponent.

Every empty point is tried on a private copy of the board (a bare placement:
no decay, captured stones left in place) and scored from the terms below.
The best score wins; ties are broken uniformly at random.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import numpy as np

from entropy_go.core import (
    EMPTY,
    GameState,
    Player,
    Point,
    find_petrified_stones,
    group_of,
    liberties_of,
    neighbors,
)

KILL_SCORE = 1000
SAVE_SCORE = 500
PETRIFY_SCORE = 300
EXPANSION_SCORE = 10
DANGER_SCORE = -500


@dataclass(frozen=True)
class HeuristicConfig:
    workers: int = 1


@dataclass(frozen=True)
class MoveScore:
    point: Point
    capture: int = 0
    danger: int = 0
    save: int = 0
    petrify: int = 0
    expansion: int = 0
    captured_stones: int = 0

    @property
    def total(self) -> int:
        return self.capture + self.danger + self.save + self.petrify + self.expansion


def evaluate_move(state: GameState, point: Point, player: Player) -> MoveScore:
    before = state.board
    row, col = point
    board = before.copy()
    board[row, col] = int(player)
    opponent = int(player.opponent())

    captured = 0
    checked: Set[Point] = set()
    for nr, nc in neighbors(row, col):
        if board[nr, nc] != opponent or (nr, nc) in checked:
            continue
        group = group_of(board, (nr, nc))
        checked.update(group)
        if liberties_of(board, group) == 0:
            captured += len(group)

    capture = 0
    if captured > 0:
        # Flat bonus for the kill on top of the per-stone award.
        capture = KILL_SCORE * captured + KILL_SCORE

    self_liberties = liberties_of(board, group_of(board, point))
    danger = DANGER_SCORE if self_liberties == 0 and captured == 0 else 0

    saved = False
    for nr, nc in neighbors(row, col):
        if before[nr, nc] != int(player):
            continue
        old_group = group_of(before, (nr, nc))
        if liberties_of(before, old_group) == 1 and self_liberties > 1:
            saved = True
    save = SAVE_SCORE if saved else 0

    petrified_after = sum(1 for r, c in find_petrified_stones(board) if board[r, c] == int(player))
    petrify = PETRIFY_SCORE if petrified_after > state.petrified_count(player) else 0

    empty_neighbors = sum(1 for nr, nc in neighbors(row, col) if before[nr, nc] == EMPTY)

    return MoveScore(
        point=point,
        capture=capture,
        danger=danger,
        save=save,
        petrify=petrify,
        expansion=EXPANSION_SCORE * empty_neighbors,
        captured_stones=captured,
    )


def score_moves(
    state: GameState,
    player: Player,
    config: Optional[HeuristicConfig] = None,
) -> Dict[Point, MoveScore]:
    config = config or HeuristicConfig()
    points = state.empty_points()
    if config.workers > 1 and len(points) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as executor:
            scores = list(executor.map(lambda p: evaluate_move(state, p, player), points))
    else:
        scores = [evaluate_move(state, p, player) for p in points]
    return {score.point: score for score in scores}


def best_moves(
    state: GameState,
    player: Player,
    config: Optional[HeuristicConfig] = None,
) -> List[Point]:
    """All points sharing the maximum score, in row-major order."""
    scores = score_moves(state, player, config)
    if not scores:
        return []
    top = max(score.total for score in scores.values())
    return [point for point, score in scores.items() if score.total == top]


def best_move(
    state: GameState,
    player: Player,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[HeuristicConfig] = None,
) -> Optional[Point]:
    candidates = best_moves(state, player, config)
    if not candidates:
        return None
    rng = rng or np.random.default_rng()
    return candidates[int(rng.integers(len(candidates)))]
