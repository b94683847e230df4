from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set

from .board import EMPTY, NUM_POINTS, Point, in_bounds, index_point, neighbors, point_index
from .groups import group_of, liberties_of
from .state import GameState, GameStatus, MoveRecord, Player
from .territory import find_petrified_stones

LOGGER = logging.getLogger(__name__)

STONE_MAX_HEALTH = 15
PASS_ACTION = NUM_POINTS
ACTION_SPACE_SIZE = NUM_POINTS + 1


class Rejection(Enum):
    GAME_NOT_PLAYING = "game_not_playing"
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"
    SUICIDE = "suicide"


@dataclass(frozen=True)
class MoveOutcome:
    state: GameState
    accepted: bool
    rejection: Optional[Rejection] = None
    captured: int = 0


def encode_action(point: Optional[Point]) -> int:
    """Map a point to its action index; ``None`` is a pass."""
    if point is None:
        return PASS_ACTION
    row, col = point
    if not in_bounds(row, col):
        raise ValueError(f"Point {point} is off the board.")
    return point_index(row, col)


def decode_action(index: int) -> Optional[Point]:
    if not 0 <= index < ACTION_SPACE_SIZE:
        raise ValueError("Action index out of range.")
    if index == PASS_ACTION:
        return None
    return index_point(index)


def initialize_game_state() -> GameState:
    return GameState.empty()


def reset_game() -> GameState:
    return initialize_game_state()


def apply_decay(state: GameState, player: Player) -> List[Point]:
    """Age ``player``'s living stones in place; return the points that crumbled."""
    crumbled: List[Point] = []
    for row, col in list(state.occupied_positions(player)):
        if state.petrified[row, col]:
            continue
        state.health[row, col] -= 1
        if state.health[row, col] <= 0:
            state.clear_point(row, col)
            crumbled.append((row, col))
    return crumbled


def play_move(state: GameState, row: int, col: int) -> MoveOutcome:
    """Place a stone for ``state.turn`` at (row, col).

    Illegal moves leave ``state`` untouched and come back as a rejected
    outcome carrying the very same state object.
    """
    if state.status != GameStatus.PLAYING:
        return _reject(state, Rejection.GAME_NOT_PLAYING, row, col)
    if not in_bounds(row, col):
        return _reject(state, Rejection.OUT_OF_BOUNDS, row, col)
    if state.board[row, col] != EMPTY:
        return _reject(state, Rejection.OCCUPIED, row, col)

    mover = state.turn
    opponent = mover.opponent()
    working = state.copy()

    crumbled = apply_decay(working, mover)
    working.put_stone(row, col, mover, STONE_MAX_HEALTH)

    captured: List[Point] = []
    checked: Set[Point] = set()
    for nr, nc in neighbors(row, col):
        if working.board[nr, nc] != int(opponent) or (nr, nc) in checked:
            continue
        group = group_of(working.board, (nr, nc))
        checked.update(group)
        if liberties_of(working.board, group) == 0:
            captured.extend(sorted(group))

    if not captured and liberties_of(working.board, group_of(working.board, (row, col))) == 0:
        return _reject(state, Rejection.SUICIDE, row, col)

    for r, c in captured:
        working.clear_point(r, c)
    working.prisoners[int(mover) - 1] += len(captured)

    newly_petrified: List[Point] = []
    for r, c in sorted(find_petrified_stones(working.board)):
        if not working.petrified[r, c]:
            working.petrified[r, c] = True
            newly_petrified.append((r, c))

    if crumbled or captured:
        LOGGER.debug("%s at %s: crumbled %s, captured %s", mover.name, (row, col), crumbled, captured)

    working.turn = opponent
    working.turn_count += 1
    working.last_move = (row, col)
    working.last_record = MoveRecord(
        point=(row, col),
        player=mover,
        captured_positions=tuple(captured),
        crumbled_positions=tuple(crumbled),
        petrified_positions=tuple(newly_petrified),
    )
    return MoveOutcome(state=working, accepted=True, captured=len(captured))


def place_stone(state: GameState, row: int, col: int) -> GameState:
    return play_move(state, row, col).state


def pass_turn(state: GameState) -> GameState:
    if state.status != GameStatus.PLAYING:
        return state
    next_state = state.copy()
    next_state.turn = state.turn.opponent()
    next_state.turn_count += 1
    next_state.last_move = None
    next_state.last_record = None
    return next_state


def enumerate_legal_moves(state: GameState) -> List[Point]:
    """Points where ``state.turn`` may play, decay included."""
    if state.status != GameStatus.PLAYING:
        return []
    return [point for point in state.empty_points() if play_move(state, *point).accepted]


def _reject(state: GameState, reason: Rejection, row: int, col: int) -> MoveOutcome:
    LOGGER.debug("rejected %s at %s: %s", state.turn.name, (row, col), reason.value)
    return MoveOutcome(state=state, accepted=False, rejection=reason)
