import numpy as np

from entropy_go.ai import PendingAIMove, respond, should_respond
from entropy_go.core import GameStatus, Player, initialize_game_state, pass_turn, place_stone

from helpers import fresh_state, place


def test_ai_waits_for_its_turn() -> None:
    state = initialize_game_state()

    assert not should_respond(state)
    assert PendingAIMove.schedule(state) is None
    assert respond(state) is state


def test_ai_answers_after_black_moves() -> None:
    state = place_stone(initialize_game_state(), 4, 4)

    pending = PendingAIMove.schedule(state)
    assert pending is not None
    next_state = pending.fire(state, rng=np.random.default_rng(0))

    assert next_state.turn == Player.BLACK
    assert next_state.turn_count == 2
    row, col = next_state.last_move
    assert next_state.stone_at(row, col).color == Player.WHITE


def test_stale_request_is_dropped() -> None:
    state = place_stone(initialize_game_state(), 4, 4)
    pending = PendingAIMove.schedule(state)

    moved_on = place_stone(pass_turn(pass_turn(state)), 0, 0)

    assert not pending.is_current(moved_on)
    assert pending.fire(moved_on) is moved_on


def test_ai_passes_on_full_board() -> None:
    state = fresh_state(turn=Player.WHITE)
    for row in range(9):
        for col in range(9):
            place(state, Player.BLACK if (row + col) % 2 == 0 else Player.WHITE, (row, col))

    next_state = respond(state)

    assert next_state.turn == Player.BLACK
    assert next_state.last_move is None


def test_ai_does_not_play_when_game_is_over() -> None:
    state = fresh_state(turn=Player.WHITE)
    state.status = GameStatus.WHITE_WON

    assert respond(state) is state
