import numpy as np
import pytest

from entropy_go.core import (
    ACTION_SPACE_SIZE,
    PASS_ACTION,
    STONE_MAX_HEALTH,
    GameStatus,
    Player,
    Rejection,
    decode_action,
    encode_action,
    enumerate_legal_moves,
    initialize_game_state,
    pass_turn,
    place_stone,
    play_move,
    reset_game,
)

from helpers import fresh_state, place


def test_first_move_on_empty_board() -> None:
    state = initialize_game_state()
    next_state = place_stone(state, 4, 4)

    stone = next_state.stone_at(4, 4)
    assert stone is not None
    assert stone.color == Player.BLACK
    assert stone.health == STONE_MAX_HEALTH
    assert not stone.petrified
    assert np.count_nonzero(next_state.board) == 1
    assert next_state.turn == Player.WHITE
    assert next_state.turn_count == 1
    assert next_state.prisoner_counts() == {"black": 0, "white": 0}
    assert next_state.last_move == (4, 4)
    # The input state is never touched.
    assert state == initialize_game_state()


def test_capture_corner_stone_after_pass() -> None:
    state = fresh_state()
    place(state, Player.WHITE, (0, 0))

    state = place_stone(state, 0, 1)
    state = pass_turn(state)
    state = place_stone(state, 1, 0)

    assert state.stone_at(0, 0) is None
    assert state.prisoners_of(Player.BLACK) == 1
    assert state.last_record.captured_positions == ((0, 0),)


def test_capture_makes_otherwise_suicidal_move_legal() -> None:
    state = fresh_state()
    place(state, Player.WHITE, (0, 1), (1, 0))
    place(state, Player.BLACK, (0, 2), (1, 1), (2, 0))

    outcome = play_move(state, 0, 0)

    assert outcome.accepted
    assert outcome.captured == 2
    assert outcome.state.stone_at(0, 1) is None
    assert outcome.state.stone_at(1, 0) is None
    assert outcome.state.prisoners_of(Player.BLACK) == 2


def test_suicide_is_rejected_without_side_effects() -> None:
    state = fresh_state(turn=Player.WHITE)
    place(state, Player.BLACK, (0, 1), (1, 0))
    place(state, Player.WHITE, (8, 8), health=1)
    before = state.copy()

    outcome = play_move(state, 0, 0)

    assert not outcome.accepted
    assert outcome.rejection == Rejection.SUICIDE
    assert outcome.state is state
    assert state == before
    # Decay of the mover's stone was rolled back with the placement.
    assert state.stone_at(8, 8).health == 1
    assert place_stone(state, 0, 0) == before


@pytest.mark.parametrize(
    "row, col, reason",
    [(-1, 0, Rejection.OUT_OF_BOUNDS), (0, 9, Rejection.OUT_OF_BOUNDS), (3, 3, Rejection.OCCUPIED)],
)
def test_invalid_targets_are_no_ops(row, col, reason) -> None:
    state = fresh_state()
    place(state, Player.WHITE, (3, 3))

    outcome = play_move(state, row, col)

    assert not outcome.accepted
    assert outcome.rejection == reason
    assert outcome.state is state


def test_no_moves_once_game_is_over() -> None:
    state = fresh_state()
    state.status = GameStatus.BLACK_WON

    outcome = play_move(state, 4, 4)

    assert outcome.rejection == Rejection.GAME_NOT_PLAYING
    assert pass_turn(state) is state
    assert enumerate_legal_moves(state) == []


def test_decay_crumbles_own_stone_without_prisoners() -> None:
    state = fresh_state()
    place(state, Player.BLACK, (8, 8), health=1)
    place(state, Player.BLACK, (0, 0), health=5)
    place(state, Player.WHITE, (8, 0), health=1)

    next_state = place_stone(state, 4, 4)

    assert next_state.stone_at(8, 8) is None
    assert next_state.stone_at(0, 0).health == 4
    # Only the mover decays.
    assert next_state.stone_at(8, 0).health == 1
    assert next_state.prisoner_counts() == {"black": 0, "white": 0}
    assert next_state.last_record.crumbled_positions == ((8, 8),)


def test_petrified_stones_do_not_decay() -> None:
    state = fresh_state()
    place(state, Player.BLACK, (0, 1), (1, 0), health=1, petrified=True)

    next_state = place_stone(state, 4, 4)

    assert next_state.stone_at(0, 1).health == 1
    assert next_state.stone_at(1, 0).petrified


def test_crumbling_frees_a_liberty_before_placement() -> None:
    state = fresh_state()
    place(state, Player.WHITE, (0, 1))
    place(state, Player.BLACK, (1, 0), health=1)

    assert (0, 0) in enumerate_legal_moves(state)
    outcome = play_move(state, 0, 0)

    assert outcome.accepted
    assert outcome.state.stone_at(1, 0) is None


def test_enclosing_a_point_petrifies_the_wall() -> None:
    state = fresh_state()
    state = place_stone(state, 0, 1)
    assert not state.stone_at(0, 1).petrified
    state = pass_turn(state)
    state = place_stone(state, 1, 0)

    assert state.stone_at(0, 1).petrified
    assert state.stone_at(1, 0).petrified
    assert set(state.last_record.petrified_positions) == {(0, 1), (1, 0)}


def test_petrification_is_never_undone() -> None:
    state = fresh_state()
    place(state, Player.BLACK, (0, 1), (1, 0))
    state = place_stone(state, 8, 8)
    assert state.stone_at(0, 1).petrified
    state = pass_turn(state)

    # Filling the eye removes the territory but the wall stays petrified.
    state = place_stone(state, 0, 0)

    assert state.stone_at(0, 0) is not None
    assert not state.stone_at(0, 0).petrified
    assert state.stone_at(0, 1).petrified
    assert state.stone_at(1, 0).petrified


def test_petrified_stones_can_still_be_captured() -> None:
    state = fresh_state()
    place(state, Player.WHITE, (0, 0), petrified=True)
    place(state, Player.BLACK, (0, 1))

    next_state = place_stone(state, 1, 0)

    assert next_state.stone_at(0, 0) is None
    assert next_state.prisoners_of(Player.BLACK) == 1


def test_pass_turn_keeps_board() -> None:
    state = place_stone(initialize_game_state(), 4, 4)
    passed = pass_turn(state)

    assert np.array_equal(passed.board, state.board)
    assert passed.turn == Player.BLACK
    assert passed.turn_count == 2
    assert passed.last_move is None
    assert passed.last_record is None


def test_reset_game_returns_initial_state() -> None:
    state = reset_game()

    assert state == initialize_game_state()
    assert state.turn == Player.BLACK
    assert state.turn_count == 0
    assert state.status == GameStatus.PLAYING
    assert state.last_move is None


def test_stone_ids_are_unique() -> None:
    state = initialize_game_state()
    for move in [(0, 0), (8, 8), (4, 4)]:
        state = place_stone(state, *move)

    ids = {state.stone_at(*point).id for point in [(0, 0), (8, 8), (4, 4)]}
    assert len(ids) == 3


def test_action_encoding() -> None:
    assert encode_action((0, 0)) == 0
    assert encode_action((8, 8)) == 80
    assert encode_action(None) == PASS_ACTION
    assert decode_action(40) == (4, 4)
    assert decode_action(PASS_ACTION) is None
    with pytest.raises(ValueError):
        decode_action(ACTION_SPACE_SIZE)
    with pytest.raises(ValueError):
        encode_action((9, 0))


def test_prisoner_count_grows_past_small_integer_range() -> None:
    state = fresh_state()
    state.prisoners[int(Player.BLACK) - 1] = 32760
    place(state, Player.WHITE, *[(0, col) for col in range(9)])
    place(state, Player.BLACK, *[(1, col) for col in range(8)])

    next_state = place_stone(state, 1, 8)

    assert next_state.prisoners_of(Player.BLACK) == 32769
    assert next_state.prisoner_counts() == {"black": 32769, "white": 0}


def test_group_touching_new_stone_twice_is_counted_once() -> None:
    state = fresh_state()
    place(state, Player.WHITE, (0, 1), (1, 1), (1, 0))
    place(state, Player.BLACK, (0, 2), (1, 2), (2, 1), (2, 0))

    outcome = play_move(state, 0, 0)

    assert outcome.accepted
    assert outcome.captured == 3
    assert outcome.state.prisoners_of(Player.BLACK) == 3
    assert sorted(outcome.state.last_record.captured_positions) == [(0, 1), (1, 0), (1, 1)]
