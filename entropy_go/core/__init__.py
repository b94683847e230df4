"""Rules engine for Entropy Go."""

from .board import BOARD_SIZE, DIRECTIONS, EMPTY, NUM_POINTS, Point, in_bounds, neighbors
from .groups import group_of, liberties_of, liberty_points
from .state import GameState, GameStatus, MoveRecord, Player, Stone
from .territory import MAX_TERRITORY_SIZE, Region, find_petrified_stones, find_regions
from .rules import (
    ACTION_SPACE_SIZE,
    PASS_ACTION,
    STONE_MAX_HEALTH,
    MoveOutcome,
    Rejection,
    apply_decay,
    decode_action,
    encode_action,
    enumerate_legal_moves,
    initialize_game_state,
    pass_turn,
    place_stone,
    play_move,
    reset_game,
)

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "EMPTY",
    "NUM_POINTS",
    "Point",
    "in_bounds",
    "neighbors",
    "group_of",
    "liberties_of",
    "liberty_points",
    "GameState",
    "GameStatus",
    "MoveRecord",
    "Player",
    "Stone",
    "MAX_TERRITORY_SIZE",
    "Region",
    "find_petrified_stones",
    "find_regions",
    "ACTION_SPACE_SIZE",
    "PASS_ACTION",
    "STONE_MAX_HEALTH",
    "MoveOutcome",
    "Rejection",
    "apply_decay",
    "decode_action",
    "encode_action",
    "enumerate_legal_moves",
    "initialize_game_state",
    "pass_turn",
    "place_stone",
    "play_move",
    "reset_game",
]
