"""Entropy Go: Go on a 9x9 board with decaying and petrifying stones."""

from . import ai, core, env, evaluation, features
from .ai import (
    HeuristicConfig,
    HeuristicPolicy,
    MoveScore,
    PendingAIMove,
    Policy,
    RandomPolicy,
    best_move,
    evaluate_move,
    respond,
)
from .core import (
    GameState,
    GameStatus,
    Player,
    Stone,
    find_petrified_stones,
    group_of,
    initialize_game_state,
    liberties_of,
    pass_turn,
    place_stone,
    play_move,
    reset_game,
)
from .env import EntropyGoEnv
from .evaluation import EvaluationResult, MatchResult, evaluate_policies, play_match
from .features import build_aux_vector, build_board_tensor, render_ascii, state_to_dict, state_to_numpy

__all__ = [
    "ai",
    "core",
    "env",
    "evaluation",
    "features",
    "HeuristicConfig",
    "HeuristicPolicy",
    "MoveScore",
    "PendingAIMove",
    "Policy",
    "RandomPolicy",
    "best_move",
    "evaluate_move",
    "respond",
    "GameState",
    "GameStatus",
    "Player",
    "Stone",
    "find_petrified_stones",
    "group_of",
    "initialize_game_state",
    "liberties_of",
    "pass_turn",
    "place_stone",
    "play_move",
    "reset_game",
    "EntropyGoEnv",
    "EvaluationResult",
    "MatchResult",
    "evaluate_policies",
    "play_match",
    "build_aux_vector",
    "build_board_tensor",
    "render_ascii",
    "state_to_dict",
    "state_to_numpy",
]
