"""Computer opponent: move scoring, policies and turn handling."""

from .heuristic import (
    DANGER_SCORE,
    EXPANSION_SCORE,
    KILL_SCORE,
    PETRIFY_SCORE,
    SAVE_SCORE,
    HeuristicConfig,
    MoveScore,
    best_move,
    best_moves,
    evaluate_move,
    score_moves,
)
from .opponent import AI_DELAY_SECONDS, AI_PLAYER, PendingAIMove, respond, should_respond
from .policy import HeuristicPolicy, Policy, RandomPolicy, select_action

__all__ = [
    "DANGER_SCORE",
    "EXPANSION_SCORE",
    "KILL_SCORE",
    "PETRIFY_SCORE",
    "SAVE_SCORE",
    "HeuristicConfig",
    "MoveScore",
    "best_move",
    "best_moves",
    "evaluate_move",
    "score_moves",
    "AI_DELAY_SECONDS",
    "AI_PLAYER",
    "PendingAIMove",
    "respond",
    "should_respond",
    "HeuristicPolicy",
    "Policy",
    "RandomPolicy",
    "select_action",
]
