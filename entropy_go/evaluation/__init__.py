"""Policy-versus-policy matches for Entropy Go."""

from .match import EvaluationResult, MatchResult, evaluate_policies, play_match

__all__ = ["EvaluationResult", "MatchResult", "evaluate_policies", "play_match"]
