from __future__ import annotations

from typing import Optional

import numpy as np

from entropy_go.core import GameState, encode_action

from .heuristic import HeuristicConfig, best_moves


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    """Uniform over legal actions."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class HeuristicPolicy(Policy):
    """Spreads probability evenly over the top-scoring legal points.

    Falls back to passing when none of the top points is legal.
    """

    def __init__(self, config: Optional[HeuristicConfig] = None) -> None:
        self.config = config or HeuristicConfig()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(legal_mask.shape, dtype=np.float32)
        indices = [encode_action(p) for p in best_moves(state, state.turn, self.config)]
        indices = [idx for idx in indices if legal_mask[idx]]
        if not indices:
            indices = [encode_action(None)]
        probs[indices] = 1.0 / len(indices)
        return probs


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() == 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
