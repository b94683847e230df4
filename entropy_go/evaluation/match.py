from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from entropy_go.ai import Policy, select_action
from entropy_go.core import GameState, Player
from entropy_go.env import EntropyGoEnv


@dataclass
class MatchResult:
    turns: int
    black_prisoners: int
    white_prisoners: int
    black_petrified: int
    white_petrified: int

    @property
    def leader(self) -> Optional[Player]:
        """Side holding more prisoners, ``None`` on equal counts."""
        if self.black_prisoners > self.white_prisoners:
            return Player.BLACK
        if self.white_prisoners > self.black_prisoners:
            return Player.WHITE
        return None


@dataclass
class EvaluationResult:
    games_played: int
    black_leads: int
    white_leads: int
    even: int
    average_length: float
    average_black_prisoners: float
    average_white_prisoners: float

    def lead_rate_black(self) -> float:
        return self.black_leads / max(1, self.games_played)

    def lead_rate_white(self) -> float:
        return self.white_leads / max(1, self.games_played)


def play_match(
    policy_black: Policy,
    policy_white: Policy,
    *,
    max_turns: int = 200,
    temperature: float = 1.0,
    rng: Optional[np.random.Generator] = None,
    env_factory: Optional[Callable[..., EntropyGoEnv]] = None,
) -> MatchResult:
    env_factory = env_factory or EntropyGoEnv
    rng = rng or np.random.default_rng()
    env = env_factory(max_turns=max_turns)
    _, info = env.reset()

    done = False
    while not done:
        state_snapshot: GameState = env.state.copy()
        legal_mask = info["legal_action_mask"]
        policy = policy_black if state_snapshot.turn == Player.BLACK else policy_white
        probs = policy.act(state_snapshot, legal_mask) * legal_mask
        if probs.sum() <= 0:
            probs = legal_mask.astype(np.float64)
        action_index = select_action(probs, temperature, rng)
        _, _, terminated, truncated, info = env.step(action_index)
        done = terminated or truncated

    final = env.state
    return MatchResult(
        turns=final.turn_count,
        black_prisoners=final.prisoners_of(Player.BLACK),
        white_prisoners=final.prisoners_of(Player.WHITE),
        black_petrified=final.petrified_count(Player.BLACK),
        white_petrified=final.petrified_count(Player.WHITE),
    )


def evaluate_policies(
    policy_black: Policy,
    policy_white: Policy,
    *,
    episodes: int,
    max_turns: int = 200,
    temperature: float = 1.0,
    seed: Optional[int] = None,
    env_factory: Optional[Callable[..., EntropyGoEnv]] = None,
) -> EvaluationResult:
    rng = np.random.default_rng(seed)
    black_leads = 0
    white_leads = 0
    even = 0
    total_turns = 0
    total_black = 0
    total_white = 0

    for _ in range(episodes):
        result = play_match(
            policy_black,
            policy_white,
            max_turns=max_turns,
            temperature=temperature,
            rng=rng,
            env_factory=env_factory,
        )
        total_turns += result.turns
        total_black += result.black_prisoners
        total_white += result.white_prisoners
        if result.leader == Player.BLACK:
            black_leads += 1
        elif result.leader == Player.WHITE:
            white_leads += 1
        else:
            even += 1

    games = max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        black_leads=black_leads,
        white_leads=white_leads,
        even=even,
        average_length=total_turns / games,
        average_black_prisoners=total_black / games,
        average_white_prisoners=total_white / games,
    )
