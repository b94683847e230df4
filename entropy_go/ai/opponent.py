"""The computer opponent's turn, as seen from whoever drives the game.

A front end watches for the AI's turn, waits a moment so the reply does not
feel instant, then asks for the move. ``PendingAIMove`` remembers the state
the request was made on; if the game moved on in the meantime the reply is
dropped instead of being played on the wrong position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from entropy_go.core import GameState, Player, pass_turn, play_move

from .heuristic import HeuristicConfig, best_move

AI_PLAYER = Player.WHITE
AI_DELAY_SECONDS = 0.7


def should_respond(state: GameState, ai_player: Player = AI_PLAYER) -> bool:
    return state.is_playing and state.turn == ai_player


def respond(
    state: GameState,
    ai_player: Player = AI_PLAYER,
    *,
    rng: Optional[np.random.Generator] = None,
    config: Optional[HeuristicConfig] = None,
) -> GameState:
    """Play the heuristic's choice for ``ai_player``, or pass when it has none."""
    if not should_respond(state, ai_player):
        return state
    move = best_move(state, ai_player, rng=rng, config=config)
    if move is None:
        return pass_turn(state)
    outcome = play_move(state, *move)
    if not outcome.accepted:
        return pass_turn(state)
    return outcome.state


@dataclass(frozen=True)
class PendingAIMove:
    ai_player: Player
    turn_count: int
    delay: float = AI_DELAY_SECONDS

    @classmethod
    def schedule(cls, state: GameState, ai_player: Player = AI_PLAYER, delay: float = AI_DELAY_SECONDS) -> Optional["PendingAIMove"]:
        if not should_respond(state, ai_player):
            return None
        return cls(ai_player=ai_player, turn_count=state.turn_count, delay=delay)

    def is_current(self, state: GameState) -> bool:
        return should_respond(state, self.ai_player) and state.turn_count == self.turn_count

    def fire(
        self,
        state: GameState,
        *,
        rng: Optional[np.random.Generator] = None,
        config: Optional[HeuristicConfig] = None,
    ) -> GameState:
        """Apply the reply if ``state`` is still the one it was scheduled on."""
        if not self.is_current(state):
            return state
        return respond(state, self.ai_player, rng=rng, config=config)
