from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from entropy_go.core import (
    ACTION_SPACE_SIZE,
    BOARD_SIZE,
    PASS_ACTION,
    decode_action,
    encode_action,
    enumerate_legal_moves,
    initialize_game_state,
    pass_turn,
    play_move,
)
from entropy_go.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    render_ascii,
)


class IllegalActionError(ValueError):
    pass


class EntropyGoEnv(gym.Env):
    """Two-player alternating environment; the side to move is ``state.turn``.

    The rules never end the game, so episodes are truncated after
    ``max_turns`` turns. The reward is the number of stones the mover captured.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_turns: int = 200,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_turns = max_turns
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_SPACE_SIZE)

        self._state = initialize_game_state()

    @property
    def state(self):
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options and "max_turns" in options:
            self._max_turns = int(options["max_turns"])
        self._state = initialize_game_state()
        observation = self._build_observation()
        info = self._build_info(accepted=True)
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise IllegalActionError(f"Illegal action {action_index} with enforce_legal_actions=True.")

        point = decode_action(int(action_index))
        reward = 0.0
        if point is None:
            self._state = pass_turn(self._state)
            accepted = True
        else:
            outcome = play_move(self._state, *point)
            self._state = outcome.state
            accepted = outcome.accepted
            reward = float(outcome.captured)

        observation = self._build_observation()
        info = self._build_info(accepted=accepted)

        terminated = not self._state.is_playing
        truncated = self._state.turn_count >= self._max_turns
        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not self._state.is_playing:
            return mask
        for point in enumerate_legal_moves(self._state):
            mask[encode_action(point)] = 1
        mask[PASS_ACTION] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_ascii(self._state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        board = build_board_tensor(self._state)
        aux = build_aux_vector(self._state)
        return {"board": board, "aux": aux}

    def _build_info(self, *, accepted: bool) -> Dict[str, object]:
        return {"legal_action_mask": self.legal_action_mask(), "accepted": accepted}
