from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from entropy_go.core import BOARD_SIZE, NUM_POINTS, STONE_MAX_HEALTH, GameState, Player

BOARD_CHANNELS = 6  # stones (2) + health (2) + petrified + last move
AUX_VECTOR_SIZE = 4  # side to move one-hot (2) + prisoners (2)


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (6, 9, 9) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    for player in Player:
        mask = state.board == int(player)
        offset = int(player) - 1
        tensor[offset][mask] = 1.0
        tensor[2 + offset][mask] = state.health[mask] / STONE_MAX_HEALTH
    tensor[4] = state.petrified.astype(np.float32)
    if state.last_move is not None:
        row, col = state.last_move
        tensor[5, row, col] = 1.0
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(state.turn) - 1] = 1.0
    aux[2:] = state.prisoners.astype(np.float32) / NUM_POINTS
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)


def state_to_dict(state: GameState) -> Dict[str, object]:
    """JSON-friendly projection of everything a front end draws."""
    cells: List[List[Optional[Dict[str, object]]]] = []
    for row in range(BOARD_SIZE):
        cells_row: List[Optional[Dict[str, object]]] = []
        for col in range(BOARD_SIZE):
            stone = state.stone_at(row, col)
            if stone is None:
                cells_row.append(None)
            else:
                cells_row.append(
                    {
                        "color": stone.color.name.lower(),
                        "health": stone.health,
                        "petrified": stone.petrified,
                        "id": stone.id,
                    }
                )
        cells.append(cells_row)
    return {
        "board": cells,
        "turn": state.turn.name.lower(),
        "turn_count": state.turn_count,
        "prisoners": state.prisoner_counts(),
        "status": state.status.value,
        "last_move": list(state.last_move) if state.last_move is not None else None,
    }


def render_ascii(state: GameState) -> str:
    """Board as text. Petrified stones show as ``#`` (Black) and ``@`` (White)."""
    symbols = {(0, False): ".", (1, False): "X", (2, False): "O", (1, True): "#", (2, True): "@"}
    header = "  " + " ".join(str(col) for col in range(BOARD_SIZE))
    rows = [header]
    for row in range(BOARD_SIZE):
        cells = (
            symbols[(int(state.board[row, col]), bool(state.petrified[row, col]))]
            for col in range(BOARD_SIZE)
        )
        rows.append(f"{row} " + " ".join(cells))
    return "\n".join(rows)
