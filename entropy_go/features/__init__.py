"""Feature extraction and read-only projections of the game state."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    render_ascii,
    state_to_dict,
    state_to_numpy,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_aux_vector",
    "build_board_tensor",
    "render_ascii",
    "state_to_dict",
    "state_to_numpy",
]
