from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .board import BOARD_SIZE, EMPTY, Point, empty_board

BoardArray = NDArray[np.int8]
BoolArray = NDArray[np.bool_]


class Player(IntEnum):
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK


class GameStatus(Enum):
    PLAYING = "playing"
    BLACK_WON = "black_won"
    WHITE_WON = "white_won"


@dataclass(frozen=True)
class Stone:
    color: Player
    health: int
    petrified: bool
    id: int


@dataclass(frozen=True)
class MoveRecord:
    point: Point
    player: Player
    captured_positions: Tuple[Point, ...] = field(default_factory=tuple)
    crumbled_positions: Tuple[Point, ...] = field(default_factory=tuple)
    petrified_positions: Tuple[Point, ...] = field(default_factory=tuple)


@dataclass(eq=False)
class GameState:
    board: BoardArray  # shape (9, 9), dtype=np.int8, 0 empty or Player value
    health: NDArray[np.int8]  # shape (9, 9), 0 where empty
    petrified: BoolArray  # shape (9, 9)
    stone_ids: NDArray[np.int32]  # shape (9, 9), 0 where empty
    prisoners: NDArray[np.int64]  # shape (2,), indexed by Player - 1
    turn: Player = Player.BLACK
    turn_count: int = 0
    status: GameStatus = GameStatus.PLAYING
    last_move: Optional[Point] = None
    last_record: Optional[MoveRecord] = None
    next_stone_id: int = 1

    @classmethod
    def empty(cls) -> "GameState":
        return cls(
            board=empty_board(),
            health=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8),
            petrified=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool),
            stone_ids=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int32),
            prisoners=np.zeros(2, dtype=np.int64),
        )

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            health=self.health.copy(),
            petrified=self.petrified.copy(),
            stone_ids=self.stone_ids.copy(),
            prisoners=self.prisoners.copy(),
            turn=self.turn,
            turn_count=self.turn_count,
            status=self.status,
            last_move=self.last_move,
            last_record=self.last_record,
            next_stone_id=self.next_stone_id,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and np.array_equal(self.health, other.health)
            and np.array_equal(self.petrified, other.petrified)
            and np.array_equal(self.stone_ids, other.stone_ids)
            and np.array_equal(self.prisoners, other.prisoners)
            and self.turn == other.turn
            and self.turn_count == other.turn_count
            and self.status == other.status
            and self.last_move == other.last_move
            and self.last_record == other.last_record
            and self.next_stone_id == other.next_stone_id
        )

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    def stone_at(self, row: int, col: int) -> Optional[Stone]:
        value = int(self.board[row, col])
        if value == EMPTY:
            return None
        return Stone(
            color=Player(value),
            health=int(self.health[row, col]),
            petrified=bool(self.petrified[row, col]),
            id=int(self.stone_ids[row, col]),
        )

    def put_stone(self, row: int, col: int, color: Player, health: int, *, petrified: bool = False) -> None:
        """Write a stone in place. Meant for the engine and for setting up positions."""
        self.board[row, col] = int(color)
        self.health[row, col] = health
        self.petrified[row, col] = petrified
        self.stone_ids[row, col] = self.next_stone_id
        self.next_stone_id += 1

    def clear_point(self, row: int, col: int) -> None:
        self.board[row, col] = EMPTY
        self.health[row, col] = 0
        self.petrified[row, col] = False
        self.stone_ids[row, col] = 0

    def prisoners_of(self, player: Player) -> int:
        return int(self.prisoners[int(player) - 1])

    def prisoner_counts(self) -> Dict[str, int]:
        return {
            "black": self.prisoners_of(Player.BLACK),
            "white": self.prisoners_of(Player.WHITE),
        }

    def empty_points(self) -> List[Point]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.board == EMPTY)]

    def occupied_positions(self, color: Player) -> Iterable[Point]:
        for r, c in np.argwhere(self.board == int(color)):
            yield int(r), int(c)

    def petrified_count(self, color: Player) -> int:
        return int(np.count_nonzero(self.petrified & (self.board == int(color))))

    def __repr__(self) -> str:
        symbols = {0: ".", 1: "X", 2: "O"}
        board_str = "\n".join(" ".join(symbols[int(cell)] for cell in row) for row in self.board)
        return (
            f"GameState(turn={self.turn.name}, status={self.status.value}, turn_count={self.turn_count}, "
            f"prisoners={self.prisoner_counts()})\n"
            f"{board_str}"
        )
