from entropy_go.core import STONE_MAX_HEALTH, GameState, Player


def fresh_state(turn: Player = Player.BLACK) -> GameState:
    state = GameState.empty()
    state.turn = turn
    return state


def place(state: GameState, color: Player, *points, health: int = STONE_MAX_HEALTH, petrified: bool = False) -> None:
    for row, col in points:
        state.put_stone(row, col, color, health, petrified=petrified)
