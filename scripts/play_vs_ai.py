#!/usr/bin/env python3
"""Play Entropy Go against the heuristic AI in the console, with optional logging & replay."""

import argparse
import json
import sys
import time
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import yaml

from entropy_go import PendingAIMove, Player, initialize_game_state, pass_turn, play_move, render_ascii
from entropy_go.ai import HeuristicConfig
from entropy_go.core import GameState


@dataclass
class PlayConfig:
    ai_color: str = "white"
    delay: float = 0.7
    max_turns: int = 200
    workers: int = 1
    seed: Optional[int] = None
    log_file: Optional[str] = None


def load_config(path: Optional[str]) -> PlayConfig:
    cfg: Dict = {}
    if path:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    known = {f.name for f in fields(PlayConfig)}
    return PlayConfig(**{key: value for key, value in cfg.items() if key in known})


def format_status(state: GameState) -> str:
    prisoners = state.prisoner_counts()
    return (
        f"Turn {state.turn_count} | {state.turn.name} to move | "
        f"prisoners black={prisoners['black']} white={prisoners['white']}"
    )


def parse_move(raw: str) -> Optional[tuple]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
        return None
    return int(parts[0]), int(parts[1])


def prompt_human_move(state: GameState) -> Optional[tuple]:
    """Return (row, col), or None for a pass."""
    while True:
        raw = input("row col (p = pass, q = quit): ").strip().lower()
        if raw in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        if raw in {"p", "pass"}:
            return None
        move = parse_move(raw)
        if move is None:
            print("Enter two numbers, e.g. '4 4'.")
            continue
        return move


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    state = initialize_game_state()
    if verbose:
        print("Replaying logged game.")
        print(render_ascii(state))
    for entry in moves:
        point = entry.get("point")
        if point is None:
            state = pass_turn(state)
        else:
            state = play_move(state, point[0], point[1]).state
        if verbose:
            where = "pass" if point is None else f"({point[0]},{point[1]})"
            print(f"{entry.get('actor', 'unknown')} ({entry.get('color', '?')}): {where}")
            print(render_ascii(state))
    summary = {
        "moves": len(moves),
        "turn_count": state.turn_count,
        "prisoners": state.prisoner_counts(),
        "board": state.board.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(format_status(state))
    return summary


def play_interactive(config: PlayConfig) -> None:
    rng = np.random.default_rng(config.seed)
    heuristic = HeuristicConfig(workers=config.workers)
    ai_player = Player[config.ai_color.upper()]
    log_records: List[Dict] = []

    state = initialize_game_state()
    while state.is_playing and state.turn_count < config.max_turns:
        print()
        print(render_ascii(state))
        print(format_status(state))
        mover = state.turn

        pending = PendingAIMove.schedule(state, ai_player, delay=config.delay)
        if pending is not None:
            time.sleep(pending.delay)
            next_state = pending.fire(state, rng=rng, config=heuristic)
            point = next_state.last_move
            actor = "ai"
            print(f"AI ({mover.name}) plays {'pass' if point is None else point}")
        else:
            point = prompt_human_move(state)
            actor = "human"
            if point is None:
                next_state = pass_turn(state)
            else:
                outcome = play_move(state, *point)
                if not outcome.accepted:
                    print(f"Illegal move: {outcome.rejection.value}. Try again.")
                    continue
                next_state = outcome.state

        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "color": mover.name.lower(),
                "point": list(point) if point is not None else None,
            }
        )
        state = next_state

    print("\nFinal board:")
    print(render_ascii(state))
    print(format_status(state))

    if config.log_file:
        metadata = {
            "ai_color": config.ai_color,
            "seed": config.seed,
            "max_turns": config.max_turns,
            "prisoners": state.prisoner_counts(),
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(config.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Entropy Go in the console against the AI.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--ai-color", choices=["black", "white"])
    parser.add_argument("--delay", type=float, help="Seconds the AI waits before answering")
    parser.add_argument("--max-turns", type=int)
    parser.add_argument("--workers", type=int, help="Threads used to score candidate moves")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    config = load_config(args.config)
    if args.ai_color is not None:
        config.ai_color = args.ai_color
    if args.delay is not None:
        config.delay = args.delay
    if args.max_turns is not None:
        config.max_turns = args.max_turns
    if args.workers is not None:
        config.workers = args.workers
    if args.seed is not None:
        config.seed = args.seed
    if args.log_file is not None:
        config.log_file = args.log_file

    play_interactive(config)


if __name__ == "__main__":
    main()
