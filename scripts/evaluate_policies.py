#!/usr/bin/env python3
"""Pit the heuristic AI against a baseline policy and report prisoner leads."""

import argparse
import json

from entropy_go.ai import HeuristicConfig, HeuristicPolicy, RandomPolicy
from entropy_go.evaluation import evaluate_policies


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--max-turns", type=int, default=120)
    parser.add_argument("--temperature", type=float, default=1.0, help="0 plays each policy greedily")
    parser.add_argument("--heuristic-color", choices=["black", "white"], default="white")
    parser.add_argument("--baseline", choices=["random", "heuristic"], default="random")
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args()

    heuristic = HeuristicPolicy(HeuristicConfig(workers=args.workers))
    baseline = RandomPolicy() if args.baseline == "random" else HeuristicPolicy()
    if args.heuristic_color == "black":
        black, white = heuristic, baseline
    else:
        black, white = baseline, heuristic

    result = evaluate_policies(
        black,
        white,
        episodes=args.episodes,
        max_turns=args.max_turns,
        temperature=args.temperature,
        seed=args.seed,
    )

    output = {
        "games": result.games_played,
        "black_leads": result.black_leads,
        "white_leads": result.white_leads,
        "even": result.even,
        "average_length": result.average_length,
        "average_black_prisoners": result.average_black_prisoners,
        "average_white_prisoners": result.average_white_prisoners,
        "black_lead_rate": result.lead_rate_black(),
        "white_lead_rate": result.lead_rate_white(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
