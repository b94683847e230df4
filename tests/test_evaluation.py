from entropy_go.ai import HeuristicPolicy, RandomPolicy
from entropy_go.core import Player
from entropy_go.env import EntropyGoEnv
from entropy_go.evaluation import MatchResult, evaluate_policies, play_match


def test_evaluate_random_vs_random_small() -> None:
    result = evaluate_policies(RandomPolicy(), RandomPolicy(), episodes=2, max_turns=10, seed=0)

    assert result.games_played == 2
    assert result.black_leads + result.white_leads + result.even == 2
    assert result.average_length == 10.0


def test_heuristic_vs_random_runs() -> None:
    result = evaluate_policies(RandomPolicy(), HeuristicPolicy(), episodes=1, max_turns=12, seed=1)

    assert result.games_played == 1
    assert result.average_white_prisoners >= 0


def test_match_leader() -> None:
    assert MatchResult(10, 3, 1, 0, 0).leader == Player.BLACK
    assert MatchResult(10, 0, 2, 0, 0).leader == Player.WHITE
    assert MatchResult(10, 1, 1, 0, 0).leader is None


def test_zero_temperature_plays_greedily() -> None:
    envs = []

    def recording_env(**kwargs) -> EntropyGoEnv:
        env = EntropyGoEnv(**kwargs)
        envs.append(env)
        return env

    result = play_match(RandomPolicy(), RandomPolicy(), max_turns=2, temperature=0.0, env_factory=recording_env)

    assert result.turns == 2
    state = envs[0].state
    assert state.stone_at(0, 0).color == Player.BLACK
    assert state.stone_at(0, 1).color == Player.WHITE
