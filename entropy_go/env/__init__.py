from .gym_env import EntropyGoEnv, IllegalActionError

__all__ = ["EntropyGoEnv", "IllegalActionError"]
