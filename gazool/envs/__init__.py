from gazool.envs.env import Game2048Env

__all__ = ["Game2048Env"]
