"""All mutable game data, owned in one place."""
import random
from dataclasses import dataclass, field

import numpy as np

from gazool.animation.registry import AnimationRegistry
from gazool.fields.board import add_random_tile, new_board
from gazool.fields.score import ScoreState
from gazool.machine.states import GameState


@dataclass
class GameSession:
    """
    Board, animations, score and screen state of one running game.

    Created once at start-up and passed to every operation. The high score
    lives for as long as the session does.
    """

    board: np.ndarray = field(default_factory=new_board)
    shadow: np.ndarray = field(default_factory=new_board)
    animations: AnimationRegistry = field(default_factory=AnimationRegistry)
    score: ScoreState = field(default_factory=ScoreState)
    winning_tile: int = 2048
    timer: int = 0
    state: GameState = GameState.TITLE_ENTER
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: int | None = None, **kwargs) -> "GameSession":
        return cls(rng=random.Random(seed), **kwargs)

    def reset_round(self) -> None:
        """Empty the board and zero the timer and current score."""
        self.timer = 0
        self.score.reset()
        self.board = new_board()
        self.shadow = new_board()
        self.animations.clear()

    def insert_tile(self) -> bool:
        return add_random_tile(self.board, self.rng)
