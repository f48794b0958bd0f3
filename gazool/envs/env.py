"""2048 Gym Environment."""
from typing import Any, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from gazool.console.model import Console
from gazool.fields import NUM_ACTIONS, NUM_COLUMNS, NUM_ROWS, Action, shift, shift_board
from gazool.fields.board import get_max_tile, is_game_lost, is_game_won
from gazool.machine.session import GameSession
from gazool.machine.states import GameState
from gazool.screens.draw import draw_board


class Game2048Env(gym.Env):
    """
    Gymnasium environment over a GameSession and the shift engine.

    Observation:
        4x4 board with tile values (0 for empty, powers of 2 for tiles)

    Actions:
        0: UP
        1: DOWN
        2: LEFT
        3: RIGHT

    Reward:
        Score gained from merging tiles in each step.

    An episode ends when the winning tile appears or no move is left.
    Animations are played out instantly.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(self, render_mode: Optional[str] = None, winning_tile: int = 2048):
        super().__init__()

        self.render_mode = render_mode
        self.winning_tile = winning_tile
        self.session = GameSession(winning_tile=winning_tile)
        self.console = Console()

        self.observation_space = spaces.Box(
            low=0,
            high=2**17,
            shape=(NUM_ROWS, NUM_COLUMNS),
            dtype=np.int32,
        )
        self.action_space = spaces.Discrete(NUM_ACTIONS)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> tuple[np.ndarray, dict[str, Any]]:
        """Start a new round; the high score carries over between episodes."""
        super().reset(seed=seed)

        if seed is not None:
            self.session.rng.seed(seed)
        if options and "winning_tile" in options:
            self.winning_tile = int(options["winning_tile"])

        self.session.winning_tile = self.winning_tile
        self.session.reset_round()
        self.session.insert_tile()
        self.session.insert_tile()
        self.session.state = GameState.ROUND_INPUT

        if self.render_mode == "human":
            self._render_human()

        return self.session.board.copy(), self._get_info()

    def step(
        self, action: int
    ) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """
        Execute one shift.

        Args:
            action: The action to take (0=UP, 1=DOWN, 2=LEFT, 3=RIGHT)

        Returns:
            observation: Current board state
            reward: Score gained from this action
            terminated: Whether the round is won or lost
            truncated: Always False (no time limit)
            info: Additional information
        """
        action_enum = Action(action)
        session = self.session
        before = session.score.current

        if shift(session, action_enum):
            while session.animations.step():
                pass
            session.animations.clear()
            if not is_game_won(session.board, session.winning_tile):
                session.insert_tile()

        won = is_game_won(session.board, session.winning_tile)
        terminated = won or is_game_lost(session.board)
        if won:
            session.state = GameState.VICTORY
        elif terminated:
            session.state = GameState.DEFEAT

        reward = float(session.score.current - before)

        if self.render_mode == "human":
            self._render_human()

        return session.board.copy(), reward, terminated, False, self._get_info()

    def _get_info(self) -> dict[str, Any]:
        """Get additional information about the current state."""
        return {
            "score": self.session.score.current,
            "high_score": self.session.score.high,
            "max_tile": get_max_tile(self.session.board),
            "won": is_game_won(self.session.board, self.session.winning_tile),
            "legal_actions": self.get_legal_actions(),
        }

    def render(self) -> Optional[str]:
        """Render the environment."""
        if self.render_mode == "ansi":
            return self._render_text()
        elif self.render_mode == "human":
            self._render_human()
            return None
        return None

    def _render_text(self) -> str:
        draw_board(self.console, self.session)
        return self.console.to_text()

    def _render_human(self) -> None:
        """Render to console for human viewing."""
        print("\033[2J\033[H")  # Clear screen
        print(self._render_text())

    def get_legal_actions(self) -> list[int]:
        """Get list of action indices that would move at least one tile."""
        return [
            int(a) for a in Action
            if shift_board(self.session.board, a).moved
        ]

    def close(self) -> None:
        """Clean up resources."""
        pass
