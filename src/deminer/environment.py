"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so agents can play the game.
"""
import logging
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, Position
from .placement import plant_random_mines
from .render import ASCII, render_board


logger = logging.getLogger(__name__)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = shown cell with neighbor mine count
        - 9 = shown mine

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already shown/flagged)

    Mines are planted on the first step, never under the first opened cell.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        if self.config.bombs >= self.config.rows * self.config.cols:
            raise ValueError("At least one safe cell is needed for a first move")
        self.board = Board.from_config(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.rows * self.config.cols)

        self._steps = 0
        self._mines_planted = False
        self._total_safe_cells = (
            self.config.rows * self.config.cols - self.config.bombs
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = Board.from_config(self.config)
        self._steps = 0
        self._mines_planted = False

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        pos = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(pos)
        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        if terminated:
            logger.debug(
                "Episode finished after %d steps: %s",
                self._steps,
                self.board.status().state.name,
            )

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.cols, int(action) % self.config.cols

    def _calculate_reward(self, pos: Position) -> float:
        """Open a cell and score the result."""
        # Invalid action (off the board, already shown or flagged)
        if not self.board.in_bounds(pos):
            return -0.1
        cell = self.board.cell(pos)
        if cell.is_shown or cell.is_flagged:
            return -0.1

        if not self._mines_planted:
            plant_random_mines(self.board, self.np_random, exclude=[pos])
            self._mines_planted = True

        status = self.board.open(pos)
        if status.is_won:
            return 10.0
        if status.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        status = self.board.status()
        return {
            "steps": self._steps,
            "revealed": self.board.shown_count,
            "total_safe": self._total_safe_cells,
            "game_state": status.state.name,
            "flags_left": status.flags_left,
            "valid_actions": len(self.board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board, style=ASCII)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.hidden_positions():
            mask[row * self.config.cols + col] = True
        return mask
