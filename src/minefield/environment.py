"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, Position
from .terminal.renderer import render_text


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = uncovered cell with neighbouring mine count
        - 9 = uncovered mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell (x, y) = (i % width, i // width).

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already uncovered or flagged)
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
            config: Board configuration (default: 20x20 with 20% mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config, rng=self.np_random)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility of the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = Board(self.config, rng=self.np_random)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to uncover (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """
        Calculate reward for uncovering a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Reward value.
        """
        if not self.board.is_playing or not self.board.get_cell(x, y).is_covered:
            return -0.1

        self.board.uncover(x, y)

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _safe_cells_uncovered(self) -> int:
        """Count safe cells the player uncovered, excluding the loss reveal."""
        revealed = self.board.revealed_count - self.board.mine_count
        if self.board.is_lost:
            revealed -= 1  # the exploded mine
        return revealed

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self._safe_cells_uncovered(),
            "total_safe": self.board.total_cells - self.board.mine_count,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(render_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
