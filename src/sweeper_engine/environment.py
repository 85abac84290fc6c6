"""
Gymnasium environment wrapper for the board engine.

Lets agents drive the engine through the standard RL interface. Each
action is a reveal; flags are left to the player.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardEngine, GameState
from .difficulty import Difficulty, resolve_difficulty
from .render import render_board
from .results import GameStatus


# ============================================================================
# Rewards
# ============================================================================

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
LOSS_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)

    Seeding:
        reset(seed=n) also reseeds the engine's mine placement, so the
        same seed always deals the same board. The engine's rng is
        replaced, which matters if it is shared with other code.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[str, Difficulty] = "easy",
        render_mode: Optional[str] = None,
        engine: Optional[BoardEngine] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Preset name or Difficulty (default: easy).
            render_mode: How to render the environment.
            engine: Engine used to create and play games.
        """
        super().__init__()

        self.difficulty = resolve_difficulty(difficulty)
        self.engine = engine or BoardEngine()
        self.render_mode = render_mode
        self.state: GameState = self.engine.initialize(self.difficulty)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.difficulty.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Seeds np_random and the engine's mine placement.
                When omitted the engine keeps its current rng.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng = random.Random(seed)
        self.state = self.engine.initialize(self.difficulty)
        self._steps = 0

        return self.state.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.state.board.get_observation()
        terminated = self.state.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.difficulty.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Apply the reveal and score it."""
        result = self.engine.reveal(self.state, row, col)

        if result.ignored:
            return INVALID_REWARD
        if result.status is GameStatus.WON:
            return WIN_REWARD
        if result.status is GameStatus.LOST:
            return LOSS_REWARD
        return SAFE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.state.revealed_count,
            "flagged": self.state.flagged_count,
            "total_safe": self.state.safe_cells,
            "game_state": self.state.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.state.board)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        return (self.state.board.get_observation() == -1).flatten()
