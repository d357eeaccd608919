"""
Gymnasium environment wrapper for Nodesweeper.

Exposes a game session through the standard Gymnasium interface so it
can be driven by scripts.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import Coord
from .render import render_text
from .session import ClickOutcome, FlagOutcome, GameSession


# ============================================================================
# Nodesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Nodesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols is a primary click on (i // cols, i % cols);
        the upper half toggles a flag on the same cells.

    Rewards:
        - +1 for a click that revealed cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changed nothing
        - 0 for a flag toggle
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(seed) if seed is not None else None
        self.session.restart(rng)
        self._steps = 0

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Args:
            action: Cell index to click, or cell index + rows * cols to
                toggle a flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, coord = self._decode_action(int(action))
        self._steps += 1

        if flag:
            reward = self._flag_reward(coord)
        else:
            reward = self._click_reward(coord)

        terminated = not self.session.is_playing
        return (
            self.session.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _decode_action(self, action: int) -> Tuple[bool, Coord]:
        total = self.config.total_cells
        flag = action >= total
        index = action - total if flag else action
        return flag, Coord(index // self.config.cols, index % self.config.cols)

    def _click_reward(self, coord: Coord) -> float:
        if not self.session.is_playing:
            return -0.1

        before = self.session.revealed_count
        outcome = self.session.primary_click(coord)

        if outcome == ClickOutcome.WIN:
            return 10.0
        if outcome == ClickOutcome.HIT_MINE:
            return -10.0
        if self.session.revealed_count == before:
            return -0.1
        return 1.0

    def _flag_reward(self, coord: Coord) -> float:
        outcome = self.session.toggle_flag(coord)
        if outcome == FlagOutcome.REJECTED:
            return -0.1
        if self.session.is_won:
            return 10.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.revealed_count,
            "total_safe": self.session.hidden.safe_cell_count,
            "mines_remaining": self.session.mines_remaining,
            "game_state": self.session.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session)
        if self.render_mode == "human":
            print(render_text(self.session))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Clicks and flag
            toggles are valid on any unrevealed cell.
        """
        if not self.session.is_playing:
            return np.zeros(self.action_space.n, dtype=bool)
        obs = self.session.get_observation().flatten()
        unrevealed = obs < 0
        return np.concatenate([unrevealed, unrevealed])
