"""
Gymnasium environment wrapper for Minefield.

Provides a standard RL interface over the board engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import (
    Board,
    BoardConfig,
    CELL_COUNT,
    GRID_SIZE,
    GameState,
    MoveMode,
    MoveOutcome,
)
from .console import render_board


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minefield.

    Observation:
        9x9 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * 81.
        Action i < 81 reveals cell (i // 9, i % 9); action 81 + i toggles
        the flag on that cell.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for finishing the game
        - -10 for hitting a mine
        - -0.1 for revealing a cell that is already visible
        - 0 for toggling a flag
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minefield environment.

        Args:
            config: Board configuration (default: 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(GRID_SIZE, GRID_SIZE),
            dtype=np.int8,
        )

        # One reveal and one flag action per cell
        self.action_space = spaces.Discrete(2 * CELL_COUNT)

        self._steps = 0
        self._total_safe_cells = CELL_COUNT - self.config.num_mines

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
        self.board = Board(self.config, rng=self.np_random)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or 81 + cell index to flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col, mode = self.action_to_move(action)
        self._steps += 1

        reward = self._apply(row, col, mode)
        if not self.board.is_lost:
            self.board.reconcile_flags()

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    @staticmethod
    def action_to_move(action: int) -> Tuple[int, int, MoveMode]:
        """Convert flat action index to (row, col, mode)."""
        mode = MoveMode.REVEAL if action < CELL_COUNT else MoveMode.TOGGLE_FLAG
        row, col = divmod(action % CELL_COUNT, GRID_SIZE)
        return row, col, mode

    def _apply(self, row: int, col: int, mode: MoveMode) -> float:
        """
        Apply a move and calculate its reward.

        Args:
            row: Row index.
            col: Column index.
            mode: Reveal or flag.

        Returns:
            Reward value.
        """
        if mode is MoveMode.TOGGLE_FLAG:
            self.board.apply_move(row, col, mode)
            return 10.0 if self.board.is_finished() else 0.0

        cell = self.board.get_cell(row, col)
        if cell.revealed:
            return -0.1

        if self.board.apply_move(row, col, mode) is MoveOutcome.LOSS:
            return -10.0
        if self.board.is_finished():
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.count_revealed(),
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Hidden cells can be revealed or flagged; flagged cells can only be
        unflagged.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.game_state != GameState.PLAYING:
            return mask
        revealed = self.board.get_revealed_grid().flatten()
        flagged = self.board.get_flagged_grid().flatten()
        mask[:CELL_COUNT] = ~revealed
        mask[CELL_COUNT:] = ~revealed | flagged
        return mask
