"""
Base agent interface for Minefield players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield import CELL_COUNT, GRID_SIZE, MoveMode


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minefield agents.

    Agents choose an action in the environment's space: indices below 81
    reveal a cell, indices from 81 toggle a flag.
    """

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 9x9 array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    @staticmethod
    def position_to_action(
        row: int, col: int, mode: MoveMode = MoveMode.REVEAL
    ) -> int:
        """Convert (row, col, mode) to flat action index."""
        offset = CELL_COUNT if mode is MoveMode.TOGGLE_FLAG else 0
        return offset + row * GRID_SIZE + col

    @staticmethod
    def action_to_position(action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(action % CELL_COUNT, GRID_SIZE)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 9x9 array of cell states.

        Returns:
            Boolean mask over reveal and flag actions.
        """
        flat_obs = observation.flatten()
        hidden = flat_obs == -1
        flagged = flat_obs == -2
        return np.concatenate([hidden, hidden | flagged])

    def reset(self) -> None:
        """Reset agent state for new episode."""
