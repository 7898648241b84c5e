"""
Random agent for Minefield.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from minefield import CELL_COUNT

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Reveals a random hidden cell; with ``flag_probability`` it toggles a
    random flag instead, when one is available.
    """

    def __init__(
        self,
        flag_probability: float = 0.0,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            flag_probability: Chance of choosing a flag action.
            seed: Random seed for reproducibility.
        """
        if not 0.0 <= flag_probability <= 1.0:
            raise ValueError("flag_probability must be between 0 and 1")
        self.flag_probability = flag_probability
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 9x9 array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        reveal_indices = np.where(valid_actions[:CELL_COUNT])[0]
        flag_indices = np.where(valid_actions[CELL_COUNT:])[0] + CELL_COUNT

        wants_flag = self.rng.random() < self.flag_probability
        if len(flag_indices) > 0 and (wants_flag or len(reveal_indices) == 0):
            return int(self.rng.choice(flag_indices))
        if len(reveal_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0
        return int(self.rng.choice(reveal_indices))
