"""
Evaluation module for Minefield agents.

Plays batches of games in the environment and summarizes the results.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from minefield import BoardConfig, MinesweeperEnv

from agents.base_agent import BaseAgent


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    revealed_cells: int = 0


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 200,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Seed for the first episode's board layout.
        """
        if num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def play_episode(
        self,
        env: MinesweeperEnv,
        agent: BaseAgent,
        seed: Optional[int] = None,
    ) -> EpisodeStats:
        """Play one episode and collect its statistics."""
        observation, info = env.reset(seed=seed)
        agent.reset()
        stats = EpisodeStats(revealed_cells=info["revealed"])

        for _ in range(self.max_steps):
            if info["game_state"] != "PLAYING":
                break
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)
            stats.total_reward += float(reward)
            stats.steps += 1
            if terminated or truncated:
                break

        stats.won = info["game_state"] == "WON"
        stats.revealed_cells = info["revealed"]
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            # Only the first reset is seeded; later ones continue the stream
            seed = self.seed if episode == 0 else None
            stats = self.play_episode(env, agent, seed=seed)
            wins += stats.won
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_revealed += stats.revealed_cells

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results
