"""
Agent evaluation.

Plays agents through the gymnasium environment and reports win rate
and progress statistics.
"""
from typing import Dict, Optional, Union

from sweeper_engine import Difficulty, MinesweeperEnv

from .base_agent import BaseAgent


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        difficulty: Union[str, Difficulty] = "easy",
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            difficulty: Preset or Difficulty to play on.
            num_episodes: Number of evaluation games.
            max_steps: Maximum moves per game (default: board size).
        """
        self.env = MinesweeperEnv(difficulty)
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.env.difficulty.total_cells

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps, avg_revealed.
        """
        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for _ in range(self.num_episodes):
            observation, info = self.env.reset()
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(
                    observation, self.env.get_action_mask()
                )
                observation, reward, terminated, truncated, info = self.env.step(
                    action
                )
                total_reward += float(reward)
                total_steps += 1

                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += info.get("revealed", 0)

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """Evaluate several agents by name."""
        return {name: self.evaluate(agent) for name, agent in agents.items()}
