"""
Unit tests for agents and evaluation.
"""
import numpy as np
from sweeper_engine import Difficulty
from sweeper_agents import Evaluator, RandomAgent


class TestRandomAgent:
    """Test the random baseline."""

    def test_selects_only_valid_actions(self) -> None:
        """Chosen action is always a hidden cell."""
        agent = RandomAgent(3, 3, seed=0)
        obs = np.full((3, 3), 1, dtype=np.int8)
        obs[2, 1] = -1
        for _ in range(10):
            assert agent.select_action(obs) == 7

    def test_no_valid_actions_returns_zero(self) -> None:
        """A fully revealed board yields action 0."""
        agent = RandomAgent(2, 2, seed=0)
        obs = np.zeros((2, 2), dtype=np.int8)
        assert agent.select_action(obs) == 0

    def test_position_conversion(self) -> None:
        """Flat indices map to (row, col) and back."""
        agent = RandomAgent(9, 30)
        assert agent.action_to_position(65) == (2, 5)
        assert agent.position_to_action(2, 5) == 65


class TestEvaluator:
    """Test agent evaluation."""

    def test_evaluate_reports_metrics(self) -> None:
        """Every game ends and metrics are in range."""
        evaluator = Evaluator(Difficulty(4, 4, 2), num_episodes=5)
        results = evaluator.evaluate(RandomAgent(4, 4, seed=1))
        assert set(results) == {"win_rate", "avg_reward", "avg_steps", "avg_revealed"}
        assert 0.0 <= results["win_rate"] <= 1.0
        assert 1.0 <= results["avg_steps"] <= 14.0

    def test_compare_by_name(self) -> None:
        """Compare returns one entry per agent."""
        evaluator = Evaluator("easy", num_episodes=2)
        results = evaluator.compare({"a": RandomAgent(seed=1), "b": RandomAgent(seed=2)})
        assert set(results) == {"a", "b"}
