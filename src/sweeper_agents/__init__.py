"""
Automated players for the board engine.

- RandomAgent: Baseline random selection
- Evaluator: Plays agents and reports win rates
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluation import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
