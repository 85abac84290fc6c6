"""
Minesweeper board engine.

Provides grid generation, mine placement, reveal with flood fill,
flag toggling and win/loss detection.
"""
from .errors import (
    EngineError,
    ConfigurationError,
    UnknownDifficulty,
    InvalidCoordinate,
    MineBudgetExhausted,
)
from .difficulty import (
    Difficulty,
    EngineConfig,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
    register_difficulty,
    resolve_difficulty,
)
from .cell import Cell, CellView
from .results import CellChange, GameOutcome, GameStatus, RevealResult
from .board import Board, BoardEngine, GameState
from .environment import MinesweeperEnv

__all__ = [
    "EngineError",
    "ConfigurationError",
    "UnknownDifficulty",
    "InvalidCoordinate",
    "MineBudgetExhausted",
    "Difficulty",
    "EngineConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "register_difficulty",
    "resolve_difficulty",
    "Cell",
    "CellView",
    "CellChange",
    "GameOutcome",
    "GameStatus",
    "RevealResult",
    "Board",
    "BoardEngine",
    "GameState",
    "MinesweeperEnv",
]
