"""
Error types raised by the board engine.

Ignored interactions (clicking a revealed cell, playing after the game
ended) are not errors and never raise; they come back as an empty
RevealResult instead.
"""


class EngineError(Exception):
    """Base class for all board engine errors."""


class ConfigurationError(EngineError, ValueError):
    """A difficulty or board layout is invalid."""


class UnknownDifficulty(ConfigurationError):
    """A difficulty name does not resolve to a known preset."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown difficulty: {name!r}")
        self.name = name


class InvalidCoordinate(EngineError, IndexError):
    """A row/column pair lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


class MineBudgetExhausted(UserWarning):
    """Mine placement ran out of attempts and placed fewer mines."""
