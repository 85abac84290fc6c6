"""
Difficulty presets for the board engine.

A difficulty is a named (rows, cols, mines) configuration. The three
classic presets are registered by default; more can be added with
register_difficulty().
"""
from dataclasses import dataclass
from typing import Dict, Union

from .errors import ConfigurationError, UnknownDifficulty


# ============================================================================
# Configuration Data Classes
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Board dimensions and mine count for one game.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
        label: Human-readable name shown to the player.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10
    label: str = "Custom"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mines < 1:
            raise ConfigurationError("A board needs at least one mine")
        if self.mines >= self.total_cells:
            raise ConfigurationError(
                f"Too many mines (max {self.total_cells - 1})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def size(self) -> str:
        """Board size as 'RxC'."""
        return f"{self.rows}x{self.cols}"


@dataclass(frozen=True)
class EngineConfig:
    """
    Mine placement settings.

    Attributes:
        placement: "shuffle" samples positions without replacement;
            "rejection" draws random cells until enough mines land or
            the attempt budget runs out.
        attempt_factor: Budget multiplier for rejection placement
            (attempts = attempt_factor * rows * cols).
    """

    placement: str = "shuffle"
    attempt_factor: int = 2

    def __post_init__(self) -> None:
        if self.placement not in ("shuffle", "rejection"):
            raise ConfigurationError(
                f"Unknown placement strategy: {self.placement!r}"
            )
        if self.attempt_factor < 1:
            raise ConfigurationError("attempt_factor must be at least 1")


# Preset difficulty levels
EASY = Difficulty(9, 9, 10, "Easy")
MEDIUM = Difficulty(16, 16, 40, "Medium")
HARD = Difficulty(16, 30, 99, "Hard")

PRESETS: Dict[str, Difficulty] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Lookup
# ============================================================================

def register_difficulty(name: str, difficulty: Difficulty) -> None:
    """Add or replace a named preset."""
    PRESETS[name.lower()] = difficulty


def resolve_difficulty(difficulty: Union[str, Difficulty]) -> Difficulty:
    """
    Turn a preset name (or an existing Difficulty) into a Difficulty.

    Raises:
        UnknownDifficulty: If the name is not a registered preset.
    """
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return PRESETS[str(difficulty).lower()]
    except KeyError:
        raise UnknownDifficulty(str(difficulty)) from None
