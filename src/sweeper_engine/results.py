"""
Values returned to the presentation layer after each engine call.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .cell import CellView


class GameStatus(Enum):
    """Possible states of the game."""

    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further moves."""
        return self in (GameStatus.WON, GameStatus.LOST)


WIN_MESSAGE = "Congratulations! You cleared the board in {seconds} seconds."
LOSS_MESSAGE = "Boom! You stepped on a mine."


@dataclass(frozen=True)
class CellChange:
    """
    Final visual state of one cell touched by a move.

    Attributes:
        row: Row index.
        col: Column index.
        view: What to draw for the cell now.
        neighbor_mines: Number to draw when view is NUMBER.
        exploded: True only for the mine that lost the game.
    """

    row: int
    col: int
    view: CellView
    neighbor_mines: int = 0
    exploded: bool = False


@dataclass(frozen=True)
class GameOutcome:
    """Completion event raised when a game reaches won or lost."""

    status: GameStatus
    message: str
    elapsed_seconds: int

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON


@dataclass
class RevealResult:
    """
    Everything a renderer needs after a reveal or flag toggle.

    An ignored interaction comes back with no changed cells and
    ignored set to True.
    """

    status: GameStatus
    revealed_count: int
    flagged_count: int
    remaining_mines: int
    changed: List[CellChange] = field(default_factory=list)
    status_changed: bool = False
    ignored: bool = False
    outcome: Optional[GameOutcome] = None

    @property
    def no_change(self) -> bool:
        """True when the move left the board untouched."""
        return not self.changed
