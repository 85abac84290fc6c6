"""
Cell module for the board engine.

Represents individual cells on the game board with their content
(mine/number) and the player's marks (revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellView(Enum):
    """What a renderer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    EMPTY = auto()
    NUMBER = auto()
    MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are mutated in place for the whole game and never replaced.
    A mine revealed at the end of a lost game may also carry a flag,
    so is_revealed and is_flagged are kept as independent marks.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player marked the cell as a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def view(self) -> CellView:
        """Visual state, with flags drawn over everything else."""
        if self.is_flagged:
            return CellView.FLAGGED
        if not self.is_revealed:
            return CellView.HIDDEN
        if self.is_mine:
            return CellView.MINE
        if self.neighbor_mines > 0:
            return CellView.NUMBER
        return CellView.EMPTY

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        view = self.view
        if view is CellView.HIDDEN:
            return -1
        if view is CellView.FLAGGED:
            return -2
        if view is CellView.MINE:
            return 9
        return self.neighbor_mines
