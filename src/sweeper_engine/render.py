"""
Text rendering of boards and counters.
"""
from typing import Dict

from .board import Board
from .cell import CellView

SYMBOLS: Dict[CellView, str] = {
    CellView.HIDDEN: ".",
    CellView.FLAGGED: "F",
    CellView.EMPTY: " ",
    CellView.MINE: "*",
}


def cell_symbol(view: CellView, neighbor_mines: int = 0) -> str:
    """Single character for a cell's visual state."""
    if view is CellView.NUMBER:
        return str(neighbor_mines)
    return SYMBOLS[view]


def render_board(board: Board, coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        board: Board to draw.
        coordinates: Prefix rows and columns with their indices.
    """
    lines = []
    if coordinates:
        header = "".join(f"{col % 10} " for col in range(board.cols))
        lines.append("    " + header)

    for row in range(board.rows):
        row_str = ""
        for col in range(board.cols):
            cell = board.cell(row, col)
            row_str += cell_symbol(cell.view, cell.neighbor_mines) + " "
        if coordinates:
            row_str = f"{row:>2}  " + row_str
        lines.append(row_str)

    return "\n".join(lines)


def format_clock(seconds: int) -> str:
    """Format elapsed seconds as HH:MM:SS."""
    hours, rest = divmod(max(0, int(seconds)), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_mines_counter(remaining: int, total: int) -> str:
    """Remaining mines over total, e.g. '7 / 10'."""
    return f"{remaining} / {total}"
