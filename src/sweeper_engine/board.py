"""
Board module for the board engine.

Implements the game board with mine placement, cell revealing,
flagging and game state management.
"""
import logging
import random
import time
import warnings
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell
from .difficulty import Difficulty, EngineConfig, resolve_difficulty
from .errors import ConfigurationError, InvalidCoordinate, MineBudgetExhausted
from .results import (
    LOSS_MESSAGE,
    WIN_MESSAGE,
    CellChange,
    GameOutcome,
    GameStatus,
    RevealResult,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Board Grid
# ============================================================================

@dataclass
class Board:
    """
    Fixed-size matrix of cells.

    The grid is allocated once and its cells are mutated in place for
    the lifetime of a game.
    """

    rows: int
    cols: int
    mine_count: int = 0
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            InvalidCoordinate: If the position is off the board.
        """
        if not self.is_valid_position(row, col):
            raise InvalidCoordinate(row, col, self.rows, self.cols)
        return self._grid[row][col]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    # ========================================================================
    # Mines
    # ========================================================================

    def lay_mine(self, row: int, col: int) -> bool:
        """Put a mine on a cell. Returns False if one is already there."""
        cell = self.cell(row, col)
        if cell.is_mine:
            return False
        cell.is_mine = True
        self.mine_count += 1
        return True

    def calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all non-mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.neighbor_mines = self.count_neighbor_mines(row, col)

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col) if self._grid[r][c].is_mine
        )

    def mine_positions(self) -> List[Position]:
        """Positions of every mine on the board."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    # ========================================================================
    # Views
    # ========================================================================

    def change_at(self, row: int, col: int, exploded: bool = False) -> CellChange:
        """Snapshot the visual state of a cell for the renderer."""
        cell = self._grid[row][col]
        return CellChange(
            row=row,
            col=col,
            view=cell.view,
            neighbor_mines=cell.neighbor_mines,
            exploded=exploded,
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def hidden_positions(self) -> List[Position]:
        """Positions that can still be revealed."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_hidden
        ]


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    State of one game, owned by whoever drives the engine.

    A fresh GameState (with a freshly mined board) is created for every
    new game; nothing carries over between games.
    """

    difficulty: Difficulty
    board: Board
    status: GameStatus = GameStatus.READY
    revealed_count: int = 0
    flagged_count: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    exploded: Optional[Position] = None

    @property
    def safe_cells(self) -> int:
        """Number of reveals needed to win."""
        return self.board.rows * self.board.cols - self.board.mine_count

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags, clamped at zero. Display only."""
        return max(0, self.board.mine_count - self.flagged_count)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def elapsed_seconds(self, now: float) -> int:
        """Whole seconds since the first reveal, frozen once the game ends."""
        if self.start_time is None:
            return 0
        end = self.end_time if self.end_time is not None else now
        return max(0, int(end - self.start_time))


# ============================================================================
# Board Engine
# ============================================================================

class BoardEngine:
    """
    Creates games and applies moves to them.

    The engine holds no game of its own: every operation takes the
    GameState it should act on. All operations run to completion
    synchronously.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Mine placement settings.
            rng: Random source for mine placement.
            clock: Returns the current time in seconds.
        """
        self.config = config or EngineConfig()
        self.rng = rng or random.Random()
        self.clock = clock

    # ========================================================================
    # New Game
    # ========================================================================

    def initialize(
        self,
        difficulty: Union[str, Difficulty],
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> GameState:
        """
        Build a new game with a freshly mined board.

        Args:
            difficulty: Preset name or Difficulty.
            mine_positions: Explicit mine layout; random when omitted.

        Returns:
            GameState in the ready status.

        Raises:
            UnknownDifficulty: If the preset name is not registered.
            ConfigurationError: If mine_positions does not fit the board.
        """
        difficulty = resolve_difficulty(difficulty)
        board = Board(difficulty.rows, difficulty.cols)

        if mine_positions is None:
            self._place_mines(board, difficulty.mines)
        else:
            self._place_mines_at(board, difficulty, list(mine_positions))
        board.calculate_neighbor_mines()

        logger.info(
            "New %s game: %s board with %d mines",
            difficulty.label, difficulty.size, board.mine_count,
        )
        return GameState(difficulty=difficulty, board=board)

    def _place_mines(self, board: Board, count: int) -> None:
        """Place mines at random using the configured strategy."""
        if self.config.placement == "rejection":
            self._place_mines_by_rejection(board, count)
        else:
            for row, col in self.rng.sample(list(board.positions()), count):
                board.lay_mine(row, col)

    def _place_mines_by_rejection(self, board: Board, count: int) -> None:
        """Draw random cells until enough mines land or attempts run out."""
        budget = self.config.attempt_factor * board.rows * board.cols
        attempts = 0
        while board.mine_count < count and attempts < budget:
            row = self.rng.randrange(board.rows)
            col = self.rng.randrange(board.cols)
            board.lay_mine(row, col)
            attempts += 1

        if board.mine_count < count:
            warnings.warn(
                f"Only placed {board.mine_count} of {count} mines "
                f"after {attempts} attempts",
                MineBudgetExhausted,
                stacklevel=4,
            )

    @staticmethod
    def _place_mines_at(
        board: Board, difficulty: Difficulty, positions: List[Position]
    ) -> None:
        if len(positions) != difficulty.mines:
            raise ConfigurationError(
                f"Expected {difficulty.mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            if not board.is_valid_position(row, col):
                raise ConfigurationError(
                    f"Mine position ({row}, {col}) is off the board"
                )
            if not board.lay_mine(row, col):
                raise ConfigurationError(
                    f"Duplicate mine position ({row}, {col})"
                )

    # ========================================================================
    # Moves
    # ========================================================================

    def reveal(self, state: GameState, row: int, col: int) -> RevealResult:
        """
        Reveal a cell, cascading over empty regions.

        The first reveal starts the clock. Revealing a mine loses the
        game and uncovers every mine; revealing the last safe cell wins
        it and flags every mine.

        Raises:
            InvalidCoordinate: If (row, col) is off the board.
        """
        board = state.board
        cell = board.cell(row, col)
        if state.is_over or cell.is_revealed or cell.is_flagged:
            return self._ignored(state)

        previous = state.status
        if state.status is GameStatus.READY:
            state.status = GameStatus.PLAYING
            state.start_time = self.clock()

        if cell.is_mine:
            changes = self._explode(state, row, col)
        else:
            changes = self._flood_fill(state, row, col)
            if state.revealed_count == state.safe_cells:
                changes.extend(self._win(state))

        return self._result(state, changes, previous)

    def _flood_fill(self, state: GameState, row: int, col: int) -> List[CellChange]:
        """Reveal a safe cell and every cell reachable through zeros."""
        board = state.board
        changes = []
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            cell = board.cell(current_row, current_col)
            if not cell.reveal():
                continue
            state.revealed_count += 1
            changes.append(board.change_at(current_row, current_col))

            if not cell.is_mine and cell.neighbor_mines == 0:
                for neighbor in board.neighbors(current_row, current_col):
                    if board.cell(*neighbor).is_hidden:
                        pending.append(neighbor)

        logger.debug("Revealed %d cell(s) from (%d, %d)", len(changes), row, col)
        return changes

    def _explode(self, state: GameState, row: int, col: int) -> List[CellChange]:
        """Lose the game and uncover every mine."""
        board = state.board
        board.cell(row, col).is_revealed = True
        state.revealed_count += 1
        state.exploded = (row, col)
        self._finish(state, GameStatus.LOST)

        changes = [board.change_at(row, col, exploded=True)]
        for mine_row, mine_col in board.mine_positions():
            mine = board.cell(mine_row, mine_col)
            if not mine.is_revealed:
                mine.is_revealed = True
                state.revealed_count += 1
                changes.append(board.change_at(mine_row, mine_col))
        return changes

    def _win(self, state: GameState) -> List[CellChange]:
        """Win the game and flag every mine still unflagged."""
        board = state.board
        self._finish(state, GameStatus.WON)

        changes = []
        for mine_row, mine_col in board.mine_positions():
            mine = board.cell(mine_row, mine_col)
            if not mine.is_flagged:
                mine.is_flagged = True
                state.flagged_count += 1
                changes.append(board.change_at(mine_row, mine_col))
        return changes

    def _finish(self, state: GameState, status: GameStatus) -> None:
        state.status = status
        state.end_time = self.clock()
        logger.info(
            "Game %s after %d second(s)",
            status.value, state.elapsed_seconds(state.end_time),
        )

    def toggle_flag(self, state: GameState, row: int, col: int) -> RevealResult:
        """
        Flag or unflag a hidden cell.

        Flags never change the game status and are not limited to the
        number of mines.

        Raises:
            InvalidCoordinate: If (row, col) is off the board.
        """
        cell = state.board.cell(row, col)
        if state.is_over or not cell.toggle_flag():
            return self._ignored(state)

        state.flagged_count += 1 if cell.is_flagged else -1
        logger.debug(
            "Cell (%d, %d) %s", row, col,
            "flagged" if cell.is_flagged else "unflagged",
        )
        return self._result(state, [state.board.change_at(row, col)], state.status)

    # ========================================================================
    # Queries
    # ========================================================================

    def elapsed_seconds(self, state: GameState) -> int:
        """Seconds since the first reveal, or 0 before it."""
        return state.elapsed_seconds(self.clock())

    def stats(self, state: GameState) -> Dict[str, Any]:
        """Summary of the game for display."""
        return {
            "difficulty": state.difficulty.label,
            "status": state.status.value,
            "revealed_cells": state.revealed_count,
            "flagged_cells": state.flagged_count,
            "total_mines": state.board.mine_count,
            "remaining_mines": state.remaining_mines,
            "elapsed_time": self.elapsed_seconds(state),
            "board_size": state.difficulty.size,
        }

    # ========================================================================
    # Results
    # ========================================================================

    def _ignored(self, state: GameState) -> RevealResult:
        result = self._result(state, [], state.status)
        result.ignored = True
        return result

    def _result(
        self,
        state: GameState,
        changes: List[CellChange],
        previous: GameStatus,
    ) -> RevealResult:
        outcome = None
        if state.is_over and previous is not state.status:
            outcome = self._outcome(state)
        return RevealResult(
            status=state.status,
            revealed_count=state.revealed_count,
            flagged_count=state.flagged_count,
            remaining_mines=state.remaining_mines,
            changed=changes,
            status_changed=previous is not state.status,
            outcome=outcome,
        )

    def _outcome(self, state: GameState) -> GameOutcome:
        seconds = self.elapsed_seconds(state)
        if state.status is GameStatus.WON:
            message = WIN_MESSAGE.format(seconds=seconds)
        else:
            message = LOSS_MESSAGE
        return GameOutcome(
            status=state.status, message=message, elapsed_seconds=seconds
        )
