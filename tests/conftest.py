"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper_engine import BoardEngine, Cell, Difficulty, GameState, EASY


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class LayoutEngine(BoardEngine):
    """Engine that always lays out the same mines."""

    def __init__(self, mines: List[Tuple[int, int]], **kwargs) -> None:
        super().__init__(**kwargs)
        self.mines = mines

    def initialize(self, difficulty, mine_positions=None) -> GameState:
        return super().initialize(difficulty, mine_positions or self.mines)


# Column 4 is a wall of mines; one more mine sits in the bottom right corner.
WALL_MINES = [(row, 4) for row in range(9)] + [(8, 8)]

TINY = Difficulty(3, 3, 1, "Tiny")


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def engine(clock: FakeClock) -> BoardEngine:
    """Engine with random placement and a fake clock."""
    return BoardEngine(clock=clock)


@pytest.fixture
def wall_game(engine: BoardEngine) -> GameState:
    """Easy game split in two by a wall of mines in column 4."""
    return engine.initialize("easy", WALL_MINES)


@pytest.fixture
def tiny_game(engine: BoardEngine) -> GameState:
    """3x3 game with a single mine in the top left corner."""
    return engine.initialize(TINY, [(0, 0)])


@pytest.fixture
def random_game(engine: BoardEngine) -> GameState:
    """Easy game with random mines."""
    return engine.initialize(EASY)


@pytest.fixture
def wall_engine(clock: FakeClock) -> LayoutEngine:
    """Engine that always builds the wall layout."""
    return LayoutEngine(WALL_MINES, clock=clock)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell
