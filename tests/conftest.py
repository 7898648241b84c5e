"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded board with 10 mines."""
    return Board(BoardConfig(num_mines=10, seed=1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood testing."""
    return Board.from_mines([])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a board with a single mine in the top-left corner."""
    return Board.from_mines([(0, 0)])


@pytest.fixture
def wall_board() -> Board:
    """Create a board with a full column of mines at col 4."""
    return Board.from_mines([(row, 4) for row in range(9)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def hint_cell() -> Cell:
    """Create a hidden cell with three adjacent mines."""
    return Cell(adjacent_mines=3)


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Build an input function that replays the given lines."""
    def make(lines: Iterable[str]) -> Callable[[], str]:
        remaining = iter(lines)
        return lambda: next(remaining)
    return make


@pytest.fixture
def output_lines() -> List[str]:
    """Collect everything the console writes."""
    return []
