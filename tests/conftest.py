"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from deminer import Board, BoardConfig, Cell, Count


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 bombs and nothing planted."""
    return Board.from_config(BoardConfig())


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with one mine in the top left corner."""
    board = Board(3, 3, 1)
    board.plant_mine((0, 0))
    return board


@pytest.fixture
def two_mine_board() -> Board:
    """Create a 3x3 board with mines in opposite corners."""
    board = Board(3, 3, 2)
    board.plant_mine((0, 0))
    board.plant_mine((2, 2))
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(5, 5, 0)


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
    cell = Cell()
    cell.plant_mine()
    return cell


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a shown cell with three mined neighbors."""
    cell = Cell(content=Count(3))
    cell.show()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
