"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 20x20 board from a fixed seed."""
    return Board(rng=np.random.default_rng(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0.0))


@pytest.fixture
def full_board() -> Board:
    """Create a 3x3 board where every cell is a mine."""
    return Board(BoardConfig(3, 3, 1.0))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with one mine in the bottom-right corner.

    Cells not touching (4, 4) have a neighbour count of 0.
    """
    return Board.from_mines(5, 5, [(4, 4)])


@pytest.fixture
def started_board() -> Board:
    """
    4x4 board with mines at (3, 0) and (3, 3), already started.

    The first uncover at (0, 0) is used up so later mine hits count.
    It cascades over columns 0-2, leaving (3, 1) and (3, 2) covered.
    """
    board = Board.from_mines(4, 4, [(3, 0), (3, 3)])
    board.uncover(0, 0)
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 0.15)
