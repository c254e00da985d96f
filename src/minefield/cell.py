"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(covered/uncovered/flagged), their content (mine or not) and the
memoized count of neighbouring mines.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        state: Current visual state (covered, uncovered, or flagged).
        neighbour_count: Cached count of mines in the 8 surrounding cells,
            or None until the board first computes it.
    """

    is_mine: bool = False
    state: CellState = CellState.COVERED
    neighbour_count: Optional[int] = None

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered.
        """
        if self.state == CellState.UNCOVERED:
            return False
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.COVERED
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Uncovered cell with neighbouring mine count
            9: Uncovered mine (game over state)
        """
        if self.state == CellState.COVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        if self.neighbour_count is None:
            raise RuntimeError("Uncovered cell has no neighbour count")
        return self.neighbour_count
