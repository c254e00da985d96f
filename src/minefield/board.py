"""
Board module for Minesweeper game.

Implements the board engine: mine placement, neighbour counting,
flood-fill uncovering, flagging, cursor handling and win/loss detection.
"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Direction(Enum):
    """Cardinal cursor movements as (dx, dy) steps."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


class ViewKind(Enum):
    """What a renderer should draw for a cell."""

    COVERED = auto()
    NUMBER = auto()
    MINE = auto()
    FLAGGED = auto()


@dataclass(frozen=True)
class CellView:
    """
    Read-only snapshot of a cell for the presentation layer.

    Attributes:
        kind: What is visible on the cell.
        count: Neighbouring mine count, only set for NUMBER cells.
    """

    kind: ViewKind
    count: Optional[int] = None


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_probability: Chance that any single cell holds a mine.
    """

    width: int = 20
    height: int = 20
    mine_probability: float = 0.2

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.mine_probability <= 1.0:
            raise ValueError("Mine probability must be between 0 and 1")


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Cells are stored row-major in a flat list. Mines are drawn once at
    construction from the injected random generator; the only later change
    to the layout is the first-click relocation inside ``uncover``.

    ``revealed_count`` starts out pre-credited with every mine on the board,
    so the game is won exactly when it reaches ``width * height``.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Create a board and place its mines.

        Args:
            config: Board configuration (default: 20x20, 20% mines).
            rng: Random generator used for mine placement.
            mines: Explicit (x, y) mine positions; skips random placement.
        """
        self.config = config or BoardConfig()
        if mines is not None:
            layout = [False] * self.total_cells
            for x, y in mines:
                layout[self._index(x, y)] = True
            self._init_grid(layout)
            return

        rng = rng if rng is not None else np.random.default_rng()
        trials = rng.random(self.total_cells)
        self._init_grid(
            bool(trial < self.config.mine_probability) for trial in trials
        )

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Create a board with an explicit mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions holding a mine.

        Returns:
            A fresh, unstarted board.
        """
        return cls(BoardConfig(width, height, 0.0), mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self, layout: Iterable[bool]) -> None:
        """Create the cells and reset all game bookkeeping."""
        self._grid: List[Cell] = [Cell(is_mine=is_mine) for is_mine in layout]
        self._revealed_count = sum(1 for cell in self._grid if cell.is_mine)
        self._cursor: Position = (0, 0)
        self._highlight: Optional[Position] = None
        self._alive = True
        self._started = False
        self._won = False
        logger.debug(
            "Created %dx%d board with %d mines",
            self.config.width, self.config.height, self._revealed_count,
        )

    def _index(self, x: int, y: int) -> int:
        """Flat list index of a position; out-of-bounds is a bug."""
        if not self._is_valid_position(x, y):
            raise IndexError(
                f"Position ({x}, {y}) is outside the "
                f"{self.config.width}x{self.config.height} board"
            )
        return y * self.config.width + x

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Neighbour Utilities (Low-level)
    # ========================================================================

    def neighbours(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighbouring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for the up to 8 in-bounds neighbours.
        """
        neighbours = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbours.append((new_x, new_y))
        return neighbours

    def neighbour_count(self, x: int, y: int) -> int:
        """
        Count mines around a cell, caching the result on the cell.

        Counts cached before the first uncover are dropped around a mine
        removed by the first-click relocation.
        """
        cell = self._grid[self._index(x, y)]
        if cell.neighbour_count is None:
            mines = [
                self._grid[self._index(nx, ny)].is_mine
                for nx, ny in self.neighbours(x, y)
            ]
            cell.neighbour_count = sum(mines)
        return cell.neighbour_count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, x: int, y: int) -> None:
        """
        Uncover a cell, flood-filling through zero-count regions.

        A flagged cell is unflagged instead of uncovered, including when
        the flood fill reaches it, so flags stop the cascade. The very first
        uncover of the game removes a mine from the target cell. Uncovering
        a mine loses the game and reveals the whole board.

        Args:
            x: Column index to uncover.
            y: Row index to uncover.
        """
        if not self.is_playing:
            return

        index = self._index(x, y)
        if self._grid[index].is_flagged:
            self._grid[index].state = CellState.COVERED
            return

        if not self._started:
            self._started = True
            if self._grid[index].is_mine:
                self._grid[index].is_mine = False
                self._revealed_count -= 1
                for nx, ny in [(x, y)] + self.neighbours(x, y):
                    self._grid[self._index(nx, ny)].neighbour_count = None
                logger.debug("First click on a mine at (%d, %d); removed it", x, y)

        frontier: Deque[Position] = deque([(x, y)])
        uncovered = 0
        while frontier:
            cx, cy = frontier.popleft()
            cell = self._grid[self._index(cx, cy)]
            if cell.is_flagged:
                cell.state = CellState.COVERED
                continue
            if cell.is_uncovered:
                continue

            cell.state = CellState.UNCOVERED
            self._revealed_count += 1
            uncovered += 1

            if cell.is_mine:
                self._lose(cx, cy)
                return

            if self.neighbour_count(cx, cy) == 0:
                frontier.extend(self.neighbours(cx, cy))

        if uncovered > 1:
            logger.debug("Cascade from (%d, %d) uncovered %d cells", x, y, uncovered)
        self._check_win_condition()

    def _lose(self, x: int, y: int) -> None:
        """Mark the game as lost after uncovering the mine at (x, y)."""
        self._alive = False
        self._reveal_all()
        logger.info("Mine uncovered at (%d, %d); game lost", x, y)

    def _reveal_all(self) -> None:
        """
        Uncover every cell after a loss.

        Correctly flagged mines keep their flag so the final board shows
        which mines the player found.
        """
        for cell in self._grid:
            if cell.is_covered:
                cell.state = CellState.UNCOVERED
            elif cell.is_flagged and not cell.is_mine:
                cell.state = CellState.UNCOVERED

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are uncovered."""
        if self._revealed_count == self.total_cells:
            self._won = True
            logger.info("All safe cells uncovered; game won")

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        index = self._index(x, y)
        if not self.is_playing:
            return False
        return self._grid[index].toggle_flag()

    def move_cursor(self, direction: Direction) -> bool:
        """
        Move the cursor one step, staying on the board.

        Returns:
            True if the cursor moved, False if the move was ignored.
        """
        if not self.is_playing:
            return False
        delta_x, delta_y = direction.value
        new_x = self._cursor[0] + delta_x
        new_y = self._cursor[1] + delta_y
        if not self._is_valid_position(new_x, new_y):
            return False
        self._cursor = (new_x, new_y)
        return True

    def set_highlight(self, x: int, y: int) -> None:
        """Anchor the 3x3 highlight region on a cell until the next frame."""
        self._index(x, y)
        if self.is_playing:
            self._highlight = (x, y)

    def take_highlight(self) -> Optional[Position]:
        """Return the highlight anchor and clear it."""
        highlight, self._highlight = self._highlight, None
        return highlight

    def uncover_at_cursor(self) -> None:
        """Uncover the cell under the cursor."""
        self.uncover(*self._cursor)

    def toggle_flag_at_cursor(self) -> bool:
        """Toggle the flag under the cursor."""
        return self.toggle_flag(*self._cursor)

    def set_highlight_at_cursor(self) -> None:
        """Highlight the region around the cursor."""
        self.set_highlight(*self._cursor)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def total_cells(self) -> int:
        return self.config.width * self.config.height

    @property
    def mine_count(self) -> int:
        """Number of mines currently on the board."""
        return sum(1 for cell in self._grid if cell.is_mine)

    @property
    def revealed_count(self) -> int:
        """Uncovered cells plus the pre-credited mines."""
        return self._revealed_count

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def highlight(self) -> Optional[Position]:
        """Peek at the highlight anchor without consuming it."""
        return self._highlight

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def started(self) -> bool:
        return self._started

    @property
    def won(self) -> bool:
        return self._won

    @property
    def game_state(self) -> GameState:
        """Get current game state; a loss outranks a win."""
        if not self._alive:
            return GameState.LOST
        if self._won:
            return GameState.WON
        return GameState.PLAYING

    def is_over(self) -> GameState:
        """Alias of ``game_state`` for the control loop."""
        return self.game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at position."""
        return self._grid[self._index(x, y)]

    def cell_state(self, x: int, y: int) -> CellView:
        """
        Describe what the player can see on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            CellView with the neighbour count filled in for numbers.
        """
        cell = self._grid[self._index(x, y)]
        if cell.is_covered:
            return CellView(ViewKind.COVERED)
        if cell.is_flagged:
            return CellView(ViewKind.FLAGGED)
        if cell.is_mine:
            return CellView(ViewKind.MINE)
        return CellView(ViewKind.NUMBER, self.neighbour_count(x, y))

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array of shape (height, width) where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with neighbour count
                9 = uncovered mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._grid[self._index(x, y)]
                if cell.is_uncovered and not cell.is_mine:
                    self.neighbour_count(x, y)
                obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of covered cells that can be uncovered.

        Returns:
            List of (x, y) positions.
        """
        actions = []
        for y in range(self.config.height):
            for x in range(self.config.width):
                if self._grid[self._index(x, y)].is_covered:
                    actions.append((x, y))
        return actions
