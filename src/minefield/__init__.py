"""
Minesweeper game module.

Provides the board engine (cells, mine placement, uncovering, flagging and
win/loss detection) plus a Gymnasium environment and a terminal front end.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    CellView,
    Direction,
    GameState,
    ViewKind,
)
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "CellView",
    "Direction",
    "GameState",
    "ViewKind",
    "MinesweeperEnv",
    "make_vec_env",
]
