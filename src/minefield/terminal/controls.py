"""
Keyboard controls.

Maps curses key codes to the discrete commands the session forwards to the
board.
"""
import curses
from enum import Enum, auto
from typing import Dict, Optional


class Command(Enum):
    """Player commands delivered to the control loop."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    UNCOVER = auto()
    FLAG = auto()
    HIGHLIGHT = auto()
    QUIT = auto()


CTRL_C = 3

KEY_BINDINGS: Dict[int, Command] = {
    curses.KEY_LEFT: Command.MOVE_LEFT,
    ord("a"): Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord("d"): Command.MOVE_RIGHT,
    curses.KEY_UP: Command.MOVE_UP,
    ord("w"): Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    ord("s"): Command.MOVE_DOWN,
    ord(" "): Command.UNCOVER,
    10: Command.UNCOVER,
    13: Command.UNCOVER,
    curses.KEY_ENTER: Command.UNCOVER,
    ord("f"): Command.FLAG,
    ord("h"): Command.HIGHLIGHT,
    ord("q"): Command.QUIT,
    CTRL_C: Command.QUIT,
}


def command_for_key(key: int) -> Optional[Command]:
    """Look up the command bound to a key code; letters are case-insensitive."""
    if 0 <= key < 256 and chr(key).isalpha():
        key = ord(chr(key).lower())
    return KEY_BINDINGS.get(key)
