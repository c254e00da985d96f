"""
Control loop connecting keyboard input, the board and the renderer.
"""
import logging
from typing import Optional

from ..board import Board, Direction, GameState
from .controls import Command, command_for_key
from .renderer import CursesRenderer


logger = logging.getLogger(__name__)

LOST_MESSAGE = "YOU FAILED"
WON_MESSAGE = "YOU WON! WELL DONE"

MOVES = {
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
}


class Session:
    """
    One game in progress.

    Commands are processed one at a time, each to completion, and the
    loop stops on quit or once the board reaches a final state.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.running = True

    def dispatch(self, command: Command) -> None:
        """Forward a command to the board."""
        logger.debug("Command %s at %s", command.name, self.board.cursor)
        if command == Command.QUIT:
            self.quit()
        elif command in MOVES:
            self.board.move_cursor(MOVES[command])
        elif command == Command.UNCOVER:
            self.board.uncover_at_cursor()
        elif command == Command.FLAG:
            self.board.toggle_flag_at_cursor()
        elif command == Command.HIGHLIGHT:
            self.board.set_highlight_at_cursor()

    def quit(self) -> None:
        """Stop the loop before the game is decided."""
        logger.info("Player quit")
        self.running = False

    @property
    def active(self) -> bool:
        """Check if the loop should keep reading input."""
        return self.running and self.board.is_playing

    def status_message(self) -> str:
        """Final message for a decided game, empty while playing."""
        state = self.board.game_state
        if state == GameState.LOST:
            return LOST_MESSAGE
        if state == GameState.WON:
            return WON_MESSAGE
        return ""


def play(window, session: Session, renderer: Optional[CursesRenderer] = None) -> None:
    """
    Run the blocking input loop on a curses window.

    Every frame is drawn between commands; the final frame stays on the
    window when the game ends.
    """
    renderer = renderer or CursesRenderer()
    renderer.init_colors()
    window.keypad(True)
    while True:
        renderer.draw(window, session.board, session.status_message())
        if not session.active:
            return
        command = command_for_key(window.getch())
        if command is not None:
            session.dispatch(command)
