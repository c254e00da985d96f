"""
Command line entry point: play Minesweeper in the terminal.
"""
import argparse
import curses
import logging
import sys
from typing import List, Optional

import numpy as np

from .board import Board, BoardConfig
from .terminal.renderer import CursesRenderer, render_ansi, render_text
from .terminal.session import Session, play


logger = logging.getLogger("minefield")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minefield",
        description=(
            "Terminal Minesweeper. Move with WASD or the arrow keys, "
            "uncover with space or enter, flag with f, highlight with h, "
            "quit with q or Ctrl-C."
        ),
    )
    parser.add_argument("--width", type=int, default=20, help="Board width")
    parser.add_argument("--height", type=int, default=20, help="Board height")
    parser.add_argument(
        "--density", type=float, default=0.2,
        help="Chance that each cell holds a mine (0-1)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the mine layout (default: random every run)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colours",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file (the screen belongs to the game)",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum level written to the log file",
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Send logs to a file, or discard them when no file is given."""
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, play one game and print the final board.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = BoardConfig(args.width, args.height, args.density)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(args.log_file, args.log_level)

    board = Board(config, rng=np.random.default_rng(args.seed))
    session = Session(board)
    logger.info(
        "Starting %dx%d game with %d mines (seed=%s)",
        config.width, config.height, board.mine_count, args.seed,
    )

    def run(window) -> None:
        curses.raw()
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        play(window, session, CursesRenderer(use_color=not args.no_color))

    try:
        curses.wrapper(run)
    except KeyboardInterrupt:
        session.quit()

    print(render_text(board) if args.no_color else render_ansi(board))
    message = session.status_message()
    if message:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
