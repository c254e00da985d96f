"""
Terminal rendering of a board.

A frame is built once as rows of tokens (text, style, highlighted) and then
emitted either as plain text, as ANSI-coloured text or through curses.
"""
import curses
from typing import Dict, List, NamedTuple, Optional

from ..board import Board, CellView, Position, ViewKind


# ============================================================================
# Constants
# ============================================================================

COVERED_GLYPH = "."
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
BLANK_GLYPH = " "

# One colour per neighbour count, indexed by count - 1
NUMBER_COLORS = (
    "blue", "green", "red", "magenta", "yellow", "cyan", "white", "grey",
)

ANSI_FOREGROUND: Dict[str, int] = {
    "blue": 34, "green": 32, "red": 31, "magenta": 35,
    "yellow": 33, "cyan": 36, "white": 37, "grey": 90,
}
ANSI_HIGHLIGHT = "\x1b[46m"
ANSI_RESET_BACKGROUND = "\x1b[49m"
ANSI_RESET_FOREGROUND = "\x1b[39m"


class Token(NamedTuple):
    """One printable piece of a frame row."""

    text: str
    style: Optional[str] = None
    highlighted: bool = False


# ============================================================================
# Frame Construction
# ============================================================================

def glyph_for(view: CellView) -> Token:
    """Map a cell view to its glyph and colour."""
    if view.kind == ViewKind.COVERED:
        return Token(COVERED_GLYPH)
    if view.kind == ViewKind.FLAGGED:
        return Token(FLAG_GLYPH)
    if view.kind == ViewKind.MINE:
        return Token(MINE_GLYPH)
    count = view.count
    if count is None or not 0 <= count <= 8:
        raise RuntimeError(f"Invalid neighbour count: {count}")
    if count == 0:
        return Token(BLANK_GLYPH)
    return Token(str(count), NUMBER_COLORS[count - 1])


def _in_region(
    x: int, y: int, highlight: Optional[Position], extra_column: int = 0
) -> bool:
    """Check if (x, y) lies in the 3x3 region around the highlight anchor."""
    if highlight is None:
        return False
    hx, hy = highlight
    return hx - 1 <= x <= hx + 1 + extra_column and hy - 1 <= y <= hy + 1


def build_frame(
    board: Board, highlight: Optional[Position] = None
) -> List[List[Token]]:
    """
    Lay out the board as rows of tokens.

    Every cell is preceded by a separator that draws the cursor brackets:
    "[" before the selected cell and "]" after it. The separator right of
    the highlight region is highlighted too so the region reads as a box.
    """
    cursor_x, cursor_y = board.cursor
    rows = []
    for y in range(board.height):
        row = []
        for x in range(board.width + 1):
            if y == cursor_y and x == cursor_x:
                separator = "["
            elif y == cursor_y and x == cursor_x + 1:
                separator = "]"
            else:
                separator = " "
            row.append(Token(
                separator, highlighted=_in_region(x, y, highlight, extra_column=1)
            ))
            if x == board.width:
                break
            cell = glyph_for(board.cell_state(x, y))
            row.append(cell._replace(highlighted=_in_region(x, y, highlight)))
        rows.append(row)
    return rows


# ============================================================================
# Text Output
# ============================================================================

def render_text(board: Board) -> str:
    """Render the board as plain text without consuming the highlight."""
    return "\n".join(
        "".join(token.text for token in row) for row in build_frame(board)
    )


def render_ansi(board: Board) -> str:
    """
    Render the board with ANSI colours.

    Consumes the board's highlight, like every frame drawn for the player.
    """
    lines = []
    for row in build_frame(board, board.take_highlight()):
        parts = []
        for token in row:
            text = token.text
            if token.style is not None:
                text = (
                    f"\x1b[{ANSI_FOREGROUND[token.style]}m{text}"
                    f"{ANSI_RESET_FOREGROUND}"
                )
            if token.highlighted:
                text = f"{ANSI_HIGHLIGHT}{text}{ANSI_RESET_BACKGROUND}"
            parts.append(text)
        lines.append("".join(parts))
    return "\n".join(lines)


# ============================================================================
# Curses Output
# ============================================================================

CURSES_COLORS: Dict[str, int] = {
    "blue": curses.COLOR_BLUE,
    "green": curses.COLOR_GREEN,
    "red": curses.COLOR_RED,
    "magenta": curses.COLOR_MAGENTA,
    "yellow": curses.COLOR_YELLOW,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
    "grey": curses.COLOR_WHITE,
}


class CursesRenderer:
    """Draws frames on a curses window using colour pairs."""

    HIGHLIGHT_PAIR = len(NUMBER_COLORS) + 1

    def __init__(self, use_color: bool = True) -> None:
        self.use_color = use_color
        self._pairs: Dict[str, int] = {}

    def init_colors(self) -> None:
        """Register one colour pair per number colour plus the highlight."""
        if not self.use_color or not curses.has_colors():
            self.use_color = False
            return
        curses.start_color()
        curses.use_default_colors()
        for pair, name in enumerate(NUMBER_COLORS, start=1):
            curses.init_pair(pair, CURSES_COLORS[name], -1)
            self._pairs[name] = pair
        curses.init_pair(self.HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_CYAN)

    def _attr(self, token: Token) -> int:
        """Curses attribute for a token."""
        if not self.use_color:
            return curses.A_REVERSE if token.highlighted else curses.A_NORMAL
        if token.highlighted:
            return curses.color_pair(self.HIGHLIGHT_PAIR)
        if token.style is None:
            return curses.A_NORMAL
        attr = curses.color_pair(self._pairs[token.style])
        if token.style == "grey":
            attr |= curses.A_DIM
        return attr

    def draw(self, window, board: Board, status: str = "") -> None:
        """Draw one frame and the status line, consuming the highlight."""
        window.erase()
        frame = build_frame(board, board.take_highlight())
        for y, row in enumerate(frame):
            for column, token in enumerate(row):
                try:
                    window.addstr(y, column, token.text, self._attr(token))
                except curses.error:
                    pass  # bottom-right corner of a full-size window
        if status:
            try:
                window.addstr(len(frame), 0, status, curses.A_BOLD)
            except curses.error:
                pass
        window.refresh()
