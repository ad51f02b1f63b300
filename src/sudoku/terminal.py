"""Curses front-end for the grid editor: read keys, redraw the screen."""

import curses
from typing import Optional

from .board import Board
from .editor import BACKSPACE, DELETE, DOWN, ESCAPE, LEFT, RIGHT, UP, GridEditor

TITLE = [
    "╔═══════════════════════════╗",
    "║   SUDOKU PUZZLE INPUT     ║",
    "╚═══════════════════════════╝",
    "",
]

_SPECIAL_KEYS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_BACKSPACE: BACKSPACE,
    curses.KEY_DC: DELETE,
    27: ESCAPE,
    127: BACKSPACE,
    8: BACKSPACE,
}


def key_name(code: int) -> Optional[str]:
    """Translate a curses key code into the editor's key names."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None


def _put(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    maxy, maxx = stdscr.getmaxyx()
    if y >= maxy or x >= maxx:
        return
    try:
        stdscr.addstr(y, x, text[:maxx - x], attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def draw(stdscr, editor: GridEditor) -> None:
    stdscr.erase()
    body = editor.screen_lines()
    maxy, _ = stdscr.getmaxyx()
    # Short terminals lose the title first, then the lines below the grid.
    title = TITLE if len(TITLE) + len(body) <= maxy else []
    for y, line in enumerate(title + body):
        _put(stdscr, y, 0, line)

    line, column = editor.cell_position()
    value = editor.board.get(editor.cursor_key)
    _put(stdscr, len(title) + line, column, str(value) if value is not None else ".", curses.A_REVERSE)
    stdscr.refresh()


def _session(stdscr, editor: GridEditor) -> Board:
    curses.set_escdelay(25)
    curses.curs_set(0)
    stdscr.keypad(True)
    while editor.running:
        draw(stdscr, editor)
        key = key_name(stdscr.getch())
        if key is not None:
            editor.handle_key(key)
    return editor.board


def edit_board(board: Optional[Board] = None) -> Board:
    """
    Run the interactive editor until the user quits and return the board.
    curses.wrapper restores the terminal even when drawing or reading fails.
    """
    editor = GridEditor(board)
    return curses.wrapper(_session, editor)
