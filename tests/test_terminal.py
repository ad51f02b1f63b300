"""Tests for curses key translation and the editor session loop."""

import curses

from src.sudoku import terminal
from src.sudoku.editor import BACKSPACE, ESCAPE, RIGHT, UP, GridEditor
from src.utils.trace import Tracer


class _FakeScreen:
    def __init__(self, keys, rows=40, cols=80):
        self.keys = list(keys)
        self.rows = rows
        self.cols = cols
        self.writes = []

    def getch(self):
        return self.keys.pop(0)

    def getmaxyx(self):
        return self.rows, self.cols

    def keypad(self, flag):
        pass

    def erase(self):
        self.writes.clear()

    def addstr(self, y, x, text, attr=0):
        if y >= self.rows or x + len(text) > self.cols:
            raise curses.error("addwstr() returned ERR")
        self.writes.append((y, x, text, attr))

    def refresh(self):
        pass


def _quiet_curses(monkeypatch):
    monkeypatch.setattr(terminal.curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(terminal.curses, "set_escdelay", lambda ms: None)


def test_key_name_translates_special_and_printable_codes():
    assert terminal.key_name(curses.KEY_UP) == UP
    assert terminal.key_name(curses.KEY_RIGHT) == RIGHT
    assert terminal.key_name(27) == ESCAPE
    assert terminal.key_name(127) == BACKSPACE
    assert terminal.key_name(ord("7")) == "7"
    assert terminal.key_name(curses.KEY_F1) is None


def test_session_applies_keys_until_quit(monkeypatch):
    _quiet_curses(monkeypatch)
    screen = _FakeScreen([curses.KEY_RIGHT, ord("6"), curses.KEY_F1, ord("q")])
    editor = GridEditor(tracer=Tracer(enabled=False))

    board = terminal._session(screen, editor)

    assert board.get("b0") == 6
    assert not editor.running
    # Cursor cell is drawn highlighted on the last frame.
    assert screen.writes[-1][2] == "6"
    assert screen.writes[-1][3] == curses.A_REVERSE
    assert screen.writes[0][2] == terminal.TITLE[0]


def test_session_fits_a_24_row_terminal(monkeypatch):
    _quiet_curses(monkeypatch)
    screen = _FakeScreen([curses.KEY_DOWN] * 8 + [ord("4"), ord("q")], rows=24, cols=80)
    editor = GridEditor(tracer=Tracer(enabled=False))

    board = terminal._session(screen, editor)

    assert board.get("a8") == 4
    assert all(y < 24 for y, _, _, _ in screen.writes)
    # Title is dropped so the grid starts at the top.
    assert screen.writes[0][2] == editor.grid_lines()[0]
    assert screen.writes[-1][2:] == ("4", curses.A_REVERSE)


def test_narrow_terminal_clips_lines(monkeypatch):
    _quiet_curses(monkeypatch)
    screen = _FakeScreen([ord("q")], rows=10, cols=12)
    editor = GridEditor(tracer=Tracer(enabled=False))

    terminal._session(screen, editor)

    assert screen.writes
    assert all(len(text) <= 12 for _, _, text, _ in screen.writes)
