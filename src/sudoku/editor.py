"""Interactive grid editor: cursor state and key handling over a Board."""

from typing import Callable, Dict, List, Optional, Tuple

from .board import Board
from .cells import SIZE, key_of
from src.utils.trace import Tracer, get_tracer

# Abstract key names produced by the terminal layer; printable keys are the
# character itself.
UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"
ESCAPE, BACKSPACE, DELETE = "esc", "backspace", "delete"

MOVES: Dict[str, Tuple[int, int]] = {
    UP: (-1, 0), "w": (-1, 0), "W": (-1, 0),
    DOWN: (1, 0), "s": (1, 0), "S": (1, 0),
    LEFT: (0, -1), "a": (0, -1), "A": (0, -1),
    RIGHT: (0, 1), "d": (0, 1), "D": (0, 1),
}
CLEAR_KEYS = {"0", " ", BACKSPACE, DELETE}
RESET_KEYS = {"r", "R"}
QUIT_KEYS = {"q", "Q", ESCAPE}

CONTROLS = [
    "Controls:",
    "  Arrow Keys / WASD: Move cursor",
    "  1-9: Enter number",
    "  0 / Space / Backspace: Clear cell",
    "  Q / Esc: Quit and show result",
    "  R: Reset grid",
]


class GridEditor:
    """
    Holds the board being edited and the (row, col) cursor. The cursor wraps
    around all four edges; writes overwrite any cell, clue or not, and no
    Sudoku legality is checked while editing.
    """

    def __init__(self, board: Optional[Board] = None, tracer: Optional[Tracer] = None):
        self.board = board if board is not None else Board.empty()
        self.cursor: Tuple[int, int] = (0, 0)
        self.running = True
        self.tracer = tracer or get_tracer()

    @property
    def cursor_key(self) -> str:
        row, col = self.cursor
        return key_of(col, row)

    def move(self, d_row: int, d_col: int) -> None:
        row, col = self.cursor
        self.cursor = ((row + d_row) % SIZE, (col + d_col) % SIZE)
        self.tracer.log_edit('move', cell=self.cursor_key)

    def set_digit(self, digit: int) -> None:
        self.board.set(self.cursor_key, digit)
        self.tracer.log_edit('set', cell=self.cursor_key, value=digit)

    def clear_cell(self) -> None:
        self.board.set(self.cursor_key, None)
        self.tracer.log_edit('clear', cell=self.cursor_key)

    def reset(self) -> None:
        self.board.clear()
        self.tracer.log_edit('reset')

    def quit(self) -> None:
        self.running = False
        self.tracer.log_edit('quit')

    def handle_key(self, key: str) -> bool:
        """Apply one key event. Returns False once the session should end."""
        action = self._action_for(key)
        if action is not None:
            action()
        return self.running

    def _action_for(self, key: str) -> Optional[Callable[[], None]]:
        if key in MOVES:
            d_row, d_col = MOVES[key]
            return lambda: self.move(d_row, d_col)
        if len(key) == 1 and key in "123456789":
            return lambda: self.set_digit(int(key))
        if key in CLEAR_KEYS:
            return self.clear_cell
        if key in RESET_KEYS:
            return self.reset
        if key in QUIT_KEYS:
            return self.quit
        return None

    def grid_lines(self) -> List[str]:
        """Box-drawn grid rows; every cell sits at column 2 + 2*col + 2*(col//3)."""
        lines = ["  A B C   D E F   G H I", "┌───────┬───────┬───────┐"]
        for row in range(SIZE):
            if row in (3, 6):
                lines.append("├───────┼───────┼───────┤")
            parts = ["│ "]
            for col in range(SIZE):
                if col in (3, 6):
                    parts.append("│ ")
                value = self.board.get(key_of(col, row))
                parts.append(f"{value if value is not None else '.'} ")
            parts.append(f"│ {row}")
            lines.append("".join(parts))
        lines.append("└───────┴───────┴───────┘")
        return lines

    def cell_position(self) -> Tuple[int, int]:
        """(line, column) of the cursor cell within `grid_lines()`."""
        row, col = self.cursor
        line = 2 + row + row // 3
        column = 2 + 2 * col + 2 * (col // 3)
        return line, column

    def screen_lines(self) -> List[str]:
        row, col = self.cursor
        status = f"Cursor: Row {chr(ord('A') + row)}, Col {col + 1}"
        return self.grid_lines() + [""] + CONTROLS + ["", status]
