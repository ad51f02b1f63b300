"""Top-level Sudoku solve interface.

Expose `solve_puzzle(puzzle)` that accepts a `Board`, a 9x9 grid of
digits (0 or None for empty), or puzzle text compatible with
`src.sudoku.parser.parse_puzzle`.
"""

from typing import Any

from src.sudoku import solver_core
from src.sudoku.board import Board
from src.sudoku.parser import parse_puzzle


def solve_puzzle(puzzle: Any) -> solver_core.SolveResult:
    """
    Solve a puzzle and return the outcome with the (possibly completed) board.
    Accepts:
      - Board instances (solved in place)
      - 9x9 lists of rows
      - Grid text (9 lines of 9 characters, or one 81-character line)
    """
    if isinstance(puzzle, Board):
        board = puzzle
    elif isinstance(puzzle, str):
        board = parse_puzzle(puzzle)
    elif isinstance(puzzle, (list, tuple)):
        board = Board.from_grid(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Board, a 9x9 grid or puzzle text")

    return solver_core.solve_board(board)


__all__ = ["solve_puzzle"]
