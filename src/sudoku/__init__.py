"""Sudoku board model, Z3 encoding, and interactive editor."""

from .board import Board
from .cells import ALL_KEYS, all_groups, decode, key_of
from .editor import GridEditor
from .encoder import Encoding, decode as decode_assignment, encode
from .parser import ParseError, parse_grid, parse_line, parse_puzzle
from .solver_core import SolveResult, SolveStatus, solve_board

__all__ = [
    "ALL_KEYS",
    "Board",
    "Encoding",
    "GridEditor",
    "ParseError",
    "SolveResult",
    "SolveStatus",
    "all_groups",
    "decode",
    "decode_assignment",
    "encode",
    "key_of",
    "parse_grid",
    "parse_line",
    "parse_puzzle",
    "solve_board",
]
