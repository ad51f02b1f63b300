"""Integration-style tests for the Z3-backed solve orchestrator."""

import pytest
import z3
from colorama import Fore, Style

from solver import solve_puzzle
from src.sudoku import solver_core
from src.sudoku.board import Board
from src.sudoku.cells import all_groups
from src.sudoku.encoder import Encoding
from src.sudoku.parser import parse_line
from src.utils.trace import Tracer

from conftest import MINIMAL_PUZZLE


class _UndecidedSolver:
    def check(self):
        return z3.unknown

    def model(self):
        raise AssertionError("model() must not be read when the check is undecided")


def test_minimal_puzzle_is_solved_consistently():
    board = parse_line(MINIMAL_PUZZLE)
    clues = {key: board.get(key) for key in board.clues}

    result = solve_puzzle(board)

    assert result.status is solver_core.SolveStatus.SAT
    assert result.board is board
    assert board.is_complete()
    for group in all_groups():
        assert sorted(board.get(key) for key in group) == list(range(1, 10))
    for key, value in clues.items():
        assert board.get(key) == value
    assert board.clues == set(clues)


def test_duplicate_in_row_is_unsat_and_board_untouched():
    grid = [[0] * 9 for _ in range(9)]
    grid[2][0] = 7
    grid[2][6] = 7
    board = Board.from_grid(grid)
    before = dict(board.values)

    result = solve_puzzle(board)

    assert result.status is solver_core.SolveStatus.UNSAT
    assert board.values == before
    assert result.message() == "No solution found"


def test_unknown_outcome_leaves_board_unmodified(monkeypatch):
    def _undecided_encode(board):
        return Encoding(solver=_UndecidedSolver(), variables={})

    monkeypatch.setattr(solver_core, "encode", _undecided_encode)
    board = parse_line(MINIMAL_PUZZLE)
    before = dict(board.values)

    result = solver_core.solve_board(board, tracer=Tracer(enabled=False))

    assert result.status is solver_core.SolveStatus.UNKNOWN
    assert board.values == before
    assert result.message() == "Solver returned unknown"


def test_solved_cells_render_differently_from_clues():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 5
    result = solve_puzzle(grid)

    assert result.solved
    first_row = result.message(color=True).splitlines()[1]
    assert first_row.startswith("| 5 |")
    assert Style.BRIGHT + Fore.BLUE in first_row


def test_solve_puzzle_accepts_text_and_rejects_other_types():
    result = solve_puzzle(MINIMAL_PUZZLE)
    assert result.solved

    with pytest.raises(TypeError):
        solve_puzzle(42)


def test_solve_records_encode_check_decode_steps():
    tracer = Tracer()
    solver_core.solve_board(parse_line(MINIMAL_PUZZLE), tracer=tracer)

    assert [s.action_type for s in tracer.steps] == ["encode", "check", "decode"]
    assert tracer.steps[0].num_variables == 81
    assert tracer.summary()["last_result"] == "sat"
