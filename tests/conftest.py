import pytest

from src.sudoku.board import Board
from src.utils.trace import reset_tracer

SOLVED_ROWS = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

# 17-clue puzzle with a unique solution.
MINIMAL_PUZZLE = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"


def rows_to_grid(rows):
    return [[int(ch) for ch in row] for row in rows]


@pytest.fixture(autouse=True)
def _fresh_tracer():
    reset_tracer()
    yield
    reset_tracer()


@pytest.fixture
def solved_board():
    return Board.from_grid(rows_to_grid(SOLVED_ROWS))
