"""Puzzle text parser: convert grid text into Board structures.

Supports:
- Piped grids: exactly 9 lines of exactly 9 characters, "\\n" or "\\r\\n"
  separated, with one optional trailing line terminator.
- Single-line puzzles: 81 characters in row-major order, as found in
  puzzle collections (used by the loader).

Digits 1-9 are values; any other character marks an empty cell.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .board import Board
from .cells import SIZE

_LINE_ENDING = re.compile(r"\r\n|\n")


class ParseError(ValueError):
    """Input text does not have the shape of a 9x9 grid."""


def _cell_value(ch: str) -> Optional[int]:
    return int(ch) if ch in "123456789" else None


def parse_grid(text: str) -> Board:
    # At most one trailing terminator is allowed.
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]

    rows = _LINE_ENDING.split(text)
    if len(rows) != SIZE:
        raise ParseError(f"Expected 9 rows, got {len(rows)}")

    for index, row in enumerate(rows, start=1):
        if len(row) != SIZE:
            raise ParseError(f"Row {index} has {len(row)} characters, expected 9")

    grid: List[List[Optional[int]]] = [[_cell_value(ch) for ch in row] for row in rows]
    return Board.from_grid(grid)


def parse_line(text: str) -> Board:
    line = text.strip()
    if len(line) != SIZE * SIZE:
        raise ParseError(f"Expected 81 characters, got {len(line)}")
    grid = [
        [_cell_value(ch) for ch in line[row * SIZE:(row + 1) * SIZE]]
        for row in range(SIZE)
    ]
    return Board.from_grid(grid)


def parse_puzzle(text: str) -> Board:
    """Accept either the 9-line grid or the 81-character single-line form."""
    if "\n" not in text.rstrip("\r\n"):
        return parse_line(text)
    return parse_grid(text)
