"""Cell addressing for the 9x9 grid: (col, row) <-> "a0" .. "i8"."""

from typing import List, Tuple

SIZE = 9
BOX = 3
COLUMN_LETTERS = "abcdefghi"

Key = str


def key_of(col: int, row: int) -> Key:
    """Column letter followed by row digit, e.g. (0, 0) -> "a0"."""
    if not (0 <= col < SIZE and 0 <= row < SIZE):
        raise ValueError(f"Cell ({col}, {row}) is outside the 9x9 grid")
    return f"{COLUMN_LETTERS[col]}{row}"


def decode(key: Key) -> Tuple[int, int]:
    if len(key) != 2 or key[0] not in COLUMN_LETTERS or not key[1].isdigit():
        raise ValueError(f"Malformed cell key: {key!r}")
    row = int(key[1])
    if row >= SIZE:
        raise ValueError(f"Malformed cell key: {key!r}")
    return COLUMN_LETTERS.index(key[0]), row


def row_keys(row: int) -> List[Key]:
    return [key_of(col, row) for col in range(SIZE)]


def col_keys(col: int) -> List[Key]:
    return [key_of(col, row) for row in range(SIZE)]


def box_keys(box_row: int, box_col: int) -> List[Key]:
    return [
        key_of(box_col * BOX + c, box_row * BOX + r)
        for r in range(BOX)
        for c in range(BOX)
    ]


def all_groups() -> List[List[Key]]:
    """The 27 groups that must hold distinct values: rows, columns, then boxes."""
    groups = [row_keys(r) for r in range(SIZE)]
    groups.extend(col_keys(c) for c in range(SIZE))
    groups.extend(box_keys(br, bc) for br in range(BOX) for bc in range(BOX))
    return groups


# Row-major order, matching how grids are read and rendered.
ALL_KEYS: List[Key] = [key_of(col, row) for row in range(SIZE) for col in range(SIZE)]
