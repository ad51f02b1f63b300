"""Puzzle board: 81 cells keyed by cell key, plus the set of clue cells."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set

from colorama import Fore, Style

from .cells import ALL_KEYS, SIZE, Key, key_of

Grid = List[List[int]]

SEPARATOR = "+---" * SIZE + "+"
_SOLVED_STYLE = Style.BRIGHT + Fore.BLUE
_RESET_STYLE = Style.RESET_ALL


def _as_digit(value: Any) -> Optional[int]:
    # bool is an int subclass; True must not read as a 1.
    if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 9:
        return value
    return None


@dataclass
class Board:
    values: Dict[Key, Optional[int]] = field(
        default_factory=lambda: {key: None for key in ALL_KEYS}
    )
    clues: Set[Key] = field(default_factory=set)

    def __post_init__(self) -> None:
        if set(self.values) != set(ALL_KEYS):
            raise ValueError("A board needs exactly one entry per cell key")
        unknown = self.clues - set(ALL_KEYS)
        if unknown:
            raise ValueError(f"Unknown clue keys: {sorted(unknown)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Any]]) -> "Board":
        """
        Build a board from 9 rows of 9 entries. Entries outside 1-9 are
        empty; every non-empty entry is recorded as a clue.
        """
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("Grid must have 9 rows of 9 entries")

        values: Dict[Key, Optional[int]] = {}
        clues: Set[Key] = set()
        for row, entries in enumerate(grid):
            for col, entry in enumerate(entries):
                key = key_of(col, row)
                values[key] = _as_digit(entry)
                if values[key] is not None:
                    clues.add(key)
        return cls(values=values, clues=clues)

    def get(self, key: Key) -> Optional[int]:
        return self.values[key]

    def set(self, key: Key, value: Optional[int]) -> None:
        if key not in self.values:
            raise KeyError(key)
        if value is not None and _as_digit(value) is None:
            raise ValueError(f"Cell value must be 1-9 or empty, got {value!r}")
        self.values[key] = value

    def clear(self) -> None:
        for key in self.values:
            self.values[key] = None
        self.clues.clear()

    def filled_keys(self) -> List[Key]:
        return [key for key in ALL_KEYS if self.values[key] is not None]

    def is_complete(self) -> bool:
        return all(value is not None for value in self.values.values())

    def to_grid(self) -> Grid:
        return [
            [self.values[key_of(col, row)] or 0 for col in range(SIZE)]
            for row in range(SIZE)
        ]

    def to_line(self) -> str:
        return "".join(str(self.values[key] or ".") for key in ALL_KEYS)

    def render(self, color: bool = True) -> str:
        lines = [SEPARATOR]
        for row in range(SIZE):
            cells = []
            for col in range(SIZE):
                key = key_of(col, row)
                value = self.values[key]
                if value is None:
                    text = " "
                elif color and key not in self.clues:
                    text = f"{_SOLVED_STYLE}{value}{_RESET_STYLE}"
                else:
                    text = str(value)
                cells.append(f" {text} |")
            lines.append("|" + "".join(cells))
            lines.append(SEPARATOR)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render(color=False)
