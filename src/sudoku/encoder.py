"""Encode a board as a Z3 finite-domain problem and decode witnesses back."""

from dataclasses import dataclass
from typing import Dict, Mapping

import z3

from .board import Board
from .cells import ALL_KEYS, Key, all_groups

Assignment = Dict[Key, int]


@dataclass
class Encoding:
    solver: z3.Solver
    variables: Dict[Key, z3.ArithRef]
    num_constraints: int = 0


def encode(board: Board) -> Encoding:
    """
    Build a fresh solver with one integer per cell, range bounds, one
    Distinct per row, column and box, and an equality for every filled cell.
    Filled cells are fixed whether or not they were clues.
    """
    solver = z3.Solver()
    variables: Dict[Key, z3.ArithRef] = {key: z3.FreshInt(key) for key in ALL_KEYS}
    count = 0

    for var in variables.values():
        solver.add(var >= 1, var <= 9)
        count += 2

    for group in all_groups():
        solver.add(z3.Distinct([variables[key] for key in group]))
        count += 1

    for key in board.filled_keys():
        solver.add(variables[key] == board.get(key))
        count += 1

    return Encoding(solver=solver, variables=variables, num_constraints=count)


def assignment_from_model(model: z3.ModelRef, variables: Mapping[Key, z3.ArithRef]) -> Assignment:
    return {
        key: model.eval(var, model_completion=True).as_long()
        for key, var in variables.items()
    }


def decode(assignment: Mapping[Key, int], board: Board) -> Board:
    """Overwrite every cell of `board` with its value from `assignment`."""
    for key in ALL_KEYS:
        board.set(key, int(assignment[key]))
    return board
