"""Single-shot solve: encode, one satisfiability check, decode on success."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import z3

from .board import Board
from .encoder import assignment_from_model, decode, encode
from src.utils.trace import Tracer, get_tracer

NO_SOLUTION_MESSAGE = "No solution found"
UNKNOWN_MESSAGE = "Solver returned unknown"


class SolveStatus(Enum):
    SAT = "sat"
    UNSAT = "unsat"
    UNKNOWN = "unknown"


@dataclass
class SolveResult:
    status: SolveStatus
    board: Board

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SAT

    def message(self, color: bool = True) -> str:
        if self.status is SolveStatus.SAT:
            return self.board.render(color=color)
        if self.status is SolveStatus.UNSAT:
            return NO_SOLUTION_MESSAGE
        return UNKNOWN_MESSAGE


def _status_of(check_result: z3.CheckSatResult) -> SolveStatus:
    if check_result == z3.sat:
        return SolveStatus.SAT
    if check_result == z3.unsat:
        return SolveStatus.UNSAT
    return SolveStatus.UNKNOWN


def solve_board(board: Board, tracer: Optional[Tracer] = None) -> SolveResult:
    """
    Solve `board` in place. The board is only written on SAT; on UNSAT or
    UNKNOWN it is returned exactly as submitted.
    """
    tracer = tracer or get_tracer()
    encoding = encode(board)
    tracer.log_encode(
        num_variables=len(encoding.variables),
        num_constraints=encoding.num_constraints,
        filled_cells=len(board.filled_keys()),
    )

    status = _status_of(encoding.solver.check())
    tracer.log_check(status.value)

    if status is SolveStatus.SAT:
        assignment = assignment_from_model(encoding.solver.model(), encoding.variables)
        decode(assignment, board)
        tracer.log_decode(cells_written=len(assignment))

    return SolveResult(status=status, board=board)
