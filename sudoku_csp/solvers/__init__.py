"""Solvers module for plain and killer puzzles."""

import sys
from typing import Optional

from .base_solver import BaseSolver, SolverStats
from .backtracking import BacktrackingSolver, IterativeBacktrackingSolver
from ..core.board import SudokuBoard

SOLVERS = {
    "recursive": BacktrackingSolver,
    "iterative": IterativeBacktrackingSolver,
}

# Stack frames kept free for the caller when sizing a recursive search
RECURSION_HEADROOM = 200


def get_solver(name: str = "auto", board: Optional[SudokuBoard] = None, **kwargs) -> BaseSolver:
    """
    Build a solver by name.

    Args:
        name: "recursive", "iterative", or "auto". "auto" picks the recursive
            solver unless the blank cells of board would come close to the
            interpreter's recursion limit.
        board: Board to size an "auto" choice against.
        **kwargs: Passed to the solver constructor.
    """
    if name == "auto":
        blanks = board.count_empty() if board is not None else 0
        if blanks + RECURSION_HEADROOM < sys.getrecursionlimit():
            name = "recursive"
        else:
            name = "iterative"
    if name not in SOLVERS:
        raise ValueError(f"Unknown solver {name!r}, expected one of {sorted(SOLVERS)} or 'auto'")
    return SOLVERS[name](**kwargs)


__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "IterativeBacktrackingSolver",
    "SOLVERS",
    "get_solver",
]
