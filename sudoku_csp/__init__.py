"""Plain and killer sudoku solving by backtracking search.

Load a puzzle with one of the readers in `sudoku_csp.fileio` (or build a
PlainSudoku / KillerSudoku directly) and hand it to a solver:

    >>> from sudoku_csp import PlainSudoku, BacktrackingSolver
    >>> puzzle = PlainSudoku.from_string("530070000600195000098000060"
    ...                                  "800060003400803001700020006"
    ...                                  "060000280000419005000080079")
    >>> solution = BacktrackingSolver().solve(puzzle)
    >>> puzzle.is_solution(solution)
    True
"""

from .core import (
    SudokuBoard,
    Region,
    RegionPartition,
    SubsetCache,
    enumerate_subsets,
    is_solution,
    SudokuError,
    PuzzleStructureError,
    UnsolvableError,
)
from .puzzles import BasePuzzle, PlainSudoku, KillerSudoku
from .solvers import BacktrackingSolver, IterativeBacktrackingSolver, get_solver

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "Region",
    "RegionPartition",
    "SubsetCache",
    "enumerate_subsets",
    "is_solution",
    "SudokuError",
    "PuzzleStructureError",
    "UnsolvableError",
    "BasePuzzle",
    "PlainSudoku",
    "KillerSudoku",
    "BacktrackingSolver",
    "IterativeBacktrackingSolver",
    "get_solver",
]
