"""Exception hierarchy for puzzle construction and solving."""


class SudokuError(Exception):
    """Base class for every error raised by sudoku_csp."""


class PuzzleStructureError(SudokuError, ValueError):
    """A puzzle could not be constructed because an invariant failed."""


class GridShapeError(PuzzleStructureError):
    """Grid is not square, its side is not a perfect square, or a value is out of range."""


class PartitionError(PuzzleStructureError):
    """Killer regions do not form a partition of the grid."""


class PuzzleFormatError(PuzzleStructureError):
    """A puzzle file or string could not be parsed."""


class UnsolvableError(SudokuError):
    """The search exhausted every candidate without finding a solution."""


class SolveCancelled(SudokuError):
    """The search was stopped by its cancellation hook."""
