"""Core module: board, regions, combinatorics and validation."""

from .board import SudokuBoard
from .combinatorics import SubsetCache, default_cache, enumerate_subsets, sum_combinations
from .errors import (
    SudokuError,
    PuzzleStructureError,
    GridShapeError,
    PartitionError,
    PuzzleFormatError,
    UnsolvableError,
    SolveCancelled,
)
from .regions import Region, RegionPartition
from .validator import is_solution

__all__ = [
    "SudokuBoard",
    "SubsetCache",
    "default_cache",
    "enumerate_subsets",
    "sum_combinations",
    "SudokuError",
    "PuzzleStructureError",
    "GridShapeError",
    "PartitionError",
    "PuzzleFormatError",
    "UnsolvableError",
    "SolveCancelled",
    "Region",
    "RegionPartition",
    "is_solution",
]
