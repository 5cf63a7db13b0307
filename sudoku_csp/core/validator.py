"""Validation utilities for filled-in grids."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from .board import SudokuBoard
    from .regions import Region
    from ..puzzles.base import BasePuzzle

GridLike = Union["SudokuBoard", np.ndarray]


def as_grid(candidate: GridLike) -> np.ndarray:
    """Return the integer array behind a board, or the candidate itself as an array."""
    grid = getattr(candidate, "grid", candidate)
    return np.asarray(grid)


def check_clues(clues: np.ndarray, grid: np.ndarray) -> bool:
    """
    Check that every non-zero clue is kept unchanged in grid.

    Args:
        clues: The puzzle's original grid, 0 for blanks.
        grid: The candidate solution.
    """
    given = clues != 0
    return bool(np.array_equal(clues[given], grid[given]))


def check_rows(grid: np.ndarray, size: int) -> bool:
    """Check that every row holds exactly the values 1..size."""
    expected = set(range(1, size + 1))
    return all(set(grid[i, :].tolist()) == expected for i in range(size))


def check_cols(grid: np.ndarray, size: int) -> bool:
    """Check that every column holds exactly the values 1..size."""
    expected = set(range(1, size + 1))
    return all(set(grid[:, j].tolist()) == expected for j in range(size))


def check_boxes(grid: np.ndarray, size: int, box_size: int) -> bool:
    """Check that every box holds exactly the values 1..size."""
    expected = set(range(1, size + 1))
    for box_row in range(0, size, box_size):
        for box_col in range(0, size, box_size):
            box = grid[box_row:box_row + box_size, box_col:box_col + box_size]
            if set(box.flatten().tolist()) != expected:
                return False
    return True


def check_region_sums(grid: np.ndarray, regions: Iterable[Region]) -> bool:
    """Check that the values on each region add up to its total."""
    return all(region.value_sum(grid) == region.total for region in regions)


def check_plain(clues: np.ndarray, grid: np.ndarray, size: int, box_size: int) -> bool:
    """
    Run the plain checks in order: clues, rows, columns, boxes.

    A grid of the wrong shape is rejected before any check runs.
    """
    if grid.shape != (size, size):
        return False
    return (
        check_clues(clues, grid)
        and check_rows(grid, size)
        and check_cols(grid, size)
        and check_boxes(grid, size, box_size)
    )


def is_solution(candidate: GridLike, puzzle: BasePuzzle) -> bool:
    """
    Check whether candidate is a legal solution of puzzle.

    Args:
        candidate: A SudokuBoard or anything numpy.asarray accepts.
        puzzle: The puzzle whose rules and clues apply.
    """
    return puzzle.is_solution(candidate)
