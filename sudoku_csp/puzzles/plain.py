"""Plain sudoku: row, column and box uniqueness."""

from __future__ import annotations
import numpy as np
from typing import List, Set, Union

from .base import BasePuzzle
from ..core.board import SudokuBoard
from ..core.validator import GridLike, as_grid, check_plain


class PlainSudoku(BasePuzzle):
    """
    A plain sudoku defined by its board of clues.

    Args:
        board: A SudokuBoard, or a square 2D list / array of ints with 0 for
            blanks. The puzzle keeps its own copy either way.

    Raises:
        GridShapeError: If the grid is not square or N is not a perfect square.
    """

    name = "Plain"

    def __init__(self, board: Union[SudokuBoard, np.ndarray, List[List[int]]]):
        if isinstance(board, SudokuBoard):
            board = board.copy()
        else:
            board = SudokuBoard.from_2d_list(np.asarray(board).tolist())
        self._board = board

    @property
    def board(self) -> SudokuBoard:
        return self._board

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> PlainSudoku:
        """Create a puzzle from a row-major string, 0 or . for blanks."""
        return cls(SudokuBoard.from_string(s, size))

    def available_values(self, board: SudokuBoard, row: int, col: int) -> Set[int]:
        """Values 1..N missing from the row, column and box of (row, col)."""
        return board.get_candidates(row, col)

    def is_solution(self, candidate: GridLike) -> bool:
        return check_plain(self.board.grid, as_grid(candidate), self.size, self.box_size)
