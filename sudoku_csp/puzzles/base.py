"""Common interface of the plain and killer puzzles."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Set

from ..core.board import SudokuBoard
from ..core.validator import GridLike


class BasePuzzle(ABC):
    """
    Abstract base class for puzzles the solvers can drive.

    A puzzle owns its board of clues and answers which values are still
    possible at a cell of some working board. Solvers only use this
    interface and never look at the concrete variant.
    """

    name: str = "BasePuzzle"

    @property
    @abstractmethod
    def board(self) -> SudokuBoard:
        """The puzzle's own board (clues, 0 for blanks)."""

    @property
    def size(self) -> int:
        """Side N of the board."""
        return self.board.size

    @property
    def box_size(self) -> int:
        """Side n of a box, sqrt(N)."""
        return self.board.box_size

    def copy_board(self) -> SudokuBoard:
        """Independent copy of the puzzle's board."""
        return self.board.copy()

    @abstractmethod
    def available_values(self, board: SudokuBoard, row: int, col: int) -> Set[int]:
        """
        Values that may be placed at (row, col) given the state of board.

        Args:
            board: Working board, usually a partially filled copy of self.board.
            row: Row index.
            col: Column index.
        """

    @abstractmethod
    def is_solution(self, candidate: GridLike) -> bool:
        """Check whether candidate is a complete, legal solution that keeps every clue."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, filled={self.board.count_filled()})"
