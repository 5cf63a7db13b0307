"""Depth-first backtracking over cells in row-major order."""

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from .base_solver import BaseSolver
from ..core.board import SudokuBoard
from ..puzzles.base import BasePuzzle


def next_blank(board: SudokuBoard, start: int) -> Optional[int]:
    """
    Linear (row-major) index of the first blank cell at or after start.

    Returns None once every remaining cell is filled.
    """
    flat = board.grid.reshape(-1)
    for index in range(start, flat.shape[0]):
        if flat[index] == 0:
            return index
    return None


class BacktrackingSolver(BaseSolver):
    """
    Recursive backtracking solver.

    Cells are visited in row-major order and clues are skipped. For a blank
    cell every value offered by the puzzle is tried in turn; the first
    assignment that completes the board wins. When no value works the cell
    is blanked again and the caller moves on to its next value.

    Recursion depth equals the number of blank cells, so very large boards
    should use IterativeBacktrackingSolver.
    """

    name = "Backtracking"

    def _search(self, puzzle: BasePuzzle, board: SudokuBoard) -> bool:
        return self._backtrack(puzzle, board, 0)

    def _backtrack(self, puzzle: BasePuzzle, board: SudokuBoard, start: int) -> bool:
        """Returns True if solution found, False otherwise."""
        self.stats.iterations += 1

        index = next_blank(board, start)
        if index is None:
            # No empty cells - solution found!
            return True

        row, col = divmod(index, board.size)
        candidates = puzzle.available_values(board, row, col)
        self.stats.nodes_explored += 1

        for value in candidates:
            self._check_cancelled()
            board.set(row, col, value)
            if self._backtrack(puzzle, board, index + 1):
                return True

        board.clear(row, col)
        self.stats.backtracks += 1
        return False


class IterativeBacktrackingSolver(BaseSolver):
    """
    Backtracking solver with an explicit stack instead of recursion.

    Each frame holds a blank cell and the candidates not yet tried there.
    Cells, candidates and their order are the same as in BacktrackingSolver,
    so both return the same grid; only the bookkeeping differs.
    """

    name = "Iterative Backtracking"

    def _search(self, puzzle: BasePuzzle, board: SudokuBoard) -> bool:
        stack: List[Tuple[int, Iterator[int]]] = []

        index = self._push(puzzle, board, stack, 0)
        if index is None:
            return True

        while stack:
            index, candidates = stack[-1]
            row, col = divmod(index, board.size)

            value = next(candidates, None)
            if value is None:
                # Exhausted - blank the cell and resume the previous frame
                board.clear(row, col)
                stack.pop()
                self.stats.backtracks += 1
                continue

            self._check_cancelled()
            board.set(row, col, value)
            if self._push(puzzle, board, stack, index + 1) is None:
                return True

        return False

    def _push(
        self,
        puzzle: BasePuzzle,
        board: SudokuBoard,
        stack: List[Tuple[int, Iterator[int]]],
        start: int,
    ) -> Optional[int]:
        """Push a frame for the next blank cell; None means the board is full."""
        self.stats.iterations += 1
        index = next_blank(board, start)
        if index is None:
            return None
        row, col = divmod(index, board.size)
        stack.append((index, iter(puzzle.available_values(board, row, col))))
        self.stats.nodes_explored += 1
        return index
