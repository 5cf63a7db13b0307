"""Killer sudoku: plain rules plus regions with required sums."""

from __future__ import annotations
import numpy as np
from typing import Optional, Sequence, Set, Union

from .base import BasePuzzle
from .plain import PlainSudoku
from ..core.board import SudokuBoard
from ..core.combinatorics import SubsetCache
from ..core.regions import Region, RegionPartition
from ..core.validator import GridLike, as_grid, check_plain, check_region_sums


class KillerSudoku(BasePuzzle):
    """
    A killer sudoku defined by a partition of the board into regions.

    The board starts blank. Row, column and box checks are delegated to an
    internal PlainSudoku of the same size.

    Attributes:
        partition: The RegionPartition of the board.
        plain: The underlying plain puzzle over the blank board.
    """

    name = "Killer"

    def __init__(self, regions: Union[RegionPartition, Sequence[Region]]):
        if not isinstance(regions, RegionPartition):
            regions = RegionPartition(regions)
        self.partition = regions
        self.plain = PlainSudoku(SudokuBoard(regions.size))

    @classmethod
    def from_index_grid(
        cls,
        index_grid: np.ndarray,
        totals: Sequence[int],
        cache: Optional[SubsetCache] = None,
    ) -> KillerSudoku:
        """Create a puzzle from a grid of 1-based region indices and the region sums."""
        return cls(RegionPartition.from_index_grid(index_grid, totals, cache))

    @property
    def board(self) -> SudokuBoard:
        return self.plain.board

    @property
    def regions(self) -> Sequence[Region]:
        return self.partition.regions

    @property
    def index_grid(self) -> np.ndarray:
        return self.partition.index_grid

    def available_values(self, board: SudokuBoard, row: int, col: int) -> Set[int]:
        """
        Plain candidates at (row, col) narrowed to values its region can still take.

        The region step is skipped when the plain set is already empty.
        """
        values = self.plain.available_values(board, row, col)
        if values:
            region = self.partition.region_at(row, col)
            values &= region.possible_values(board.grid)
        return values

    def is_solution(self, candidate: GridLike) -> bool:
        grid = as_grid(candidate)
        return (
            check_plain(self.board.grid, grid, self.size, self.box_size)
            and check_region_sums(grid, self.regions)
        )
