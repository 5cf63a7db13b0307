"""Killer regions (cages) and their partition of the grid."""

from __future__ import annotations
import numpy as np
from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Set, Tuple

from .board import box_size_for
from .combinatorics import Combination, SubsetCache, sum_combinations
from .errors import GridShapeError, PartitionError


class Region:
    """
    An area of the board whose values must add up to `total`.

    Attributes:
        mask: Read-only boolean N x N array, True on cells of the region.
        total: Required sum of the region's values.
        cell_count: Number of cells in the region.
        combinations: Every set of cell_count distinct values from 1..N
            summing to total.
    """

    def __init__(self, mask: np.ndarray, total: int, cache: Optional[SubsetCache] = None):
        mask = np.array(mask, dtype=bool)
        if mask.ndim != 2 or mask.shape[0] != mask.shape[1]:
            raise GridShapeError(f"Region mask must be square, got shape {mask.shape}")
        mask.flags.writeable = False

        self.mask = mask
        self.total = int(total)
        self.size = mask.shape[0]
        self.flat_cells = np.flatnonzero(mask)
        self.cell_count = len(self.flat_cells)
        self.combinations: Tuple[Combination, ...] = sum_combinations(
            self.total, self.cell_count, self.size, cache
        )
        # union of compatible combinations, keyed by the placed values
        self._possible: Dict[FrozenSet[int], FrozenSet[int]] = {}

    @classmethod
    def from_cells(
        cls,
        cells: Sequence[Tuple[int, int]],
        total: int,
        size: int,
        cache: Optional[SubsetCache] = None,
    ) -> Region:
        """Build a region from zero-based (row, col) cells on a size x size board."""
        mask = np.zeros((size, size), dtype=bool)
        for row, col in cells:
            mask[row, col] = True
        return cls(mask, total, cache)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """Cells of the region in row-major order."""
        rows, cols = np.nonzero(self.mask)
        return list(zip(rows.tolist(), cols.tolist()))

    def placed_values(self, grid: np.ndarray) -> Set[int]:
        """Non-zero values already on the region's cells."""
        values = set(grid.reshape(-1)[self.flat_cells].tolist())
        values.discard(0)
        return values

    def possible_values(self, grid: np.ndarray) -> Set[int]:
        """
        Values that may still go into an empty cell of this region.

        Only the combinations containing every value already placed survive;
        their union, minus the placed values, is returned.
        """
        placed = frozenset(self.placed_values(grid))
        possible = self._possible.get(placed)
        if possible is None:
            union: Set[int] = set()
            for combination in self.combinations:
                if placed <= combination:
                    union |= combination
            possible = self._possible[placed] = frozenset(union - placed)
        return set(possible)

    def value_sum(self, grid: np.ndarray) -> int:
        """Sum of the grid values on the region."""
        return int(grid.reshape(-1)[self.flat_cells].sum())

    def __repr__(self) -> str:
        return f"Region(total={self.total}, cells={self.cell_count})"


class RegionPartition:
    """
    An ordered set of regions covering every cell of the board exactly once.

    `index_grid` maps each cell to the 1-based index of its region.
    Construction fails with PartitionError if the regions disagree on the
    board size, a region has no cells, regions overlap, or a cell is left
    uncovered.
    """

    def __init__(self, regions: Sequence[Region]):
        self.regions: Tuple[Region, ...] = tuple(regions)
        if not self.regions:
            raise PartitionError("At least one region is required")

        self.size = self._get_size(self.regions)
        self.box_size = box_size_for(self.size)
        self.index_grid = self._get_index_grid(self.regions, self.size)

    @staticmethod
    def _get_size(regions: Sequence[Region]) -> int:
        """Figure the side N of the board from the region masks."""
        shapes = [region.mask.shape for region in regions]
        size = shapes[0][0]
        box_size_for(size)
        if any(shape != (size, size) for shape in shapes):
            raise PartitionError(f"Regions have different shapes: {sorted(set(shapes))}")
        return size

    @staticmethod
    def _get_index_grid(regions: Sequence[Region], size: int) -> np.ndarray:
        """Compute the grid of 1-based region indices, checking overlap and coverage."""
        index_grid = np.zeros((size, size), dtype=np.int32)
        coverage = np.zeros((size, size), dtype=np.int32)
        for i, region in enumerate(regions, 1):
            if region.cell_count == 0:
                raise PartitionError(f"Region {i} has no cells")
            coverage += region.mask
            if np.any(coverage > 1):
                raise PartitionError(f"Region {i} overlaps with a previous region")
            index_grid[region.mask] = i
        uncovered = int(np.sum(coverage == 0))
        if uncovered:
            raise PartitionError(
                f"Regions do not cover the whole board ({uncovered} cells uncovered)"
            )
        index_grid.flags.writeable = False
        return index_grid

    @classmethod
    def from_index_grid(
        cls,
        index_grid: np.ndarray,
        totals: Sequence[int],
        cache: Optional[SubsetCache] = None,
    ) -> RegionPartition:
        """
        Build a partition from a grid of 1-based region indices.

        Args:
            index_grid: N x N integers; cell value i puts it in region i.
            totals: Required sum of each region, totals[i - 1] for region i.
            cache: Subset cache handed to every region.
        """
        index_grid = np.asarray(index_grid)
        regions = [
            Region(index_grid == i, total, cache)
            for i, total in enumerate(totals, 1)
        ]
        return cls(regions)

    def index_at(self, row: int, col: int) -> int:
        """1-based index of the region containing (row, col)."""
        return int(self.index_grid[row, col])

    def region_at(self, row: int, col: int) -> Region:
        """Region containing (row, col)."""
        return self.regions[self.index_at(row, col) - 1]

    @property
    def totals(self) -> List[int]:
        return [region.total for region in self.regions]

    def __getitem__(self, idx: int) -> Region:
        return self.regions[idx]

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    def __repr__(self) -> str:
        return f"RegionPartition(size={self.size}, regions={len(self.regions)})"
