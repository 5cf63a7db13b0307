"""Tests for killer regions and region partitions."""

import pytest
import numpy as np
from sudoku_csp.core.combinatorics import SubsetCache
from sudoku_csp.core.errors import GridShapeError, PartitionError, PuzzleStructureError
from sudoku_csp.core.regions import Region, RegionPartition

# 4x4 layout of eight dominoes, labelled 1..8
LAYOUT_4X4 = np.array([
    [1, 2, 2, 3],
    [1, 4, 4, 3],
    [5, 6, 6, 7],
    [5, 8, 8, 7],
])
TOTALS_4X4 = [4, 5, 6, 5, 6, 5, 4, 5]


class TestRegion:
    """Tests for Region."""

    def test_combinations_computed(self):
        """Region combinations are derived from the mask size and total."""
        region = Region.from_cells([(0, 0), (0, 1)], 3, size=4)
        assert region.cell_count == 2
        assert region.combinations == (frozenset({1, 2}),)

    def test_mask_is_read_only(self):
        """The mask cannot be modified after construction."""
        region = Region.from_cells([(0, 0)], 2, size=4)
        with pytest.raises(ValueError):
            region.mask[1, 1] = True

    def test_mask_is_copied(self):
        """Changing the array used to build a region does not change the region."""
        mask = np.zeros((4, 4), dtype=bool)
        mask[0, 0] = True
        region = Region(mask, 1)
        mask[3, 3] = True
        assert region.cell_count == 1

    def test_non_square_mask(self):
        """A mask that is not square is rejected."""
        with pytest.raises(GridShapeError):
            Region(np.ones((2, 4), dtype=bool), 10)

    def test_cells_row_major(self):
        """Cells are reported in row-major order."""
        region = Region.from_cells([(1, 0), (0, 1), (0, 0)], 6, size=4)
        assert region.cells == [(0, 0), (0, 1), (1, 0)]

    def test_possible_values_empty_region(self):
        """With nothing placed, every value of any combination is possible."""
        region = Region.from_cells([(0, 0), (0, 1)], 5, size=4)
        grid = np.zeros((4, 4), dtype=int)
        assert region.possible_values(grid) == {1, 2, 3, 4}

    def test_possible_values_with_placed(self):
        """Placed values select the compatible combinations and are removed."""
        region = Region.from_cells([(0, 0), (0, 1), (0, 2)], 15, size=9)
        grid = np.zeros((9, 9), dtype=int)
        grid[0, 0] = 9
        # 15 = 9 + {1, 5} or 9 + {2, 4}
        assert region.possible_values(grid) == {1, 2, 4, 5}
        grid[0, 1] = 2
        assert region.possible_values(grid) == {4}

    def test_possible_values_inconsistent(self):
        """Placed values that fit no combination leave nothing possible."""
        region = Region.from_cells([(0, 0), (0, 1)], 3, size=4)
        grid = np.zeros((4, 4), dtype=int)
        grid[0, 0] = 4
        assert region.possible_values(grid) == set()

    def test_possible_values_follow_the_grid(self):
        """Repeated lookups reflect the values placed since the last one."""
        region = Region.from_cells([(0, 0), (0, 1), (0, 2)], 15, size=9)
        grid = np.zeros((9, 9), dtype=int)
        first = region.possible_values(grid)
        grid[0, 0] = 9
        assert region.possible_values(grid) == {1, 2, 4, 5}
        grid[0, 0] = 0
        assert region.possible_values(grid) == first

    def test_possible_values_returns_fresh_set(self):
        """Changing a returned set does not affect later lookups."""
        region = Region.from_cells([(0, 0), (0, 1)], 5, size=4)
        grid = np.zeros((4, 4), dtype=int)
        region.possible_values(grid).clear()
        assert region.possible_values(grid) == {1, 2, 3, 4}

    def test_value_sum(self):
        region = Region.from_cells([(1, 1), (2, 3)], 5, size=4)
        grid = np.arange(16).reshape(4, 4)
        assert region.value_sum(grid) == 5 + 11

    def test_private_cache(self):
        """A region can be given its own cache."""
        cache = SubsetCache()
        Region.from_cells([(0, 0), (0, 1)], 5, size=4, cache=cache)
        assert (5, 2, 4) in cache


class TestRegionPartition:
    """Tests for RegionPartition."""

    def test_index_grid(self):
        """Each cell maps to the 1-based index of its region."""
        partition = RegionPartition.from_index_grid(LAYOUT_4X4, TOTALS_4X4)
        assert partition.size == 4
        assert partition.box_size == 2
        assert len(partition) == 8
        np.testing.assert_array_equal(partition.index_grid, LAYOUT_4X4)
        assert partition.index_at(1, 2) == 4
        assert partition.region_at(1, 2) is partition[3]
        assert partition.totals == TOTALS_4X4

    def test_missing_cell(self):
        """A partition that leaves one cell uncovered fails."""
        layout = LAYOUT_4X4.copy()
        layout[3, 3] = 0
        with pytest.raises(PartitionError, match="cover"):
            RegionPartition.from_index_grid(layout, TOTALS_4X4)

    def test_double_covered_cell(self):
        """A cell in two regions fails construction."""
        regions = [
            Region.from_cells([(r, c) for r in range(4) for c in range(4)], 40, size=4),
            Region.from_cells([(0, 0)], 1, size=4),
        ]
        with pytest.raises(PartitionError, match="overlaps"):
            RegionPartition(regions)

    def test_mismatched_shapes(self):
        """Regions of different board sizes fail construction."""
        regions = [
            Region(np.ones((4, 4), dtype=bool), 40),
            Region(np.zeros((9, 9), dtype=bool), 0),
        ]
        with pytest.raises(PartitionError, match="shapes"):
            RegionPartition(regions)

    def test_region_without_cells(self):
        """A region with a sum but no cells fails construction."""
        regions = list(RegionPartition.from_index_grid(LAYOUT_4X4, TOTALS_4X4))
        regions.append(Region(np.zeros((4, 4), dtype=bool), 7))
        with pytest.raises(PartitionError, match="Region 9 has no cells"):
            RegionPartition(regions)

    def test_more_totals_than_regions(self):
        """A total for a label missing from the index grid is an empty region."""
        with pytest.raises(PartitionError, match="no cells"):
            RegionPartition.from_index_grid(LAYOUT_4X4, TOTALS_4X4 + [7])

    def test_size_not_perfect_square(self):
        """Masks on a board whose side is not a perfect square fail."""
        with pytest.raises(GridShapeError):
            RegionPartition([Region(np.ones((3, 3), dtype=bool), 18)])

    def test_empty(self):
        """At least one region is needed."""
        with pytest.raises(PartitionError):
            RegionPartition([])

    def test_errors_are_structure_errors(self):
        """Partition errors are construction errors and ValueErrors."""
        assert issubclass(PartitionError, PuzzleStructureError)
        assert issubclass(PartitionError, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
