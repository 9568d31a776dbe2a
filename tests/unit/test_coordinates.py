"""Unit tests for grid coordinate functions."""

import pytest

from floorplan.core.exceptions import InvalidGridIndexError, InvalidParameterError
from floorplan.domain.layout.coordinates import cell_at, to_coord, to_index, validate_index
from floorplan.domain.models.grid import GridSpec


class TestToCoord:
    """Tests for index to (row, col) conversion."""

    def test_row_major_order(self):
        """Index 17 on an 8-wide grid is row 2, column 1."""
        assert to_coord(17, 8) == (2, 1)

    def test_first_and_last_cell(self):
        """Corners of an 8x8 grid."""
        assert to_coord(0, 8) == (0, 0)
        assert to_coord(63, 8, 8) == (7, 7)

    def test_round_trip(self):
        """to_index inverts to_coord for every cell."""
        for index in range(64):
            row, col = to_coord(index, 8)
            assert to_index(row, col, 8) == index

    def test_negative_index_rejected(self):
        """Negative indices are never on a grid."""
        with pytest.raises(InvalidGridIndexError):
            to_coord(-1, 8)

    def test_index_past_grid_rejected_when_rows_known(self):
        """With rows given, the last cell bounds the index."""
        with pytest.raises(InvalidGridIndexError) as exc_info:
            to_coord(64, 8, 8)
        assert exc_info.value.cell_count == 64

    def test_index_past_grid_accepted_without_rows(self):
        """Without rows the grid is unbounded downwards."""
        assert to_coord(64, 8) == (8, 0)

    def test_non_positive_cols_rejected(self):
        """A grid must be at least one cell wide."""
        with pytest.raises(InvalidParameterError):
            to_coord(3, 0)


class TestToIndex:
    """Tests for (row, col) to index conversion."""

    def test_basic(self):
        assert to_index(1, 1, 8) == 9

    def test_column_out_of_range(self):
        """A column at or beyond the width is rejected."""
        with pytest.raises(InvalidParameterError):
            to_index(0, 8, 8)

    def test_negative_row(self):
        with pytest.raises(InvalidParameterError):
            to_index(-1, 0, 8)


class TestValidateIndex:
    """Tests for grid membership checks."""

    def test_valid_index_returned(self, grid):
        assert validate_index(63, grid) == 63

    def test_off_grid_index(self, grid):
        with pytest.raises(InvalidGridIndexError):
            validate_index(64, grid)


class TestCellAt:
    """Tests for pixel hit-testing."""

    def test_inside_cell(self, grid):
        """Any point inside a cell maps to that cell."""
        assert cell_at(45, 85, 40, grid) == 17

    def test_outside_grid(self, grid):
        assert cell_at(320, 0, 40, grid) is None
        assert cell_at(-1, 10, 40, grid) is None

    def test_small_grid(self):
        small = GridSpec(cols=2, rows=2)
        assert cell_at(79, 79, 40, small) == 3
