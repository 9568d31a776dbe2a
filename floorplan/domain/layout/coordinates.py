"""Grid coordinate functions.

Cells are numbered row by row from the top-left corner:
``index = row * cols + col``.
"""

from __future__ import annotations

from floorplan.core.exceptions import InvalidGridIndexError, InvalidParameterError
from floorplan.domain.models.grid import GridSpec


def _check_cols(cols: int) -> None:
    if cols <= 0:
        raise InvalidParameterError("cols", cols, "grid width must be positive")


def to_coord(index: int, cols: int, rows: int | None = None) -> tuple[int, int]:
    """Convert a linear cell index to ``(row, col)``.

    Args:
        index: Cell index
        cols: Grid width
        rows: Grid height; when given, the index must lie on the grid

    Returns:
        Tuple of (row, col)

    Raises:
        InvalidGridIndexError: If the index is negative or past the last cell

    Example:
        >>> to_coord(17, 8)
        (2, 1)
    """
    _check_cols(cols)
    if index < 0:
        raise InvalidGridIndexError(index)
    if rows is not None and index >= rows * cols:
        raise InvalidGridIndexError(index, rows * cols)
    return index // cols, index % cols


def to_index(row: int, col: int, cols: int) -> int:
    """Convert ``(row, col)`` back to a linear cell index."""
    _check_cols(cols)
    if row < 0 or not 0 <= col < cols:
        raise InvalidParameterError("coord", (row, col), f"outside a grid {cols} cells wide")
    return row * cols + col


def validate_index(index: int, grid: GridSpec) -> int:
    """Return ``index`` unchanged if it lies on ``grid``.

    Raises:
        InvalidGridIndexError: If the index is off the grid
    """
    if not grid.contains(index):
        raise InvalidGridIndexError(index, grid.cell_count)
    return index


def cell_at(x_px: float, y_px: float, cell_size_px: int, grid: GridSpec) -> int | None:
    """Cell under a pixel position, or None outside the grid."""
    if x_px < 0 or y_px < 0:
        return None
    col = int(x_px // cell_size_px)
    row = int(y_px // cell_size_px)
    if col >= grid.cols or row >= grid.rows:
        return None
    return to_index(row, col, grid.cols)
