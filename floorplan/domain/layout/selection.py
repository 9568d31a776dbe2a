"""Ordered unit selection.

A selection is a sequence of distinct cell indices in the order they were
picked. The order is load-bearing: a cell's position in the sequence is
its displayed unit number and drives its generated unit name. Every
operation returns a new tuple and never reorders surviving cells.
"""

from __future__ import annotations

from collections.abc import Sequence

from floorplan.domain.models.grid import GridSpec

Selection = tuple[int, ...]


def toggle(cells: Sequence[int], index: int) -> Selection:
    """Remove ``index`` if selected, otherwise append it."""
    if index in cells:
        return tuple(c for c in cells if c != index)
    return (*cells, index)


def add(cells: Sequence[int], index: int) -> Selection:
    """Append ``index`` unless it is already selected."""
    if index in cells:
        return tuple(cells)
    return (*cells, index)


def remove(cells: Sequence[int], index: int) -> Selection:
    """Drop ``index`` if selected."""
    return tuple(c for c in cells if c != index)


def clear(cells: Sequence[int]) -> Selection:
    return ()


def select_all(cells: Sequence[int], grid: GridSpec) -> Selection:
    """Append every unselected cell of the grid in index order."""
    chosen = set(cells)
    missing = [i for i in range(grid.cell_count) if i not in chosen]
    return (*cells, *missing)


def position_of(cells: Sequence[int], index: int) -> int | None:
    """1-based display number of a selected cell."""
    try:
        return list(cells).index(index) + 1
    except ValueError:
        return None
