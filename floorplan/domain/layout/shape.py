"""Layout preview and shape classification.

Summarises a selection before it is saved: bounding box size, a coarse
shape label, and how densely the selection fills its box and the grid.
"""

from __future__ import annotations

from collections.abc import Sequence

from floorplan.domain.layout.coordinates import to_coord
from floorplan.domain.models.grid import GridSpec
from floorplan.domain.models.vector import LayoutPreview, LayoutShape

# A box is "wide"/"tall" once one side exceeds the other by this factor
ELONGATION_RATIO = 1.5


def classify_shape(width: int, height: int) -> LayoutShape:
    """Label a bounding box of ``width`` x ``height`` cells."""
    if width == 1:
        return LayoutShape.VERTICAL_LINE
    if height == 1:
        return LayoutShape.HORIZONTAL_LINE
    if width == height:
        return LayoutShape.SQUARE
    if width > height * ELONGATION_RATIO:
        return LayoutShape.WIDE_RECTANGLE
    if height > width * ELONGATION_RATIO:
        return LayoutShape.TALL_RECTANGLE
    return LayoutShape.RECTANGLE


def preview_layout(cells: Sequence[int], grid: GridSpec) -> LayoutPreview | None:
    """Build the pre-save preview of a selection.

    Args:
        cells: Selected cells in selection order
        grid: Grid the cells belong to

    Returns:
        LayoutPreview, or None when nothing is selected
    """
    if not cells:
        return None

    coords = [to_coord(i, grid.cols, grid.rows) for i in cells]
    rows = [r for r, _ in coords]
    cols = [c for _, c in coords]
    width = max(cols) - min(cols) + 1
    height = max(rows) - min(rows) + 1

    return LayoutPreview(
        units_count=len(cells),
        shape=classify_shape(width, height),
        width=width,
        height=height,
        density=len(cells) / (width * height) * 100,
        efficiency=round(len(cells) / grid.cell_count * 100, 1),
        sorted_cells=sorted(cells),
    )
