"""Layout serialization service.

Turns an ordered selection into positioned rectangles, renders them as SVG
markup for storage and display, and reads stored markup back into a
selection. All functions are pure: identical input gives byte-identical
output, so persisted and in-progress layouts can be diffed directly.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from floorplan.core.exceptions import InvalidParameterError, LayoutParseError
from floorplan.core.logging import get_logger
from floorplan.domain.layout.coordinates import to_coord, to_index
from floorplan.domain.models.floor import ensure_distinct
from floorplan.domain.models.grid import GridSpec
from floorplan.domain.models.vector import BoundingBox, RectPrimitive, VectorLayout

log = get_logger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
ELEMENT_ID_PREFIX = "unit_"
UNIT_FILL = "#3b82f6"
UNIT_STROKE = "#1e40af"

_ELEMENT_ID_RE = re.compile(rf"^{ELEMENT_ID_PREFIX}(\d+)$")


def element_id_for(index: int) -> str:
    """Stable element id of a cell's rectangle."""
    return f"{ELEMENT_ID_PREFIX}{index}"


def serialize(cells: Sequence[int], cell_size_px: int, cols: int = 8) -> VectorLayout:
    """Serialize a selection into a vector layout.

    Args:
        cells: Selected cells in selection order
        cell_size_px: Side of one cell in pixels
        cols: Grid width

    Returns:
        VectorLayout with one rectangle per cell, labelled with its 1-based
        position, and the occupied bounding box (None when empty)
    """
    if cell_size_px <= 0:
        raise InvalidParameterError("cell_size_px", cell_size_px, "must be positive")

    primitives: list[RectPrimitive] = []
    rows_used: list[int] = []
    cols_used: list[int] = []

    for position, index in enumerate(cells):
        row, col = to_coord(index, cols)
        rows_used.append(row)
        cols_used.append(col)
        primitives.append(RectPrimitive(
            element_id=element_id_for(index),
            cell_index=index,
            x=col * cell_size_px,
            y=row * cell_size_px,
            width=cell_size_px,
            height=cell_size_px,
            label=str(position + 1),
        ))

    bounding_box = None
    if primitives:
        bounding_box = BoundingBox(
            min_row=min(rows_used),
            max_row=max(rows_used),
            min_col=min(cols_used),
            max_col=max(cols_used),
        )

    layout = VectorLayout(cell_size_px=cell_size_px, primitives=primitives, bounding_box=bounding_box)
    log.debug(
        "layout_serialized",
        units=len(primitives),
        width=layout.layout_width,
        height=layout.layout_height,
    )
    return layout


def cell_geometry(index: int, cell_size_px: int, cols: int = 8) -> str:
    """Closed path outlining one cell, as stored in ``svg_geom``.

    Example:
        >>> cell_geometry(9, 40)
        'M40,40 L80,40 L80,80 L40,80 Z'
    """
    row, col = to_coord(index, cols)
    x0, y0 = col * cell_size_px, row * cell_size_px
    x1, y1 = x0 + cell_size_px, y0 + cell_size_px
    return f"M{x0},{y0} L{x1},{y0} L{x1},{y1} L{x0},{y1} Z"


def _fmt(value: float) -> str:
    return f"{value:g}"


def render_markup(layout: VectorLayout, grid: GridSpec) -> str:
    """Render a vector layout as SVG markup sized to the full grid.

    Each unit becomes a ``<rect>`` followed by a centred ``<text>`` label.
    """
    size = layout.cell_size_px
    parts = [
        f'<svg width="{grid.cols * size}" height="{grid.rows * size}" xmlns="{SVG_NS}">'
    ]
    for rect in layout.primitives:
        parts.append(
            f'<rect width="{rect.width}" height="{rect.height}" x="{rect.x}" y="{rect.y}" '
            f'id="{rect.element_id}" fill="{UNIT_FILL}" stroke="{UNIT_STROKE}" stroke-width="2" />'
        )
        parts.append(
            f'<text x="{_fmt(rect.x + rect.width / 2)}" y="{_fmt(rect.y + rect.height / 2)}" '
            f'text-anchor="middle" dominant-baseline="middle" fill="white" '
            f'font-size="12" font-weight="bold">{rect.label}</text>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


def _rect_cell(rect: ET.Element, cell_size_px: int, cols: int) -> int:
    match = _ELEMENT_ID_RE.match(rect.get("id", ""))
    if match:
        return int(match.group(1))

    # No usable id: fall back to the rectangle's position
    try:
        x = float(rect.get("x", "0"))
        y = float(rect.get("y", "0"))
    except ValueError as e:
        raise LayoutParseError(f"Non-numeric rectangle position: {e}") from e
    if x < 0 or y < 0 or x % cell_size_px or y % cell_size_px:
        raise LayoutParseError(f"Rectangle at ({x:g}, {y:g}) is not aligned to the grid")
    try:
        return to_index(int(y // cell_size_px), int(x // cell_size_px), cols)
    except InvalidParameterError as e:
        raise LayoutParseError(str(e)) from e


def parse_markup(markup: str, cell_size_px: int, cols: int = 8) -> tuple[int, ...]:
    """Read stored markup back into an ordered selection.

    Rectangles are taken in document order.

    Raises:
        LayoutParseError: If the markup is not well-formed XML or a
            rectangle cannot be mapped to a cell
    """
    if not markup or not markup.strip():
        return ()

    try:
        root = ET.fromstring(markup)
    except ET.ParseError as e:
        raise LayoutParseError(f"Malformed layout markup: {e}") from e

    cells = [
        _rect_cell(element, cell_size_px, cols)
        for element in root.iter()
        if element.tag in ("rect", f"{{{SVG_NS}}}rect")
    ]
    log.debug("layout_markup_parsed", units=len(cells))
    return tuple(ensure_distinct(cells))
