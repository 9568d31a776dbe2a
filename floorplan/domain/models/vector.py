"""Vector layout models.

Describe a floor layout as positioned rectangles, one per unit, together
with the occupied bounding box used to render a trimmed viewport.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class RectPrimitive(BaseModel):
    """One unit rectangle in pixel space."""

    element_id: str = Field(..., description="Stable element id, e.g. unit_9")
    cell_index: int = Field(..., ge=0, description="Originating grid cell")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    label: str = Field(..., description="1-based position in the selection")

    model_config = {
        "frozen": True,
    }


class BoundingBox(BaseModel):
    """Occupied rows and columns of a layout, inclusive."""

    min_row: int = Field(..., ge=0)
    max_row: int = Field(..., ge=0)
    min_col: int = Field(..., ge=0)
    max_col: int = Field(..., ge=0)

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def width_cells(self) -> int:
        return self.max_col - self.min_col + 1

    @computed_field
    @property
    def height_cells(self) -> int:
        return self.max_row - self.min_row + 1


class VectorLayout(BaseModel):
    """Serialized floor layout.

    ``bounding_box`` is None for an empty selection, in which case the
    layout has zero width and height.
    """

    cell_size_px: int = Field(..., gt=0)
    primitives: list[RectPrimitive] = Field(default_factory=list)
    bounding_box: BoundingBox | None = None

    @computed_field
    @property
    def layout_width(self) -> int:
        """Trimmed viewport width in pixels."""
        if self.bounding_box is None:
            return 0
        return self.bounding_box.width_cells * self.cell_size_px

    @computed_field
    @property
    def layout_height(self) -> int:
        """Trimmed viewport height in pixels."""
        if self.bounding_box is None:
            return 0
        return self.bounding_box.height_cells * self.cell_size_px


class LayoutShape(str, Enum):
    """Shape of a layout's bounding box."""
    VERTICAL_LINE = "vertical_line"
    HORIZONTAL_LINE = "horizontal_line"
    SQUARE = "square"
    WIDE_RECTANGLE = "wide_rectangle"
    TALL_RECTANGLE = "tall_rectangle"
    RECTANGLE = "rectangle"


class LayoutPreview(BaseModel):
    """Summary of a selection shown before saving."""

    units_count: int = Field(..., ge=0)
    shape: LayoutShape
    width: int = Field(..., gt=0, description="Bounding box width in cells")
    height: int = Field(..., gt=0, description="Bounding box height in cells")
    density: float = Field(..., ge=0, le=100, description="Selected share of the bounding box %")
    efficiency: float = Field(..., ge=0, le=100, description="Selected share of the whole grid %")
    sorted_cells: list[int] = Field(default_factory=list)

    @computed_field
    @property
    def coverage_area(self) -> int:
        """Cells covered by the bounding box."""
        return self.width * self.height
