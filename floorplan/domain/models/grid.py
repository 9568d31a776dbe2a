"""Grid specification model.

Every floor of a property is laid out on the same fixed-size grid; cells are
addressed by a linear index read row by row from the top-left corner.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class GridSpec(BaseModel):
    """Fixed grid dimensions shared by all floors of a property."""

    cols: int = Field(default=8, gt=0, description="Cells per row")
    rows: int = Field(default=8, gt=0, description="Number of rows")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def cell_count(self) -> int:
        """Total number of cells on the grid."""
        return self.rows * self.cols

    def contains(self, index: int) -> bool:
        """Whether a linear cell index lies on this grid."""
        return 0 <= index < self.cell_count
