"""Floor layout data models.

A floor layout is the ordered set of grid cells a landlord has marked as
units on one floor. The persisted shapes mirror the backend's floor
endpoint: ``PersistedFloor`` is what comes back, ``FloorPayload`` is what
a save sends.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, computed_field, field_validator

from floorplan.core.exceptions import DuplicateCellError
from floorplan.domain.models.unit import UnitRecord


class LayoutType(str, Enum):
    """Descriptive floor shape; does not constrain the selection."""
    RECTANGULAR = "rectangular"
    L_SHAPED = "l_shaped"
    U_SHAPED = "u_shaped"
    CUSTOM = "custom"


class CreationMethod(str, Enum):
    """How the layout was produced."""
    MANUAL = "manual"
    AUTO = "auto"
    TEMPLATE = "template"


def _normalize_layout_type(value: Any) -> Any:
    # Grid-editor saves were stored as "manual_grid"; blank means unset
    if value is None or value == "":
        return LayoutType.RECTANGULAR
    if value == "manual_grid":
        return LayoutType.CUSTOM
    return value


def _normalize_creation_method(value: Any) -> Any:
    if value is None or value == "":
        return CreationMethod.MANUAL
    return value


LayoutTypeField = Annotated[LayoutType, BeforeValidator(_normalize_layout_type)]
CreationMethodField = Annotated[CreationMethod, BeforeValidator(_normalize_creation_method)]


def ensure_distinct(cells: list[int]) -> list[int]:
    """Reject a cell sequence that repeats an index."""
    seen: set[int] = set()
    for index in cells:
        if index in seen:
            raise DuplicateCellError(index)
        seen.add(index)
    return cells


class FloorLayout(BaseModel):
    """One floor of one property.

    ``floor_number`` is stored 0-based; the UI shows ``display_number``.
    """

    floor_number: int = Field(..., ge=0, description="0-based floor number")
    grid_cols: int = Field(default=8, gt=0)
    selected_cells: list[int] = Field(default_factory=list, description="Cells in selection order")
    layout_type: LayoutTypeField = Field(default=LayoutType.RECTANGULAR)
    creation_method: CreationMethodField = Field(default=CreationMethod.MANUAL)

    @field_validator("selected_cells")
    @classmethod
    def validate_cells(cls, v: list[int]) -> list[int]:
        return ensure_distinct(v)

    @computed_field
    @property
    def display_number(self) -> int:
        """1-based floor number shown to users."""
        return self.floor_number + 1

    @computed_field
    @property
    def units_total(self) -> int:
        return len(self.selected_cells)


class PersistedFloor(BaseModel):
    """An existing floor as returned by the backend."""

    floor_no: int = Field(..., ge=0, description="0-based floor number")
    units_total: int = Field(default=0, ge=0)
    layout_type: LayoutTypeField = Field(default=LayoutType.RECTANGULAR)
    creation_method: CreationMethodField = Field(default=CreationMethod.MANUAL)
    layout_data: str = Field(default="", description="Vector markup of the floor")
    units: list[UnitRecord] = Field(default_factory=list)

    model_config = {
        "extra": "ignore",
    }

    @field_validator("units", mode="before")
    @classmethod
    def coerce_units(cls, v: Any) -> Any:
        return v or []

    @property
    def selected_cells(self) -> list[int]:
        """Cells in the order the backend stored the units."""
        return ensure_distinct([unit.svg_id for unit in self.units])


class FloorPayload(BaseModel):
    """Request body sent when a floor layout is saved."""

    floor_no: int = Field(..., ge=0, description="0-based floor number")
    units_total: int = Field(..., ge=0)
    layout_type: LayoutTypeField = Field(default=LayoutType.RECTANGULAR)
    creation_method: CreationMethodField = Field(default=CreationMethod.MANUAL)
    layout_data: str = Field(default="")
    units: list[UnitRecord] = Field(default_factory=list)

    def to_request(self) -> dict[str, Any]:
        """JSON-ready dict for the floor endpoint."""
        return self.model_dump(mode="json")
