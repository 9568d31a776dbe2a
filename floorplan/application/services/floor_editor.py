"""Floor layout editing session.

The editing state of one floor is an explicit, immutable value: every
operation takes a ``FloorEditorState`` and returns a new one. The caller
(the Streamlit page, or any other shell) decides where that value lives
between interactions and guards against double submission of a save.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from floorplan.core.exceptions import EmptySelectionError, UnitRemovalBlockedError
from floorplan.core.logging import get_logger
from floorplan.core.settings import FloorPlanSettings, get_settings
from floorplan.application.services.serializer import parse_markup, render_markup, serialize
from floorplan.application.services.unit_builder import check_unique_names, merge_units
from floorplan.domain.layout import selection
from floorplan.domain.layout.coordinates import validate_index
from floorplan.domain.layout.shape import preview_layout
from floorplan.domain.models.floor import (
    CreationMethod,
    FloorLayout,
    FloorPayload,
    LayoutType,
    PersistedFloor,
    ensure_distinct,
)
from floorplan.domain.models.grid import GridSpec
from floorplan.domain.models.unit import UnitDefaults, UnitRecord
from floorplan.domain.models.vector import LayoutPreview, VectorLayout

log = get_logger(__name__)


class FloorEditorState(BaseModel):
    """Editing state of one floor.

    Attributes:
        floor_number: 0-based floor number
        selected_cells: Cells in selection order
        existing_units: Units stored for the floor when editing started
        has_changes: Whether the selection differs from what was loaded
    """

    floor_number: int = Field(..., ge=0)
    grid: GridSpec = Field(default_factory=GridSpec)
    cell_size_px: int = Field(default=40, gt=0)
    selected_cells: tuple[int, ...] = ()
    layout_type: LayoutType = LayoutType.RECTANGULAR
    creation_method: CreationMethod = CreationMethod.MANUAL
    existing_units: tuple[UnitRecord, ...] = ()
    has_changes: bool = False

    model_config = {
        "frozen": True,
    }

    @field_validator("selected_cells")
    @classmethod
    def validate_cells(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        ensure_distinct(list(v))
        return v

    @property
    def display_number(self) -> int:
        return self.floor_number + 1

    @property
    def occupied_cells(self) -> frozenset[int]:
        """Cells whose stored unit currently has a tenant."""
        return frozenset(u.svg_id for u in self.existing_units if u.has_tenant)

    def existing_unit(self, index: int) -> UnitRecord | None:
        for unit in self.existing_units:
            if unit.svg_id == index:
                return unit
        return None

    def to_layout(self) -> FloorLayout:
        return FloorLayout(
            floor_number=self.floor_number,
            grid_cols=self.grid.cols,
            selected_cells=list(self.selected_cells),
            layout_type=self.layout_type,
            creation_method=self.creation_method,
        )


def new_floor(
    floor_number: int,
    settings: FloorPlanSettings | None = None,
    layout_type: LayoutType = LayoutType.RECTANGULAR,
    creation_method: CreationMethod = CreationMethod.MANUAL,
) -> FloorEditorState:
    """Empty editing state for a floor that has no layout yet."""
    settings = settings or get_settings()
    return FloorEditorState(
        floor_number=floor_number,
        grid=settings.grid,
        cell_size_px=settings.cell_size_px,
        layout_type=layout_type,
        creation_method=creation_method,
    )


def hydrate(
    persisted: PersistedFloor | dict[str, Any],
    settings: FloorPlanSettings | None = None,
) -> FloorEditorState:
    """Re-open a stored floor for editing.

    The selection is rebuilt from ``units[].svg_id`` in the stored order.
    A floor stored without unit records falls back to its layout markup.

    Raises:
        InvalidGridIndexError: If a stored unit lies off the grid
        DuplicateCellError: If two stored units share a cell
        DuplicateUnitNameCollisionError: If two stored units share a name
    """
    settings = settings or get_settings()
    if isinstance(persisted, dict):
        persisted = PersistedFloor.model_validate(persisted)

    grid = settings.grid
    check_unique_names(persisted.units)
    if persisted.units:
        cells = persisted.selected_cells
    else:
        cells = list(parse_markup(persisted.layout_data, settings.cell_size_px, grid.cols))
    for index in cells:
        validate_index(index, grid)

    state = FloorEditorState(
        floor_number=persisted.floor_no,
        grid=grid,
        cell_size_px=settings.cell_size_px,
        selected_cells=tuple(cells),
        layout_type=persisted.layout_type,
        creation_method=persisted.creation_method,
        existing_units=tuple(persisted.units),
    )
    log.info(
        "floor_hydrated",
        floor_number=state.floor_number,
        units=len(cells),
        occupied=len(state.occupied_cells),
    )
    return state


def _guard_removal(state: FloorEditorState, index: int) -> None:
    if index in state.occupied_cells:
        unit = state.existing_unit(index)
        log.warning("unit_removal_blocked", floor_number=state.floor_number, svg_id=index)
        raise UnitRemovalBlockedError(index, unit.unit_name if unit else "")


def toggle_cell(state: FloorEditorState, index: int) -> FloorEditorState:
    """Select or deselect one cell.

    Raises:
        InvalidGridIndexError: If the cell is off the grid
        UnitRemovalBlockedError: If deselecting a unit that has a tenant
    """
    validate_index(index, state.grid)
    if index in state.selected_cells:
        _guard_removal(state, index)
    cells = selection.toggle(state.selected_cells, index)
    return state.model_copy(update={"selected_cells": cells, "has_changes": True})


def select_all_cells(state: FloorEditorState) -> FloorEditorState:
    """Select every remaining cell, keeping the current order first."""
    cells = selection.select_all(state.selected_cells, state.grid)
    return state.model_copy(update={"selected_cells": cells, "has_changes": True})


def clear_cells(state: FloorEditorState) -> FloorEditorState:
    """Deselect everything.

    Raises:
        UnitRemovalBlockedError: If any selected unit has a tenant
    """
    for index in state.selected_cells:
        _guard_removal(state, index)
    return state.model_copy(update={"selected_cells": selection.clear(state.selected_cells), "has_changes": True})


def set_layout_type(state: FloorEditorState, layout_type: LayoutType) -> FloorEditorState:
    if layout_type == state.layout_type:
        return state
    return state.model_copy(update={"layout_type": layout_type, "has_changes": True})


def vector_layout(state: FloorEditorState) -> VectorLayout:
    return serialize(state.selected_cells, state.cell_size_px, state.grid.cols)


def preview(state: FloorEditorState) -> LayoutPreview | None:
    return preview_layout(state.selected_cells, state.grid)


def build_payload(
    state: FloorEditorState,
    defaults: UnitDefaults | None = None,
    renumber: bool = True,
) -> FloorPayload:
    """Build the save request for the edited floor.

    Args:
        state: Editing state
        defaults: Values for newly added units; settings when omitted
        renumber: Rename every unit by selection position

    Raises:
        EmptySelectionError: If no cell is selected
        DuplicateUnitNameCollisionError: If ``renumber`` is False and a new
            unit's name clashes with a kept one
    """
    if not state.selected_cells:
        raise EmptySelectionError(f"Floor {state.display_number} has no units selected")

    defaults = defaults or get_settings().unit_defaults()
    units = merge_units(
        state.existing_units,
        state.selected_cells,
        state.floor_number,
        defaults,
        renumber=renumber,
        cell_size_px=state.cell_size_px,
        cols=state.grid.cols,
    )
    markup = render_markup(vector_layout(state), state.grid)

    payload = FloorPayload(
        floor_no=state.floor_number,
        units_total=len(units),
        layout_type=state.layout_type,
        creation_method=state.creation_method,
        layout_data=markup,
        units=units,
    )
    log.info("floor_payload_built", floor_number=state.floor_number, units=payload.units_total)
    return payload


def stored_payload(persisted: PersistedFloor) -> FloorPayload:
    """The save request that produced a stored floor, for overlays and export."""
    return FloorPayload(
        floor_no=persisted.floor_no,
        units_total=len(persisted.units),
        layout_type=persisted.layout_type,
        creation_method=persisted.creation_method,
        layout_data=persisted.layout_data,
        units=persisted.units,
    )


def mark_saved(state: FloorEditorState, payload: FloorPayload) -> FloorEditorState:
    """State after the backend accepted ``payload``."""
    return state.model_copy(update={
        "existing_units": tuple(payload.units),
        "selected_cells": tuple(u.svg_id for u in payload.units),
        "has_changes": False,
    })
