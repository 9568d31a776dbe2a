"""Application controller - orchestrates UI and the layout services.

Each function is one user action of the editor page. They keep Streamlit
calls to error reporting so the flow stays readable.
"""

from __future__ import annotations

import json

import streamlit as st
from pydantic import TypeAdapter, ValidationError

from floorplan.application.services.exporter import LayoutExporter
from floorplan.application.services.floor_editor import (
    FloorEditorState,
    build_payload,
    clear_cells,
    hydrate,
    select_all_cells,
    stored_payload,
    toggle_cell,
)
from floorplan.application.services.overlay import resolve_display, summarize_property
from floorplan.core.exceptions import FloorPlanError
from floorplan.core.logging import floor_context, get_logger
from floorplan.core.settings import get_settings
from floorplan.domain.models.floor import FloorPayload, PersistedFloor
from floorplan.domain.models.occupancy import FloorDisplayState, OccupancyFact, PropertySummary
from floorplan.ui.state import SessionManager

log = get_logger(__name__)

_FLOORS = TypeAdapter(list[PersistedFloor])


def apply_edit(action: str, index: int | None = None) -> FloorEditorState:
    """Apply one grid edit to the current floor.

    Args:
        action: "toggle", "select_all" or "clear"
        index: Cell for "toggle"

    Returns:
        The (possibly unchanged) editing state
    """
    state = SessionManager.get_editor()
    try:
        if action == "toggle" and index is not None:
            state = toggle_cell(state, index)
        elif action == "select_all":
            state = select_all_cells(state)
        elif action == "clear":
            state = clear_cells(state)
        else:
            raise ValueError(f"Unknown edit action: {action}")
    except FloorPlanError as e:
        st.error(f"Cannot edit layout: {e}")
        return state

    SessionManager.set_editor(state)
    return state


def save_current_floor(renumber: bool = True) -> FloorPayload | None:
    """Save the current floor, at most once per click.

    Returns:
        The saved payload, or None if the save was refused or failed
    """
    with floor_context(SessionManager.get_current_floor()):
        if not SessionManager.begin_save():
            log.warning("save_already_in_flight")
            return None

        try:
            state = SessionManager.get_editor()
            payload = build_payload(state, get_settings().unit_defaults(), renumber=renumber)
            SessionManager.record_saved(payload)
            log.info("floor_saved", units=payload.units_total)
            return payload
        except FloorPlanError as e:
            log.warning("floor_save_failed", error=str(e))
            st.error(f"Save failed: {e}")
            return None
        finally:
            SessionManager.end_save()


def load_floors(raw: str | bytes) -> int:
    """Load stored floors from a JSON document and open them for editing.

    The document is a list of persisted floors as the backend returns them.
    Floors with unit records also count as saved, so their occupancy overlay
    shows without saving them again.

    Returns:
        Number of floors loaded
    """
    try:
        floors = _FLOORS.validate_json(raw)
        states = [hydrate(floor, get_settings()) for floor in floors]
    except (ValidationError, FloorPlanError) as e:
        log.error("floors_load_failed", error=str(e))
        st.error(f"Could not load floors: {e}")
        return 0

    if states:
        SessionManager.set_total_floors(max(SessionManager.get_total_floors(), max(s.floor_number for s in states) + 1))
    saved = SessionManager.get_saved_floors()
    for floor, state in zip(floors, states):
        SessionManager.set_editor(state)
        if floor.units:
            saved[floor.floor_no] = stored_payload(floor)
    log.info("floors_loaded", count=len(states))
    return len(states)


def load_occupancy_facts(raw: str | bytes) -> int:
    """Load occupancy facts from a JSON list.

    Returns:
        Number of facts loaded
    """
    try:
        facts = [OccupancyFact.model_validate(item) for item in json.loads(raw)]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        log.error("occupancy_load_failed", error=str(e))
        st.error(f"Could not load occupancy data: {e}")
        return 0

    SessionManager.set_occupancy_facts(facts)
    log.info("occupancy_loaded", count=len(facts))
    return len(facts)


def current_display() -> FloorDisplayState | None:
    """Overlay of the current floor's saved units."""
    payload = SessionManager.get_saved_floors().get(SessionManager.get_current_floor())
    if payload is None:
        return None
    return resolve_display(payload.units, SessionManager.get_occupancy_facts())


def property_summary() -> PropertySummary:
    facts = SessionManager.get_occupancy_facts()
    return summarize_property(
        resolve_display(payload.units, facts)
        for payload in SessionManager.get_saved_floors().values()
    )


def export_saved_floors(property_name: str = "") -> str | None:
    """Write every saved floor to a JSON file.

    Returns:
        Path of the export, or None if it failed
    """
    floors = list(SessionManager.get_saved_floors().values())
    if not floors:
        st.warning("Save at least one floor before exporting.")
        return None
    try:
        exporter = LayoutExporter(get_settings().export_dir)
        path = exporter.save_layouts(floors, metadata={"property": property_name})
    except FloorPlanError as e:
        st.error(f"Export failed: {e}")
        return None
    return path
