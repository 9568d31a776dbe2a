"""Session state management for the Streamlit editor.

The pure core never holds state; this module is where the editor keeps one
``FloorEditorState`` per floor, the saved payloads and the occupancy facts
between Streamlit reruns.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from floorplan.application.services.floor_editor import FloorEditorState, mark_saved, new_floor
from floorplan.core.settings import get_settings
from floorplan.domain.models.floor import FloorPayload
from floorplan.domain.models.occupancy import OccupancyFact

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key not present

    Returns:
        Value from session state or default
    """
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the editor."""

    DEFAULTS = {
        "total_floors": 1,
        "current_floor": 0,
        "editors": {},          # floor_number -> FloorEditorState
        "saved_floors": {},     # floor_number -> FloorPayload
        "occupancy_facts": [],
        "save_in_flight": False,
        "last_export_path": "",
    }

    @classmethod
    def initialize(cls) -> None:
        """Initialize all session state with defaults."""
        # Fresh containers per session; DEFAULTS values are shared
        init_state({key: (value.copy() if isinstance(value, (dict, list)) else value)
                    for key, value in cls.DEFAULTS.items()})

    @classmethod
    def get_current_floor(cls) -> int:
        return get_state("current_floor", 0)

    @classmethod
    def set_current_floor(cls, floor_number: int) -> None:
        set_state("current_floor", floor_number)

    @classmethod
    def get_total_floors(cls) -> int:
        return get_state("total_floors", 1)

    @classmethod
    def set_total_floors(cls, count: int) -> None:
        """Change the number of floors, dropping state of removed floors."""
        set_state("total_floors", count)
        editors = get_state("editors", {})
        saved = get_state("saved_floors", {})
        for floor_number in [f for f in editors if f >= count]:
            del editors[floor_number]
        for floor_number in [f for f in saved if f >= count]:
            del saved[floor_number]
        if cls.get_current_floor() >= count:
            cls.set_current_floor(0)

    @classmethod
    def get_editor(cls, floor_number: int | None = None) -> FloorEditorState:
        """Editing state of a floor, created empty on first access."""
        if floor_number is None:
            floor_number = cls.get_current_floor()
        editors = get_state("editors", {})
        if floor_number not in editors:
            editors[floor_number] = new_floor(floor_number, get_settings())
        return editors[floor_number]

    @classmethod
    def set_editor(cls, state: FloorEditorState) -> None:
        get_state("editors", {})[state.floor_number] = state

    @classmethod
    def get_saved_floors(cls) -> dict[int, FloorPayload]:
        return get_state("saved_floors", {})

    @classmethod
    def begin_save(cls) -> bool:
        """Claim the save slot; False if a save is already running."""
        if get_state("save_in_flight", False):
            return False
        set_state("save_in_flight", True)
        return True

    @classmethod
    def end_save(cls) -> None:
        set_state("save_in_flight", False)

    @classmethod
    def record_saved(cls, payload: FloorPayload) -> None:
        """Store an accepted payload and re-open its floor from it."""
        cls.get_saved_floors()[payload.floor_no] = payload
        cls.set_editor(mark_saved(cls.get_editor(payload.floor_no), payload))

    @classmethod
    def get_occupancy_facts(cls) -> list[OccupancyFact]:
        return get_state("occupancy_facts", [])

    @classmethod
    def set_occupancy_facts(cls, facts: list[OccupancyFact]) -> None:
        set_state("occupancy_facts", facts)
