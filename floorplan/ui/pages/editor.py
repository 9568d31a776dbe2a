"""Floor editor page.

Composes the grid editor, the overlay chart and the unit table into the
main application page.
"""

from __future__ import annotations

import streamlit as st

from floorplan.application.services.floor_editor import set_layout_type, vector_layout
from floorplan.domain.models.floor import LayoutType
from floorplan.ui import app_controller
from floorplan.ui.components.floor_grid import render_floor_overlay, render_grid_editor
from floorplan.ui.components.stats import (
    render_floor_stats,
    render_property_summary,
    units_dataframe,
)
from floorplan.ui.state import SessionManager, get_state, set_state


def render_header() -> None:
    st.markdown("<h1 style='text-align: center;'>🏢 Floor Layout Editor</h1>", unsafe_allow_html=True)
    st.caption("Draw each floor on the grid, then save it to create its units")


def render_floor_switcher() -> int:
    """Tabs-like radio to pick the floor being edited.

    Returns:
        Selected 0-based floor number
    """
    total = SessionManager.get_total_floors()
    saved = SessionManager.get_saved_floors()
    labels = [
        f"Floor {n + 1}" + (" ✓" if n in saved else "")
        for n in range(total)
    ]
    current = min(SessionManager.get_current_floor(), total - 1)
    choice = st.radio("Floor", labels, index=current, horizontal=True, label_visibility="collapsed")
    floor_number = labels.index(choice)
    SessionManager.set_current_floor(floor_number)
    return floor_number


def render_toolbar() -> None:
    """Layout type and bulk selection actions."""
    state = SessionManager.get_editor()
    types = list(LayoutType)
    col_type, col_all, col_clear, col_preview = st.columns([3, 1, 1, 1])

    with col_type:
        chosen = st.selectbox(
            "Layout type",
            types,
            index=types.index(state.layout_type),
            format_func=lambda t: t.value.replace("_", " ").title(),
            key=f"layout_type_{state.floor_number}",
        )
        if chosen != state.layout_type:
            SessionManager.set_editor(set_layout_type(state, chosen))

    with col_all:
        if st.button("Select All", key=f"select_all_{state.floor_number}", use_container_width=True):
            app_controller.apply_edit("select_all")
            st.rerun()
    with col_clear:
        if st.button("Clear All", key=f"clear_{state.floor_number}", use_container_width=True):
            # An unchanged state means the clear was refused; keep the error visible
            if app_controller.apply_edit("clear") is not state:
                st.rerun()
    with col_preview:
        show = get_state("show_preview", False)
        if st.button("Hide Preview" if show else "Preview", key=f"preview_{state.floor_number}",
                     use_container_width=True):
            set_state("show_preview", not show)
            st.rerun()


def render_editor() -> None:
    """Grid editor with live statistics and optional preview."""
    state = SessionManager.get_editor()
    left, right = st.columns([3, 2])

    with left:
        st.markdown(f"#### Floor {state.display_number} Layout")
        clicked = render_grid_editor(state, readonly=get_state("save_in_flight", False))
        if clicked is not None:
            if app_controller.apply_edit("toggle", clicked) is not state:
                st.rerun()

    with right:
        render_floor_stats(state, app_controller.current_display())
        if get_state("show_preview", False):
            render_floor_overlay(vector_layout(state), title="Preview", key=f"preview_{state.floor_number}")

        saved = state.floor_number in SessionManager.get_saved_floors()
        label = "💾 Save Floor" if state.has_changes or not saved else "✓ Saved"
        if st.button(label, type="primary", disabled=not state.selected_cells or get_state("save_in_flight", False),
                     key=f"save_{state.floor_number}", use_container_width=True):
            payload = app_controller.save_current_floor()
            if payload is not None:
                st.success(f"Floor {state.display_number} saved with {payload.units_total} units")
                st.rerun()


def render_units_section() -> None:
    """Overlay chart and unit table of the saved floor."""
    floor_number = SessionManager.get_current_floor()
    payload = SessionManager.get_saved_floors().get(floor_number)
    if payload is None:
        return

    display = app_controller.current_display()
    state = SessionManager.get_editor()
    st.markdown("#### Units")
    col_chart, col_table = st.columns([2, 3])
    with col_chart:
        render_floor_overlay(vector_layout(state), display, key=f"overlay_{floor_number}")
    with col_table:
        st.dataframe(units_dataframe(payload.units, display), use_container_width=True, hide_index=True)


def render_summary() -> None:
    if not SessionManager.get_saved_floors():
        return
    st.divider()
    st.markdown("### Property Overview")
    render_property_summary(app_controller.property_summary())


def render_editor_page() -> None:
    """Render the complete editor page."""
    render_header()
    render_floor_switcher()
    render_toolbar()
    render_editor()
    render_units_section()
    render_summary()
