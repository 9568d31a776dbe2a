"""Floor grid components: the clickable editor grid and the overlay chart."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from floorplan.application.services.floor_editor import FloorEditorState
from floorplan.domain.layout.selection import position_of
from floorplan.domain.models.occupancy import DisplayStatus, FloorDisplayState
from floorplan.domain.models.vector import VectorLayout

STATUS_COLORS = {
    DisplayStatus.VACANT: "#e5e7eb",
    DisplayStatus.DUE: "#f59e0b",
    DisplayStatus.OVERDUE: "#dc2626",
    DisplayStatus.PAID: "#16a34a",
}
SELECTED_COLOR = "#3b82f6"


def render_grid_editor(state: FloorEditorState, readonly: bool = False) -> int | None:
    """Render the grid as buttons, one per cell.

    Selected cells show their unit number, occupied cells a lock.

    Returns:
        Index of the clicked cell, or None
    """
    clicked = None
    occupied = state.occupied_cells
    for row in range(state.grid.rows):
        columns = st.columns(state.grid.cols, gap="small")
        for col, column in enumerate(columns):
            index = row * state.grid.cols + col
            number = position_of(state.selected_cells, index)
            label = "·" if number is None else str(number)
            if index in occupied:
                label = f"🔒{label}"
            with column:
                pressed = st.button(
                    label,
                    key=f"cell_{state.floor_number}_{index}",
                    type="primary" if number is not None else "secondary",
                    disabled=readonly,
                    use_container_width=True,
                )
                if pressed:
                    clicked = index
    return clicked


def build_floor_figure(
    layout: VectorLayout,
    display: FloorDisplayState | None = None,
    title: str = "",
) -> go.Figure:
    """Plot unit rectangles, trimmed to the occupied bounding box.

    Units are coloured by display status when ``display`` is given.
    """
    fig = go.Figure()
    statuses = {}
    if display is not None:
        statuses = {u.svg_id: u for u in display.units}

    for rect in layout.primitives:
        unit = statuses.get(rect.cell_index)
        color = STATUS_COLORS[unit.payment_status] if unit else SELECTED_COLOR
        fig.add_shape(
            type="rect",
            x0=rect.x, y0=rect.y,
            x1=rect.x + rect.width, y1=rect.y + rect.height,
            line=dict(color="#1e40af", width=2),
            fillcolor=color,
        )
        text = unit.unit_name if unit else rect.label
        hover = f"{text}: {unit.payment_status.value}" if unit else f"Unit {rect.label}"
        fig.add_trace(go.Scatter(
            x=[rect.x + rect.width / 2],
            y=[rect.y + rect.height / 2],
            text=[text],
            mode="text",
            hovertext=[hover],
            hoverinfo="text",
            showlegend=False,
        ))

    box = layout.bounding_box
    if box is not None:
        size = layout.cell_size_px
        fig.update_xaxes(range=[box.min_col * size, (box.max_col + 1) * size])
        # Screen coordinates: y grows downwards
        fig.update_yaxes(range=[(box.max_row + 1) * size, box.min_row * size])

    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1)
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
        plot_bgcolor="white",
        height=max(240, layout.layout_height + 80),
    )
    return fig


def render_floor_overlay(
    layout: VectorLayout,
    display: FloorDisplayState | None = None,
    title: str = "",
    key: str = "floor",
) -> None:
    """Render the floor chart, or a hint when nothing is selected."""
    if not layout.primitives:
        st.info("No units on this floor yet. Click grid cells to add units.")
        return
    st.plotly_chart(build_floor_figure(layout, display, title), use_container_width=True, key=key)
