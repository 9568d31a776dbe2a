"""Floor statistics and unit table components."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd
import streamlit as st

from floorplan.application.services.floor_editor import FloorEditorState, preview
from floorplan.domain.models.occupancy import FloorDisplayState, PropertySummary
from floorplan.domain.models.unit import UnitRecord


def format_amount(value: float | None, currency: str = "TSh") -> str:
    """Format a rent amount like "TSh 1,250,000"."""
    if value is None:
        return "—"
    return f"{currency} {int(round(value)):,}"


def units_dataframe(
    units: Sequence[UnitRecord],
    display: FloorDisplayState | None = None,
) -> pd.DataFrame:
    """Tabulate unit records with their overlay status.

    Args:
        units: Unit records of a floor
        display: Resolved overlay; status column is omitted without it

    Returns:
        One row per unit in selection order
    """
    statuses = {u.svg_id: u for u in display.units} if display else {}
    rows = []
    for unit in units:
        row = {
            "Unit": unit.unit_name,
            "Cell": unit.svg_id,
            "Floor": unit.floor_number + 1,
            "Area (m²)": unit.area_sqm,
            "Bedrooms": unit.bedrooms,
            "Status": unit.status.value,
            "Rent": unit.rent_amount,
            "Frequency": unit.payment_freq.value,
            "Utilities": ", ".join(k for k, v in unit.utilities.model_dump().items() if v) or "—",
        }
        if display is not None:
            resolved = statuses.get(unit.svg_id)
            row["Payment"] = resolved.payment_status.value if resolved else "vacant"
            row["Tenant"] = (resolved.tenant_ref if resolved else None) or "—"
        rows.append(row)
    return pd.DataFrame(rows)


def render_floor_stats(state: FloorEditorState, display: FloorDisplayState | None = None) -> None:
    """Sidebar-style statistics of the floor being edited."""
    st.markdown("#### Floor Statistics")
    col1, col2 = st.columns(2)
    col1.metric("Selected Units", len(state.selected_cells))
    col2.metric("Existing Units", len(state.existing_units))
    col1.metric("With Tenants", len(state.occupied_cells))
    col2.metric("Changes Made", "Yes" if state.has_changes else "No")

    layout_preview = preview(state)
    if layout_preview is not None:
        st.caption(
            f"Shape: {layout_preview.shape.value.replace('_', ' ')} · "
            f"{layout_preview.width}×{layout_preview.height} cells · "
            f"density {layout_preview.density:.0f}% · "
            f"grid usage {layout_preview.efficiency}%"
        )

    if display is not None and display.total_units:
        counts = display.status_counts()
        st.caption(" · ".join(f"{k}: {v}" for k, v in counts.items()))
        st.progress(display.occupancy_rate / 100.0, text=f"Occupancy {display.occupancy_rate}%")


def render_property_summary(summary: PropertySummary) -> None:
    """Headline metrics across all saved floors."""
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Units", summary.total_units)
    col2.metric("Occupied Units", summary.occupied_units)
    col3.metric("Occupancy Rate", f"{summary.occupancy_rate}%")
    col4.metric("Rent Collected", format_amount(summary.total_rent))
    st.caption(f"Average rent per unit: {format_amount(summary.average_rent)}")
