"""Custom exceptions for floorplan.

Domain-specific exception types for the grid layout model.
"""

from __future__ import annotations

from typing import Any


class FloorPlanError(Exception):
    """Base exception for all floorplan errors."""
    pass


# --- Grid Errors ---

class InvalidGridIndexError(FloorPlanError):
    """A cell index outside the grid was supplied."""

    def __init__(self, index: int, cell_count: int | None = None):
        self.index = index
        self.cell_count = cell_count
        if cell_count is None:
            msg = f"Invalid grid index {index}: must be >= 0"
        else:
            msg = f"Invalid grid index {index}: must be in [0, {cell_count})"
        super().__init__(msg)


class DuplicateCellError(FloorPlanError):
    """A layout lists the same cell index more than once."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Cell {index} is selected more than once")


# --- Layout Errors ---

class EmptySelectionError(FloorPlanError):
    """A floor layout was saved with no selected cells."""
    pass


class LayoutParseError(FloorPlanError):
    """Vector markup could not be read back into a selection."""
    pass


# --- Unit Errors ---

class DuplicateUnitNameCollisionError(FloorPlanError):
    """Two units on the same floor would carry the same name."""

    def __init__(self, unit_name: str, svg_id: int | None = None):
        self.unit_name = unit_name
        self.svg_id = svg_id
        msg = f"Unit name '{unit_name}' is already in use"
        if svg_id is not None:
            msg += f" (cell {svg_id})"
        super().__init__(msg)


class UnitRemovalBlockedError(FloorPlanError):
    """An occupied unit cannot be removed from the layout."""

    def __init__(self, svg_id: int, unit_name: str = ""):
        self.svg_id = svg_id
        self.unit_name = unit_name
        label = unit_name or f"cell {svg_id}"
        super().__init__(f"{label} is currently occupied. Please vacate the tenant first.")


class InvalidParameterError(FloorPlanError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Infrastructure Errors ---

class ExportError(FloorPlanError):
    """Failed to write or read an exported layout file."""
    pass


class ConfigurationError(FloorPlanError):
    """Error in application configuration."""
    pass
