"""Core exceptions, logging and settings."""

from .exceptions import (
    ConfigurationError,
    DuplicateCellError,
    DuplicateUnitNameCollisionError,
    EmptySelectionError,
    ExportError,
    FloorPlanError,
    InvalidGridIndexError,
    InvalidParameterError,
    LayoutParseError,
    UnitRemovalBlockedError,
)

__all__ = [
    "FloorPlanError",
    "InvalidGridIndexError",
    "DuplicateCellError",
    "EmptySelectionError",
    "LayoutParseError",
    "DuplicateUnitNameCollisionError",
    "UnitRemovalBlockedError",
    "InvalidParameterError",
    "ExportError",
    "ConfigurationError",
]
