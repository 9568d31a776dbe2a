"""Data models for floorplan."""

from .floor import CreationMethod, FloorLayout, FloorPayload, LayoutType, PersistedFloor
from .grid import GridSpec
from .occupancy import (
    DisplayStatus,
    FloorDisplayState,
    OccupancyFact,
    PaymentStatus,
    PropertySummary,
    UnitDisplay,
)
from .unit import PaymentFrequency, UnitDefaults, UnitRecord, UnitStatus, Utilities
from .vector import BoundingBox, LayoutPreview, LayoutShape, RectPrimitive, VectorLayout

__all__ = [
    "GridSpec",
    "FloorLayout",
    "FloorPayload",
    "PersistedFloor",
    "LayoutType",
    "CreationMethod",
    "UnitRecord",
    "UnitDefaults",
    "UnitStatus",
    "PaymentFrequency",
    "Utilities",
    "OccupancyFact",
    "PaymentStatus",
    "DisplayStatus",
    "UnitDisplay",
    "FloorDisplayState",
    "PropertySummary",
    "RectPrimitive",
    "BoundingBox",
    "VectorLayout",
    "LayoutPreview",
    "LayoutShape",
]
