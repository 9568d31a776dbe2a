"""Occupancy and display state models.

Occupancy facts come from the tenant/payment side and are read-only here;
display states are derived on every request and never persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class PaymentStatus(str, Enum):
    """Payment state of an occupied unit."""
    PAID = "paid"
    DUE = "due"
    OVERDUE = "overdue"


class DisplayStatus(str, Enum):
    """Resolved status shown on the floor overlay."""
    VACANT = "vacant"
    DUE = "due"
    OVERDUE = "overdue"
    PAID = "paid"


class OccupancyFact(BaseModel):
    """A tenant-to-unit assignment with its current payment state.

    ``unit_name`` and ``floor_number`` are only used when no fact matches
    the unit by id.
    """

    unit_id: int | None = Field(None, description="svg_id of the occupied unit")
    tenant_ref: str = Field(..., description="Tenant reference")
    rent_amount: float = Field(default=0.0, ge=0)
    payment_status: PaymentStatus | None = None
    unit_name: str | None = None
    floor_number: int | None = Field(None, ge=0, description="0-based floor number")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class UnitDisplay(BaseModel):
    """Overlay state of one unit."""

    svg_id: int
    unit_name: str
    payment_status: DisplayStatus
    tenant_ref: str | None = None
    rent_amount: float = 0.0

    @property
    def is_occupied(self) -> bool:
        return self.payment_status is not DisplayStatus.VACANT


class FloorDisplayState(BaseModel):
    """Derived overlay for one floor."""

    floor_number: int | None = None
    units: list[UnitDisplay] = Field(default_factory=list)
    occupied_units: int = Field(default=0, ge=0)
    occupancy_rate: int = Field(default=0, ge=0, le=100, description="Occupied share, whole %")

    @computed_field
    @property
    def total_units(self) -> int:
        return len(self.units)

    @computed_field
    @property
    def vacant_units(self) -> int:
        return self.total_units - self.occupied_units

    @computed_field
    @property
    def total_rent(self) -> float:
        """Rent of occupied units, per their payment period."""
        return sum(u.rent_amount for u in self.units if u.is_occupied)

    def status_counts(self) -> dict[str, int]:
        """Number of units per display status."""
        counts = {status.value: 0 for status in DisplayStatus}
        for unit in self.units:
            counts[unit.payment_status.value] += 1
        return counts


class PropertySummary(BaseModel):
    """Totals across all floors of a property."""

    floors: int = Field(default=0, ge=0)
    total_units: int = Field(default=0, ge=0)
    occupied_units: int = Field(default=0, ge=0)
    occupancy_rate: int = Field(default=0, ge=0, le=100)
    total_rent: float = Field(default=0.0, ge=0)
    average_rent: int = Field(default=0, ge=0, description="Rounded rent per unit")

    @computed_field
    @property
    def vacant_units(self) -> int:
        return self.total_units - self.occupied_units
