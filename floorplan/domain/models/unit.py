"""Unit record data models.

A unit is one occupiable rental space derived from a single selected grid
cell. Records are created in batch when a floor layout is saved and edited
individually afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator, model_validator


class UnitStatus(str, Enum):
    """Lifecycle status of a unit."""
    VACANT = "vacant"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"


class PaymentFrequency(str, Enum):
    """How often rent is collected for a unit."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUAL = "biannual"
    ANNUAL = "annual"


class Utilities(BaseModel):
    """Utilities included with a unit."""

    electricity: bool = False
    water: bool = False
    wifi: bool = False

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


def _normalize_status(value: Any) -> Any:
    # Records saved by older clients use "available" for an empty unit
    if isinstance(value, str) and value.lower() == "available":
        return UnitStatus.VACANT
    return value


Status = Annotated[UnitStatus, BeforeValidator(_normalize_status)]


class UnitDefaults(BaseModel):
    """Caller-supplied defaults for newly generated units."""

    area_sqm: float = Field(default=150.0, ge=0, description="Floor area in m²")
    bedrooms: int = Field(default=1, ge=0, description="Number of bedrooms")
    rent_amount: float = Field(default=0.0, ge=0, description="Rent per payment period")
    payment_freq: PaymentFrequency = Field(default=PaymentFrequency.MONTHLY)
    utilities: Utilities = Field(default_factory=Utilities)
    status: Status = Field(default=UnitStatus.VACANT)


class UnitRecord(BaseModel):
    """One persisted unit of a floor.

    Attributes:
        svg_id: Originating grid cell index, stable id back to the grid
        svg_geom: Closed path describing the unit's cell in pixels
        floor_number: 0-based floor number
        unit_name: Display label, e.g. "A1"
        has_tenant: Set on persisted units that currently have a tenant
    """

    svg_id: int = Field(..., ge=0, description="Grid cell index")
    svg_geom: str = Field(default="", description="Vector path of the unit cell")
    floor_number: int = Field(..., ge=0, description="0-based floor number")
    unit_name: str = Field(..., min_length=1, description="Unit label")
    area_sqm: float = Field(default=150.0, ge=0)
    bedrooms: int = Field(default=1, ge=0)
    status: Status = Field(default=UnitStatus.VACANT)
    rent_amount: float = Field(default=0.0, ge=0)
    payment_freq: PaymentFrequency = Field(default=PaymentFrequency.MONTHLY)
    utilities: Utilities = Field(default_factory=Utilities)
    has_tenant: bool = Field(default=False, exclude=True, description="Occupied in the backend")

    model_config = {
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def read_current_tenant(cls, data: Any) -> Any:
        """Backend records carry the tenant object instead of a flag."""
        if isinstance(data, dict) and "has_tenant" not in data and data.get("current_tenant"):
            data = {**data, "has_tenant": True}
        return data

    @field_validator("utilities", mode="before")
    @classmethod
    def coerce_utilities(cls, v: Any) -> Any:
        """Accept a missing or empty utilities map from older records."""
        if v is None:
            return Utilities()
        return v
