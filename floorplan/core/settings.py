"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from floorplan.domain.models.grid import GridSpec
from floorplan.domain.models.unit import PaymentFrequency, UnitDefaults


class FloorPlanSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Grid
    grid_cols: int = Field(default=8, gt=0, le=26, description="Cells per grid row")
    grid_rows: int = Field(default=8, gt=0, le=26, description="Cells per grid column")
    cell_size_px: int = Field(default=40, gt=0, description="Rendered cell size in pixels")

    # Unit defaults applied when a layout is saved
    default_area_sqm: float = Field(default=150.0, ge=0, description="Area of a new unit in m²")
    default_bedrooms: int = Field(default=1, ge=0, description="Bedrooms of a new unit")
    default_rent_amount: float = Field(default=0.0, ge=0, description="Rent of a new unit")
    default_payment_freq: PaymentFrequency = Field(default=PaymentFrequency.MONTHLY)

    # Export
    export_dir: str = Field(default="exports", description="Directory for exported layouts")

    model_config = {
        "env_prefix": "FLOORPLAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def grid(self) -> GridSpec:
        """Grid dimensions shared by every floor."""
        return GridSpec(cols=self.grid_cols, rows=self.grid_rows)

    def unit_defaults(self) -> UnitDefaults:
        """Defaults used by the unit builder for newly created units."""
        return UnitDefaults(
            area_sqm=self.default_area_sqm,
            bedrooms=self.default_bedrooms,
            rent_amount=self.default_rent_amount,
            payment_freq=self.default_payment_freq,
        )


@lru_cache
def get_settings() -> FloorPlanSettings:
    """Get cached application settings."""
    return FloorPlanSettings()
