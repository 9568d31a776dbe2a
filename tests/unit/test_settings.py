"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from floorplan.core.settings import FloorPlanSettings, get_settings
from floorplan.domain.models.unit import PaymentFrequency


class TestFloorPlanSettings:
    """Tests for FloorPlanSettings."""

    def test_defaults(self):
        settings = FloorPlanSettings(_env_file=None)
        assert settings.grid.cols == 8
        assert settings.grid.rows == 8
        assert settings.cell_size_px == 40

    def test_env_prefix(self, monkeypatch):
        """FLOORPLAN_ variables override defaults."""
        monkeypatch.setenv("FLOORPLAN_GRID_COLS", "10")
        monkeypatch.setenv("FLOORPLAN_DEFAULT_RENT_AMOUNT", "250000")
        monkeypatch.setenv("FLOORPLAN_DEFAULT_PAYMENT_FREQ", "annual")
        settings = FloorPlanSettings(_env_file=None)
        assert settings.grid.cols == 10
        defaults = settings.unit_defaults()
        assert defaults.rent_amount == 250000.0
        assert defaults.payment_freq == PaymentFrequency.ANNUAL

    def test_grid_capped(self):
        """Grids wider than 26 would run out of unit letters."""
        with pytest.raises(ValidationError):
            FloorPlanSettings(_env_file=None, grid_cols=27)

    def test_get_settings_cached(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.setenv("FLOORPLAN_CELL_SIZE_PX", "32")
        try:
            assert get_settings().cell_size_px == 32
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
