"""Pytest fixtures for floorplan tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from floorplan.core.settings import FloorPlanSettings
from floorplan.domain.models.grid import GridSpec
from floorplan.domain.models.unit import UnitDefaults


@pytest.fixture
def grid():
    """Default 8x8 grid."""
    return GridSpec(cols=8, rows=8)


@pytest.fixture
def settings():
    """Settings with the default grid, independent of the environment."""
    return FloorPlanSettings(_env_file=None, grid_cols=8, grid_rows=8, cell_size_px=40)


@pytest.fixture
def defaults():
    """Unit defaults as a landlord would configure them."""
    return UnitDefaults(area_sqm=150.0, bedrooms=1, rent_amount=0.0)


@pytest.fixture
def sample_units_data():
    """Units of a stored floor, in the order the backend returned them."""
    return [
        {
            "svg_id": 5,
            "svg_geom": "M200,0 L240,0 L240,40 L200,40 Z",
            "floor_number": 1,
            "unit_name": "A1",
            "area_sqm": 120.0,
            "bedrooms": 2,
            "status": "occupied",
            "rent_amount": 450000.0,
            "payment_freq": "monthly",
            "utilities": {"electricity": True, "water": True, "wifi": False},
            "current_tenant": {"id": 77, "name": "J. Mushi"},
        },
        {
            "svg_id": 2,
            "svg_geom": "M80,0 L120,0 L120,40 L80,40 Z",
            "floor_number": 1,
            "unit_name": "A2",
            "area_sqm": 150.0,
            "bedrooms": 1,
            "status": "available",
            "rent_amount": 300000.0,
            "payment_freq": "quarterly",
            "utilities": None,
            "current_tenant": None,
        },
    ]


@pytest.fixture
def sample_persisted_floor(sample_units_data):
    """A stored floor as the backend returns it."""
    return {
        "floor_no": 1,
        "units_total": 2,
        "layout_type": "manual_grid",
        "creation_method": "manual",
        "layout_data": "",
        "units": sample_units_data,
    }


@pytest.fixture
def sample_facts_data():
    """Occupancy facts for floor 1."""
    return [
        {"unit_id": 5, "tenant_ref": "T-77", "rent_amount": 450000.0, "payment_status": "paid"},
    ]
