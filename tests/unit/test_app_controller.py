"""Unit tests for the editor's user actions, with session state in a dict."""

import json
from types import SimpleNamespace

import pytest

from floorplan.domain.models.occupancy import DisplayStatus, OccupancyFact
from floorplan.ui import app_controller, state


@pytest.fixture
def session(monkeypatch):
    """Stand-in for the Streamlit module: a plain session dict and recorded errors."""
    fake = SimpleNamespace(session_state={}, errors=[], warnings=[])
    fake.error = fake.errors.append
    fake.warning = fake.warnings.append
    monkeypatch.setattr(state, "st", fake)
    monkeypatch.setattr(app_controller, "st", fake)
    state.SessionManager.initialize()
    return fake


class TestLoadFloors:
    """Tests for loading stored floors from JSON."""

    def test_loads_list(self, session, sample_persisted_floor):
        count = app_controller.load_floors(json.dumps([sample_persisted_floor]))
        assert count == 1
        assert state.SessionManager.get_total_floors() == 2
        assert state.SessionManager.get_editor(1).selected_cells == (5, 2)
        assert session.errors == []

    def test_object_instead_of_list(self, session, sample_persisted_floor):
        """A single floor object is reported, not iterated by key."""
        assert app_controller.load_floors(json.dumps(sample_persisted_floor)) == 0
        assert len(session.errors) == 1

    def test_malformed_json(self, session):
        assert app_controller.load_floors("[{") == 0
        assert len(session.errors) == 1

    def test_loaded_floor_has_overlay(self, session, sample_persisted_floor, sample_facts_data):
        """Occupancy shows for loaded floors without saving them again."""
        app_controller.load_floors(json.dumps([sample_persisted_floor]))
        state.SessionManager.set_current_floor(1)
        state.SessionManager.set_occupancy_facts([OccupancyFact(**f) for f in sample_facts_data])

        display = app_controller.current_display()
        assert display is not None
        assert [u.payment_status for u in display.units] == [DisplayStatus.PAID, DisplayStatus.VACANT]
        assert app_controller.property_summary().occupied_units == 1

    def test_floor_without_units_not_saved(self, session):
        app_controller.load_floors(json.dumps([{"floor_no": 0, "units": []}]))
        assert state.SessionManager.get_saved_floors() == {}


class TestSaveCurrentFloor:
    """Tests for the guarded save action."""

    def test_save(self, session):
        app_controller.apply_edit("toggle", 3)
        payload = app_controller.save_current_floor()
        assert payload.units_total == 1
        assert state.SessionManager.get_saved_floors()[0] is payload
        assert state.SessionManager.get_editor().has_changes is False

    def test_empty_floor_reports_error(self, session):
        assert app_controller.save_current_floor() is None
        assert len(session.errors) == 1
        assert state.get_state("save_in_flight", None) is False

    def test_save_in_flight_refused(self, session):
        app_controller.apply_edit("toggle", 3)
        assert state.SessionManager.begin_save()
        assert app_controller.save_current_floor() is None
        assert state.SessionManager.get_saved_floors() == {}


class TestApplyEdit:
    """Tests for grid edits."""

    def test_blocked_removal_keeps_state(self, session, sample_persisted_floor):
        app_controller.load_floors(json.dumps([sample_persisted_floor]))
        state.SessionManager.set_current_floor(1)
        before = state.SessionManager.get_editor()
        assert app_controller.apply_edit("toggle", 5) is before
        assert len(session.errors) == 1
