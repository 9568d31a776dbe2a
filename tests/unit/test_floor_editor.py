"""Unit tests for the floor editing session."""

import pytest

from floorplan.application.services.floor_editor import (
    build_payload,
    clear_cells,
    hydrate,
    mark_saved,
    new_floor,
    preview,
    select_all_cells,
    set_layout_type,
    stored_payload,
    toggle_cell,
)
from floorplan.application.services.serializer import render_markup, serialize
from floorplan.core.exceptions import (
    DuplicateUnitNameCollisionError,
    EmptySelectionError,
    InvalidGridIndexError,
    UnitRemovalBlockedError,
)
from floorplan.domain.models.floor import LayoutType, PersistedFloor


class TestNewFloor:
    """Tests for starting an empty floor."""

    def test_empty_state(self, settings):
        state = new_floor(2, settings)
        assert state.floor_number == 2
        assert state.display_number == 3
        assert state.selected_cells == ()
        assert state.has_changes is False
        assert state.grid.cell_count == 64


class TestHydrate:
    """Tests for re-opening a stored floor."""

    def test_selection_in_stored_order(self, sample_persisted_floor, settings):
        """Units [5, 2] re-open as selection (5, 2), not sorted."""
        state = hydrate(sample_persisted_floor, settings)
        assert state.selected_cells == (5, 2)
        assert state.floor_number == 1
        assert state.layout_type == LayoutType.CUSTOM
        assert state.has_changes is False

    def test_occupied_cells(self, sample_persisted_floor, settings):
        state = hydrate(sample_persisted_floor, settings)
        assert state.occupied_cells == frozenset({5})

    def test_markup_fallback(self, settings, grid):
        """A floor stored without units re-opens from its markup."""
        markup = render_markup(serialize([12, 3], 40), grid)
        state = hydrate({"floor_no": 0, "layout_data": markup, "units": []}, settings)
        assert state.selected_cells == (12, 3)

    def test_off_grid_unit(self, settings):
        floor = {"floor_no": 0, "units": [{"svg_id": 64, "floor_number": 0, "unit_name": "A1"}]}
        with pytest.raises(InvalidGridIndexError):
            hydrate(floor, settings)

    def test_duplicate_names(self, settings):
        floor = {"floor_no": 0, "units": [
            {"svg_id": 1, "floor_number": 0, "unit_name": "A1"},
            {"svg_id": 2, "floor_number": 0, "unit_name": "A1"},
        ]}
        with pytest.raises(DuplicateUnitNameCollisionError):
            hydrate(floor, settings)


class TestEditing:
    """Tests for selection edits."""

    def test_toggle_marks_changes(self, settings):
        state = toggle_cell(new_floor(0, settings), 9)
        assert state.selected_cells == (9,)
        assert state.has_changes is True

    def test_toggle_returns_new_state(self, settings):
        original = new_floor(0, settings)
        toggle_cell(original, 9)
        assert original.selected_cells == ()

    def test_toggle_off_grid(self, settings):
        with pytest.raises(InvalidGridIndexError):
            toggle_cell(new_floor(0, settings), 64)

    def test_remove_occupied_unit_blocked(self, sample_persisted_floor, settings):
        """A unit with a tenant cannot be deselected."""
        state = hydrate(sample_persisted_floor, settings)
        with pytest.raises(UnitRemovalBlockedError) as exc_info:
            toggle_cell(state, 5)
        assert exc_info.value.unit_name == "A1"

    def test_remove_vacant_unit_allowed(self, sample_persisted_floor, settings):
        state = toggle_cell(hydrate(sample_persisted_floor, settings), 2)
        assert state.selected_cells == (5,)

    def test_clear_blocked_by_tenant(self, sample_persisted_floor, settings):
        with pytest.raises(UnitRemovalBlockedError):
            clear_cells(hydrate(sample_persisted_floor, settings))

    def test_clear(self, settings):
        state = clear_cells(toggle_cell(new_floor(0, settings), 3))
        assert state.selected_cells == ()
        assert state.has_changes is True

    def test_select_all(self, settings):
        state = select_all_cells(toggle_cell(new_floor(0, settings), 10))
        assert len(state.selected_cells) == 64
        assert state.selected_cells[0] == 10

    def test_set_layout_type(self, settings):
        state = new_floor(0, settings)
        assert set_layout_type(state, LayoutType.RECTANGULAR) is state
        changed = set_layout_type(state, LayoutType.L_SHAPED)
        assert changed.layout_type == LayoutType.L_SHAPED
        assert changed.has_changes is True

    def test_preview(self, settings):
        state = new_floor(0, settings)
        assert preview(state) is None
        assert preview(toggle_cell(state, 0)).units_count == 1


class TestBuildPayload:
    """Tests for the save request."""

    def test_empty_selection_rejected(self, settings, defaults):
        with pytest.raises(EmptySelectionError):
            build_payload(new_floor(0, settings), defaults)

    def test_payload_fields(self, settings, defaults):
        state = new_floor(0, settings)
        for index in (0, 9, 17):
            state = toggle_cell(state, index)
        payload = build_payload(state, defaults)
        assert payload.floor_no == 0
        assert payload.units_total == 3
        assert [u.unit_name for u in payload.units] == ["A1", "A2", "A3"]
        assert 'id="unit_17"' in payload.layout_data

    def test_existing_units_kept(self, sample_persisted_floor, settings, defaults):
        """Stored attributes survive an edit; names follow the new order."""
        state = toggle_cell(hydrate(sample_persisted_floor, settings), 30)
        payload = build_payload(state, defaults)
        by_cell = {u.svg_id: u for u in payload.units}
        assert by_cell[5].rent_amount == 450000.0
        assert by_cell[30].rent_amount == 0.0
        assert [u.unit_name for u in payload.units] == ["A1", "A2", "A3"]


class TestMarkSaved:
    """Tests for re-opening after a save."""

    def test_mark_saved(self, settings, defaults):
        state = toggle_cell(toggle_cell(new_floor(0, settings), 4), 1)
        payload = build_payload(state, defaults)
        saved = mark_saved(state, payload)
        assert saved.has_changes is False
        assert saved.selected_cells == (4, 1)
        assert len(saved.existing_units) == 2


class TestStoredPayload:
    """Tests for rebuilding the payload of a stored floor."""

    def test_keeps_units_and_tenants(self, sample_persisted_floor):
        payload = stored_payload(PersistedFloor(**sample_persisted_floor))
        assert payload.floor_no == 1
        assert payload.units_total == 2
        assert [u.svg_id for u in payload.units] == [5, 2]
        assert payload.units[0].has_tenant is True
        assert payload.layout_type == LayoutType.CUSTOM
