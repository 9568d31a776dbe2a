"""Unit tests for the pure parts of the UI components."""

from floorplan.application.services.overlay import resolve_display
from floorplan.application.services.serializer import serialize
from floorplan.application.services.unit_builder import build_units
from floorplan.domain.models.occupancy import OccupancyFact
from floorplan.ui.components.floor_grid import SELECTED_COLOR, STATUS_COLORS, build_floor_figure
from floorplan.ui.components.stats import format_amount, units_dataframe


class TestFormatAmount:
    """Tests for rent formatting."""

    def test_thousands(self):
        assert format_amount(1250000) == "TSh 1,250,000"

    def test_missing(self):
        assert format_amount(None) == "—"


class TestUnitsDataframe:
    """Tests for the unit table."""

    def test_rows_in_selection_order(self, defaults):
        units = build_units([9, 0], 0, defaults)
        df = units_dataframe(units)
        assert list(df["Unit"]) == ["A1", "A2"]
        assert list(df["Cell"]) == [9, 0]
        assert "Payment" not in df.columns

    def test_with_overlay(self, defaults):
        units = build_units([9, 0], 0, defaults)
        display = resolve_display(units, [OccupancyFact(unit_id=0, tenant_ref="T-1", payment_status="paid")])
        df = units_dataframe(units, display)
        assert list(df["Payment"]) == ["vacant", "paid"]
        assert list(df["Tenant"]) == ["—", "T-1"]


class TestBuildFloorFigure:
    """Tests for the floor overlay chart."""

    def test_one_shape_per_unit(self):
        fig = build_floor_figure(serialize([0, 9, 17], 40))
        assert len(fig.layout.shapes) == 3
        assert all(s.fillcolor == SELECTED_COLOR for s in fig.layout.shapes)

    def test_trimmed_to_bounding_box(self):
        fig = build_floor_figure(serialize([9, 10], 40))
        assert list(fig.layout.xaxis.range) == [40, 120]
        assert list(fig.layout.yaxis.range) == [80, 40]

    def test_status_colours(self, defaults):
        units = build_units([0, 1], 0, defaults)
        display = resolve_display(units, [OccupancyFact(unit_id=1, tenant_ref="T", payment_status="overdue")])
        fig = build_floor_figure(serialize([0, 1], 40), display)
        colours = [s.fillcolor for s in fig.layout.shapes]
        assert colours == [STATUS_COLORS[display.units[0].payment_status],
                           STATUS_COLORS[display.units[1].payment_status]]
        assert colours[1] == "#dc2626"
