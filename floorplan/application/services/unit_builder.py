"""Unit record builder.

Expands an ordered selection into persisted unit records. Unit names are
derived from the selection position, not the cell index: the letter
advances every 26 units and the number restarts at 1 (A1..A26, B1..B26).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from floorplan.core.exceptions import DuplicateUnitNameCollisionError, InvalidParameterError
from floorplan.core.logging import get_logger
from floorplan.application.services.serializer import cell_geometry
from floorplan.domain.models.unit import UnitDefaults, UnitRecord

log = get_logger(__name__)

LETTERS_PER_CYCLE = 26
MAX_NAMED_UNITS = LETTERS_PER_CYCLE * LETTERS_PER_CYCLE


def unit_name_for(position: int) -> str:
    """Unit name for a 0-based selection position.

    Example:
        >>> [unit_name_for(i) for i in (0, 25, 26, 52)]
        ['A1', 'A26', 'B1', 'C1']
    """
    if not 0 <= position < MAX_NAMED_UNITS:
        raise InvalidParameterError("position", position, f"must be in [0, {MAX_NAMED_UNITS})")
    letter = chr(ord("A") + position // LETTERS_PER_CYCLE)
    return f"{letter}{position % LETTERS_PER_CYCLE + 1}"


def _new_unit(
    index: int,
    unit_name: str,
    floor_number: int,
    defaults: UnitDefaults,
    cell_size_px: int,
    cols: int,
) -> UnitRecord:
    return UnitRecord(
        svg_id=index,
        svg_geom=cell_geometry(index, cell_size_px, cols),
        floor_number=floor_number,
        unit_name=unit_name,
        area_sqm=defaults.area_sqm,
        bedrooms=defaults.bedrooms,
        status=defaults.status,
        rent_amount=defaults.rent_amount,
        payment_freq=defaults.payment_freq,
        utilities=defaults.utilities,
    )


def build_units(
    cells: Sequence[int],
    floor_number: int,
    defaults: UnitDefaults | None = None,
    reserved_names: Iterable[str] | None = None,
    cell_size_px: int = 40,
    cols: int = 8,
) -> list[UnitRecord]:
    """Create one unit record per selected cell.

    Args:
        cells: Selected cells in selection order
        floor_number: 0-based floor number
        defaults: Values for every field not derived from the cell
        reserved_names: Names already taken on this floor
        cell_size_px: Cell size used for ``svg_geom``
        cols: Grid width

    Returns:
        Unit records in selection order; empty for an empty selection

    Raises:
        DuplicateUnitNameCollisionError: If a generated name is reserved
    """
    defaults = defaults or UnitDefaults()
    reserved = set(reserved_names or ())

    units = []
    for position, index in enumerate(cells):
        name = unit_name_for(position)
        if name in reserved:
            raise DuplicateUnitNameCollisionError(name, index)
        units.append(_new_unit(index, name, floor_number, defaults, cell_size_px, cols))

    log.info("units_built", floor_number=floor_number, count=len(units))
    return units


def merge_units(
    existing: Sequence[UnitRecord],
    cells: Sequence[int],
    floor_number: int,
    defaults: UnitDefaults | None = None,
    renumber: bool = True,
    cell_size_px: int = 40,
    cols: int = 8,
) -> list[UnitRecord]:
    """Rebuild a floor's units after its layout was edited.

    Cells that already had a unit keep its stored attributes (rent, area,
    status, utilities, tenant flag); new cells take ``defaults``.

    Args:
        existing: Units stored for the floor before editing
        cells: Edited selection in selection order
        floor_number: 0-based floor number
        defaults: Values for newly added units
        renumber: Rename every unit by position. When False, kept units
            keep their names and new units must not clash with them.
        cell_size_px: Cell size used for ``svg_geom``
        cols: Grid width

    Raises:
        DuplicateUnitNameCollisionError: If ``renumber`` is False and a new
            unit's generated name is held by a kept unit
    """
    defaults = defaults or UnitDefaults()
    by_cell = {unit.svg_id: unit for unit in existing}
    selected = set(cells)

    reserved: set[str] = set()
    if not renumber:
        reserved = {unit.unit_name for unit in existing if unit.svg_id in selected}

    units = []
    kept = 0
    for position, index in enumerate(cells):
        generated = unit_name_for(position)
        previous = by_cell.get(index)
        if previous is not None:
            kept += 1
            units.append(previous.model_copy(update={
                "floor_number": floor_number,
                "svg_geom": cell_geometry(index, cell_size_px, cols),
                "unit_name": generated if renumber else previous.unit_name,
            }))
            continue

        if generated in reserved:
            raise DuplicateUnitNameCollisionError(generated, index)
        reserved.add(generated)
        units.append(_new_unit(index, generated, floor_number, defaults, cell_size_px, cols))

    log.info(
        "units_merged",
        floor_number=floor_number,
        kept=kept,
        added=len(units) - kept,
        dropped=len(by_cell) - kept,
        renumber=renumber,
    )
    return units


def check_unique_names(units: Iterable[UnitRecord]) -> None:
    """Raise if two units of a floor share a name."""
    seen: set[str] = set()
    for unit in units:
        if unit.unit_name in seen:
            raise DuplicateUnitNameCollisionError(unit.unit_name, unit.svg_id)
        seen.add(unit.unit_name)
