"""Occupancy and payment overlay resolution.

Derives what each unit on a floor should display from its unit records and
the active occupancy facts, and rolls floors up into a property summary.
Everything here is recomputed per request; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from floorplan.core.logging import get_logger
from floorplan.domain.models.occupancy import (
    DisplayStatus,
    FloorDisplayState,
    OccupancyFact,
    PaymentStatus,
    PropertySummary,
    UnitDisplay,
)
from floorplan.domain.models.unit import UnitRecord

log = get_logger(__name__)


def percent(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 0 when ``whole`` is 0.

    Example:
        >>> percent(1, 8)
        13
    """
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (2 * whole)


def match_fact(unit: UnitRecord, facts: Sequence[OccupancyFact]) -> tuple[OccupancyFact | None, bool]:
    """Find the occupancy fact for a unit.

    A fact carrying a ``unit_id`` matches only the unit with that
    ``svg_id``. A fact without one matches by ``(unit_name, floor_number)``.
    The first matching fact in iteration order wins.

    Returns:
        Tuple of (matching fact or None, whether the name fallback was used)
    """
    for fact in facts:
        if fact.unit_id is not None:
            if fact.unit_id == unit.svg_id:
                return fact, False
        elif (
            fact.unit_name is not None
            and fact.unit_name == unit.unit_name
            and fact.floor_number == unit.floor_number
        ):
            return fact, True
    return None, False


def resolve_display(
    units: Sequence[UnitRecord],
    facts: Iterable[OccupancyFact],
) -> FloorDisplayState:
    """Resolve the display status of every unit on a floor.

    Args:
        units: Unit records of one floor
        facts: Active occupancy facts (any floor)

    Returns:
        FloorDisplayState with per-unit status and the occupancy rate
    """
    facts = list(facts)
    displays: list[UnitDisplay] = []
    occupied = 0

    for unit in units:
        fact, by_name = match_fact(unit, facts)
        if fact is None:
            displays.append(UnitDisplay(
                svg_id=unit.svg_id,
                unit_name=unit.unit_name,
                payment_status=DisplayStatus.VACANT,
                rent_amount=unit.rent_amount,
            ))
            continue

        if by_name:
            # Name matches can hide two records sharing a label
            log.warning(
                "occupancy_name_fallback",
                svg_id=unit.svg_id,
                unit_name=unit.unit_name,
                fact_unit_id=fact.unit_id,
                tenant_ref=fact.tenant_ref,
            )
        occupied += 1
        status = fact.payment_status or PaymentStatus.DUE
        displays.append(UnitDisplay(
            svg_id=unit.svg_id,
            unit_name=unit.unit_name,
            payment_status=DisplayStatus(status.value),
            tenant_ref=fact.tenant_ref,
            rent_amount=fact.rent_amount,
        ))

    floor_number = units[0].floor_number if units else None
    state = FloorDisplayState(
        floor_number=floor_number,
        units=displays,
        occupied_units=occupied,
        occupancy_rate=percent(occupied, len(units)),
    )
    log.debug(
        "floor_display_resolved",
        floor_number=floor_number,
        total=state.total_units,
        occupied=occupied,
        rate=state.occupancy_rate,
    )
    return state


def summarize_property(states: Iterable[FloorDisplayState]) -> PropertySummary:
    """Totals across the floors of one property."""
    states = list(states)
    total_units = sum(s.total_units for s in states)
    occupied = sum(s.occupied_units for s in states)
    total_rent = sum(s.total_rent for s in states)
    average_rent = int(total_rent / total_units + 0.5) if total_units else 0

    return PropertySummary(
        floors=len(states),
        total_units=total_units,
        occupied_units=occupied,
        occupancy_rate=percent(occupied, total_units),
        total_rent=total_rent,
        average_rent=average_rent,
    )
