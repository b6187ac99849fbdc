"""
Spray calculation engine.

Turns a validated CalculationInput into an immutable SprayCalculation. The
engine is a pure function: it performs no validation of its own, never
raises for finite inputs and touches no shared state, so it is safe to call
from any thread. Degenerate inputs (zero tank capacity, zero rates) yield
non-finite or zero derived fields; rejecting those is up to the caller
(see services.validation.ensure_displayable).
"""

from __future__ import annotations

import logging

from spraycalc_app.models import AreaUnit, CalculationInput, SprayCalculation

logger = logging.getLogger(__name__)


def compute(calc_input: CalculationInput) -> SprayCalculation:
    """Build the result record for one calculation request."""
    result = SprayCalculation(
        field_area=calc_input.field_area,
        area_unit=calc_input.area_unit,
        spray_rate=calc_input.spray_rate,
        chemical_rate=calc_input.chemical_rate,
        tank_capacity=calc_input.tank_capacity,
    )
    logger.debug(
        "Computed %s: %.4f ha, fluid %.3f l, chemical %.3f l, %s full tank(s), partial %.3f l",
        result.id,
        result.field_area_in_hectares,
        result.total_working_fluid,
        result.total_chemical,
        result.full_tanks,
        result.partial_tank_volume,
    )
    return result


def calculate(
    field_area: float,
    area_unit: AreaUnit,
    spray_rate: float,
    chemical_rate: float,
    tank_capacity: float,
) -> SprayCalculation:
    """Keyword-friendly wrapper around compute()."""
    return compute(
        CalculationInput(
            field_area=field_area,
            area_unit=area_unit,
            spray_rate=spray_rate,
            chemical_rate=chemical_rate,
            tank_capacity=tank_capacity,
        )
    )
