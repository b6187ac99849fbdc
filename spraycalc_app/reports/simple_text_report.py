"""
Plain-text summary of a spray calculation, for sharing or the clipboard.
"""

from __future__ import annotations

from spraycalc_app.config.labels import Labels
from spraycalc_app.models import SprayCalculation
from spraycalc_app.services.formatting import describe_tank_fills, format_quantity, format_timestamp


def build_calculation_summary_text(calculation: SprayCalculation, labels: Labels) -> str:
    fmt = labels.numbers

    def q(value: float) -> str:
        return format_quantity(value, fmt)

    lines: list[str] = []
    lines.append(labels.app_title)
    lines.append(format_timestamp(calculation.created_at))
    lines.append("")
    lines.append(f"{labels.field_area}: {q(calculation.field_area)} {calculation.area_unit.symbol}")
    lines.append(f"{labels.spray_rate}: {q(calculation.spray_rate)} l/ha")
    lines.append(f"{labels.chemical_rate}: {q(calculation.chemical_rate)} l/ha")
    lines.append(f"{labels.tank_capacity}: {q(calculation.tank_capacity)} l")
    lines.append("")
    lines.append(f"{labels.working_fluid}: {q(calculation.total_working_fluid)} l")
    lines.append(f"{labels.chemical_to_buy}: {q(calculation.total_chemical)} l")
    lines.append(
        f"{labels.tank_fills}: "
        f"{describe_tank_fills(calculation, labels.full_tanks, labels.partial_tank)}"
    )
    lines.append("")
    lines.append(
        f"{labels.full_tank_composition}: {labels.water} {q(calculation.water_per_full_tank)} l"
        f" + {labels.chemical} {q(calculation.chemical_per_tank)} l"
    )
    if calculation.has_partial_tank:
        lines.append(
            f"{labels.partial_tank_composition}: {labels.water} {q(calculation.water_for_partial_tank)} l"
            f" + {labels.chemical} {q(calculation.chemical_for_partial_tank)} l"
        )
    return "\n".join(lines)
