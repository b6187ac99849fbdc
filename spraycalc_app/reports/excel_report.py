"""
Excel export of the calculation history.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..services.formatting import describe_tank_fills_with_volume, format_timestamp

if TYPE_CHECKING:
    from ..config.labels import Labels
    from ..models import SprayCalculation


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _stripe_rows(ws, start_row: int = 2) -> None:
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        for cell in row:
            if cell.row % 2 == 0:
                cell.fill = stripe_fill


def history_columns(labels: "Labels") -> list[str]:
    """Sheet headers; units go in the header so cells stay numeric."""
    return [
        labels.date,
        labels.field_area,
        labels.area_unit,
        f"{labels.spray_rate} (l/ha)",
        f"{labels.chemical_rate} (l/ha)",
        f"{labels.tank_capacity} (l)",
        f"{labels.working_fluid} (l)",
        f"{labels.chemical_to_buy} (l)",
        labels.tank_fills,
        f"{labels.full_tank_composition}: {labels.water} (l)",
        f"{labels.full_tank_composition}: {labels.chemical} (l)",
        f"{labels.partial_tank_composition}: {labels.water} (l)",
        f"{labels.partial_tank_composition}: {labels.chemical} (l)",
    ]


def build_history_rows(calculations: Iterable["SprayCalculation"], labels: "Labels") -> list[list]:
    """One row per calculation, in history_columns() order, quantities rounded to two decimals."""
    rows: list[list] = []
    for calc in calculations:
        partial = calc.has_partial_tank
        rows.append(
            [
                format_timestamp(calc.created_at),
                round(calc.field_area, 2),
                calc.area_unit.symbol,
                round(calc.spray_rate, 2),
                round(calc.chemical_rate, 2),
                round(calc.tank_capacity, 2),
                round(calc.total_working_fluid, 2),
                round(calc.total_chemical, 2),
                describe_tank_fills_with_volume(calc, labels.full_tanks, labels.partial_tank, labels.numbers),
                round(calc.water_per_full_tank, 2),
                round(calc.chemical_per_tank, 2),
                round(calc.water_for_partial_tank, 2) if partial else None,
                round(calc.chemical_for_partial_tank, 2) if partial else None,
            ]
        )
    return rows


def export_history_to_excel(
    filepath: Path,
    calculations: Iterable["SprayCalculation"],
    labels: "Labels",
) -> None:
    """Write the given calculations (usually the history, newest first) to one sheet."""
    rows = build_history_rows(calculations, labels)
    df = pd.DataFrame(rows, columns=history_columns(labels))
    sheet_name = labels.history[:31]

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]
        ws.column_dimensions["A"].width = 18  # Date
        for col_idx in range(2, ws.max_column + 1):
            ws.column_dimensions[get_column_letter(col_idx)].width = 16
        _style_header(ws)
        _stripe_rows(ws)
        ws.freeze_panes = "A2"
