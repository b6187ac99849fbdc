"""
PDF report generation for a spray calculation.

The report only lays out values the calculation already carries; it is
printed black on white regardless of any UI theme.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import HRFlowable, SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from ..services.formatting import describe_tank_fills, format_quantity, format_timestamp

if TYPE_CHECKING:
    from ..config.labels import Labels
    from ..models import SprayCalculation

# Lato carries the Polish letters the built-in PDF fonts lack
REPORT_FONT = "Lato"
_FONT_FILE = Path(__file__).resolve().parent / "fonts" / "Lato-Regular.ttf"


def _register_report_font() -> str:
    if REPORT_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(REPORT_FONT, str(_FONT_FILE)))
    return REPORT_FONT


def _values_table(rows: list[list[str]], font: str) -> Table:
    table = Table(rows, colWidths=[8 * cm, 7 * cm])
    table.setStyle(
        TableStyle(
            [
                ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
                ("FONTNAME", (0, 0), (-1, -1), font),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("FONTSIZE", (1, 0), (1, -1), 11),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ("LEFTPADDING", (0, 0), (-1, -1), 0),
            ]
        )
    )
    return table


def _composition_line(labels: "Labels", water: float, chemical: float) -> str:
    fmt = labels.numbers
    return (
        f"{labels.water}: {format_quantity(water, fmt)} l + "
        f"{labels.chemical}: {format_quantity(chemical, fmt)} l"
    )


def export_calculation_to_pdf(
    filepath: Path,
    calculation: "SprayCalculation",
    labels: "Labels",
) -> None:
    """
    Generate a one-page A4 report: parameters, results, tank compositions.

    The partial tank composition is included only when the calculation has
    a partial tank.
    """
    fmt = labels.numbers
    font = _register_report_font()
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
        title=labels.app_title,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontName=font,
        fontSize=18,
        textColor=colors.black,
    )
    heading_style = ParagraphStyle(
        "SectionHeading",
        parent=styles["Heading3"],
        fontName=font,
        textColor=colors.black,
    )
    muted_style = ParagraphStyle(
        "Muted",
        parent=styles["Normal"],
        fontName=font,
        textColor=colors.grey,
    )
    footer_style = ParagraphStyle(
        "Footer",
        parent=styles["Normal"],
        fontName=font,
        fontSize=8,
        textColor=colors.grey,
    )
    body_style = ParagraphStyle(
        "Body",
        parent=styles["Normal"],
        fontName=font,
        textColor=colors.black,
    )

    story = []
    story.append(Paragraph(labels.app_title, title_style))
    story.append(HRFlowable(width="100%", color=colors.black, thickness=0.5))
    story.append(Spacer(1, 0.3 * cm))
    story.append(Paragraph(format_timestamp(calculation.created_at), muted_style))
    story.append(Spacer(1, 0.4 * cm))

    story.append(Paragraph(labels.parameters, heading_style))
    story.append(
        _values_table(
            [
                [labels.field_area, f"{format_quantity(calculation.field_area, fmt)} {calculation.area_unit.symbol}"],
                [labels.spray_rate, f"{format_quantity(calculation.spray_rate, fmt)} l/ha"],
                [labels.chemical_rate, f"{format_quantity(calculation.chemical_rate, fmt)} l/ha"],
                [labels.tank_capacity, f"{format_quantity(calculation.tank_capacity, fmt)} l"],
            ],
            font,
        )
    )
    story.append(Spacer(1, 0.3 * cm))
    story.append(HRFlowable(width="100%", color=colors.black, thickness=0.5))

    story.append(Paragraph(labels.results, heading_style))
    story.append(
        _values_table(
            [
                [labels.working_fluid, f"{format_quantity(calculation.total_working_fluid, fmt)} l"],
                [labels.chemical_to_buy, f"{format_quantity(calculation.total_chemical, fmt)} l"],
                [labels.tank_fills, describe_tank_fills(calculation, labels.full_tanks, labels.partial_tank)],
            ],
            font,
        )
    )
    story.append(Spacer(1, 0.3 * cm))
    story.append(HRFlowable(width="100%", color=colors.black, thickness=0.5))

    story.append(Paragraph(labels.full_tank_composition, heading_style))
    story.append(
        Paragraph(
            _composition_line(labels, calculation.water_per_full_tank, calculation.chemical_per_tank),
            body_style,
        )
    )
    if calculation.has_partial_tank:
        story.append(Paragraph(labels.partial_tank_composition, heading_style))
        story.append(
            Paragraph(
                _composition_line(
                    labels, calculation.water_for_partial_tank, calculation.chemical_for_partial_tank
                ),
                body_style,
            )
        )

    story.append(Spacer(1, 1.0 * cm))
    story.append(HRFlowable(width="100%", color=colors.grey, thickness=0.5))
    story.append(Paragraph(labels.pdf_signature, footer_style))
    doc.build(story)
