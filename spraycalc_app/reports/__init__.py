"""
Reporting utilities (PDF/Excel/text) for the spray calculator.
"""

from spraycalc_app.reports.simple_text_report import build_calculation_summary_text
from spraycalc_app.reports.pdf_report import export_calculation_to_pdf
from spraycalc_app.reports.excel_report import export_history_to_excel

__all__ = [
    "build_calculation_summary_text",
    "export_calculation_to_pdf",
    "export_history_to_excel",
]
