"""Tests for PDF, Excel and text reports."""

from __future__ import annotations

import pandas as pd
import pytest
from PyPDF2 import PdfReader

from spraycalc_app.config.labels import Language, labels_for
from spraycalc_app.reports import (
    build_calculation_summary_text,
    export_calculation_to_pdf,
    export_history_to_excel,
)
from spraycalc_app.reports.excel_report import build_history_rows, history_columns


@pytest.fixture
def english():
    return labels_for(Language.ENGLISH)


def _pdf_text(path) -> str:
    reader = PdfReader(str(path))
    return "\n".join(page.extract_text() for page in reader.pages)


class TestTextReport:
    def test_partial_tank_section_present(self, scenario_b, english):
        text = build_calculation_summary_text(scenario_b, english)
        assert "Working fluid: 4,500 l" in text
        assert "Chemical to buy: 45 l" in text
        assert "Tank fills: 4 full + 1 partial" in text
        assert "Full tank composition: Water 990 l + Chemical 10 l" in text
        assert "Partial tank composition: Water 495 l + Chemical 5 l" in text

    def test_no_partial_section_without_partial_tank(self, scenario_a, english):
        text = build_calculation_summary_text(scenario_a, english)
        assert "Tank fills: 2 full" in text
        assert "Partial tank composition" not in text

    def test_polish_labels_and_numbers(self, scenario_b):
        text = build_calculation_summary_text(scenario_b, labels_for(Language.POLISH))
        assert text.startswith("Kalkulator Oprysku")
        assert "Ciecz robocza: 4 500 l" in text
        assert "4 pełne + 1 częściowe" in text


class TestPdfReport:
    @pytest.mark.parametrize("language", list(Language))
    def test_writes_pdf(self, tmp_path, scenario_b, language):
        path = tmp_path / "report.pdf"
        export_calculation_to_pdf(path, scenario_b, labels_for(language))
        data = path.read_bytes()
        assert data.startswith(b"%PDF")

    def test_without_partial_tank(self, tmp_path, scenario_a, english):
        path = tmp_path / "report.pdf"
        export_calculation_to_pdf(path, scenario_a, english)
        text = _pdf_text(path)
        assert "Full tank composition" in text
        assert "Partial tank composition" not in text

    def test_polish_letters_are_embedded(self, tmp_path, scenario_b):
        path = tmp_path / "raport.pdf"
        export_calculation_to_pdf(path, scenario_b, labels_for(Language.POLISH))
        text = _pdf_text(path)
        assert "Pojemność" in text
        assert "środka" in text
        assert "częściowe" in text
        assert "pełne" in text


class TestExcelReport:
    def test_rows_follow_columns(self, scenario_a, scenario_b, english):
        rows = build_history_rows([scenario_b, scenario_a], english)
        columns = history_columns(english)
        assert all(len(row) == len(columns) for row in rows)
        b_row = dict(zip(columns, rows[0]))
        assert b_row["Working fluid (l)"] == 4500.0
        assert b_row["Tank fills"] == "4 full + 1 partial (500 l)"
        assert dict(zip(columns, rows[1]))["Tank fills"] == "2 full"
        assert b_row["Partial tank composition: Water (l)"] == 495.0
        a_row = dict(zip(columns, rows[1]))
        assert a_row["Partial tank composition: Water (l)"] is None

    def test_export_and_read_back(self, tmp_path, scenario_a, scenario_b, english):
        path = tmp_path / "history.xlsx"
        export_history_to_excel(path, [scenario_b, scenario_a], english)
        df = pd.read_excel(path, sheet_name=english.history)
        assert list(df.columns) == history_columns(english)
        assert len(df) == 2
        assert df["Chemical to buy (l)"].tolist() == [45.0, 20.0]

    def test_export_empty_history(self, tmp_path, english):
        path = tmp_path / "history.xlsx"
        export_history_to_excel(path, [], english)
        df = pd.read_excel(path, sheet_name=english.history)
        assert list(df.columns) == history_columns(english)
        assert df.empty
