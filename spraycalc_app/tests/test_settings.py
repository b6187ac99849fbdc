"""Tests for settings, preferences, labels and application bootstrap."""

from __future__ import annotations

import pytest

from spraycalc_app.config.labels import Language, labels_for
from spraycalc_app.config.settings import Settings, load_language, save_language
from spraycalc_app.main import bootstrap
from spraycalc_app.services.formatting import ENGLISH_NUMBERS, POLISH_NUMBERS
from spraycalc_app.services.validation import CalculationForm


class TestSettings:
    def test_for_directory(self, tmp_path):
        settings = Settings.for_directory(tmp_path / "data")
        assert settings.data_dir.is_dir()
        assert settings.db_path == tmp_path / "data" / "spraycalc.db"
        assert settings.preferences_path.parent == settings.data_dir

    def test_language_defaults_to_polish(self, tmp_path):
        assert load_language(Settings.for_directory(tmp_path)) == Language.POLISH

    def test_language_round_trip(self, tmp_path):
        settings = Settings.for_directory(tmp_path)
        save_language(settings, Language.ENGLISH)
        assert load_language(settings) == Language.ENGLISH

    @pytest.mark.parametrize("content", ["not json", "[]", '{"language": "de"}'])
    def test_bad_preferences_fall_back(self, tmp_path, content):
        settings = Settings.for_directory(tmp_path)
        settings.preferences_path.write_text(content, encoding="utf-8")
        assert load_language(settings) == Language.POLISH


class TestLabels:
    def test_number_formats(self):
        assert labels_for(Language.POLISH).numbers == POLISH_NUMBERS
        assert labels_for(Language.ENGLISH).numbers == ENGLISH_NUMBERS

    def test_tank_fill_words(self):
        assert labels_for(Language.POLISH).full_tanks == "pełne"
        assert labels_for(Language.ENGLISH).partial_tank == "partial"

    def test_display_names(self):
        assert Language.POLISH.display_name == "Polski"
        assert Language.ENGLISH.display_name == "English"


class TestBootstrap:
    def test_end_to_end(self, tmp_path):
        app = bootstrap(Settings.for_directory(tmp_path), configure_logging=False)
        try:
            assert app.language == Language.POLISH
            form = CalculationForm(field_area="500", spray_rate="200", chemical_rate="2",
                                   tank_capacity="1000")
            result = app.calculator.calculate(form)
            assert result.total_working_fluid == pytest.approx(100000.0)

            favorite = app.favorites.save_from_calculation(result, "Maize")
            assert app.favorites.list_favorites() == [favorite]

            app.set_language(Language.ENGLISH)
            assert app.labels.language == Language.ENGLISH
            assert load_language(app.settings) == Language.ENGLISH

            pdf_path = app.export_pdf(result)
            assert pdf_path.read_bytes().startswith(b"%PDF")
            xlsx_path = app.export_history(tmp_path / "history.xlsx")
            assert xlsx_path.exists()
        finally:
            app.close()

    def test_history_survives_restart(self, tmp_path):
        settings = Settings.for_directory(tmp_path)
        app = bootstrap(settings, configure_logging=False)
        result = app.calculator.calculate(
            CalculationForm(field_area="1", spray_rate="200", chemical_rate="2", tank_capacity="150")
        )
        app.close()

        app = bootstrap(settings, configure_logging=False)
        try:
            assert app.calculator.history() == [result]
        finally:
            app.close()
