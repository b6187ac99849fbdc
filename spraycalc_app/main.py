"""
Composition root for the spray calculator.

Wires settings, logging, the SQLite stores and the services together for a
front end (or a test) to drive. There is no UI or command line here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.orm import Session

from spraycalc_app.config.labels import Labels, Language, labels_for
from spraycalc_app.config.settings import Settings, init_logging, load_language, save_language
from spraycalc_app.models import SprayCalculation
from spraycalc_app.reports import export_calculation_to_pdf, export_history_to_excel
from spraycalc_app.repositories import FavoriteRepository, HistoryRepository, init_database
from spraycalc_app.services.calculator_service import CalculatorService, FavoritesService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SprayCalculatorApp:
    settings: Settings
    session: Session
    calculator: CalculatorService
    favorites: FavoritesService
    language: Language

    @property
    def labels(self) -> Labels:
        return labels_for(self.language)

    def set_language(self, language: Language) -> None:
        self.language = language
        save_language(self.settings, language)

    def export_pdf(self, calculation: SprayCalculation, filepath: Path | None = None) -> Path:
        """Write the PDF report; defaults to the data directory."""
        filepath = filepath or self.settings.data_dir / "spray_calculation.pdf"
        export_calculation_to_pdf(filepath, calculation, self.labels)
        logger.info("Exported calculation %s to %s", calculation.id, filepath)
        return filepath

    def export_history(self, filepath: Path | None = None) -> Path:
        filepath = filepath or self.settings.data_dir / "spray_history.xlsx"
        export_history_to_excel(filepath, self.calculator.history(), self.labels)
        logger.info("Exported history to %s", filepath)
        return filepath

    def close(self) -> None:
        self.session.close()


def bootstrap(settings: Settings | None = None, configure_logging: bool = True) -> SprayCalculatorApp:
    """Create the application services backed by the SQLite database in settings."""
    settings = settings or Settings.default()
    if configure_logging:
        init_logging(settings)

    session_factory = init_database(settings.db_path)
    session = session_factory()

    return SprayCalculatorApp(
        settings=settings,
        session=session,
        calculator=CalculatorService(HistoryRepository(session)),
        favorites=FavoritesService(FavoriteRepository(session)),
        language=load_language(settings),
    )
