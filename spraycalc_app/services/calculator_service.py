"""
Business logic tying the input form, the engine and the stores together.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import List

from spraycalc_app.models import FavoriteConfiguration, SprayCalculation
from spraycalc_app.repositories.base import FavoritesStore, HistoryStore
from spraycalc_app.services.formatting import POLISH_NUMBERS, NumberFormat, describe_tank_fills
from spraycalc_app.services.spray_engine import compute
from spraycalc_app.services.validation import (
    CalculationForm,
    ensure_displayable,
    parse_calculation_input,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FavoriteValidationError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class CalculatorService:
    """Runs calculations from form input and records them in the history."""

    def __init__(self, history: HistoryStore) -> None:
        self._history = history

    def calculate(self, form: CalculationForm) -> SprayCalculation:
        """
        Validate the form, compute the result and append it to the history.

        Raises InvalidInputError before anything is computed or stored when a
        field is empty, not a number or out of range.
        """
        calc_input = parse_calculation_input(form)
        result = ensure_displayable(compute(calc_input))
        self._history.append(result)
        logger.info(
            "Calculation %s: %.2f l working fluid, %.2f l chemical, %s tank fills (%s)",
            result.id,
            result.total_working_fluid,
            result.total_chemical,
            result.total_tank_fills,
            describe_tank_fills(result, "full", "partial"),
        )
        return result

    def history(self) -> List[SprayCalculation]:
        return self._history.list_recent()

    def get_history_entry(self, calculation_id: uuid.UUID) -> SprayCalculation | None:
        return self._history.get(calculation_id)

    def delete_history_entry(self, calculation_id: uuid.UUID) -> None:
        self._history.delete(calculation_id)

    def clear_history(self) -> None:
        self._history.clear()
        logger.info("History cleared")


class FavoritesService:
    """Saves and reuses named rate/capacity configurations."""

    def __init__(self, favorites: FavoritesStore) -> None:
        self._favorites = favorites

    def save_from_calculation(self, calculation: SprayCalculation, name: str) -> FavoriteConfiguration:
        name = name.strip()
        if not name:
            raise FavoriteValidationError("Configuration name is required.")
        favorite = FavoriteConfiguration.from_calculation(calculation, name)
        self._favorites.add(favorite)
        logger.info("Saved favorite %r (%s)", favorite.name, favorite.id)
        return favorite

    def list_favorites(self) -> List[FavoriteConfiguration]:
        return self._favorites.list_all()

    def delete_favorite(self, favorite_id: uuid.UUID) -> None:
        self._favorites.delete(favorite_id)

    def form_for(
        self,
        favorite: FavoriteConfiguration,
        number_format: NumberFormat = POLISH_NUMBERS,
        field_area: str = "",
    ) -> CalculationForm:
        """Input form prefilled from a favorite, ready for the user to enter the field area."""
        return CalculationForm.from_favorite(favorite, number_format, field_area=field_area)
