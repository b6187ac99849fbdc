"""Tests for the calculator and favorites services."""

from __future__ import annotations

import uuid
from typing import List, Optional

import pytest

from spraycalc_app.models import AreaUnit, FavoriteConfiguration, SprayCalculation
from spraycalc_app.repositories.favorite_repository import FavoriteRepository
from spraycalc_app.repositories.history_repository import HistoryRepository
from spraycalc_app.services.calculator_service import (
    CalculatorService,
    FavoritesService,
    FavoriteValidationError,
)
from spraycalc_app.services.formatting import ENGLISH_NUMBERS
from spraycalc_app.services.validation import CalculationForm, InvalidInputError


class ListHistory:
    """Minimal in-memory history, to check services only rely on the store methods."""

    def __init__(self) -> None:
        self.items: List[SprayCalculation] = []

    def append(self, calculation: SprayCalculation) -> SprayCalculation:
        self.items.insert(0, calculation)
        return calculation

    def list_recent(self) -> List[SprayCalculation]:
        return list(self.items)

    def get(self, calculation_id: uuid.UUID) -> Optional[SprayCalculation]:
        return next((c for c in self.items if c.id == calculation_id), None)

    def delete(self, calculation_id: uuid.UUID) -> None:
        self.items = [c for c in self.items if c.id != calculation_id]

    def clear(self) -> None:
        self.items = []


class TestCalculatorService:
    def test_calculate_records_history(self, db_session, valid_form):
        svc = CalculatorService(HistoryRepository(db_session))
        result = svc.calculate(valid_form)
        assert result.full_tanks == 4
        assert result.has_partial_tank
        assert [c.id for c in svc.history()] == [result.id]
        assert svc.get_history_entry(result.id) == result

    def test_invalid_input_is_not_recorded(self, db_session):
        svc = CalculatorService(HistoryRepository(db_session))
        with pytest.raises(InvalidInputError) as exc_info:
            svc.calculate(CalculationForm(field_area="10", spray_rate="200", chemical_rate="2"))
        assert exc_info.value.fields == ["tank_capacity"]
        assert svc.history() == []

    def test_overflowing_input_is_not_recorded(self):
        history = ListHistory()
        svc = CalculatorService(history)
        form = CalculationForm(field_area="1e200", spray_rate="1e200", chemical_rate="1", tank_capacity="1000")
        with pytest.raises(InvalidInputError):
            svc.calculate(form)
        assert history.items == []

    def test_delete_and_clear_history(self, db_session, valid_form):
        svc = CalculatorService(HistoryRepository(db_session))
        first = svc.calculate(valid_form)
        second = svc.calculate(valid_form)
        svc.delete_history_entry(first.id)
        assert [c.id for c in svc.history()] == [second.id]
        svc.clear_history()
        assert svc.history() == []

    def test_works_with_any_history_store(self, valid_form):
        history = ListHistory()
        svc = CalculatorService(history)
        result = svc.calculate(valid_form)
        assert history.items == [result]


class TestFavoritesService:
    def test_save_from_calculation(self, db_session, scenario_b):
        svc = FavoritesService(FavoriteRepository(db_session))
        fav = svc.save_from_calculation(scenario_b, "  Wheat T1  ")
        assert fav.name == "Wheat T1"
        assert svc.list_favorites() == [fav]

    def test_empty_name_rejected(self, db_session, scenario_b):
        svc = FavoritesService(FavoriteRepository(db_session))
        with pytest.raises(FavoriteValidationError):
            svc.save_from_calculation(scenario_b, "   ")
        assert svc.list_favorites() == []

    def test_delete_favorite(self, db_session, scenario_a, scenario_b):
        svc = FavoritesService(FavoriteRepository(db_session))
        a = svc.save_from_calculation(scenario_a, "A")
        b = svc.save_from_calculation(scenario_b, "B")
        svc.delete_favorite(a.id)
        assert [f.id for f in svc.list_favorites()] == [b.id]

    def test_form_for_favorite_feeds_calculation(self, db_session):
        favorites = FavoritesService(FavoriteRepository(db_session))
        calculator = CalculatorService(HistoryRepository(db_session))
        fav = FavoriteConfiguration(
            name="Orchard",
            spray_rate=1000.0,
            chemical_rate=2.5,
            tank_capacity=1500.0,
            area_unit=AreaUnit.ARES,
        )
        form = favorites.form_for(fav, ENGLISH_NUMBERS, field_area="250")
        result = calculator.calculate(form)
        assert result.field_area_in_hectares == pytest.approx(2.5)
        assert result.total_working_fluid == pytest.approx(2500.0)
        assert result.full_tanks == 1
        assert result.partial_tank_volume == pytest.approx(1000.0)
