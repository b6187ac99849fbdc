"""
Display labels for reports and tank-fill descriptions, per language.

Only data lives here: the engine never reads labels, and the report builders
receive a Labels instance from their caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spraycalc_app.services.formatting import ENGLISH_NUMBERS, POLISH_NUMBERS, NumberFormat


class Language(Enum):
    POLISH = "pl"
    ENGLISH = "en"

    @property
    def display_name(self) -> str:
        return "Polski" if self is Language.POLISH else "English"


@dataclass(frozen=True, slots=True)
class Labels:
    language: Language
    numbers: NumberFormat

    app_title: str
    parameters: str
    results: str

    field_area: str
    spray_rate: str
    chemical_rate: str
    tank_capacity: str
    area_unit: str

    working_fluid: str
    chemical: str
    chemical_to_buy: str
    water: str
    tank_fills: str
    full_tanks: str
    partial_tank: str
    full_tank_composition: str
    partial_tank_composition: str

    history: str
    favorites: str
    date: str
    configuration_name: str

    empty_field_error: str
    invalid_value_error: str
    pdf_signature: str


_POLISH = Labels(
    language=Language.POLISH,
    numbers=POLISH_NUMBERS,
    app_title="Kalkulator Oprysku",
    parameters="Parametry",
    results="Wyniki",
    field_area="Powierzchnia pola",
    spray_rate="Dawka cieczy",
    chemical_rate="Dawka środka",
    tank_capacity="Pojemność opryskiwacza",
    area_unit="Jednostka powierzchni",
    working_fluid="Ciecz robocza",
    chemical="Środek",
    chemical_to_buy="Środek do kupienia",
    water="Woda",
    tank_fills="Napełnienia opryskiwacza",
    full_tanks="pełne",
    partial_tank="częściowe",
    full_tank_composition="Skład pełnego zbiornika",
    partial_tank_composition="Skład niepełnego zbiornika",
    history="Historia",
    favorites="Ulubione",
    date="Data",
    configuration_name="Nazwa konfiguracji",
    empty_field_error="Uzupełnij wszystkie pola",
    invalid_value_error="Wprowadź poprawne wartości",
    pdf_signature="Wygenerowano w aplikacji Kalkulator Oprysku",
)

_ENGLISH = Labels(
    language=Language.ENGLISH,
    numbers=ENGLISH_NUMBERS,
    app_title="Spray Calculator",
    parameters="Parameters",
    results="Results",
    field_area="Field area",
    spray_rate="Spray rate",
    chemical_rate="Chemical rate",
    tank_capacity="Tank capacity",
    area_unit="Area unit",
    working_fluid="Working fluid",
    chemical="Chemical",
    chemical_to_buy="Chemical to buy",
    water="Water",
    tank_fills="Tank fills",
    full_tanks="full",
    partial_tank="partial",
    full_tank_composition="Full tank composition",
    partial_tank_composition="Partial tank composition",
    history="History",
    favorites="Favorites",
    date="Date",
    configuration_name="Configuration name",
    empty_field_error="Fill in all fields",
    invalid_value_error="Enter valid values",
    pdf_signature="Generated in the Spray Calculator app",
)

_LABELS = {
    Language.POLISH: _POLISH,
    Language.ENGLISH: _ENGLISH,
}


def labels_for(language: Language) -> Labels:
    return _LABELS[language]
