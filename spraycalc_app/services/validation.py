"""
Input boundary for the spray calculation engine.

Raw text from the input form is checked and parsed here, before the engine
runs. Problems are reported as InvalidInputError carrying the names of the
fields to flag, so the form can highlight exactly those inputs.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, TYPE_CHECKING

from spraycalc_app.models import AreaUnit, CalculationInput, SprayCalculation
from spraycalc_app.services.formatting import POLISH_NUMBERS, NumberFormat, format_quantity

if TYPE_CHECKING:
    from spraycalc_app.models import FavoriteConfiguration

FIELD_NAMES = ("field_area", "spray_rate", "chemical_rate", "tank_capacity")

# Spaces (plain, no-break or narrow no-break) may only group thousands: "12 500,5"
_GROUP_SEPARATORS = " \u00a0\u202f"
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d{1,3}(?:[ \u00a0\u202f]\d{3})+|\d+)(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)


class InvalidInputReason(Enum):
    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    NON_FINITE_RESULT = "non_finite_result"


@dataclass(slots=True)
class InvalidInputError(Exception):
    message: str
    reason: InvalidInputReason
    fields: List[str] = field(default_factory=list)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True)
class CalculationForm:
    """Raw text of the four input fields plus the selected area unit."""

    field_area: str = ""
    spray_rate: str = ""
    chemical_rate: str = ""
    tank_capacity: str = ""
    area_unit: AreaUnit = AreaUnit.HECTARES

    @classmethod
    def from_favorite(
        cls,
        favorite: "FavoriteConfiguration",
        number_format: NumberFormat = POLISH_NUMBERS,
        field_area: str = "",
    ) -> "CalculationForm":
        """Prefill rates, capacity and unit from a favorite; the field area stays as given."""
        # No grouping, so the text parses back even when "," groups thousands
        fmt = NumberFormat(decimal_separator=number_format.decimal_separator, grouping_separator="")
        return cls(
            field_area=field_area,
            spray_rate=format_quantity(favorite.spray_rate, fmt),
            chemical_rate=format_quantity(favorite.chemical_rate, fmt),
            tank_capacity=format_quantity(favorite.tank_capacity, fmt),
            area_unit=favorite.area_unit,
        )

    def texts(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in FIELD_NAMES}


def parse_number(text: str) -> float | None:
    """
    Parse a decimal number typed by the user.

    A comma is accepted as decimal separator and surrounding whitespace is
    ignored. Spaces inside the number are accepted only as thousands
    grouping ("1 000", not "10 00"). Returns None for anything that is not a
    finite number.
    """
    normalized = text.strip().replace(",", ".")
    if not _NUMBER_RE.fullmatch(normalized):
        return None
    value = float(normalized.translate({ord(c): None for c in _GROUP_SEPARATORS}))
    if not math.isfinite(value):
        return None
    return value


def parse_calculation_input(form: CalculationForm) -> CalculationInput:
    """
    Validate the form and build the engine input.

    Empty fields are reported first, then fields that are not numbers, then
    values the engine cannot turn into a usable result (non-positive tank
    capacity or spray rate, negative area or chemical rate).
    """
    texts = form.texts()

    empty = [name for name, text in texts.items() if not text.strip()]
    if empty:
        raise InvalidInputError("All fields are required.", InvalidInputReason.EMPTY, empty)

    values: dict[str, float] = {}
    invalid: List[str] = []
    for name, text in texts.items():
        value = parse_number(text)
        if value is None:
            invalid.append(name)
        else:
            values[name] = value
    if invalid:
        raise InvalidInputError(
            "Fields must contain finite numbers.", InvalidInputReason.NOT_A_NUMBER, invalid
        )

    out_of_range: List[str] = []
    if values["field_area"] < 0:
        out_of_range.append("field_area")
    if values["spray_rate"] <= 0:
        out_of_range.append("spray_rate")
    if values["chemical_rate"] < 0:
        out_of_range.append("chemical_rate")
    if values["tank_capacity"] <= 0:
        out_of_range.append("tank_capacity")
    if out_of_range:
        raise InvalidInputError(
            "Tank capacity and spray rate must be greater than zero; "
            "area and chemical rate must not be negative.",
            InvalidInputReason.OUT_OF_RANGE,
            out_of_range,
        )

    return CalculationInput(
        field_area=values["field_area"],
        area_unit=form.area_unit,
        spray_rate=values["spray_rate"],
        chemical_rate=values["chemical_rate"],
        tank_capacity=values["tank_capacity"],
    )


def ensure_displayable(result: SprayCalculation) -> SprayCalculation:
    """Reject a result whose derived fields overflowed or divided by zero."""
    if not result.is_finite:
        raise InvalidInputError(
            "Inputs produce a result that cannot be displayed.",
            InvalidInputReason.NON_FINITE_RESULT,
            list(FIELD_NAMES),
        )
    return result
