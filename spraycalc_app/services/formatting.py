"""
Display formatting for calculation results.

Pure functions over an already-computed SprayCalculation; nothing here
changes or recomputes a result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from spraycalc_app.config.limits import QUANTITY_DECIMALS

if TYPE_CHECKING:
    from spraycalc_app.models import SprayCalculation


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Separators used when showing quantities to the user."""

    decimal_separator: str
    grouping_separator: str


# "4 500,5"
POLISH_NUMBERS = NumberFormat(decimal_separator=",", grouping_separator=" ")
ENGLISH_NUMBERS = NumberFormat(decimal_separator=".", grouping_separator=",")


def format_quantity(value: float, number_format: NumberFormat = POLISH_NUMBERS) -> str:
    """
    Format a quantity with at most two decimals and grouped thousands.

    Trailing zeros are dropped ("10", "2,5", "4 500,25"). Values that round to
    zero never carry a minus sign. Non-finite values are shown as "NaN", "∞"
    or "-∞" so a degenerate result is visible rather than hidden.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    text = f"{abs(value):,.{QUANTITY_DECIMALS}f}"
    integer_part, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")

    integer_part = integer_part.replace(",", number_format.grouping_separator)
    out = integer_part
    if fraction:
        out += number_format.decimal_separator + fraction
    if value < 0 and out != "0":
        out = "-" + out
    return out


def describe_tank_fills(result: "SprayCalculation", full_label: str, partial_label: str) -> str:
    """Short phrase such as "4 full + 1 partial" for the results panel and reports."""
    if result.full_tanks > 0 and result.has_partial_tank:
        return f"{result.full_tanks} {full_label} + 1 {partial_label}"
    if result.full_tanks > 0:
        return f"{result.full_tanks} {full_label}"
    if result.has_partial_tank:
        return f"1 {partial_label}"
    return "0"


def describe_tank_fills_with_volume(
    result: "SprayCalculation",
    full_label: str,
    partial_label: str,
    number_format: NumberFormat = POLISH_NUMBERS,
) -> str:
    """History-list variant that also shows the partial tank volume in litres."""
    if result.has_partial_tank:
        volume = format_quantity(result.partial_tank_volume, number_format)
        return f"{result.full_tanks} {full_label} + 1 {partial_label} ({volume} l)"
    return f"{result.full_tanks} {full_label}"


def format_timestamp(value: datetime) -> str:
    """Local date and time for lists and reports."""
    return value.astimezone().strftime("%Y-%m-%d %H:%M")
