from __future__ import annotations

from enum import Enum


class AreaUnit(Enum):
    """Units a field area may be entered in; the value is the display symbol."""

    HECTARES = "ha"
    ARES = "ar"
    SQUARE_METERS = "m²"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def to_hectares(self) -> float:
        """Multiply an area in this unit by this factor to get hectares."""
        return _HECTARE_FACTORS[self]


# One entry per AreaUnit member
_HECTARE_FACTORS = {
    AreaUnit.HECTARES: 1.0,
    AreaUnit.ARES: 0.01,
    AreaUnit.SQUARE_METERS: 0.0001,
}


def to_hectares(value: float, unit: AreaUnit) -> float:
    """Normalize an area entered in ``unit`` to hectares."""
    return value * unit.to_hectares
