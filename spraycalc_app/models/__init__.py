"""
Domain models for the spray calculator.

These are pure Python/domain classes, separate from ORM mappings.
"""

from .area_unit import AreaUnit, to_hectares
from .calculation import CalculationInput, SprayCalculation
from .favorite import FavoriteConfiguration

__all__ = [
    "AreaUnit",
    "to_hectares",
    "CalculationInput",
    "SprayCalculation",
    "FavoriteConfiguration",
]
