"""
Favorite configuration: a named, reusable set of rates and tank capacity.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from .area_unit import AreaUnit

if TYPE_CHECKING:
    from .calculation import SprayCalculation


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class FavoriteConfiguration:
    name: str
    spray_rate: float  # l/ha
    chemical_rate: float  # l/ha
    tank_capacity: float  # l
    area_unit: AreaUnit = AreaUnit.HECTARES
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_calculation(cls, calculation: "SprayCalculation", name: str) -> "FavoriteConfiguration":
        """Keep the reusable parameters of a calculation; the field area and results are dropped."""
        return cls(
            name=name,
            spray_rate=calculation.spray_rate,
            chemical_rate=calculation.chemical_rate,
            tank_capacity=calculation.tank_capacity,
            area_unit=calculation.area_unit,
        )
