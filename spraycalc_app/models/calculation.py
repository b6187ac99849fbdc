"""
Calculation input and the immutable spray calculation result.

Only the raw inputs are stored on a SprayCalculation. Every derived quantity
is a property recomputed from them, so a stored record can never disagree
with its own inputs.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from spraycalc_app.config.limits import PARTIAL_TANK_EPSILON_L, WHOLE_TANK_REL_TOL

from .area_unit import AreaUnit, to_hectares


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def _divide(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives +-inf (or nan for 0/0) instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    """Truncating remainder (sign of a), nan where math.fmod would raise."""
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


@dataclass(frozen=True, slots=True)
class CalculationInput:
    field_area: float
    spray_rate: float  # l/ha
    chemical_rate: float  # l/ha
    tank_capacity: float  # l
    area_unit: AreaUnit = AreaUnit.HECTARES


@dataclass(frozen=True, slots=True)
class SprayCalculation:
    field_area: float
    spray_rate: float  # l/ha
    chemical_rate: float  # l/ha
    tank_capacity: float  # l
    area_unit: AreaUnit = AreaUnit.HECTARES
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utc_now)

    @property
    def field_area_in_hectares(self) -> float:
        return to_hectares(self.field_area, self.area_unit)

    @property
    def total_working_fluid(self) -> float:
        """Water plus chemical for the whole field (l)."""
        return self.field_area_in_hectares * self.spray_rate

    @property
    def total_chemical(self) -> float:
        return self.field_area_in_hectares * self.chemical_rate

    @property
    def tank_fill_ratio(self) -> float:
        return _divide(self.total_working_fluid, self.tank_capacity)

    def _tank_split(self) -> tuple[int | float, float]:
        """
        Split the working fluid into whole tanks and the remainder.

        The remainder is taken first and the count derived from it, so
        full_tanks * tank_capacity + partial_tank_volume always gives the
        total back. A non-finite ratio (zero capacity) is returned as the
        count instead of raising, so callers can reject it.
        """
        total, capacity = self.total_working_fluid, self.tank_capacity
        ratio = _divide(total, capacity)
        partial = _remainder(total, capacity)
        if not math.isfinite(ratio):
            return ratio, partial
        full = round((total - partial) / capacity)
        if partial and math.isclose(abs(partial), abs(capacity), rel_tol=WHOLE_TANK_REL_TOL):
            full += 1 if (partial > 0) == (capacity > 0) else -1
            partial = 0.0
        return full, partial

    @property
    def full_tanks(self) -> int | float:
        """Number of complete tank fills, truncated toward zero."""
        return self._tank_split()[0]

    @property
    def partial_tank_volume(self) -> float:
        return self._tank_split()[1]

    @property
    def has_partial_tank(self) -> bool:
        return self.partial_tank_volume > PARTIAL_TANK_EPSILON_L

    @property
    def total_tank_fills(self) -> int | float:
        return self.full_tanks + (1 if self.has_partial_tank else 0)

    @property
    def _chemical_fraction(self) -> float:
        # spray_rate == 0 implies total_working_fluid == 0, so callers guard on the total
        return _divide(self.chemical_rate, self.spray_rate)

    @property
    def chemical_per_tank(self) -> float:
        if not self.total_working_fluid > 0:
            return 0.0
        return self._chemical_fraction * self.tank_capacity

    @property
    def chemical_for_partial_tank(self) -> float:
        if not self.total_working_fluid > 0:
            return 0.0
        return self._chemical_fraction * self.partial_tank_volume

    @property
    def water_per_full_tank(self) -> float:
        return self.tank_capacity - self.chemical_per_tank

    @property
    def water_for_partial_tank(self) -> float:
        return self.partial_tank_volume - self.chemical_for_partial_tank

    @property
    def is_finite(self) -> bool:
        """True when every derived quantity is a finite number."""
        values = (
            self.field_area_in_hectares,
            self.total_working_fluid,
            self.total_chemical,
            self.full_tanks,
            self.partial_tank_volume,
            self.chemical_per_tank,
            self.chemical_for_partial_tank,
            self.water_per_full_tank,
            self.water_for_partial_tank,
        )
        return all(math.isfinite(v) for v in values)

    def to_input(self) -> CalculationInput:
        return CalculationInput(
            field_area=self.field_area,
            spray_rate=self.spray_rate,
            chemical_rate=self.chemical_rate,
            tank_capacity=self.tank_capacity,
            area_unit=self.area_unit,
        )
