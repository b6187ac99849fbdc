"""
Repository for the calculation history.

Only the raw inputs, identity and timestamp are stored; derived quantities
are recomputed by SprayCalculation when a record is loaded.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Integer, String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column, Session

from .database import Base, from_db_time, to_db_time
from ..config.limits import MAX_HISTORY_ITEMS
from ..models import AreaUnit, SprayCalculation

logger = logging.getLogger(__name__)


class SprayCalculationORM(Base):
    __tablename__ = "spray_calculations"

    # Insertion order; eviction and listing follow it
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    field_area: Mapped[float] = mapped_column(Float, nullable=False)
    area_unit: Mapped[str] = mapped_column(String(32), nullable=False)
    spray_rate: Mapped[float] = mapped_column(Float, nullable=False)
    chemical_rate: Mapped[float] = mapped_column(Float, nullable=False)
    tank_capacity: Mapped[float] = mapped_column(Float, nullable=False)


class HistoryRepository:
    """Bounded history of calculations, most recent first."""

    def __init__(self, db: Session, max_items: int = MAX_HISTORY_ITEMS) -> None:
        self._db = db
        self._max_items = max_items

    def append(self, calculation: SprayCalculation) -> SprayCalculation:
        obj = SprayCalculationORM(
            uuid=str(calculation.id),
            created_at=to_db_time(calculation.created_at),
            field_area=calculation.field_area,
            area_unit=calculation.area_unit.name,
            spray_rate=calculation.spray_rate,
            chemical_rate=calculation.chemical_rate,
            tank_capacity=calculation.tank_capacity,
        )
        self._db.add(obj)
        self._db.commit()
        self._evict_oldest()
        return calculation

    def list_recent(self) -> List[SprayCalculation]:
        result: List[SprayCalculation] = []
        for obj in (
            self._db.query(SprayCalculationORM)
            .order_by(SprayCalculationORM.seq.desc())
            .all()
        ):
            result.append(self._to_model(obj))
        return result

    def get(self, calculation_id: uuid.UUID) -> Optional[SprayCalculation]:
        obj = self._find(calculation_id)
        if obj is None:
            return None
        return self._to_model(obj)

    def delete(self, calculation_id: uuid.UUID) -> None:
        obj = self._find(calculation_id)
        if obj is None:
            return
        self._db.delete(obj)
        self._db.commit()

    def clear(self) -> None:
        self._db.query(SprayCalculationORM).delete()
        self._db.commit()

    def _find(self, calculation_id: uuid.UUID) -> Optional[SprayCalculationORM]:
        return (
            self._db.query(SprayCalculationORM)
            .filter(SprayCalculationORM.uuid == str(calculation_id))
            .one_or_none()
        )

    def _evict_oldest(self) -> None:
        stale = (
            self._db.query(SprayCalculationORM)
            .order_by(SprayCalculationORM.seq.desc())
            .offset(self._max_items)
            .all()
        )
        if not stale:
            return
        for obj in stale:
            self._db.delete(obj)
        self._db.commit()
        logger.debug("Evicted %d calculation(s) from history", len(stale))

    @staticmethod
    def _to_model(obj: SprayCalculationORM) -> SprayCalculation:
        return SprayCalculation(
            id=uuid.UUID(obj.uuid),
            created_at=from_db_time(obj.created_at),
            field_area=obj.field_area,
            area_unit=AreaUnit[obj.area_unit],
            spray_rate=obj.spray_rate,
            chemical_rate=obj.chemical_rate,
            tank_capacity=obj.tank_capacity,
        )
