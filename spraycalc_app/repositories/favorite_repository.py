"""
Repository for favorite configurations.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import Integer, String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column, Session

from .database import Base, from_db_time, to_db_time
from ..models import AreaUnit, FavoriteConfiguration


class FavoriteConfigurationORM(Base):
    __tablename__ = "favorite_configurations"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    spray_rate: Mapped[float] = mapped_column(Float, nullable=False)
    chemical_rate: Mapped[float] = mapped_column(Float, nullable=False)
    tank_capacity: Mapped[float] = mapped_column(Float, nullable=False)
    area_unit: Mapped[str] = mapped_column(String(32), default="HECTARES")


class FavoriteRepository:
    """CRUD for favorites; listing returns the most recently added first."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def add(self, favorite: FavoriteConfiguration) -> FavoriteConfiguration:
        obj = FavoriteConfigurationORM(
            uuid=str(favorite.id),
            name=favorite.name,
            created_at=to_db_time(favorite.created_at),
            spray_rate=favorite.spray_rate,
            chemical_rate=favorite.chemical_rate,
            tank_capacity=favorite.tank_capacity,
            area_unit=favorite.area_unit.name,
        )
        self._db.add(obj)
        self._db.commit()
        return favorite

    def list_all(self) -> List[FavoriteConfiguration]:
        result: List[FavoriteConfiguration] = []
        for obj in (
            self._db.query(FavoriteConfigurationORM)
            .order_by(FavoriteConfigurationORM.seq.desc())
            .all()
        ):
            result.append(self._to_model(obj))
        return result

    def get(self, favorite_id: uuid.UUID) -> Optional[FavoriteConfiguration]:
        obj = self._find(favorite_id)
        if not obj:
            return None
        return self._to_model(obj)

    def delete(self, favorite_id: uuid.UUID) -> None:
        obj = self._find(favorite_id)
        if obj is None:
            return
        self._db.delete(obj)
        self._db.commit()

    def _find(self, favorite_id: uuid.UUID) -> Optional[FavoriteConfigurationORM]:
        return (
            self._db.query(FavoriteConfigurationORM)
            .filter(FavoriteConfigurationORM.uuid == str(favorite_id))
            .one_or_none()
        )

    @staticmethod
    def _to_model(obj: FavoriteConfigurationORM) -> FavoriteConfiguration:
        return FavoriteConfiguration(
            id=uuid.UUID(obj.uuid),
            name=obj.name,
            created_at=from_db_time(obj.created_at),
            spray_rate=obj.spray_rate,
            chemical_rate=obj.chemical_rate,
            tank_capacity=obj.tank_capacity,
            area_unit=AreaUnit[obj.area_unit or "HECTARES"],
        )
