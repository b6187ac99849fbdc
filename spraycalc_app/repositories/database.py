"""
SQLAlchemy database setup for the spray calculator.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base declarative class for ORM models."""

    pass


def init_database(db_path: Path) -> sessionmaker:
    """
    Initialize the SQLite database, create tables and return a session factory.

    Called once at startup by main.bootstrap().
    """
    # Import ORM models so their metadata is registered on Base
    from .history_repository import SprayCalculationORM  # noqa: F401
    from .favorite_repository import FavoriteConfigurationORM  # noqa: F401

    engine = create_engine(f"sqlite:///{db_path}", future=True, echo=False)
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", db_path)

    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )


def to_db_time(value: datetime) -> datetime:
    """SQLite keeps naive datetimes; store them as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db_time(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc)
