"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from spraycalc_app.models import AreaUnit, SprayCalculation
from spraycalc_app.services.validation import CalculationForm


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database and return its path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass  # Windows may hold file; ignore cleanup failure


@pytest.fixture
def db_session(temp_db):
    """Provide a database session with initialized schema."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from spraycalc_app.repositories.database import Base
    from spraycalc_app.repositories.history_repository import SprayCalculationORM  # noqa: F401
    from spraycalc_app.repositories.favorite_repository import FavoriteConfigurationORM  # noqa: F401

    engine = create_engine(f"sqlite:///{temp_db}", future=True)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def scenario_a():
    """10 ha at 200 l/ha and 2 l/ha with a 1000 l tank: exactly two full tanks."""
    return SprayCalculation(
        field_area=10.0,
        area_unit=AreaUnit.HECTARES,
        spray_rate=200.0,
        chemical_rate=2.0,
        tank_capacity=1000.0,
    )


@pytest.fixture
def scenario_b():
    """15 ha at 300 l/ha and 3 l/ha with a 1000 l tank: four full tanks and 500 l."""
    return SprayCalculation(
        field_area=15.0,
        area_unit=AreaUnit.HECTARES,
        spray_rate=300.0,
        chemical_rate=3.0,
        tank_capacity=1000.0,
    )


@pytest.fixture
def valid_form():
    return CalculationForm(
        field_area="15",
        spray_rate="300",
        chemical_rate="3",
        tank_capacity="1000",
        area_unit=AreaUnit.HECTARES,
    )
