"""
Shared fixtures: an in-memory database per test and an API client bound to it.
"""

from decimal import Decimal

import pandas as pd
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.config import settings
from app.core.database import Base, get_db
from app.schemas.category import CategoryCreate
from app.schemas.location import LocationCreate, PriceLocationCreate
from app.schemas.sku import SKUCreate
from app.schemas.vendor import VendorCreate
from app.services.category_repository import CategoryRepository
from app.services.location_repository import LocationRepository, PriceLocationRepository
from app.services.sku_repository import SKURepository
from app.services.vendor_repository import VendorRepository
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


# ============================================================================
# Record factories
# ============================================================================

@pytest.fixture
def make_category(db):
    def _make(name="Food", parent_id=None):
        return CategoryRepository.create(db, CategoryCreate(name=name, parent_id=parent_id))
    return _make


@pytest.fixture
def make_sku(db):
    def _make(name="Milk", unit_value="500 g", unit="g", category_id=None, **extra):
        data = {"selling_price": Decimal("25.00"), "brand": "Sutas"}
        data.update(extra)
        sku = SKUCreate(name=name, unit=unit, unit_value=unit_value, category_id=category_id, **data)
        return SKURepository.create(db, sku)
    return _make


@pytest.fixture
def make_vendor(db):
    def _make(name="Migros"):
        return VendorRepository.create(db, VendorCreate(name=name))
    return _make


@pytest.fixture
def make_price_location(db):
    def _make(name="Kadikoy"):
        return PriceLocationRepository.create(db, PriceLocationCreate(name=name))
    return _make


@pytest.fixture
def make_location(db):
    def _make(name="Besiktas Store", city="Istanbul", region="Marmara"):
        return LocationRepository.create(db, LocationCreate(
            name=name,
            city=city,
            region=region,
            demography="Urban",
            size="Large",
            domains=["retail"],
        ))
    return _make


@pytest.fixture
def write_workbook(tmp_path):
    """Write rows (list of dicts) to an .xlsx file and return its path"""
    def _write(rows, filename="prices.xlsx", columns=None):
        path = tmp_path / filename
        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(path, index=False, engine="openpyxl")
        return path
    return _write
