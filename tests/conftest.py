# tests/conftest.py
import os

# Must be set before config / database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from dependencies import verify_token
from main import app
from models import Base
from schemas.room import RoomCreate
from schemas.tenant import TenantCreate
from services import TenantService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_session():
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[verify_token] = lambda: {"id": 1}
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_room(db):
    def _make_room(room_number="101", **overrides):
        data = {"room_number": room_number, "rent_amount": Decimal("8000")}
        data.update(overrides)
        return TenantService.add_room(db, RoomCreate(**data))
    return _make_room


@pytest.fixture
def make_tenant(db):
    def _make_tenant(name="Asha Verma", room_number="101", **overrides):
        data = {
            "name": name,
            "mobile": "9876543210",
            "room_number": room_number,
            "joining_date": date(2026, 1, 5),
            "monthly_rent": Decimal("8000"),
            "security_deposit": Decimal("8000"),
            "electricity_joining_reading": Decimal("1000"),
        }
        data.update(overrides)
        return TenantService.add_tenant(db, TenantCreate(**data))
    return _make_tenant
