# tests/test_repositories.py
from datetime import date
from decimal import Decimal

import pytest

from errors import NotFoundError, StoreError
from models import ExpenseCategory, PaymentMethod, TenantStatus
from repositories import ExpenseRepository, RoomRepository, TenantRepository
from schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from schemas.room import RoomCreate
from schemas.tenant import TenantCreate, TenantResponse, TenantUpdate

TENANT_JSON = {
    "name": "Asha Verma",
    "mobile": "9876543210",
    "roomNumber": "101",
    "joiningDate": "2026-01-05",
    "monthlyRent": "8000",
    "securityDeposit": "5000",
    "electricityJoiningReading": "1000",
    "status": "active",
    "hasFood": True,
    "noticeGiven": False,
}


def test_create_then_get_all_returns_camel_case_fields(db):
    repo = TenantRepository(db)
    repo.create(TenantCreate.model_validate(TENANT_JSON))

    rows = repo.get_all()
    assert len(rows) == 1
    body = TenantResponse.model_validate(rows[0]).model_dump(mode="json", by_alias=True)

    assert body["name"] == "Asha Verma"
    assert body["roomNumber"] == "101"
    assert body["joiningDate"] == "2026-01-05"
    assert Decimal(body["monthlyRent"]) == Decimal("8000")
    assert Decimal(body["electricityJoiningReading"]) == Decimal("1000")
    assert body["hasFood"] is True
    assert body["status"] == "active"
    assert body["id"] == rows[0].id
    assert body["createdAt"] is not None


def test_update_writes_only_fields_that_were_sent(db):
    repo = TenantRepository(db)
    tenant = repo.create(TenantCreate.model_validate(TENANT_JSON))

    tenant = repo.update(tenant.id, TenantUpdate.model_validate({"monthlyRent": "9000"}))

    assert tenant.monthly_rent == Decimal("9000")
    assert tenant.mobile == "9876543210"
    assert tenant.security_deposit == Decimal("5000")
    assert tenant.status == TenantStatus.ACTIVE


def test_update_with_explicit_null_clears_the_column(db):
    repo = TenantRepository(db)
    tenant = repo.create(TenantCreate.model_validate(TENANT_JSON))

    tenant = repo.update(tenant.id, TenantUpdate.model_validate({"securityDeposit": None}))

    assert tenant.security_deposit is None
    assert tenant.effective_deposit() == Decimal("0")


def test_missing_row_raises_not_found(db):
    repo = ExpenseRepository(db)
    with pytest.raises(NotFoundError):
        repo.get(42)
    with pytest.raises(NotFoundError):
        repo.update(42, ExpenseUpdate(amount=Decimal("10")))
    with pytest.raises(NotFoundError):
        repo.delete(42)
    assert repo.find(42) is None


def test_store_failure_surfaces_as_store_error(db):
    repo = RoomRepository(db)
    repo.create(RoomCreate(room_number="101"))

    with pytest.raises(StoreError) as excinfo:
        repo.create(RoomCreate(room_number="101"))
    assert str(excinfo.value).startswith("Database error:")
    # Session is usable again after the rollback
    assert repo.get_all() == []


def test_default_ordering_is_newest_first(db):
    repo = ExpenseRepository(db)
    for day, amount in ((3, "300"), (20, "2000"), (11, "1100")):
        repo.create(ExpenseCreate(
            date=date(2026, 10, day),
            category=ExpenseCategory.UTILITIES,
            description=f"Bill {day}",
            amount=Decimal(amount),
            payment_method=PaymentMethod.UPI,
        ))

    rows = repo.get_all()
    assert [row.date.day for row in rows] == [20, 11, 3]
    body = ExpenseResponse.model_validate(rows[0]).model_dump(mode="json", by_alias=True)
    assert body["category"] == "Utilities"
    assert body["paymentMethod"] == "upi"
    assert body["receiptUrl"] is None
