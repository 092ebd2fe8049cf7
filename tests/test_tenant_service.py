# tests/test_tenant_service.py
from datetime import date
from decimal import Decimal

import pytest

from errors import ValidationError
from models import RoomStatus, TenantStatus
from repositories import RoomRepository
from schemas.room import RoomCreate
from schemas.tenant import TenantUpdate
from services import TenantService


def test_move_in_marks_room_occupied(db, make_room, make_tenant):
    room = make_room("101")
    assert room.status == RoomStatus.VACANT

    tenant = make_tenant(room_number="101")

    room = RoomRepository(db).get(room.id)
    assert room.status == RoomStatus.OCCUPIED
    assert room.tenant_id == tenant.id


def test_move_in_to_unknown_room_still_creates_tenant(db, make_tenant):
    tenant = make_tenant(room_number="999")
    assert tenant.id is not None
    assert RoomRepository(db).by_number("999") is None


def test_room_floor_is_derived_from_number(db):
    assert TenantService.add_room(db, RoomCreate(room_number="G4")).floor == 0
    assert TenantService.add_room(db, RoomCreate(room_number="305")).floor == 3
    assert TenantService.add_room(db, RoomCreate(room_number="410", floor=1)).floor == 1


def test_give_notice(db, make_tenant):
    tenant = make_tenant()
    tenant = TenantService.give_notice(db, tenant.id, date(2026, 10, 1), date(2026, 10, 31))

    assert tenant.status == TenantStatus.DEPARTING
    assert tenant.notice_given is True
    assert tenant.notice_date == date(2026, 10, 1)
    assert tenant.departure_date == date(2026, 10, 31)


def test_give_notice_rejects_departure_before_notice(db, make_tenant):
    tenant = make_tenant()
    with pytest.raises(ValidationError):
        TenantService.give_notice(db, tenant.id, date(2026, 10, 15), date(2026, 10, 1))


def test_tenant_who_left_cannot_give_notice(db, make_tenant):
    tenant = make_tenant()
    TenantService.move_out(db, tenant.id, date(2026, 10, 31))
    with pytest.raises(ValidationError):
        TenantService.give_notice(db, tenant.id, date(2026, 11, 1))


def test_shared_room_is_freed_when_last_tenant_leaves(db, make_room, make_tenant):
    room = make_room("201", capacity=2)
    first = make_tenant(name="Asha Verma", room_number="201")
    second = make_tenant(name="Ravi Kumar", room_number="201")

    TenantService.move_out(db, second.id, date(2026, 10, 31))
    room = RoomRepository(db).get(room.id)
    assert room.status == RoomStatus.OCCUPIED
    assert room.tenant_id == first.id

    left = TenantService.move_out(db, first.id, date(2026, 11, 30))
    assert left.status == TenantStatus.LEFT
    assert left.departure_date == date(2026, 11, 30)
    room = RoomRepository(db).get(room.id)
    assert room.status == RoomStatus.VACANT
    assert room.tenant_id is None


def test_update_tenant_keeps_meter_monotonic(db, make_tenant):
    tenant = make_tenant(electricity_joining_reading=Decimal("1000"))

    with pytest.raises(ValidationError):
        TenantService.update_tenant(db, tenant.id, TenantUpdate(last_electricity_reading=Decimal("900")))

    tenant = TenantService.update_tenant(db, tenant.id, TenantUpdate(last_electricity_reading=Decimal("1100")))
    assert tenant.last_electricity_reading == Decimal("1100")


def test_update_tenant_cannot_move_recorded_reading_back(db, make_tenant):
    tenant = make_tenant(electricity_joining_reading=Decimal("1000"))
    TenantService.update_tenant(db, tenant.id, TenantUpdate(last_electricity_reading=Decimal("1200")))

    with pytest.raises(ValidationError):
        TenantService.update_tenant(db, tenant.id, TenantUpdate(last_electricity_reading=Decimal("1100")))
    with pytest.raises(ValidationError):
        TenantService.update_tenant(db, tenant.id, TenantUpdate(last_electricity_reading=None))

    tenant = TenantService.update_tenant(db, tenant.id, TenantUpdate(name="Asha V."))
    assert tenant.last_electricity_reading == Decimal("1200")


def test_first_room_reading_is_free_then_measured(db):
    first = TenantService.record_electricity_reading(
        db, "101", Decimal("1000"), tenant_name="Asha Verma", reading_date=date(2026, 9, 30)
    )
    assert first.last_reading is None
    assert first.units_consumed == Decimal("0")
    assert first.amount == Decimal("0")
    assert first.is_billed is False

    second = TenantService.record_electricity_reading(db, "101", Decimal("1050"), reading_date=date(2026, 10, 31))
    assert second.last_reading == Decimal("1000")
    assert second.units_consumed == Decimal("50")
    assert second.amount == Decimal("600")

    # Other rooms have their own meters
    other = TenantService.record_electricity_reading(db, "102", Decimal("500"), reading_date=date(2026, 10, 31))
    assert other.units_consumed == Decimal("0")
