# tests/test_reporting.py
from datetime import date
from decimal import Decimal

from models import (
    Bill,
    BillStatus,
    ElectricityReading,
    Expense,
    ExpenseCategory,
    PaymentMethod,
    Room,
    RoomStatus,
    RoomType,
    Tenant,
    TenantStatus,
)
from schemas.expense import ExpenseCreate
from schemas.room import RoomCreate
from repositories import ExpenseRepository
from services import DataSnapshot, TenantService, reporting_service

TODAY = date(2026, 10, 18)


def _room(number, status=RoomStatus.VACANT, room_type=RoomType.SINGLE, floor=None, rent="8000"):
    return Room(
        room_number=number, status=status, room_type=room_type, floor=floor,
        capacity=1, rent_amount=Decimal(rent),
    )


def _tenant(name, room, status=TenantStatus.ACTIVE, rent="8000", deposit="8000", departure=None, notice=False):
    return Tenant(
        name=name, mobile="9876543210", room_number=room, joining_date=date(2026, 1, 5),
        monthly_rent=Decimal(rent), security_deposit=Decimal(deposit) if deposit is not None else None,
        electricity_joining_reading=Decimal("1000"), status=status,
        departure_date=departure, notice_given=notice, notice_date=date(2026, 10, 1) if notice else None,
    )


def _bill(total, status, due=date(2026, 10, 11)):
    return Bill(
        tenant_id=1, billing_period="2026-10", electricity_reading=Decimal("1100"),
        rent_amount=Decimal(total), electricity_charges=Decimal("0"), adjustments=Decimal("0"),
        total_amount=Decimal(total), bill_date=date(2026, 10, 1), due_date=due, payment_status=status,
    )


def _expense(amount, category, when=date(2026, 10, 5), method=PaymentMethod.CASH):
    return Expense(
        date=when, category=category, description="x", amount=Decimal(amount), payment_method=method,
    )


def test_dashboard_metrics():
    snapshot = DataSnapshot(
        rooms=[_room("101", RoomStatus.OCCUPIED), _room("102", RoomStatus.OCCUPIED), _room("103", RoomStatus.OCCUPIED)]
        + [_room(f"2{i:02d}") for i in range(5)],
        tenants=[
            _tenant("Asha", "101", rent="8000", deposit="8000"),
            _tenant("Ravi", "102", status=TenantStatus.DEPARTING, rent="7000", deposit=None),
            _tenant("Old", "103", status=TenantStatus.LEFT, rent="6000", deposit="6000"),
        ],
        bills=[
            _bill("9560", BillStatus.PAID),
            _bill("7800", BillStatus.PARTIAL),
            _bill("5000", BillStatus.UNPAID),
            _bill("4000", BillStatus.UNPAID),
        ],
        expenses=[_expense("1500", ExpenseCategory.UTILITIES), _expense("500", ExpenseCategory.OTHER)],
    )

    metrics = reporting_service.dashboard_metrics(snapshot)

    assert metrics.active_tenants == 2
    assert metrics.total_rooms == 8
    assert metrics.occupied_rooms == 3
    assert metrics.occupancy_rate == 38
    assert metrics.total_monthly_rent == Decimal("21000")
    assert metrics.security_deposit == Decimal("14000")
    assert metrics.monthly_collection == Decimal("9560")
    assert metrics.monthly_pending == Decimal("9000")
    assert metrics.monthly_expenses == Decimal("2000")
    assert metrics.collection_rate == 25


def test_empty_snapshot_gives_zero_rates():
    metrics = reporting_service.dashboard_metrics(DataSnapshot())
    assert metrics.occupancy_rate == 0
    assert metrics.collection_rate == 0
    assert metrics.monthly_collection == Decimal("0")


def test_tenant_status_counts_lists_every_status():
    snapshot = DataSnapshot(tenants=[
        _tenant("A", "101"), _tenant("B", "102"), _tenant("C", "103", status=TenantStatus.HOLD),
    ])
    counts = reporting_service.tenant_status_counts(snapshot)

    assert set(counts.counts) == {status.value for status in TenantStatus}
    assert counts.counts["active"] == 2
    assert counts.counts["hold"] == 1
    assert counts.counts["left"] == 0
    assert counts.total == 3


def test_billing_summary():
    snapshot = DataSnapshot(bills=[
        _bill("9560", BillStatus.PAID, due=date(2026, 9, 11)),
        _bill("7800", BillStatus.PARTIAL, due=date(2026, 9, 11)),
        _bill("5000", BillStatus.UNPAID, due=date(2026, 10, 11)),
        _bill("4000", BillStatus.UNPAID, due=date(2026, 10, 28)),
    ])
    summary = reporting_service.billing_summary(snapshot, TODAY)

    assert summary.total_billed == Decimal("26360")
    assert summary.total_paid == Decimal("9560")
    assert summary.total_partial == Decimal("7800")
    assert summary.total_pending == Decimal("9000")
    assert summary.overdue_count == 1
    assert summary.overdue_amount == Decimal("5000")


def test_room_type_breakdown():
    snapshot = DataSnapshot(rooms=[
        _room("101", RoomStatus.OCCUPIED, RoomType.DOUBLE),
        _room("102", RoomStatus.VACANT, RoomType.DOUBLE),
        _room("103", RoomStatus.OCCUPIED, RoomType.SINGLE),
    ])
    breakdown = {row.room_type: (row.occupied, row.total) for row in reporting_service.room_type_breakdown(snapshot)}

    assert breakdown == {"single": (1, 1), "double": (1, 2), "triple": (0, 0), "quad": (0, 0)}


def test_floor_breakdown_falls_back_to_room_number():
    snapshot = DataSnapshot(rooms=[
        _room("G1", RoomStatus.OCCUPIED, rent="6000"),
        _room("101", RoomStatus.OCCUPIED, floor=1, rent="8000"),
        _room("102", RoomStatus.MAINTENANCE, floor=1),
        _room("103", RoomStatus.VACANT),
        _room("Annex", RoomStatus.VACANT),
    ])
    floors = reporting_service.floor_breakdown(snapshot)

    assert [(f.floor, f.label) for f in floors] == [(0, "Ground Floor"), (1, "Floor 1")]
    first = floors[1]
    assert (first.total_rooms, first.occupied_rooms, first.vacant_rooms, first.maintenance_rooms) == (3, 1, 1, 1)
    assert first.total_revenue == Decimal("8000")
    assert floors[0].total_revenue == Decimal("6000")


def test_room_occupancy_comes_from_tenants():
    snapshot = DataSnapshot(
        # Room status says vacant, but an active tenant lives there
        rooms=[_room("10", RoomStatus.VACANT, RoomType.DOUBLE), _room("9"), _room("102", RoomStatus.OCCUPIED)],
        tenants=[
            _tenant("Asha", "10", rent="7000", deposit="7000", notice=True),
            _tenant("Ravi", "10", rent="6000", deposit=None),
            _tenant("Old", "102", status=TenantStatus.LEFT),
            _tenant("Walk-in", "G2", rent="5000", deposit="5000"),
        ],
    )
    summary = reporting_service.room_occupancy(snapshot)

    assert [room.room_number for room in summary.rooms] == ["9", "10", "102", "G2"]
    by_number = {room.room_number: room for room in summary.rooms}
    assert by_number["10"].room_status == "occupied"
    assert [t.name for t in by_number["10"].tenants] == ["Asha", "Ravi"]
    assert by_number["102"].room_status == "vacant"
    assert by_number["G2"].room_type is None
    assert by_number["G2"].floor == 0

    assert summary.total_rooms == 4
    assert summary.occupied_rooms == 2
    assert summary.vacant_rooms == 2
    assert summary.total_tenants == 3
    assert summary.total_rent == Decimal("18000")
    assert summary.total_deposit == Decimal("12000")
    assert summary.notice_period_tenants == 1
    assert summary.average_rent == 6000


def test_electricity_stats():
    def reading(day, units, amount, billed, month=10):
        return ElectricityReading(
            room_number="101", current_reading=Decimal("0"), reading_date=date(2026, month, day),
            units_consumed=Decimal(units), amount=Decimal(amount), is_billed=billed,
        )

    snapshot = DataSnapshot(readings=[
        reading(30, "80", "960", True, month=9),
        reading(15, "50", "600", False),
        reading(16, "10", "120", True),
    ])
    stats = reporting_service.electricity_stats(snapshot, TODAY)

    assert stats.total_units == Decimal("140")
    assert stats.total_amount == Decimal("1680")
    assert stats.total_collected == Decimal("1080")
    assert stats.pending_amount == Decimal("600")
    assert stats.current_month_units == Decimal("60")
    assert stats.current_month_amount == Decimal("720")


def test_expense_breakdown_for_one_month():
    snapshot = DataSnapshot(expenses=[
        _expense("1500", ExpenseCategory.UTILITIES, method=PaymentMethod.UPI),
        _expense("700", ExpenseCategory.UTILITIES),
        _expense("4000", ExpenseCategory.SALARIES, method=PaymentMethod.BANK_TRANSFER),
        _expense("999", ExpenseCategory.OTHER, when=date(2026, 9, 30)),
    ])
    breakdown = reporting_service.expense_breakdown(snapshot, "2026-10")

    assert breakdown.total == Decimal("6200")
    assert [(c.name, c.amount, c.count) for c in breakdown.by_category] == [
        ("Staff Salaries", Decimal("4000"), 1),
        ("Utilities", Decimal("2200"), 2),
    ]
    assert {c.name: c.amount for c in breakdown.by_payment_method} == {
        "bank_transfer": Decimal("4000"),
        "upi": Decimal("1500"),
        "cash": Decimal("700"),
    }


def test_vacancy_forecast_buckets_departures_by_month():
    snapshot = DataSnapshot(
        rooms=[_room("101", RoomStatus.OCCUPIED), _room("102", RoomStatus.OCCUPIED), _room("103")],
        tenants=[
            _tenant("Asha", "101", status=TenantStatus.DEPARTING, departure=date(2026, 11, 30)),
            _tenant("Ravi", "102", departure=date(2026, 11, 15)),
            _tenant("Gone", "103", status=TenantStatus.LEFT, departure=date(2026, 11, 1)),
            _tenant("Later", "104", departure=date(2027, 3, 1)),
        ],
    )
    forecast = reporting_service.vacancy_forecast(snapshot, months_ahead=3, today=TODAY)

    assert [(m.month, m.month_name) for m in forecast] == [
        ("2026-10", "October 2026"),
        ("2026-11", "November 2026"),
        ("2026-12", "December 2026"),
    ]
    october, november, december = forecast
    assert (october.departing_tenants, october.available_rooms) == (0, 1)
    assert (november.departing_tenants, november.available_rooms) == (2, 3)
    assert [r.tenant_name for r in november.rooms_becoming_vacant] == ["Ravi", "Asha"]
    # No carry-over from November
    assert (december.vacant_rooms, december.available_rooms) == (1, 1)
    assert november.total_rooms == 3
    assert november.occupied_rooms == 2


def test_snapshot_load_and_refresh(db):
    TenantService.add_room(db, RoomCreate(room_number="101"))
    snapshot = DataSnapshot.load(db)
    assert len(snapshot.rooms) == 1
    assert snapshot.bills == []

    ExpenseRepository(db).create(ExpenseCreate(
        date=date(2026, 10, 2), category=ExpenseCategory.CLEANING, description="Mops", amount=Decimal("250"),
    ))
    assert snapshot.expenses == []
    snapshot.refresh(db)
    assert len(snapshot.expenses) == 1
    assert reporting_service.dashboard_metrics(snapshot).monthly_expenses == Decimal("250")
