# tests/test_billing.py
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from services import billing


def test_electricity_charge_is_units_times_rate():
    assert billing.electricity_charge(Decimal("1100"), Decimal("1000")) == Decimal("1200")
    assert billing.electricity_charge(1100, 1000, rate_per_unit=8) == Decimal("800")
    assert billing.electricity_charge(1000, 1000) == Decimal("0")


def test_electricity_charge_is_not_clamped():
    # Reading below the previous one comes out as a credit
    assert billing.electricity_charge(990, 1000) == Decimal("-120")


def test_previous_reading_falls_back_to_joining_reading():
    fresh = SimpleNamespace(last_electricity_reading=None, electricity_joining_reading=Decimal("1000"))
    billed = SimpleNamespace(last_electricity_reading=Decimal("1100"), electricity_joining_reading=Decimal("1000"))
    assert billing.previous_reading_for(fresh) == Decimal("1000")
    assert billing.previous_reading_for(billed) == Decimal("1100")


def test_total_bill():
    assert billing.total_bill(Decimal("8000"), Decimal("1200"), Decimal("360")) == Decimal("9560")
    assert billing.total_bill(Decimal("7000"), Decimal("1200"), Decimal("-400")) == Decimal("7800")
    assert billing.total_bill(5000, 0) == Decimal("5000")


def test_due_date_is_ten_days_after_bill_date():
    assert billing.due_date_for(date(2026, 10, 1)) == date(2026, 10, 11)
    assert billing.due_date_for(date(2026, 10, 25)) == date(2026, 11, 4)
    assert billing.due_date_for(date(2026, 10, 1), grace_days=3) == date(2026, 10, 4)


def test_days_overdue():
    due = date(2026, 10, 11)
    assert billing.days_overdue(due, date(2026, 10, 1)) == 0
    assert billing.days_overdue(due, due) == 0
    assert billing.days_overdue(due, date(2026, 10, 12)) == 1
    assert billing.days_overdue(due, date(2026, 10, 21)) == 10


def test_occupancy_rate_rounds_half_up():
    assert billing.occupancy_rate(0, 0) == 0
    assert billing.occupancy_rate(10, 10) == 100
    assert billing.occupancy_rate(10, 3) == 30
    assert billing.occupancy_rate(8, 3) == 38
    assert billing.occupancy_rate(8, 1) == 13


def test_collection_rate():
    assert billing.collection_rate(0, 0) == 0
    assert billing.collection_rate(4, 1) == 25
    assert billing.collection_rate(3, 2) == 67


def test_billing_period_range():
    assert billing.billing_period_range("2026-10") == (date(2026, 10, 1), date(2026, 10, 31))
    assert billing.billing_period_range("2028-02") == (date(2028, 2, 1), date(2028, 2, 29))


def test_add_months_wraps_the_year():
    assert billing.add_months(date(2026, 10, 18), 0) == date(2026, 10, 1)
    assert billing.add_months(date(2026, 10, 18), 3) == date(2027, 1, 1)
    assert billing.month_key(date(2026, 12, 31)) == "2026-12"


def test_floor_from_room_number():
    assert billing.floor_for_room("G12") == 0
    assert billing.floor_for_room("g3") == 0
    assert billing.floor_for_room("305") == 3
    assert billing.floor_for_room("A1") is None
    assert billing.floor_label("G12") == "Ground Floor"
    assert billing.floor_label("204") == "Floor 2"
    assert billing.floor_label("Annex") == ""
