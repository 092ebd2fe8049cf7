# services/billing.py
"""
Billing calculator - pure functions, no database access.

Money and meter values are Decimal throughout. Percentages are rounded half
up to whole numbers (8 rooms, 3 occupied -> 38).
"""
import calendar
import re
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple, Union

import config

Number = Union[int, float, Decimal]

_GROUND_FLOOR = re.compile(r"^g\d+", re.IGNORECASE)


def _dec(value: Number) -> Decimal:
     return value if isinstance(value, Decimal) else Decimal(str(value))


def units_consumed(current_reading: Number, previous_reading: Number) -> Decimal:
     return _dec(current_reading) - _dec(previous_reading)


def electricity_charge(
     current_reading: Number,
     previous_reading: Number,
     rate_per_unit: Optional[Number] = None
) -> Decimal:
     """
     (current - previous) * rate.

     Not clamped: a reading below the previous one yields a negative charge,
     i.e. a credit. The caller decides whether that is a meter reset or a typo.
     """
     rate = config.ELECTRICITY_RATE_PER_UNIT if rate_per_unit is None else _dec(rate_per_unit)
     return units_consumed(current_reading, previous_reading) * rate


def previous_reading_for(tenant) -> Decimal:
     """Last recorded meter reading, or the joining reading when none is recorded yet."""
     if tenant.last_electricity_reading is not None:
          return _dec(tenant.last_electricity_reading)
     return _dec(tenant.electricity_joining_reading)


def total_bill(rent: Number, electricity: Number, adjustment: Number = 0) -> Decimal:
     """rent + electricity + adjustment. Adjustment is signed and unbounded."""
     return _dec(rent) + _dec(electricity) + _dec(adjustment)


def due_date_for(bill_date: date, grace_days: Optional[int] = None) -> date:
     days = config.BILL_DUE_DAYS if grace_days is None else grace_days
     return bill_date + timedelta(days=days)


def days_overdue(due_date: date, today: Optional[date] = None) -> int:
     today = today or date.today()
     return max(0, (today - due_date).days)


def _percentage(part: int, whole: int) -> int:
     if whole <= 0:
          return 0
     value = Decimal(100 * part) / Decimal(whole)
     return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def occupancy_rate(total_rooms: int, occupied_rooms: int) -> int:
     return _percentage(occupied_rooms, total_rooms)


def collection_rate(total_bills: int, paid_bills: int) -> int:
     return _percentage(paid_bills, total_bills)


def billing_period_range(billing_period: str) -> Tuple[date, date]:
     """First and last day of a YYYY-MM billing period."""
     year, month = (int(part) for part in billing_period.split("-"))
     return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def month_key(d: date) -> str:
     return d.strftime("%Y-%m")


def add_months(d: date, months: int) -> date:
     """First day of the month `months` after d's month."""
     index = d.year * 12 + (d.month - 1) + months
     return date(index // 12, index % 12 + 1, 1)


def floor_for_room(room_number: str) -> Optional[int]:
     """G12 -> 0, 305 -> 3, anything else -> None."""
     if not room_number:
          return None
     if _GROUND_FLOOR.match(room_number):
          return 0
     first = room_number[0]
     return int(first) if first.isdigit() else None


def floor_label(room_number: str) -> str:
     floor = floor_for_room(room_number)
     if floor is None:
          return ""
     if floor == 0 and _GROUND_FLOOR.match(room_number):
          return "Ground Floor"
     return f"Floor {floor}"
