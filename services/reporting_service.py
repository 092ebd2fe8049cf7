# services/reporting_service.py
"""
Reporting Service - dashboard aggregates over a DataSnapshot.

Every function is pure: it reads the snapshot it is given and recomputes
from scratch. Nothing here touches the database.
"""
import re
from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from models import BillStatus, RoomStatus, RoomType, TenantStatus
from schemas.reporting import (
     BillingSummary,
     CategoryTotal,
     DashboardMetrics,
     DepartingRoom,
     ElectricityStats,
     ExpenseBreakdown,
     FloorStats,
     RoomOccupancy,
     RoomOccupancySummary,
     RoomOccupant,
     RoomTypeOccupancy,
     TenantStatusCounts,
     VacancyForecast,
)
from . import billing
from .snapshot import DataSnapshot

ZERO = Decimal("0")


def _sum(values) -> Decimal:
     return sum((v for v in values if v is not None), ZERO)


def _natural_key(room_number: str):
     """Sort key so that 2 < 10 and G2 < G10."""
     return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", room_number)]


def tenant_status_counts(snapshot: DataSnapshot) -> TenantStatusCounts:
     counts = {status.value: 0 for status in TenantStatus}
     for tenant in snapshot.tenants:
          counts[TenantStatus(tenant.status).value] += 1
     return TenantStatusCounts(counts=counts, total=len(snapshot.tenants))


def dashboard_metrics(snapshot: DataSnapshot) -> DashboardMetrics:
     """
     Headline numbers for the dashboard.

     Rent and deposit totals run over every tenant regardless of status.
     Occupancy follows the stored room status; collection rate is paid bills
     over all bills.
     """
     total_rooms = len(snapshot.rooms)
     occupied_rooms = sum(1 for room in snapshot.rooms if room.status == RoomStatus.OCCUPIED)
     paid_bills = [bill for bill in snapshot.bills if bill.payment_status == BillStatus.PAID]
     unpaid_bills = [bill for bill in snapshot.bills if bill.payment_status == BillStatus.UNPAID]

     return DashboardMetrics(
          active_tenants=sum(1 for tenant in snapshot.tenants if tenant.is_active_like),
          total_rooms=total_rooms,
          occupied_rooms=occupied_rooms,
          total_monthly_rent=_sum(tenant.monthly_rent for tenant in snapshot.tenants),
          security_deposit=_sum(tenant.security_deposit for tenant in snapshot.tenants),
          monthly_collection=_sum(bill.total_amount for bill in paid_bills),
          monthly_pending=_sum(bill.total_amount for bill in unpaid_bills),
          monthly_expenses=_sum(expense.amount for expense in snapshot.expenses),
          occupancy_rate=billing.occupancy_rate(total_rooms, occupied_rooms),
          collection_rate=billing.collection_rate(len(snapshot.bills), len(paid_bills)),
     )


def billing_summary(snapshot: DataSnapshot, today: Optional[date] = None) -> BillingSummary:
     today = today or date.today()
     by_status: Dict[BillStatus, Decimal] = defaultdict(lambda: ZERO)
     for bill in snapshot.bills:
          by_status[BillStatus(bill.payment_status)] += bill.total_amount
     overdue = [bill for bill in snapshot.bills if bill.is_overdue(today)]

     return BillingSummary(
          total_billed=_sum(bill.total_amount for bill in snapshot.bills),
          total_paid=by_status[BillStatus.PAID],
          total_partial=by_status[BillStatus.PARTIAL],
          total_pending=by_status[BillStatus.UNPAID],
          overdue_count=len(overdue),
          overdue_amount=_sum(bill.total_amount for bill in overdue),
     )


def room_type_breakdown(snapshot: DataSnapshot) -> List[RoomTypeOccupancy]:
     """Occupied / total per room type, always listing all four types."""
     result = []
     for room_type in RoomType:
          rooms = [room for room in snapshot.rooms if room.room_type == room_type]
          result.append(RoomTypeOccupancy(
               room_type=room_type.value,
               occupied=sum(1 for room in rooms if room.status == RoomStatus.OCCUPIED),
               total=len(rooms),
          ))
     return result


def floor_breakdown(snapshot: DataSnapshot) -> List[FloorStats]:
     """
     Per-floor room counts and rent of occupied rooms.

     A room without a stored floor falls back to the floor in its number;
     rooms whose floor cannot be worked out are left out.
     """
     floors: Dict[int, list] = defaultdict(list)
     for room in snapshot.rooms:
          floor = room.floor if room.floor is not None else billing.floor_for_room(room.room_number)
          if floor is not None:
               floors[floor].append(room)

     result = []
     for floor in sorted(floors):
          rooms = floors[floor]
          occupied = [room for room in rooms if room.status == RoomStatus.OCCUPIED]
          result.append(FloorStats(
               floor=floor,
               label="Ground Floor" if floor == 0 else f"Floor {floor}",
               total_rooms=len(rooms),
               occupied_rooms=len(occupied),
               vacant_rooms=sum(1 for room in rooms if room.status == RoomStatus.VACANT),
               maintenance_rooms=sum(1 for room in rooms if room.status == RoomStatus.MAINTENANCE),
               total_revenue=_sum(room.rent_amount for room in occupied),
          ))
     return result


def room_occupancy(snapshot: DataSnapshot) -> RoomOccupancySummary:
     """
     Occupancy by room number, derived from tenants rather than room status.

     Room numbers come from both rooms and tenants, so a tenant assigned to a
     number with no Room row still shows up. A room is occupied while any
     active-like tenant references it.
     """
     rooms_by_number = {room.room_number: room for room in snapshot.rooms}
     occupants: Dict[str, list] = defaultdict(list)
     for tenant in snapshot.tenants:
          if tenant.is_active_like:
               occupants[tenant.room_number].append(tenant)

     numbers = set(rooms_by_number) | {tenant.room_number for tenant in snapshot.tenants}
     rooms = []
     for number in sorted(numbers, key=_natural_key):
          room = rooms_by_number.get(number)
          tenants = [
               RoomOccupant(
                    name=tenant.name,
                    mobile=tenant.mobile,
                    rent=tenant.monthly_rent,
                    deposit=tenant.effective_deposit(),
                    status=TenantStatus(tenant.status).value,
                    notice_given=bool(tenant.notice_given),
                    notice_date=tenant.notice_date,
                    joining_date=tenant.joining_date,
               )
               for tenant in occupants.get(number, [])
          ]
          rooms.append(RoomOccupancy(
               room_number=number,
               room_status=RoomStatus.OCCUPIED.value if tenants else RoomStatus.VACANT.value,
               floor=room.floor if room is not None else billing.floor_for_room(number),
               room_type=RoomType(room.room_type).value if room is not None else None,
               capacity=room.capacity if room is not None else None,
               tenants=tenants,
          ))

     all_occupants = [occupant for room in rooms for occupant in room.tenants]
     total_rent = _sum(occupant.rent for occupant in all_occupants)
     average_rent = 0
     if all_occupants:
          average_rent = int((total_rent / len(all_occupants)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
     occupied = sum(1 for room in rooms if room.tenants)

     return RoomOccupancySummary(
          rooms=rooms,
          total_rooms=len(rooms),
          occupied_rooms=occupied,
          vacant_rooms=len(rooms) - occupied,
          total_tenants=len(all_occupants),
          total_rent=total_rent,
          total_deposit=_sum(occupant.deposit for occupant in all_occupants),
          notice_period_tenants=sum(1 for occupant in all_occupants if occupant.notice_given),
          average_rent=average_rent,
     )


def electricity_stats(snapshot: DataSnapshot, today: Optional[date] = None) -> ElectricityStats:
     """Totals over the logged meter readings; billed readings count as collected."""
     current_month = billing.month_key(today or date.today())
     readings = snapshot.readings
     this_month = [r for r in readings if billing.month_key(r.reading_date) == current_month]

     return ElectricityStats(
          total_units=_sum(r.units_consumed for r in readings),
          total_amount=_sum(r.amount for r in readings),
          total_collected=_sum(r.amount for r in readings if r.is_billed),
          pending_amount=_sum(r.amount for r in readings if not r.is_billed),
          current_month_units=_sum(r.units_consumed for r in this_month),
          current_month_amount=_sum(r.amount for r in this_month),
     )


def _grouped(expenses, key) -> List[CategoryTotal]:
     amounts: Dict[str, Decimal] = defaultdict(lambda: ZERO)
     counts: Dict[str, int] = defaultdict(int)
     for expense in expenses:
          name = key(expense)
          amounts[name] += expense.amount
          counts[name] += 1
     totals = [CategoryTotal(name=name, amount=amounts[name], count=counts[name]) for name in amounts]
     totals.sort(key=lambda total: (-total.amount, total.name))
     return totals


def expense_breakdown(snapshot: DataSnapshot, month: str) -> ExpenseBreakdown:
     """Expenses of one YYYY-MM month, grouped by category and by payment method."""
     expenses = [e for e in snapshot.expenses if billing.month_key(e.date) == month]
     return ExpenseBreakdown(
          month=month,
          total=_sum(e.amount for e in expenses),
          by_category=_grouped(expenses, lambda e: e.category.value),
          by_payment_method=_grouped(expenses, lambda e: e.payment_method.value),
     )


def vacancy_forecast(
     snapshot: DataSnapshot,
     months_ahead: int = 3,
     today: Optional[date] = None
) -> List[VacancyForecast]:
     """
     Rooms expected to free up over the coming months, starting with the current one.

     Each month stands alone: available = rooms vacant today + tenants
     leaving that month. Departures from an earlier forecast month are not
     carried forward.
     """
     today = today or date.today()
     total_rooms = len(snapshot.rooms)
     occupied_rooms = sum(1 for room in snapshot.rooms if room.status == RoomStatus.OCCUPIED)
     vacant_rooms = sum(1 for room in snapshot.rooms if room.status == RoomStatus.VACANT)

     forecast = []
     for offset in range(months_ahead):
          first_day = billing.add_months(today, offset)
          key = billing.month_key(first_day)
          departing = sorted(
               (tenant for tenant in snapshot.tenants if tenant.departs_in(key)),
               key=lambda tenant: (tenant.departure_date, _natural_key(tenant.room_number))
          )
          forecast.append(VacancyForecast(
               month=key,
               month_name=first_day.strftime("%B %Y"),
               total_rooms=total_rooms,
               occupied_rooms=occupied_rooms,
               vacant_rooms=vacant_rooms,
               departing_tenants=len(departing),
               available_rooms=vacant_rooms + len(departing),
               rooms_becoming_vacant=[
                    DepartingRoom(
                         room_number=tenant.room_number,
                         tenant_name=tenant.name,
                         departure_date=tenant.departure_date,
                    )
                    for tenant in departing
               ],
          ))
     return forecast
