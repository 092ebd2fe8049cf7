# schemas/reporting.py
"""
Response shapes for the dashboard / reporting endpoints.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from .base import CamelModel


class DashboardMetrics(CamelModel):
     active_tenants: int
     total_rooms: int
     occupied_rooms: int
     total_monthly_rent: Decimal
     security_deposit: Decimal
     monthly_collection: Decimal
     monthly_pending: Decimal
     monthly_expenses: Decimal
     occupancy_rate: int
     collection_rate: int


class BillingSummary(CamelModel):
     total_billed: Decimal
     total_paid: Decimal
     total_partial: Decimal
     total_pending: Decimal
     overdue_count: int
     overdue_amount: Decimal


class RoomTypeOccupancy(CamelModel):
     room_type: str
     occupied: int
     total: int


class FloorStats(CamelModel):
     floor: int
     label: str
     total_rooms: int
     occupied_rooms: int
     vacant_rooms: int
     maintenance_rooms: int
     total_revenue: Decimal


class RoomOccupant(CamelModel):
     name: str
     mobile: str
     rent: Decimal
     deposit: Decimal
     status: str
     notice_given: bool
     notice_date: Optional[date] = None
     joining_date: date


class RoomOccupancy(CamelModel):
     room_number: str
     room_status: str
     floor: Optional[int] = None
     room_type: Optional[str] = None
     capacity: Optional[int] = None
     tenants: List[RoomOccupant] = []


class RoomOccupancySummary(CamelModel):
     rooms: List[RoomOccupancy]
     total_rooms: int
     occupied_rooms: int
     vacant_rooms: int
     total_tenants: int
     total_rent: Decimal
     total_deposit: Decimal
     notice_period_tenants: int
     average_rent: int


class ElectricityStats(CamelModel):
     total_units: Decimal
     total_amount: Decimal
     total_collected: Decimal
     pending_amount: Decimal
     current_month_units: Decimal
     current_month_amount: Decimal


class CategoryTotal(CamelModel):
     name: str
     amount: Decimal
     count: int


class ExpenseBreakdown(CamelModel):
     month: str
     total: Decimal
     by_category: List[CategoryTotal]
     by_payment_method: List[CategoryTotal]


class DepartingRoom(CamelModel):
     room_number: str
     tenant_name: str
     departure_date: date


class VacancyForecast(CamelModel):
     month: str
     month_name: str
     total_rooms: int
     occupied_rooms: int
     vacant_rooms: int
     departing_tenants: int
     available_rooms: int
     rooms_becoming_vacant: List[DepartingRoom]


class TenantStatusCounts(CamelModel):
     counts: Dict[str, int]
     total: int
