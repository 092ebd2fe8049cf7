# routers/dashboard.py
"""
Dashboard / reporting routes.

Each request loads a fresh DataSnapshot and recomputes from it.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.reporting import (
     BillingSummary,
     DashboardMetrics,
     ElectricityStats,
     ExpenseBreakdown,
     FloorStats,
     RoomOccupancySummary,
     RoomTypeOccupancy,
     TenantStatusCounts,
     VacancyForecast,
)
from services import DataSnapshot, billing, reporting_service

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


def get_snapshot(db: Session = Depends(get_session)) -> DataSnapshot:
     return DataSnapshot.load(db)


@router.get("/metrics", response_model=DashboardMetrics, summary="Headline dashboard numbers")
def get_metrics(
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.dashboard_metrics(snapshot)


@router.get("/billing-summary", response_model=BillingSummary, summary="Bill totals by status")
def get_billing_summary(
     as_of: Optional[date] = Query(None, alias="asOf", description="Reference date for overdue bills"),
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.billing_summary(snapshot, as_of)


@router.get("/tenant-status", response_model=TenantStatusCounts, summary="Tenant counts by status")
def get_tenant_status_counts(
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.tenant_status_counts(snapshot)


@router.get("/room-types", response_model=List[RoomTypeOccupancy], summary="Occupancy by room type")
def get_room_types(
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.room_type_breakdown(snapshot)


@router.get("/floors", response_model=List[FloorStats], summary="Occupancy by floor")
def get_floors(
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.floor_breakdown(snapshot)


@router.get("/occupancy", response_model=RoomOccupancySummary, summary="Who lives in which room")
def get_occupancy(
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.room_occupancy(snapshot)


@router.get("/electricity", response_model=ElectricityStats, summary="Meter reading totals")
def get_electricity_stats(
     as_of: Optional[date] = Query(None, alias="asOf", description="Month counted as current"),
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.electricity_stats(snapshot, as_of)


@router.get("/expenses", response_model=ExpenseBreakdown, summary="Expenses of a month by category")
def get_expense_breakdown(
     month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM, defaults to this month"),
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.expense_breakdown(snapshot, month or billing.month_key(date.today()))


@router.get("/vacancy-forecast", response_model=List[VacancyForecast], summary="Rooms freeing up")
def get_vacancy_forecast(
     months: int = Query(3, ge=1, le=12, description="Number of months to forecast"),
     as_of: Optional[date] = Query(None, alias="asOf", description="First forecast month"),
     snapshot: DataSnapshot = Depends(get_snapshot),
     token: dict = Depends(verify_token)
):
     return reporting_service.vacancy_forecast(snapshot, months, as_of)
