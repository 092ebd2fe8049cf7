# routers/tenants.py
"""
Tenant API routes.

Tenants are never hard-deleted: moving out sets the status to LEFT.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from models import TenantStatus
from repositories import TenantRepository
from schemas.bill import TenantBalance
from schemas.tenant import (
     TenantCreate,
     TenantMoveOut,
     TenantNotice,
     TenantResponse,
     TenantUpdate,
)
from services import InvoiceService, TenantService

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Move a tenant in"
)
def create_tenant(
     tenant_data: TenantCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Create a tenant and mark their room occupied.

     - **roomNumber**: Room the tenant moves into
     - **electricityJoiningReading**: Meter reading on the joining day
     - **monthlyRent**: Rent charged on every bill
     """
     return TenantService.add_tenant(db, tenant_data)


@router.get(
     "",
     response_model=List[TenantResponse],
     summary="List tenants"
)
def list_tenants(
     tenant_status: Optional[TenantStatus] = Query(None, alias="status", description="Filter by status"),
     room_number: Optional[str] = Query(None, alias="roomNumber", description="Filter by room"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Newest first."""
     criteria = {}
     if tenant_status is not None:
          criteria["status"] = tenant_status
     if room_number:
          criteria["room_number"] = room_number
     return TenantRepository(db).filter_by(**criteria)


@router.get(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Get tenant by ID"
)
def get_tenant(
     tenant_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return TenantRepository(db).get(tenant_id)


@router.patch(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Update tenant"
)
def update_tenant(
     tenant_id: int,
     tenant_data: TenantUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Only the fields sent are changed."""
     return TenantService.update_tenant(db, tenant_id, tenant_data)


@router.post(
     "/{tenant_id}/notice",
     response_model=TenantResponse,
     summary="Record notice of departure"
)
def give_notice(
     tenant_id: int,
     notice: TenantNotice,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return TenantService.give_notice(db, tenant_id, notice.notice_date, notice.departure_date)


@router.post(
     "/{tenant_id}/move-out",
     response_model=TenantResponse,
     summary="Move a tenant out"
)
def move_out(
     tenant_id: int,
     move_out_data: TenantMoveOut,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Status becomes LEFT; the room is freed when nobody else lives in it."""
     return TenantService.move_out(db, tenant_id, move_out_data.departure_date)


@router.get(
     "/{tenant_id}/balance",
     response_model=TenantBalance,
     summary="Get tenant balance"
)
def get_tenant_balance(
     tenant_id: int,
     as_of: Optional[date] = Query(None, alias="asOf", description="Reference date for overdue bills"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Bill counts and amounts per payment status, plus overdue."""
     return InvoiceService.calculate_tenant_balance(db, tenant_id, as_of)
