# routers/electricity.py
"""
Electricity meter reading routes.

Readings are logged per room, independently of bills.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from repositories import ElectricityReadingRepository
from schemas.electricity import (
     ElectricityReadingLog,
     ElectricityReadingResponse,
     ElectricityReadingUpdate,
)
from services import TenantService

router = APIRouter(prefix="/api/electricity-readings", tags=["electricity"])


@router.post(
     "",
     response_model=ElectricityReadingResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Log a meter reading"
)
def log_reading(
     reading_data: ElectricityReadingLog,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Units and amount are measured from the room's previous reading.
     The first reading for a room is charged nothing.
     """
     return TenantService.record_electricity_reading(
          db,
          room_number=reading_data.room_number,
          current_reading=reading_data.current_reading,
          tenant_name=reading_data.tenant_name,
          reading_date=reading_data.reading_date,
     )


@router.get(
     "",
     response_model=List[ElectricityReadingResponse],
     summary="List meter readings"
)
def list_readings(
     room_number: Optional[str] = Query(None, alias="roomNumber", description="Filter by room"),
     is_billed: Optional[bool] = Query(None, alias="isBilled", description="Filter by billed flag"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     criteria = {}
     if room_number:
          criteria["room_number"] = room_number
     if is_billed is not None:
          criteria["is_billed"] = is_billed
     return ElectricityReadingRepository(db).filter_by(**criteria)


@router.patch(
     "/{reading_id}",
     response_model=ElectricityReadingResponse,
     summary="Update meter reading"
)
def update_reading(
     reading_id: int,
     reading_data: ElectricityReadingUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Mark a reading billed or fix the tenant name."""
     return ElectricityReadingRepository(db).update(reading_id, reading_data)


@router.delete(
     "/{reading_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete meter reading"
)
def delete_reading(
     reading_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     ElectricityReadingRepository(db).delete(reading_id)
     return None
