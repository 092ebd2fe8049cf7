# schemas/electricity.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from models.electricity_reading import ElectricityReading
from .base import CamelModel, UpdateModel


class ElectricityReadingLog(CamelModel):
     """Request body for logging a room meter reading."""
     room_number: str = Field(..., min_length=1, max_length=20)
     tenant_name: Optional[str] = Field(None, max_length=200)
     current_reading: Decimal = Field(..., ge=0)
     reading_date: Optional[date] = None


class ElectricityReadingCreate(CamelModel):
     room_number: str
     tenant_name: Optional[str] = None
     current_reading: Decimal
     last_reading: Optional[Decimal] = None
     reading_date: date
     units_consumed: Decimal = Decimal("0")
     amount: Decimal = Decimal("0")
     is_billed: bool = False


class ElectricityReadingUpdate(UpdateModel):
     store_model = ElectricityReading

     tenant_name: Optional[str] = Field(None, max_length=200)
     is_billed: Optional[bool] = None


class ElectricityReadingResponse(ElectricityReadingCreate):
     id: int
     created_at: datetime
