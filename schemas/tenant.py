# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from models.tenant import Tenant, TenantStatus, TenantCategory, StayDuration
from .base import CamelModel, UpdateModel


class TenantBase(CamelModel):
     name: str = Field(..., min_length=1, max_length=200)
     mobile: str = Field(..., min_length=1, max_length=20)
     room_number: str = Field(..., min_length=1, max_length=20)
     joining_date: date
     monthly_rent: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     electricity_joining_reading: Decimal = Field(Decimal("0"), ge=0)
     last_electricity_reading: Optional[Decimal] = Field(None, ge=0)
     status: TenantStatus = TenantStatus.ACTIVE
     has_food: bool = False
     category: Optional[TenantCategory] = None
     departure_date: Optional[date] = None
     stay_duration: Optional[StayDuration] = None
     notice_given: bool = False
     notice_date: Optional[date] = None
     security_adjustment: Decimal = Decimal("0")


class TenantCreate(TenantBase):
     """Schema for a tenant moving in."""

     @model_validator(mode="after")
     def check_meter_is_monotonic(self):
          if (
               self.last_electricity_reading is not None
               and self.last_electricity_reading < self.electricity_joining_reading
          ):
               raise ValueError("lastElectricityReading cannot be lower than electricityJoiningReading")
          return self


class TenantUpdate(UpdateModel):
     """Partial update; only the fields sent are written."""
     store_model = Tenant

     name: Optional[str] = Field(None, min_length=1, max_length=200)
     mobile: Optional[str] = Field(None, min_length=1, max_length=20)
     room_number: Optional[str] = Field(None, min_length=1, max_length=20)
     joining_date: Optional[date] = None
     monthly_rent: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     electricity_joining_reading: Optional[Decimal] = Field(None, ge=0)
     last_electricity_reading: Optional[Decimal] = Field(None, ge=0)
     status: Optional[TenantStatus] = None
     has_food: Optional[bool] = None
     category: Optional[TenantCategory] = None
     departure_date: Optional[date] = None
     stay_duration: Optional[StayDuration] = None
     notice_given: Optional[bool] = None
     notice_date: Optional[date] = None
     security_adjustment: Optional[Decimal] = None


class TenantResponse(TenantBase):
     id: int
     created_at: datetime


class TenantNotice(CamelModel):
     """Body for POST /api/tenants/{id}/notice."""
     notice_date: date
     departure_date: Optional[date] = None


class TenantMoveOut(CamelModel):
     """Body for POST /api/tenants/{id}/move-out."""
     departure_date: date
