# schemas/bill.py
"""
Pydantic schemas for Bill API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from models.bill import Bill, BillStatus
from models.payment import PaymentMethod
from .base import CamelModel, UpdateModel

BILLING_PERIOD_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class BillGenerate(CamelModel):
     """Schema for generating a new bill from a meter reading."""
     tenant_id: int = Field(..., gt=0, description="Tenant being billed")
     billing_period: str = Field(..., pattern=BILLING_PERIOD_PATTERN, description="YYYY-MM")
     electricity_reading: Decimal = Field(..., ge=0, description="Current meter reading")
     adjustments: Decimal = Field(Decimal("0"), description="Signed manual correction")
     bill_date: Optional[date] = Field(None, description="Defaults to today")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenantId": 1,
                    "billingPeriod": "2026-10",
                    "electricityReading": 1100,
                    "adjustments": 0
               }
          }
     )


class BillCreate(CamelModel):
     """Full bill row as written to the store."""
     tenant_id: int
     billing_period: str = Field(..., pattern=BILLING_PERIOD_PATTERN)
     electricity_reading: Decimal
     rent_amount: Decimal
     electricity_charges: Decimal
     adjustments: Decimal = Decimal("0")
     total_amount: Decimal
     bill_date: date
     due_date: date
     payment_status: BillStatus = BillStatus.UNPAID
     payment_date: Optional[date] = None
     payment_method: Optional[PaymentMethod] = None


class BillUpdate(UpdateModel):
     """Administrative edit. Any status may be forced here."""
     store_model = Bill

     billing_period: Optional[str] = Field(None, pattern=BILLING_PERIOD_PATTERN)
     electricity_reading: Optional[Decimal] = Field(None, ge=0)
     rent_amount: Optional[Decimal] = Field(None, ge=0)
     electricity_charges: Optional[Decimal] = None
     adjustments: Optional[Decimal] = None
     total_amount: Optional[Decimal] = None
     bill_date: Optional[date] = None
     due_date: Optional[date] = None
     payment_status: Optional[BillStatus] = None
     payment_date: Optional[date] = None
     payment_method: Optional[PaymentMethod] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "paymentStatus": "paid"
               }
          }
     )


class BillResponse(BillCreate):
     id: int
     created_at: datetime


class OverdueBill(CamelModel):
     bill: BillResponse
     days_overdue: int


class OverdueBillList(CamelModel):
     bills: List[OverdueBill]
     total_amount: Decimal


class StatusTotal(CamelModel):
     count: int = 0
     amount: Decimal = Decimal("0")


class TenantBalance(CamelModel):
     """Summary of one tenant's bills."""
     tenant_id: int
     tenant_name: str
     total_bills: int
     total_amount: Decimal
     total_owed: Decimal
     paid: StatusTotal
     partial: StatusTotal
     unpaid: StatusTotal
     overdue: StatusTotal
