# schemas/payment.py
"""
Pydantic schemas for payment recording.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from models.payment import Payment, PaymentMethod, PaymentRecordStatus
from .base import CamelModel, UpdateModel
from .bill import BillResponse


class PaymentRecord(CamelModel):
     """Request body for POST /api/payments."""

     bill_id: int = Field(..., gt=0, description="Bill the money is paid against")
     payment_amount: Decimal = Field(..., gt=0, description="Amount received")
     payment_method: PaymentMethod = PaymentMethod.CASH
     payment_date: Optional[date] = Field(None, description="Defaults to today")
     notes: Optional[str] = Field(None, max_length=1000)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "billId": 1,
                    "paymentAmount": 9560,
                    "paymentMethod": "upi",
                    "paymentDate": "2026-10-18",
                    "notes": "October rent"
               }
          }
     )


class PaymentCreate(CamelModel):
     """Full payment row as written to the store."""
     bill_id: Optional[int] = None
     tenant_id: int
     payment_amount: Decimal
     payment_date: date
     payment_method: PaymentMethod
     payment_status: PaymentRecordStatus = PaymentRecordStatus.COMPLETED
     receipt_sent: bool = False
     notes: Optional[str] = None


class PaymentUpdate(UpdateModel):
     """Operator correction of a recorded payment."""
     store_model = Payment

     payment_amount: Optional[Decimal] = Field(None, gt=0)
     payment_date: Optional[date] = None
     payment_method: Optional[PaymentMethod] = None
     payment_status: Optional[PaymentRecordStatus] = None
     receipt_sent: Optional[bool] = None
     notes: Optional[str] = None


class PaymentResponse(PaymentCreate):
     id: int
     created_at: datetime


class PaymentRecordResponse(CamelModel):
     """Response for POST /api/payments: the payment and the bill it settled."""
     payment: PaymentResponse
     bill: BillResponse
