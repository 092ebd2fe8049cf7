# routers/payments.py
"""
Payment API routes.

POST /api/payments records money received against a bill and moves the bill
to PARTIAL or PAID. Payments are never matched to a running balance: each
one is compared with the bill's total.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from repositories import PaymentRepository
from schemas.bill import BillResponse
from schemas.payment import (
     PaymentRecord,
     PaymentRecordResponse,
     PaymentResponse,
     PaymentUpdate,
)
from services import InvoiceService

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.post(
     "",
     response_model=PaymentRecordResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment"
)
def record_payment(
     body: PaymentRecord,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Record a payment against a bill.

     - **billId**: Bill being paid (must not already be paid)
     - **paymentAmount**: Covers the bill total -> PAID, anything less -> PARTIAL
     - **paymentMethod**: cash, online, upi, bank_transfer or cheque
     """
     payment, bill = InvoiceService.record_payment(
          db,
          bill_id=body.bill_id,
          amount=body.payment_amount,
          payment_method=body.payment_method,
          payment_date=body.payment_date,
          notes=body.notes,
     )
     return PaymentRecordResponse(
          payment=PaymentResponse.model_validate(payment),
          bill=BillResponse.model_validate(bill),
     )


@router.get(
     "",
     response_model=List[PaymentResponse],
     summary="List payments"
)
def list_payments(
     tenant_id: Optional[int] = Query(None, alias="tenantId", description="Filter by tenant ID"),
     bill_id: Optional[int] = Query(None, alias="billId", description="Filter by bill ID"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Latest payment date first."""
     criteria = {}
     if tenant_id:
          criteria["tenant_id"] = tenant_id
     if bill_id:
          criteria["bill_id"] = bill_id
     return PaymentRepository(db).filter_by(**criteria)


@router.get(
     "/{payment_id}",
     response_model=PaymentResponse,
     summary="Get payment by ID"
)
def get_payment(
     payment_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return PaymentRepository(db).get(payment_id)


@router.patch(
     "/{payment_id}",
     response_model=PaymentResponse,
     summary="Correct a payment"
)
def update_payment(
     payment_id: int,
     payment_data: PaymentUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Fixes the payment row only; the bill's status is left as it is."""
     return PaymentRepository(db).update(payment_id, payment_data)
