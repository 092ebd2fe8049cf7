# routers/bills.py
"""
Bill API routes.

Bills move unpaid -> partial -> paid through payments (see routers/payments.py).
PATCH is the administrative override and may set any field, status included.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from models import BillStatus
from repositories import BillRepository, PaymentRepository, TenantRepository
from schemas.bill import (
     BillGenerate,
     BillResponse,
     BillUpdate,
     OverdueBill,
     OverdueBillList,
)
from schemas.receipt import ReceiptResponse
from schemas.tenant import TenantResponse
from services import InvoiceService, receipt_service

router = APIRouter(prefix="/api/bills", tags=["bills"])


@router.post(
     "",
     response_model=BillResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Generate a monthly bill"
)
def generate_bill(
     bill_data: BillGenerate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Generate a bill from the tenant's rent and a new meter reading.

     - **tenantId**: Tenant being billed (must be in an active status)
     - **billingPeriod**: YYYY-MM, one bill per tenant per period
     - **electricityReading**: Current meter reading
     - **adjustments**: Signed correction added to the total
     """
     return InvoiceService.generate_bill(
          db,
          tenant_id=bill_data.tenant_id,
          billing_period=bill_data.billing_period,
          electricity_reading=bill_data.electricity_reading,
          adjustments=bill_data.adjustments,
          bill_date=bill_data.bill_date,
     )


@router.get(
     "",
     response_model=List[BillResponse],
     summary="List bills with filters"
)
def list_bills(
     tenant_id: Optional[int] = Query(None, alias="tenantId", description="Filter by tenant ID"),
     billing_period: Optional[str] = Query(None, alias="billingPeriod", description="Filter by YYYY-MM"),
     payment_status: Optional[BillStatus] = Query(None, alias="paymentStatus", description="Filter by status"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Newest bill date first."""
     criteria = {}
     if tenant_id:
          criteria["tenant_id"] = tenant_id
     if billing_period:
          criteria["billing_period"] = billing_period
     if payment_status is not None:
          criteria["payment_status"] = payment_status
     return BillRepository(db).filter_by(**criteria)


@router.get(
     "/overdue",
     response_model=OverdueBillList,
     summary="List overdue bills"
)
def list_overdue_bills(
     as_of: Optional[date] = Query(None, alias="asOf", description="Reference date, defaults to today"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Unpaid bills past their due date, oldest first, with days overdue."""
     overdue = InvoiceService.overdue_bills(db, as_of)
     return OverdueBillList(
          bills=[
               OverdueBill(bill=BillResponse.model_validate(bill), days_overdue=days)
               for bill, days in overdue
          ],
          total_amount=sum((bill.total_amount for bill, _ in overdue), Decimal("0")),
     )


@router.get(
     "/{bill_id}",
     response_model=BillResponse,
     summary="Get bill by ID"
)
def get_bill(
     bill_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return BillRepository(db).get(bill_id)


@router.patch(
     "/{bill_id}",
     response_model=BillResponse,
     summary="Edit bill"
)
def update_bill(
     bill_id: int,
     bill_data: BillUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Administrative edit; only the fields sent are written."""
     return InvoiceService.update_bill(db, bill_id, bill_data)


@router.delete(
     "/{bill_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete bill"
)
def delete_bill(
     bill_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Irreversible. Payments recorded against the bill are kept, unlinked."""
     InvoiceService.delete_bill(db, bill_id)
     return None


@router.post(
     "/{bill_id}/reconcile-reading",
     response_model=TenantResponse,
     summary="Save the bill's meter reading on the tenant"
)
def reconcile_reading(
     bill_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """The tenant's next bill is measured from this bill's reading."""
     return InvoiceService.reconcile_tenant_reading(db, bill_id)


def _receipt_parts(db: Session, bill_id: int):
     bill = BillRepository(db).get(bill_id)
     tenant = TenantRepository(db).get(bill.tenant_id)
     payments = PaymentRepository(db).by_bill(bill_id)
     return tenant, bill, (payments[0] if payments else None)


@router.get(
     "/{bill_id}/receipt",
     response_model=ReceiptResponse,
     summary="Get bill receipt and share link"
)
def get_receipt(
     bill_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Plain-text receipt, share message and messaging deep link. Latest payment is included."""
     tenant, bill, payment = _receipt_parts(db, bill_id)
     return ReceiptResponse(
          bill_id=bill.id,
          text=receipt_service.receipt_text(tenant, bill, payment),
          share_message=receipt_service.share_message(tenant, bill, payment),
          share_link=receipt_service.share_link(tenant, bill, payment),
     )


@router.get(
     "/{bill_id}/receipt.html",
     response_class=HTMLResponse,
     summary="Printable bill receipt"
)
def get_receipt_html(
     bill_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     tenant, bill, payment = _receipt_parts(db, bill_id)
     return HTMLResponse(content=receipt_service.receipt_html(tenant, bill, payment))
