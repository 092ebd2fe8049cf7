# services/invoice_service.py
"""
Invoice Service - Business logic layer for bill operations.

This service handles bill generation, payment recording and the bill
payment lifecycle, separate from the API layer:

     unpaid --> partial --> paid
     unpaid --------------> paid

No lifecycle call moves a bill out of PAID. update_bill is the
administrative override and may set any status.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from errors import DuplicateBillError, ValidationError
from models import Bill, BillStatus, Payment, PaymentMethod, Tenant
from repositories import BillRepository, PaymentRepository, TenantRepository
from schemas.bill import BillCreate, BillUpdate, StatusTotal, TenantBalance
from schemas.payment import PaymentCreate
from . import billing

log = logging.getLogger(__name__)


class InvoiceService:
     """Service class for bill-related business logic."""

     @staticmethod
     def generate_bill(
          db: Session,
          tenant_id: int,
          billing_period: str,
          electricity_reading: Decimal,
          adjustments: Decimal = Decimal("0"),
          bill_date: Optional[date] = None
     ) -> Bill:
          """
          Generate the monthly bill for a tenant.

          Args:
               db: SQLAlchemy database session
               tenant_id: ID of the tenant
               billing_period: YYYY-MM
               electricity_reading: Current meter reading
               adjustments: Signed manual correction (discount < 0 < surcharge)
               bill_date: Defaults to today; due date is bill_date + BILL_DUE_DAYS

          Returns:
               Created Bill object (status UNPAID)

          Raises:
               NotFoundError: If the tenant doesn't exist
               ValidationError: If the tenant is not billable
               DuplicateBillError: If the tenant already has a bill for the period

          The tenant's cached last_electricity_reading is left alone; see
          reconcile_tenant_reading.
          """
          tenant = TenantRepository(db).get(tenant_id)
          if not tenant.is_active_like:
               raise ValidationError(
                    f"Tenant {tenant_id} has status '{tenant.status.value}' and cannot be billed"
               )

          bills = BillRepository(db)
          if bills.for_period(tenant_id, billing_period):
               log.warning("Rejected duplicate bill for tenant %s, period %s", tenant_id, billing_period)
               raise DuplicateBillError(
                    f"Tenant {tenant_id} already has a bill for {billing_period}"
               )

          bill_date = bill_date or date.today()
          charges = billing.electricity_charge(electricity_reading, billing.previous_reading_for(tenant))
          total = billing.total_bill(tenant.monthly_rent, charges, adjustments)

          bill = bills.create(BillCreate(
               tenant_id=tenant_id,
               billing_period=billing_period,
               electricity_reading=electricity_reading,
               rent_amount=tenant.monthly_rent,
               electricity_charges=charges,
               adjustments=adjustments,
               total_amount=total,
               bill_date=bill_date,
               due_date=billing.due_date_for(bill_date),
               payment_status=BillStatus.UNPAID,
          ))
          log.info(
               "Generated bill %s for tenant %s (%s): total=%s",
               bill.id, tenant_id, billing_period, total
          )
          return bill

     @staticmethod
     def record_payment(
          db: Session,
          bill_id: int,
          amount: Decimal,
          payment_method: PaymentMethod,
          payment_date: Optional[date] = None,
          notes: Optional[str] = None
     ) -> Tuple[Payment, Bill]:
          """
          Record money received against a bill.

          The bill becomes PAID when this payment covers bill.total_amount,
          otherwise PARTIAL. Each payment is compared with the bill's original
          total, not with a remaining balance.

          Raises:
               ValidationError: If amount <= 0 or the bill is already paid
               NotFoundError: If the bill doesn't exist
          """
          if amount is None or amount <= 0:
               raise ValidationError("Payment amount must be greater than zero")

          bills = BillRepository(db)
          bill = bills.get(bill_id)
          if bill.payment_status == BillStatus.PAID:
               log.warning("Rejected payment against already paid bill %s", bill_id)
               raise ValidationError(f"Bill {bill_id} is already paid")

          payment_date = payment_date or date.today()
          current = BillStatus(bill.payment_status)
          target = BillStatus.PAID if amount >= bill.total_amount else BillStatus.PARTIAL
          # A further partial payment leaves a PARTIAL bill where it is.
          if target != current and not current.can_move_to(target):
               raise ValidationError(
                    f"Bill {bill_id} cannot move from '{current.value}' to '{target.value}'"
               )

          payment = PaymentRepository(db).create(PaymentCreate(
               bill_id=bill.id,
               tenant_id=bill.tenant_id,
               payment_amount=amount,
               payment_date=payment_date,
               payment_method=payment_method,
               notes=notes,
          ))

          bill = bills.update_values(bill.id, {
               "payment_status": target,
               "payment_date": payment_date,
               "payment_method": payment_method,
          })
          log.info(
               "Recorded payment %s of %s on bill %s -> %s",
               payment.id, amount, bill.id, target.value
          )
          return payment, bill

     @staticmethod
     def update_bill(db: Session, bill_id: int, changes: BillUpdate) -> Bill:
          """Administrative edit. Only the fields sent are written."""
          bill = BillRepository(db).update(bill_id, changes)
          log.info("Bill %s edited: %s", bill_id, sorted(changes.model_fields_set))
          return bill

     @staticmethod
     def delete_bill(db: Session, bill_id: int) -> None:
          """Permanently remove a bill. Its payments are kept."""
          BillRepository(db).delete(bill_id)
          log.info("Bill %s deleted", bill_id)

     @staticmethod
     def reconcile_tenant_reading(db: Session, bill_id: int) -> Tenant:
          """
          Copy a bill's meter reading onto its tenant as the last known reading.

          Bill generation does not touch the tenant row; the operator runs
          this once the bill is confirmed so the next bill starts from it.

          Raises:
               ValidationError: If the reading is below the tenant's joining or last reading
          """
          bill = BillRepository(db).get(bill_id)
          tenants = TenantRepository(db)
          tenant = tenants.get(bill.tenant_id)
          floor = tenant.meter_floor()
          if bill.electricity_reading < floor:
               raise ValidationError(
                    f"Reading {bill.electricity_reading} from bill {bill_id} is below the "
                    f"current meter reading {floor} for tenant {tenant.id}"
               )
          tenant = tenants.update_values(tenant.id, {
               "last_electricity_reading": bill.electricity_reading
          })
          log.info("Tenant %s last reading set to %s from bill %s", tenant.id, bill.electricity_reading, bill_id)
          return tenant

     @staticmethod
     def overdue_bills(db: Session, today: Optional[date] = None) -> List[Tuple[Bill, int]]:
          """
          Unpaid bills past their due date, oldest due first, each with its age in days.
          """
          today = today or date.today()
          overdue = [bill for bill in BillRepository(db).get_all() if bill.is_overdue(today)]
          overdue.sort(key=lambda bill: bill.due_date)
          return [(bill, billing.days_overdue(bill.due_date, today)) for bill in overdue]

     @staticmethod
     def calculate_tenant_balance(
          db: Session,
          tenant_id: int,
          today: Optional[date] = None
     ) -> TenantBalance:
          """
          Calculate the total balance owed by a tenant.

          Args:
               db: SQLAlchemy database session
               tenant_id: ID of the tenant
               today: Reference date for overdue detection

          Returns:
               TenantBalance with counts and amounts per payment status
          """
          today = today or date.today()
          tenant = TenantRepository(db).get(tenant_id)
          bills = BillRepository(db).by_tenant(tenant_id)

          def _total(selected: List[Bill]) -> StatusTotal:
               return StatusTotal(
                    count=len(selected),
                    amount=sum((b.total_amount for b in selected), Decimal("0"))
               )

          paid = [b for b in bills if b.payment_status == BillStatus.PAID]
          partial = [b for b in bills if b.payment_status == BillStatus.PARTIAL]
          unpaid = [b for b in bills if b.payment_status == BillStatus.UNPAID]
          overdue = [b for b in bills if b.is_overdue(today)]

          return TenantBalance(
               tenant_id=tenant_id,
               tenant_name=tenant.name,
               total_bills=len(bills),
               total_amount=sum((b.total_amount for b in bills), Decimal("0")),
               total_owed=sum((b.total_amount for b in partial + unpaid), Decimal("0")),
               paid=_total(paid),
               partial=_total(partial),
               unpaid=_total(unpaid),
               overdue=_total(overdue),
          )
