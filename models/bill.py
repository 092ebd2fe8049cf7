# models/bill.py
import enum
from datetime import date
from typing import Optional

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column
from .payment import PaymentMethod


class BillStatus(str, enum.Enum):
     """Enumeration for bill payment status."""
     UNPAID = "unpaid"
     PARTIAL = "partial"
     PAID = "paid"

     def can_move_to(self, target: "BillStatus") -> bool:
          """Lifecycle transitions: unpaid -> partial -> paid, unpaid -> paid."""
          return target in _TRANSITIONS[self]


_TRANSITIONS = {
     BillStatus.UNPAID: {BillStatus.PARTIAL, BillStatus.PAID},
     BillStatus.PARTIAL: {BillStatus.PAID},
     BillStatus.PAID: set(),
}


class Bill(CreatedAtMixin, Base):
     """
     Bill model - the monthly invoice for one tenant.

     total_amount = rent_amount + electricity_charges + adjustments at creation.
     adjustments is signed: negative for a discount, positive for an extra charge.
     """
     __tablename__ = "bills"

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Foreign keys
     tenant_id = Column(
          Integer,
          ForeignKey("tenants.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Bill details
     billing_period = Column(String(7), nullable=False, index=True)  # YYYY-MM
     electricity_reading = Column(Numeric(12, 2), nullable=False)
     rent_amount = Column(Numeric(12, 2), nullable=False)
     electricity_charges = Column(Numeric(12, 2), nullable=False)
     adjustments = Column(Numeric(12, 2), default=0, nullable=False)
     total_amount = Column(Numeric(12, 2), nullable=False)
     bill_date = Column(Date, nullable=False)
     due_date = Column(Date, nullable=False, index=True)

     payment_status = Column(
          enum_column(BillStatus, "bill_status"),
          default=BillStatus.UNPAID,
          nullable=False,
          index=True
     )
     payment_date = Column(Date, nullable=True)
     payment_method = Column(enum_column(PaymentMethod, "bill_payment_method"), nullable=True)

     # Relationships
     tenant = relationship("Tenant", back_populates="bills")
     payments = relationship("Payment", back_populates="bill")

     def __repr__(self):
          return (
               f"<Bill(id={self.id}, tenant_id={self.tenant_id}, period='{self.billing_period}', "
               f"total={self.total_amount}, status='{self.payment_status}')>"
          )

     def is_overdue(self, today: Optional[date] = None) -> bool:
          """Unpaid and past the due date."""
          today = today or date.today()
          return self.payment_status == BillStatus.UNPAID and self.due_date < today
