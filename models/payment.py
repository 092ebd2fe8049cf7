# models/payment.py
import enum

from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column


class PaymentMethod(str, enum.Enum):
     CASH = "cash"
     ONLINE = "online"
     UPI = "upi"
     BANK_TRANSFER = "bank_transfer"
     CHEQUE = "cheque"


class PaymentRecordStatus(str, enum.Enum):
     COMPLETED = "completed"
     PENDING = "pending"


class Payment(CreatedAtMixin, Base):
     """
     Payment model - money received against a bill.

     tenant_id duplicates bill.tenant_id for query convenience. Deleting a bill
     does not remove its payments.
     """
     __tablename__ = "payments"

     id = Column(Integer, primary_key=True, autoincrement=True)
     bill_id = Column(Integer, ForeignKey("bills.id", ondelete="NO ACTION"), nullable=True, index=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="NO ACTION"), nullable=False, index=True)

     payment_amount = Column(Numeric(12, 2), nullable=False)
     payment_date = Column(Date, nullable=False)
     payment_method = Column(enum_column(PaymentMethod, "payment_method"), nullable=False)
     payment_status = Column(
          enum_column(PaymentRecordStatus, "payment_record_status"),
          default=PaymentRecordStatus.COMPLETED,
          nullable=False
     )
     receipt_sent = Column(Boolean, default=False, nullable=False)
     notes = Column(Text, nullable=True)

     # Relationships
     bill = relationship("Bill", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, bill_id={self.bill_id}, amount={self.payment_amount})>"
