# models/tenant.py
import enum
from decimal import Decimal

from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column


class TenantStatus(str, enum.Enum):
     """Lifecycle status of a tenant. One closed set used everywhere."""
     ACTIVE = "active"
     PAID = "paid"
     DUE = "due"
     ADJUST = "adjust"
     DEPARTING = "departing"
     LEFT = "left"
     PENDING = "pending"
     TERMINATED = "terminated"
     INACTIVE = "inactive"
     HOLD = "hold"
     PROSPECTIVE = "prospective"

     @property
     def is_active_like(self) -> bool:
          """Statuses that still occupy a bed and can be billed."""
          return self in ACTIVE_LIKE_STATUSES


ACTIVE_LIKE_STATUSES = frozenset({
     TenantStatus.ACTIVE,
     TenantStatus.PAID,
     TenantStatus.DUE,
     TenantStatus.ADJUST,
     TenantStatus.DEPARTING,
     TenantStatus.HOLD,
})


class TenantCategory(str, enum.Enum):
     NEW = "new"
     EXISTING = "existing"
     NO_SECURITY = "no_security"


class StayDuration(str, enum.Enum):
     ONE_MONTH = "1"
     TWO_MONTHS = "2"
     THREE_MONTHS = "3"
     UNKNOWN = "unknown"


class Tenant(CreatedAtMixin, Base):
     """
     Tenant model - a person renting a bed in a room.

     The room is referenced by room number (by value), not by id: several
     tenants may share one room. Tenants are not deleted in normal operation,
     moving out sets the status to LEFT.
     """
     __tablename__ = "tenants"

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Personal info
     name = Column(String(200), nullable=False)
     mobile = Column(String(20), nullable=False)
     room_number = Column(String(20), nullable=False, index=True)
     joining_date = Column(Date, nullable=False)

     # Money
     monthly_rent = Column(Numeric(12, 2), nullable=False)
     security_deposit = Column(Numeric(12, 2), nullable=True)
     security_adjustment = Column(Numeric(12, 2), default=0, nullable=False)

     # Electricity meter
     electricity_joining_reading = Column(Numeric(12, 2), default=0, nullable=False)
     last_electricity_reading = Column(Numeric(12, 2), nullable=True)

     status = Column(
          enum_column(TenantStatus, "tenant_status"),
          default=TenantStatus.ACTIVE,
          nullable=False,
          index=True
     )
     has_food = Column(Boolean, default=False, nullable=False)
     category = Column(enum_column(TenantCategory, "tenant_category"), nullable=True)

     # Departure tracking
     departure_date = Column(Date, nullable=True)
     stay_duration = Column(enum_column(StayDuration, "stay_duration"), nullable=True)
     notice_given = Column(Boolean, default=False, nullable=False)
     notice_date = Column(Date, nullable=True)

     # Relationships
     bills = relationship("Bill", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}', room='{self.room_number}')>"

     @property
     def is_active_like(self) -> bool:
          return TenantStatus(self.status).is_active_like

     def departs_in(self, month_key: str) -> bool:
          """True if this tenant is still in residence and leaves during YYYY-MM."""
          if self.departure_date is None or not self.is_active_like:
               return False
          return self.departure_date.strftime("%Y-%m") == month_key

     def effective_deposit(self) -> Decimal:
          return self.security_deposit or Decimal("0")

     def meter_floor(self) -> Decimal:
          """Lowest reading the meter may move to: the last known one, else the joining one."""
          if self.last_electricity_reading is not None:
               return max(self.last_electricity_reading, self.electricity_joining_reading)
          return self.electricity_joining_reading
