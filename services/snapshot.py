# services/snapshot.py
"""
In-memory copy of every collection the dashboard needs.

Owned by the caller (one per request, or one per long-lived session) and
passed explicitly to the reporting functions. Nothing refreshes it behind
the caller's back: call refresh() after writes.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from models import Bill, ElectricityReading, Expense, Payment, Room, Tenant
from repositories import (
     BillRepository,
     ElectricityReadingRepository,
     ExpenseRepository,
     PaymentRepository,
     RoomRepository,
     TenantRepository,
)

log = logging.getLogger(__name__)


@dataclass
class DataSnapshot:
     tenants: List[Tenant] = field(default_factory=list)
     rooms: List[Room] = field(default_factory=list)
     bills: List[Bill] = field(default_factory=list)
     payments: List[Payment] = field(default_factory=list)
     expenses: List[Expense] = field(default_factory=list)
     readings: List[ElectricityReading] = field(default_factory=list)

     @classmethod
     def load(cls, db: Session) -> "DataSnapshot":
          snapshot = cls()
          snapshot.refresh(db)
          return snapshot

     def refresh(self, db: Session) -> "DataSnapshot":
          """Reload every collection from the store. On failure the old data is kept."""
          tenants = TenantRepository(db).get_all()
          rooms = RoomRepository(db).get_all()
          bills = BillRepository(db).get_all()
          payments = PaymentRepository(db).get_all()
          expenses = ExpenseRepository(db).get_all()
          readings = ElectricityReadingRepository(db).get_all()

          self.tenants, self.rooms, self.bills = tenants, rooms, bills
          self.payments, self.expenses, self.readings = payments, expenses, readings
          log.debug(
               "Snapshot loaded: %d tenants, %d rooms, %d bills, %d payments, %d expenses, %d readings",
               len(tenants), len(rooms), len(bills), len(payments), len(expenses), len(readings)
          )
          return self
