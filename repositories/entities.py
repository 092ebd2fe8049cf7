# repositories/entities.py
"""
One repository per entity, each with the store's default ordering.
"""
from typing import List, Optional

from sqlalchemy import select

from models import Bill, ElectricityReading, Expense, Payment, Room, Tenant
from .base import Repository


class TenantRepository(Repository[Tenant]):
     model = Tenant
     default_order = (Tenant.created_at.desc(), Tenant.id.desc())

     def in_room(self, room_number: str) -> List[Tenant]:
          return self.filter_by(room_number=room_number)


class RoomRepository(Repository[Room]):
     model = Room
     default_order = (Room.room_number,)

     def by_number(self, room_number: str) -> Optional[Room]:
          stmt = select(Room).where(Room.room_number == room_number)
          return self._run(lambda: self.db.scalars(stmt).first(), "fetch")


class BillRepository(Repository[Bill]):
     model = Bill
     default_order = (Bill.bill_date.desc(), Bill.id.desc())

     def by_tenant(self, tenant_id: int) -> List[Bill]:
          return self.filter_by(tenant_id=tenant_id)

     def for_period(self, tenant_id: int, billing_period: str) -> List[Bill]:
          return self.filter_by(tenant_id=tenant_id, billing_period=billing_period)


class PaymentRepository(Repository[Payment]):
     model = Payment
     default_order = (Payment.payment_date.desc(), Payment.id.desc())

     def by_bill(self, bill_id: int) -> List[Payment]:
          return self.filter_by(bill_id=bill_id)


class ExpenseRepository(Repository[Expense]):
     model = Expense
     default_order = (Expense.date.desc(), Expense.id.desc())


class ElectricityReadingRepository(Repository[ElectricityReading]):
     model = ElectricityReading
     default_order = (ElectricityReading.reading_date.desc(), ElectricityReading.id.desc())

     def latest_for_room(self, room_number: str) -> Optional[ElectricityReading]:
          stmt = (
               select(ElectricityReading)
               .where(ElectricityReading.room_number == room_number)
               .order_by(*self.default_order)
               .limit(1)
          )
          return self._run(lambda: self.db.scalars(stmt).first(), "fetch")
