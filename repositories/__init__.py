# repositories/__init__.py
from .base import Repository
from .entities import (
     TenantRepository,
     RoomRepository,
     BillRepository,
     PaymentRepository,
     ExpenseRepository,
     ElectricityReadingRepository,
)

__all__ = [
     "Repository",
     "TenantRepository",
     "RoomRepository",
     "BillRepository",
     "PaymentRepository",
     "ExpenseRepository",
     "ElectricityReadingRepository",
]
