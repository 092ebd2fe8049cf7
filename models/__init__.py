# models/__init__.py
from .base import Base
from .tenant import Tenant, TenantStatus, TenantCategory, StayDuration, ACTIVE_LIKE_STATUSES
from .room import Room, RoomType, RoomStatus
from .payment import Payment, PaymentMethod, PaymentRecordStatus
from .bill import Bill, BillStatus
from .expense import Expense, ExpenseCategory
from .electricity_reading import ElectricityReading

__all__ = [
     "Base",
     "Tenant",
     "TenantStatus",
     "TenantCategory",
     "StayDuration",
     "ACTIVE_LIKE_STATUSES",
     "Room",
     "RoomType",
     "RoomStatus",
     "Payment",
     "PaymentMethod",
     "PaymentRecordStatus",
     "Bill",
     "BillStatus",
     "Expense",
     "ExpenseCategory",
     "ElectricityReading",
]
