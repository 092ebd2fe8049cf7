# schemas/__init__.py
from .base import CamelModel
from .tenant import TenantCreate, TenantUpdate, TenantResponse, TenantNotice, TenantMoveOut
from .room import RoomCreate, RoomUpdate, RoomResponse
from .bill import (
     BillGenerate,
     BillCreate,
     BillUpdate,
     BillResponse,
     OverdueBill,
     OverdueBillList,
     TenantBalance,
)
from .payment import PaymentRecord, PaymentCreate, PaymentUpdate, PaymentResponse, PaymentRecordResponse
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .electricity import (
     ElectricityReadingLog,
     ElectricityReadingCreate,
     ElectricityReadingUpdate,
     ElectricityReadingResponse,
)
from .receipt import ReceiptResponse

__all__ = [
     "CamelModel",
     "TenantCreate",
     "TenantUpdate",
     "TenantResponse",
     "TenantNotice",
     "TenantMoveOut",
     "RoomCreate",
     "RoomUpdate",
     "RoomResponse",
     "BillGenerate",
     "BillCreate",
     "BillUpdate",
     "BillResponse",
     "OverdueBill",
     "OverdueBillList",
     "TenantBalance",
     "PaymentRecord",
     "PaymentCreate",
     "PaymentUpdate",
     "PaymentResponse",
     "PaymentRecordResponse",
     "ExpenseCreate",
     "ExpenseUpdate",
     "ExpenseResponse",
     "ElectricityReadingLog",
     "ElectricityReadingCreate",
     "ElectricityReadingUpdate",
     "ElectricityReadingResponse",
     "ReceiptResponse",
]
