# schemas/expense.py
import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import Field

from models.expense import Expense, ExpenseCategory
from models.payment import PaymentMethod
from .base import CamelModel, UpdateModel


class ExpenseCreate(CamelModel):
     date: dt.date
     category: ExpenseCategory
     description: str = Field(..., min_length=1)
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     payment_method: PaymentMethod = PaymentMethod.CASH
     receipt_url: Optional[str] = Field(None, max_length=500)


class ExpenseUpdate(UpdateModel):
     store_model = Expense

     date: Optional[dt.date] = None
     category: Optional[ExpenseCategory] = None
     description: Optional[str] = Field(None, min_length=1)
     amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
     payment_method: Optional[PaymentMethod] = None
     receipt_url: Optional[str] = Field(None, max_length=500)


class ExpenseResponse(ExpenseCreate):
     id: int
     created_at: dt.datetime
