# models/expense.py
import enum

from sqlalchemy import Column, Date, Integer, Numeric, String, Text

from .base import Base, CreatedAtMixin, enum_column
from .payment import PaymentMethod


class ExpenseCategory(str, enum.Enum):
     MAINTENANCE = "Maintenance & Repairs"
     UTILITIES = "Utilities"
     CLEANING = "Cleaning Supplies"
     SECURITY = "Security Services"
     FOOD = "Food & Groceries"
     SALARIES = "Staff Salaries"
     OTHER = "Other Expenses"


class Expense(CreatedAtMixin, Base):
     """Operating expense. Independent of tenants, rooms and bills."""
     __tablename__ = "expenses"

     id = Column(Integer, primary_key=True, autoincrement=True)
     date = Column(Date, nullable=False, index=True)
     category = Column(enum_column(ExpenseCategory, "expense_category"), nullable=False, index=True)
     description = Column(Text, nullable=False)
     amount = Column(Numeric(12, 2), nullable=False)
     payment_method = Column(enum_column(PaymentMethod, "expense_payment_method"), nullable=False)
     receipt_url = Column(String(500), nullable=True)

     def __repr__(self):
          return f"<Expense(id={self.id}, category='{self.category}', amount={self.amount})>"
