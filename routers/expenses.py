# routers/expenses.py
"""
Expense API routes, including receipt image uploads to Azure Blob Storage.
"""
import logging
from typing import List, Optional

from azure.core.exceptions import AzureError
from fastapi import APIRouter, BackgroundTasks, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

import azure_blob
from database import get_session
from dependencies import verify_token
from models import ExpenseCategory
from repositories import ExpenseRepository
from schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from services import billing

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.post(
     "",
     response_model=ExpenseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Add an expense"
)
def create_expense(
     expense_data: ExpenseCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return ExpenseRepository(db).create(expense_data)


@router.get(
     "",
     response_model=List[ExpenseResponse],
     summary="List expenses"
)
def list_expenses(
     category: Optional[ExpenseCategory] = Query(None, description="Filter by category"),
     month: Optional[str] = Query(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$", description="Filter by YYYY-MM"),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Latest first."""
     criteria = {}
     if category is not None:
          criteria["category"] = category
     expenses = ExpenseRepository(db).filter_by(**criteria)
     if month:
          expenses = [e for e in expenses if billing.month_key(e.date) == month]
     return expenses


@router.get(
     "/{expense_id}",
     response_model=ExpenseResponse,
     summary="Get expense by ID"
)
def get_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return ExpenseRepository(db).get(expense_id)


@router.patch(
     "/{expense_id}",
     response_model=ExpenseResponse,
     summary="Update expense"
)
def update_expense(
     expense_id: int,
     expense_data: ExpenseUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return ExpenseRepository(db).update(expense_id, expense_data)


@router.delete(
     "/{expense_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete expense"
)
def delete_expense(
     expense_id: int,
     background_tasks: BackgroundTasks,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Also removes an uploaded receipt image, if any, once the delete is committed."""
     expenses = ExpenseRepository(db)
     expense = expenses.get(expense_id)
     receipt_url = expense.receipt_url
     expenses.delete(expense_id)
     if receipt_url and ".blob.core.windows.net/" in receipt_url:
          background_tasks.add_task(_delete_receipt_blob, receipt_url)
     return None


def _delete_receipt_blob(receipt_url: str) -> None:
     try:
          azure_blob.delete_from_blob(receipt_url)
     except AzureError as e:
          log.warning("Could not delete receipt %s: %s", receipt_url, e)


@router.post(
     "/{expense_id}/receipt",
     response_model=ExpenseResponse,
     summary="Upload expense receipt"
)
def upload_expense_receipt(
     expense_id: int,
     file: UploadFile = File(...),
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """Store the receipt image and point the expense at it."""
     expenses = ExpenseRepository(db)
     expenses.get(expense_id)
     try:
          receipt_url = azure_blob.upload_receipt(file, expense_id)
     except AzureError as e:
          log.error("Receipt upload for expense %s failed: %s", expense_id, e)
          raise HTTPException(
               status_code=status.HTTP_502_BAD_GATEWAY,
               detail="Failed to upload receipt"
          )
     return expenses.update_values(expense_id, {"receipt_url": receipt_url})
