# services/__init__.py
from .invoice_service import InvoiceService
from .tenant_service import TenantService
from .snapshot import DataSnapshot
from . import billing, receipt_service, reporting_service

__all__ = [
     "InvoiceService",
     "TenantService",
     "DataSnapshot",
     "billing",
     "receipt_service",
     "reporting_service",
]
