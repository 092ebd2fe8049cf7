# schemas/receipt.py
from .base import CamelModel


class ReceiptResponse(CamelModel):
     """Rendered receipt for one bill."""
     bill_id: int
     text: str
     share_message: str
     share_link: str
