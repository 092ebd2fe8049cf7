# services/receipt_service.py
"""
Receipt Service - printable bill receipts and share links.

Pure formatting: nothing here reads the database or sends anything. The
router loads the tenant, bill and payment and hands them over.
"""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from html import escape
from typing import List, Optional
from urllib.parse import quote

import config
from models import Bill, BillStatus, Payment, Tenant
from . import billing

RULE = "━━━━━━━━━━━━━━━━━━━━━━"

_STATUS_LABELS = {
     BillStatus.PAID: "PAID",
     BillStatus.PARTIAL: "PARTIALLY PAID",
     BillStatus.UNPAID: "PENDING",
}


def _group_indian(digits: str) -> str:
     """1234567 -> 12,34,567"""
     if len(digits) <= 3:
          return digits
     head, tail = digits[:-3], digits[-3:]
     groups = []
     while len(head) > 2:
          groups.insert(0, head[-2:])
          head = head[:-2]
     if head:
          groups.insert(0, head)
     return ",".join(groups + [tail])


def format_currency(amount) -> str:
     """Rupees, Indian digit grouping, rounded to whole rupees: ₹12,34,567"""
     value = Decimal(str(amount or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
     sign = "-" if value < 0 else ""
     return f"{sign}₹{_group_indian(str(abs(int(value))))}"


def format_date(d: date) -> str:
     """18 Oct 2026"""
     return f"{d.day} {d.strftime('%b %Y')}"


def _format_day(d: date) -> str:
     return d.strftime("%d-%m-%Y")


def _format_number(value) -> str:
     value = Decimal(str(value))
     return str(value.quantize(Decimal("1"))) if value == value.to_integral_value() else str(value.normalize())


def normalize_phone(phone: str, country_code: Optional[str] = None) -> str:
     """Keep digits only; a bare 10-digit local number gets the country code."""
     code = config.PHONE_COUNTRY_CODE if country_code is None else country_code
     digits = "".join(ch for ch in (phone or "") if ch.isdigit())
     if len(digits) == 10:
          digits = code + digits
     return digits


def status_label(bill: Bill) -> str:
     return _STATUS_LABELS[BillStatus(bill.payment_status)]


def electricity_details(bill: Bill) -> dict:
     """
     Meter figures for a bill.

     Units are worked back from the stored charge at the configured rate, so
     the receipt matches what was billed even after the tenant's cached
     reading has moved on.
     """
     rate = config.ELECTRICITY_RATE_PER_UNIT
     units = bill.electricity_charges / rate if rate else Decimal("0")
     return {
          "previous": bill.electricity_reading - units,
          "current": bill.electricity_reading,
          "units": units,
          "rate": rate,
     }


def _receipt_lines(tenant: Tenant, bill: Bill, payment: Optional[Payment] = None) -> List[str]:
     start, end = billing.billing_period_range(bill.billing_period)
     meter = electricity_details(bill)

     lines = [
          config.BUSINESS_NAME,
          RULE,
          "MONTHLY BILL",
          "",
          "Tenant Details:",
          f"Name: {tenant.name}",
          f"Mobile: {tenant.mobile}",
          f"Room: {tenant.room_number}",
          f"Month: {_format_day(start)} to {_format_day(end)}",
          "",
          "Electricity Details:",
          f"Previous Reading: {_format_number(meter['previous'])} units",
          f"Current Reading: {_format_number(meter['current'])} units",
          f"Units Consumed: {_format_number(meter['units'])} units",
          f"Rate: {format_currency(meter['rate'])} per unit",
          "",
          "Bill Breakdown:",
          f"Monthly Rent: {format_currency(bill.rent_amount)}",
          f"Electricity: {format_currency(bill.electricity_charges)}",
          f"Security Deposit: {format_currency(tenant.security_deposit)}",
     ]
     if bill.adjustments:
          lines.append(f"Adjustments: {format_currency(bill.adjustments)}")
     lines += [
          "",
          RULE,
          f"Total Amount: {format_currency(bill.total_amount)}",
          RULE,
          "",
          f"Payment Status: {status_label(bill)}",
     ]
     if payment is not None:
          lines.append(f"Paid: {format_currency(payment.payment_amount)} on {format_date(payment.payment_date)}")
          lines.append(f"Method: {payment.payment_method.value.replace('_', ' ').title()}")
     lines += [
          f"Due Date: {format_date(bill.due_date)}",
          "",
          "Thank you for your prompt payment!",
          "",
     ]
     return lines + _footer_lines()


def _footer_lines() -> List[str]:
     return [
          f"Authorized by: {config.BUSINESS_NAME}",
          f"UPI ID: {config.BUSINESS_UPI_ID}",
          f"Contact: {config.BUSINESS_CONTACT}",
          f"Address: {config.BUSINESS_ADDRESS}",
     ]


def receipt_text(tenant: Tenant, bill: Bill, payment: Optional[Payment] = None) -> str:
     return "\n".join(_receipt_lines(tenant, bill, payment))


def receipt_html(tenant: Tenant, bill: Bill, payment: Optional[Payment] = None) -> str:
     """Printable receipt page. Every value is HTML-escaped."""
     start, end = billing.billing_period_range(bill.billing_period)
     meter = electricity_details(bill)
     paid = BillStatus(bill.payment_status) == BillStatus.PAID

     def row(label: str, value: str) -> str:
          return f'<div class="row"><span>{escape(label)}</span><span>{escape(value)}</span></div>'

     rows = [
          '<div class="section"><div class="section-title">Tenant Details</div>',
          row("Name:", tenant.name),
          row("Mobile:", tenant.mobile),
          row("Room:", tenant.room_number),
          row("Month:", f"{_format_day(start)} to {_format_day(end)}"),
          "</div>",
          '<div class="section"><div class="section-title">Electricity Details</div>',
          row("Previous Reading:", f"{_format_number(meter['previous'])} units"),
          row("Current Reading:", f"{_format_number(meter['current'])} units"),
          row("Units Consumed:", f"{_format_number(meter['units'])} units"),
          row("Rate:", f"{format_currency(meter['rate'])} per unit"),
          "</div>",
          '<div class="section"><div class="section-title">Bill Breakdown</div>',
          row("Monthly Rent:", format_currency(bill.rent_amount)),
          row("Electricity:", format_currency(bill.electricity_charges)),
          row("Security Deposit:", format_currency(tenant.security_deposit)),
     ]
     if bill.adjustments:
          rows.append(row("Adjustments:", format_currency(bill.adjustments)))
     rows.append("</div>")
     if payment is not None:
          rows.append(row("Paid:", f"{format_currency(payment.payment_amount)} on {format_date(payment.payment_date)}"))

     footer = "".join(f"<div>{escape(line)}</div>" for line in _footer_lines())
     background, colour = ("#d4edda", "#155724") if paid else ("#f8d7da", "#721c24")

     return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Bill - {escape(tenant.name)}</title>
<style>
@media print {{ body {{ margin: 0; }} }}
body {{ font-family: 'Courier New', monospace; max-width: 400px; margin: 0 auto; padding: 20px; line-height: 1.4; }}
.header, .footer, .contact-info {{ text-align: center; }}
.title {{ font-size: 20px; font-weight: bold; }}
.section {{ margin: 15px 0; }}
.section-title {{ font-weight: bold; margin-bottom: 10px; }}
.row {{ display: flex; justify-content: space-between; margin: 5px 0; }}
.total {{ border-top: 2px solid #000; border-bottom: 2px solid #000; padding: 10px 0; text-align: center; font-weight: bold; }}
.status {{ text-align: center; font-weight: bold; padding: 8px; background: {background}; color: {colour}; }}
.contact-info {{ margin-top: 15px; font-size: 11px; }}
</style>
</head>
<body>
<div class="header"><div class="title">{escape(config.BUSINESS_NAME)}</div><div>MONTHLY BILL</div></div>
{"".join(rows)}
<div class="total">Total Amount: {escape(format_currency(bill.total_amount))}</div>
<div class="status">Payment Status: {escape(status_label(bill))}</div>
<div class="footer">Thank you for your prompt payment!</div>
<div class="contact-info">{footer}</div>
</body>
</html>
"""


def share_message(tenant: Tenant, bill: Bill, payment: Optional[Payment] = None) -> str:
     return receipt_text(tenant, bill, payment)


def share_link(tenant: Tenant, bill: Bill, payment: Optional[Payment] = None) -> str:
     """<scheme>://send?recipient=<phone>&body=<url-encoded receipt>"""
     recipient = normalize_phone(tenant.mobile)
     body = quote(share_message(tenant, bill, payment), safe="")
     return f"{config.SHARE_LINK_SCHEME}://send?recipient={recipient}&body={body}"
