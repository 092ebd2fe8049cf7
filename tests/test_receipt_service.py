# tests/test_receipt_service.py
from datetime import date
from decimal import Decimal
from urllib.parse import unquote

from models import Bill, BillStatus, Payment, PaymentMethod, Tenant
from services import receipt_service


def _tenant(name="Asha Verma", mobile="98765 43210"):
    return Tenant(name=name, mobile=mobile, room_number="101")


def _bill(status=BillStatus.UNPAID, adjustments="360"):
    return Bill(
        billing_period="2026-10",
        electricity_reading=Decimal("1100"),
        rent_amount=Decimal("8000"),
        electricity_charges=Decimal("1200"),
        adjustments=Decimal(adjustments),
        total_amount=Decimal("9200") + Decimal(adjustments),
        bill_date=date(2026, 10, 1),
        due_date=date(2026, 10, 11),
        payment_status=status,
    )


def test_format_currency_uses_indian_grouping():
    assert receipt_service.format_currency(Decimal("9560")) == "₹9,560"
    assert receipt_service.format_currency(Decimal("1234567")) == "₹12,34,567"
    assert receipt_service.format_currency(Decimal("123")) == "₹123"
    assert receipt_service.format_currency(Decimal("999.50")) == "₹1,000"
    assert receipt_service.format_currency(Decimal("-400")) == "-₹400"
    assert receipt_service.format_currency(None) == "₹0"


def test_format_date():
    assert receipt_service.format_date(date(2026, 10, 18)) == "18 Oct 2026"
    assert receipt_service.format_date(date(2026, 1, 5)) == "5 Jan 2026"


def test_normalize_phone():
    assert receipt_service.normalize_phone("98765 43210") == "919876543210"
    assert receipt_service.normalize_phone("+91-98765-43210") == "919876543210"
    assert receipt_service.normalize_phone("9876543210", country_code="1") == "19876543210"
    assert receipt_service.normalize_phone("12345") == "12345"


def test_receipt_text_contents():
    text = receipt_service.receipt_text(_tenant(), _bill())

    assert "Name: Asha Verma" in text
    assert "Mobile: 98765 43210" in text
    assert "Room: 101" in text
    assert "Month: 01-10-2026 to 31-10-2026" in text
    assert "Previous Reading: 1000 units" in text
    assert "Current Reading: 1100 units" in text
    assert "Units Consumed: 100 units" in text
    assert "Rate: ₹12 per unit" in text
    assert "Monthly Rent: ₹8,000" in text
    assert "Electricity: ₹1,200" in text
    assert "Security Deposit: ₹0" in text
    assert "Adjustments: ₹360" in text
    assert "Total Amount: ₹9,560" in text
    assert "Payment Status: PENDING" in text
    assert "Due Date: 11 Oct 2026" in text
    assert "UPI ID: " in text


def test_receipt_text_omits_zero_adjustment_and_shows_payment():
    payment = Payment(
        payment_amount=Decimal("9200"),
        payment_date=date(2026, 10, 5),
        payment_method=PaymentMethod.BANK_TRANSFER,
    )
    text = receipt_service.receipt_text(_tenant(), _bill(BillStatus.PAID, adjustments="0"), payment)

    assert "Adjustments" not in text
    assert "Payment Status: PAID" in text
    assert "Paid: ₹9,200 on 5 Oct 2026" in text
    assert "Method: Bank Transfer" in text


def test_receipt_shows_tenant_mobile_and_deposit():
    tenant = _tenant()
    tenant.security_deposit = Decimal("8000")

    text = receipt_service.receipt_text(tenant, _bill())
    html = receipt_service.receipt_html(tenant, _bill())

    assert "Security Deposit: ₹8,000" in text
    assert "Mobile: 98765 43210" in text
    assert "<span>Security Deposit:</span><span>₹8,000</span>" in html
    assert "<span>Mobile:</span><span>98765 43210</span>" in html


def test_receipt_html_escapes_values():
    html = receipt_service.receipt_html(_tenant(name="<b>Asha & Co</b>"), _bill(BillStatus.PARTIAL))

    assert html.startswith("<!DOCTYPE html>")
    assert "&lt;b&gt;Asha &amp; Co&lt;/b&gt;" in html
    assert "<b>Asha" not in html
    assert "PARTIALLY PAID" in html
    assert "₹9,560" in html


def test_share_link_targets_normalized_phone():
    tenant, bill = _tenant(), _bill()
    link = receipt_service.share_link(tenant, bill)

    prefix = "whatsapp://send?recipient=919876543210&body="
    assert link.startswith(prefix)
    body = link[len(prefix):]
    assert " " not in body and "\n" not in body
    assert unquote(body) == receipt_service.share_message(tenant, bill)
