"""
order_service.domain.receipts

Plain-text order receipts.

Responsibilities:
- Derive the blob key a receipt is stored under.
- Render the fixed-format receipt text.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from order_service.domain.models import Order

RECEIPT_PREFIX = "receipts/"

_CENTS = Decimal("0.01")


def receipt_key(order_id: str) -> str:
    return f"{RECEIPT_PREFIX}{order_id}.txt"


def format_amount(amount: Decimal) -> str:
    return f"${amount.quantize(_CENTS, rounding=ROUND_HALF_UP)}"


def format_date(value: datetime) -> str:
    # e.g. "Sunday, October 18, 2026 1:05:09 PM"; day and hour are not zero-padded.
    hour = value.hour % 12 or 12
    return f"{value:%A, %B} {value.day}, {value.year} {hour}:{value:%M:%S %p}"


def render_receipt(order: Order) -> str:
    return "\n".join(
        [
            "Order Receipt",
            "",
            f"Order ID: {order.order_id}",
            f"Customer: {order.customer_email}",
            f"Amount: {format_amount(order.amount)}",
            f"Date: {format_date(order.created_at)}",
        ]
    )
