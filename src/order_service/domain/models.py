"""
order_service.domain.models

Order domain model.

Responsibilities:
- Define the immutable `Order` value shared by the service, codec and API layers.
- Generate server-side identity and creation time for new orders.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Order:
    """
    A placed order. Never updated or deleted once created.
    """

    order_id: str
    customer_email: str
    amount: Decimal
    created_at: datetime


def new_order(*, customer_email: str, amount: Decimal) -> Order:
    # Uniqueness relies on UUID4; the store overwrites on the (theoretical) collision.
    return Order(
        order_id=str(uuid.uuid4()),
        customer_email=customer_email,
        amount=amount,
        created_at=datetime.now(UTC),
    )
