"""
order_service.domain.codec

Encodings of `Order` for the key-value store and the message queue.

Responsibilities:
- Map an `Order` to a DynamoDB attribute-value item and back.
- Build the JSON event body published when an order is created.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

import simplejson

from order_service.domain.models import Order

# DynamoDB attribute-value format: {"OrderId": {"S": "..."}, "Amount": {"N": "..."}, ...}
Item = dict[str, dict[str, str]]

KEY_ATTRIBUTE = "OrderId"


class RecordDecodeError(ValueError):
    """A stored record is missing an attribute or holds an unparsable value."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot decode order record {key!r}: {reason}")
        self.key = key
        self.reason = reason


def order_key(order_id: str) -> Item:
    return {KEY_ATTRIBUTE: {"S": order_id}}


def encode_amount(amount: Decimal) -> str:
    # Fixed-point keeps the stored text free of exponents ("100", never "1E+2").
    return format(amount, "f")


def encode_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def decode_timestamp(raw: str) -> datetime:
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def order_to_item(order: Order) -> Item:
    return {
        KEY_ATTRIBUTE: {"S": order.order_id},
        "CustomerEmail": {"S": order.customer_email},
        "Amount": {"N": encode_amount(order.amount)},
        "CreatedAt": {"S": encode_timestamp(order.created_at)},
    }


def order_from_item(item: Item) -> Order:
    key = _attr(item, KEY_ATTRIBUTE, "S", key="?")
    customer_email = _attr(item, "CustomerEmail", "S", key=key)
    raw_amount = _attr(item, "Amount", "N", key=key)
    raw_created_at = _attr(item, "CreatedAt", "S", key=key)
    try:
        amount = Decimal(raw_amount)
    except InvalidOperation as e:
        raise RecordDecodeError(key, f"bad Amount {raw_amount!r}") from e
    try:
        created_at = decode_timestamp(raw_created_at)
    except ValueError as e:
        raise RecordDecodeError(key, f"bad CreatedAt {raw_created_at!r}") from e
    return Order(
        order_id=key,
        customer_email=customer_email,
        amount=amount,
        created_at=created_at,
    )


def _attr(item: Item, name: str, type_tag: str, *, key: str) -> str:
    try:
        return item[name][type_tag]
    except (KeyError, TypeError) as e:
        raise RecordDecodeError(key, f"missing {name}.{type_tag}") from e


def order_to_payload(order: Order) -> dict[str, Any]:
    """
    Event field mapping. Keys are PascalCase, as existing queue consumers read them;
    the HTTP API uses camelCase instead.
    """

    return {
        "OrderId": order.order_id,
        "CustomerEmail": order.customer_email,
        "Amount": order.amount,
        "CreatedAt": encode_timestamp(order.created_at),
    }


def order_event_body(order: Order) -> str:
    # use_decimal writes Amount as an exact JSON number (never via float).
    return simplejson.dumps(order_to_payload(order), use_decimal=True)


# --- Module Notes -----------------------------------------------------------
# `order_from_item(order_to_item(o)) == o` for every UTC order; the store layer never
# sees `Order` directly, only `Item`.
