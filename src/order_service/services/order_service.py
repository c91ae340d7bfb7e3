"""
order_service.services.order_service

Order lifecycle service.

Responsibilities:
- Create orders: persist the record, store the receipt, publish the event.
- Read orders back from the key-value store.
- Expose read-only views of queued events and stored receipts.
"""

from __future__ import annotations

from decimal import Decimal

from order_service.backends.base import (
    BlobInfo,
    BlobNotFoundError,
    BlobStore,
    KeyValueStore,
    MessageQueue,
    QueuedMessage,
)
from order_service.domain.codec import order_event_body, order_from_item, order_key, order_to_item
from order_service.domain.models import Order, new_order
from order_service.domain.receipts import RECEIPT_PREFIX, receipt_key, render_receipt
from order_service.observability.logging import get_logger

log = get_logger(__name__)

# SQS caps a single receive at 10 messages.
PEEK_MAX_MESSAGES = 10
PEEK_WAIT_SECONDS = 1


class OrderService:
    def __init__(
        self,
        *,
        store: KeyValueStore,
        blobs: BlobStore,
        queue: MessageQueue,
        table_name: str,
        bucket_name: str,
        queue_name: str,
    ) -> None:
        self._store = store
        self._blobs = blobs
        self._queue = queue
        self._table_name = table_name
        self._bucket_name = bucket_name
        self._queue_name = queue_name

    async def create_order(self, *, customer_email: str, amount: Decimal) -> Order:
        """
        Fan a new order out to all three backends, one call at a time.

        A failure in any step propagates and leaves the earlier steps in place: there
        is no rollback of the stored record or receipt.
        """

        order = new_order(customer_email=customer_email, amount=amount)
        await self._save_record(order)
        await self._store_receipt(order)
        message_id = await self._publish_event(order)
        log.info("order.created", order_id=order.order_id, message_id=message_id)
        return order

    async def get_order(self, order_id: str) -> Order | None:
        item = await self._store.get_item(self._table_name, order_key(order_id))
        if item is None:
            return None
        return order_from_item(item)

    async def list_orders(self) -> list[Order]:
        # Full table scan; order is whatever the store returns.
        return [order_from_item(item) for item in await self._store.scan(self._table_name)]

    async def list_messages(self) -> list[QueuedMessage]:
        url = await self._queue.resolve_url(self._queue_name)
        return await self._queue.receive(
            url, max_messages=PEEK_MAX_MESSAGES, wait_seconds=PEEK_WAIT_SECONDS
        )

    async def list_receipts(self) -> list[BlobInfo]:
        return await self._blobs.list_objects(self._bucket_name, RECEIPT_PREFIX)

    async def get_receipt(self, order_id: str) -> str | None:
        try:
            return await self._blobs.get_text(self._bucket_name, receipt_key(order_id))
        except BlobNotFoundError:
            log.info("receipt.missing", order_id=order_id)
            return None

    async def _save_record(self, order: Order) -> None:
        await self._store.put_item(self._table_name, order_to_item(order))

    async def _store_receipt(self, order: Order) -> None:
        await self._blobs.put_text(
            self._bucket_name, receipt_key(order.order_id), render_receipt(order)
        )

    async def _publish_event(self, order: Order) -> str:
        url = await self._queue.resolve_url(self._queue_name)
        return await self._queue.send(url, order_event_body(order))


# --- Module Notes -----------------------------------------------------------
# The three create steps are separate methods so a compensating action can be
# attached to each without changing `create_order`'s contract.
