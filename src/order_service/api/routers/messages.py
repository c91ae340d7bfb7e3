"""
order_service.api.routers.messages

Debug view of the order-events queue.

Responsibilities:
- Peek at up to 10 queued events without deleting them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from order_service.api.deps import order_service
from order_service.api.schemas import CamelModel
from order_service.services.order_service import OrderService

router = APIRouter(tags=["debug"])


class QueuedMessageResponse(CamelModel):
    message_id: str
    body: str
    receipt_handle: str


@router.get("/messages", response_model=list[QueuedMessageResponse])
async def list_messages(
    svc: OrderService = Depends(order_service),
) -> list[QueuedMessageResponse]:
    # Received messages become invisible for the queue's visibility timeout, then return.
    return [
        QueuedMessageResponse(
            message_id=m.message_id,
            body=m.body,
            receipt_handle=m.receipt_handle,
        )
        for m in await svc.list_messages()
    ]


# --- Module Notes -----------------------------------------------------------
# `receiptHandle` is returned for inspection only; there is no delete endpoint.
