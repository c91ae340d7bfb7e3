"""
order_service.api.routers.receipts

Receipt endpoints.

Responsibilities:
- List stored receipts with size and modification time.
- Return the text of one order's receipt.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_404_NOT_FOUND

from order_service.api.deps import order_service
from order_service.api.schemas import CamelModel
from order_service.services.order_service import OrderService

router = APIRouter(prefix="/receipts", tags=["receipts"])


class ReceiptSummaryResponse(CamelModel):
    key: str
    size: int
    last_modified: datetime


class ReceiptContentResponse(CamelModel):
    order_id: str
    content: str


@router.get("", response_model=list[ReceiptSummaryResponse])
async def list_receipts(
    svc: OrderService = Depends(order_service),
) -> list[ReceiptSummaryResponse]:
    return [
        ReceiptSummaryResponse(key=b.key, size=b.size, last_modified=b.last_modified)
        for b in await svc.list_receipts()
    ]


@router.get("/{order_id}", response_model=ReceiptContentResponse)
async def get_receipt(
    order_id: str,
    svc: OrderService = Depends(order_service),
) -> ReceiptContentResponse:
    content = await svc.get_receipt(order_id)
    if content is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Receipt not found")
    return ReceiptContentResponse(order_id=order_id, content=content)
