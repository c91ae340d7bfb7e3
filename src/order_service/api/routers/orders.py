"""
order_service.api.routers.orders

Order endpoints.

Responsibilities:
- Create an order (record + receipt + event) and point at its resource.
- Fetch one order by id, or list all of them.

Amounts travel as exact JSON numbers in both directions (see `api.responses`).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_201_CREATED, HTTP_404_NOT_FOUND

from order_service.api.deps import order_service
from order_service.api.responses import DecimalJSONResponse, DecimalJSONRoute
from order_service.api.schemas import CamelModel
from order_service.domain.models import Order
from order_service.services.order_service import OrderService

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    route_class=DecimalJSONRoute,
    default_response_class=DecimalJSONResponse,
)


class CreateOrderRequest(CamelModel):
    # Deliberately unvalidated beyond types.
    customer_email: str
    amount: Decimal


class OrderResponse(CamelModel):
    order_id: str
    customer_email: str
    amount: Decimal
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            order_id=order.order_id,
            customer_email=order.customer_email,
            amount=order.amount,
            created_at=order.created_at,
        )


@router.post("", response_model=OrderResponse, status_code=HTTP_201_CREATED)
async def create_order(
    body: CreateOrderRequest,
    svc: OrderService = Depends(order_service),
) -> DecimalJSONResponse:
    # Any backend failure propagates as a 500; steps already done are not undone.
    order = await svc.create_order(customer_email=body.customer_email, amount=body.amount)
    return DecimalJSONResponse(
        OrderResponse.from_order(order),
        status_code=HTTP_201_CREATED,
        headers={"Location": f"/orders/{order.order_id}"},
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    svc: OrderService = Depends(order_service),
) -> DecimalJSONResponse:
    order = await svc.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Order not found")
    return DecimalJSONResponse(OrderResponse.from_order(order))


@router.get("", response_model=list[OrderResponse])
async def list_orders(svc: OrderService = Depends(order_service)) -> DecimalJSONResponse:
    return DecimalJSONResponse([OrderResponse.from_order(o) for o in await svc.list_orders()])
