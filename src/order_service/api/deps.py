"""
order_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the settings and backends stashed on app.state.
- Build a request-scoped `OrderService` over the shared backends.
"""

from __future__ import annotations

from fastapi import Depends, Request

from order_service.backends.base import Backends
from order_service.services.order_service import OrderService
from order_service.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def backends_from_app(request: Request) -> Backends:
    # Set by `create_app` (injected) or by the lifespan (AWS clients).
    return request.app.state.backends  # type: ignore[attr-defined]


def order_service(
    backends: Backends = Depends(backends_from_app),
    settings: Settings = Depends(settings_dep),
) -> OrderService:
    return OrderService(
        store=backends.store,
        blobs=backends.blobs,
        queue=backends.queue,
        table_name=settings.table_name,
        bucket_name=settings.bucket_name,
        queue_name=settings.queue_name,
    )
