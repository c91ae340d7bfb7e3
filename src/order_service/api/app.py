"""
order_service.api.app

FastAPI app factory for the Order Service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open and close the AWS clients for the life of the process.
- Accept pre-built backends so tests can run against in-memory fakes.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from order_service import __version__
from order_service.api.responses import http_error_handler
from order_service.api.routers.health import router as health_router
from order_service.api.routers.messages import router as messages_router
from order_service.api.routers.orders import router as orders_router
from order_service.api.routers.receipts import router as receipts_router
from order_service.backends.base import Backends
from order_service.backends.session import AwsBackends
from order_service.observability.logging import configure_logging, get_logger
from order_service.observability.middleware import RequestContextMiddleware
from order_service.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, backends: Backends | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, mode=settings.mode)
        if backends is not None:
            yield
        else:
            # One set of clients per process; every request shares them.
            async with AwsBackends(settings) as aws:
                app.state.backends = aws
                yield
        log.info("shutdown")

    app = FastAPI(
        title="Order Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if backends is not None:
        app.state.backends = backends

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(orders_router)
    app.include_router(messages_router)
    app.include_router(receipts_router)
    return app


# --- Module Notes -----------------------------------------------------------
# Composition only; the create/read logic lives in `services.order_service`.
