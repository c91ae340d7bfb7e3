"""
order_service.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs on every response, including 500s.
- Bind request metadata into structlog contextvars.
- Log unhandled errors once and answer them with a plain 500.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from order_service.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        except Exception:
            # Collaborator failures are not translated into domain errors: log, then 500.
            log.exception("request.failed")
            response = PlainTextResponse(
                "Internal Server Error", status_code=HTTP_500_INTERNAL_SERVER_ERROR
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Request metadata is present on every log line emitted while the request is in flight,
# including the `order.created` event from the service layer.
