"""
order_service.api.responses

JSON reading/writing that keeps amounts exact.

Responsibilities:
- Parse request bodies with JSON numbers as `Decimal` (never float).
- Render `Decimal` values as unquoted, exact JSON numbers.
- Render 404s and other HTTP errors as `{"message": ...}`.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Coroutine
from datetime import datetime
from decimal import Decimal
from typing import Any

import simplejson
from fastapi.routing import APIRoute
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        # python mode keeps Decimal/datetime objects for simplejson to render.
        return value.model_dump(mode="python", by_alias=True)
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class DecimalJSONResponse(JSONResponse):
    """
    JSONResponse that accepts pydantic models and writes `Decimal` as a JSON number.

    FastAPI's own response serialization turns Decimal into a string, so routes that
    carry amounts return this response directly.
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            default=_default,
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")


class DecimalJSONRequest(Request):
    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            # 12345678901234567.89 must not pass through float on its way to the store.
            self._json = json.loads(await self.body(), parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            return await handler(DecimalJSONRequest(request.scope, request.receive))

        return decimal_route_handler


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> Response:
    return JSONResponse(
        {"message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )
