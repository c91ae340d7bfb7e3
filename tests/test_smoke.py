"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve its health endpoint.
"""

from __future__ import annotations

import httpx
import pytest

from order_service.api.app import create_app
from order_service.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoint_reports_mode(transport: httpx.ASGITransport) -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/")
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "Running"
        assert body["mode"] == "LocalStack"
        assert "timestamp" in body
        assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_health_endpoint_live_mode(backends) -> None:
    app = create_app(settings=Settings(env="test", use_localstack=False), backends=backends)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/")
        assert r.json()["mode"] == "AWS"


@pytest.mark.asyncio
async def test_request_id_is_echoed(transport: httpx.ASGITransport) -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/", headers={"x-request-id": "req-123"})
        assert r.headers["x-request-id"] == "req-123"


@pytest.mark.asyncio
async def test_openapi_lists_order_routes(transport: httpx.ASGITransport) -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/openapi.json")
        assert r.status_code == 200
        paths = r.json()["paths"]
        for path in ("/", "/orders", "/orders/{order_id}", "/messages", "/receipts"):
            assert path in paths
