"""
order_service.api.routers.health

Health endpoint.

Responsibilities:
- Report that the process is serving, which backend mode it runs in, and the time.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from order_service.api.deps import settings_dep
from order_service.api.schemas import CamelModel
from order_service.settings import Settings

router = APIRouter()


class HealthResponse(CamelModel):
    status: str
    mode: str
    timestamp: datetime


@router.get("/", response_model=HealthResponse)
async def health(settings: Settings = Depends(settings_dep)) -> HealthResponse:
    # No backend calls: this only proves the process is up.
    return HealthResponse(status="Running", mode=settings.mode, timestamp=datetime.now(UTC))
