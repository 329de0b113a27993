"""Health check — no auth required."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request
from pydantic import BaseModel

from config.settings import settings
from src.api.app import VERSION

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_sec: int
    analyzer_api_url: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness plus the configured analysis backend."""
    started_at = getattr(request.app.state, "started_at", None)
    uptime = int(time.monotonic() - started_at) if started_at is not None else 0

    return HealthResponse(
        status="ok",
        version=VERSION,
        uptime_sec=uptime,
        analyzer_api_url=settings.analyzer_api_url,
    )
