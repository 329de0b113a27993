"""FastAPI application factory for the analyzer web UI."""

from __future__ import annotations

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from config.settings import settings
from src.analyzer.client import AnalyzerClient
from src.api.middleware import SecurityHeadersMiddleware
from src.views.templating import STATIC_DIR

VERSION = "0.1.0"

# Rate limiter (shared instance)
limiter = Limiter(key_func=get_remote_address)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.started_at = time.monotonic()
    app.state.analyzer = AnalyzerClient(
        settings.analyzer_api_url, timeout=settings.analyzer_timeout_sec
    )
    logger.info(f"Analysis backend: {settings.analyzer_api_url}")
    try:
        yield
    finally:
        await app.state.analyzer.close()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Web3 Risk Analyzer",
        version=VERSION,
        docs_url="/api/docs" if settings.dashboard_debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.dashboard_debug else None,
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    # Import and include routers
    from src.api.routers.analyzer import router as analyzer_router
    from src.api.routers.health import router as health_router

    app.include_router(health_router)
    app.include_router(analyzer_router)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app
