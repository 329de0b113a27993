"""FastAPI dependency injection — the shared analysis client."""

from __future__ import annotations

from fastapi import Request

from src.analyzer.client import AnalyzerClient


def get_analyzer(request: Request) -> AnalyzerClient:
    """Return the application-wide analysis client (created in the lifespan)."""
    return request.app.state.analyzer
