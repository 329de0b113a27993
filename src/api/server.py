"""uvicorn wiring for the analyzer UI."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from src.api.app import create_app


def build_server(app: FastAPI | None = None) -> uvicorn.Server:
    """uvicorn server bound to the configured host and port.

    ``Server.serve()`` installs its own SIGINT/SIGTERM handlers and drains
    in-flight requests, so callers only need to await it. Access lines are
    only written in debug mode.
    """
    config = uvicorn.Config(
        app=app if app is not None else create_app(),
        host=settings.dashboard_host,
        port=settings.dashboard_port,
        log_level=settings.log_level.lower(),
        access_log=settings.dashboard_debug,
    )
    return uvicorn.Server(config)
