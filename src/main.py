"""Entry point for the Web3 Risk Analyzer web UI."""

import asyncio

from loguru import logger

from config.settings import settings
from src.api.server import build_server
from src.utils.logger import setup_logger


def main() -> None:
    setup_logger("web", level=settings.log_level, json_logs=settings.json_logs)
    server = build_server()
    logger.info(
        f"Web3 Risk Analyzer on http://{settings.dashboard_host}:{settings.dashboard_port}"
        f" (backend {settings.analyzer_api_url})"
    )
    asyncio.run(server.serve())
    logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
