"""loguru setup shared by the web UI and the CLI."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<magenta>{extra[component]}</magenta> <cyan>{name}</cyan> {message}"
)


def setup_logger(
    component: str,
    *,
    level: str = "INFO",
    json_logs: bool = False,
    log_dir: Path | None = Path("logs"),
) -> None:
    """Replace loguru's default sink with this process's sinks.

    Every record is tagged with ``component`` ("web", "cli"). When
    ``log_dir`` is set, a daily DEBUG file per component keeps every backend
    call, including the ones below the console level.
    """
    logger.remove()
    logger.configure(extra={"component": component})

    if json_logs:
        logger.add(sys.stderr, level=level.upper(), serialize=True)
    else:
        logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)

    if log_dir is not None:
        logger.add(
            str(log_dir / f"{component}_{{time:YYYY-MM-DD}}.log"),
            level="DEBUG",
            rotation="00:00",
            retention=5,
            serialize=json_logs,
        )
