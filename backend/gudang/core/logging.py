"""
Structured logging setup (structlog on top of stdlib logging).

Usage:
    from gudang.core.logging import get_logger, setup_logging

    setup_logging("DEBUG")          # once, at process start
    logger = get_logger(__name__)
    logger.info("Import validated", rows=120, failed=3)
"""

from __future__ import annotations

import logging
import sys

import structlog

from gudang.core.config import settings


def setup_logging(level: str | None = None, *, json_output: bool | None = None) -> None:
    """Configure stdlib logging and structlog processors."""
    level_name = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_output is None else json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=settings.is_development)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger."""
    return structlog.get_logger(name)
