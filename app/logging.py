from __future__ import annotations

import logging
import os
from typing import Any

import structlog


def _get_log_level() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level, logging.INFO)


def _renderer() -> Any:
    # JSON by default; APP_ENV=dev without LOG_FORMAT gets the console renderer.
    log_format = os.getenv("LOG_FORMAT", "").lower()
    if not log_format:
        log_format = "console" if os.getenv("APP_ENV", "dev") == "dev" else "json"
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging() -> None:
    """Route structlog and stdlib logging (uvicorn, alembic) through one formatter.

    Every line carries an ISO/UTC timestamp, level, event name, bound
    contextvars such as request_id, and formatted exc_info when present.
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(),
            ],
        )
    )
    logging.basicConfig(level=_get_log_level(), handlers=[handler], force=True)
