"""Logging configuration for the Performance Lab extension."""

from __future__ import annotations

import logging

import structlog

from .config import PerfLabSettings, load_settings

PACKAGE_LOGGER = "perflab_graphql"


def configure_logging(settings: PerfLabSettings | None = None) -> None:
    """Route structlog through stdlib logging as one JSON object per line.

    ``settings.log_level`` (``PERFLAB_LOG_LEVEL``) applies to the package
    loggers; events below it are dropped before rendering.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
