"""Structured logging setup.

Usage:
    from configmap_healthcheck.core.log import get_logger
    logger = get_logger(__name__)
    logger.info("volume_modified", volume="/etc/config")
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", log_format: str = "auto") -> None:
    """Configure structlog for JSON logs in containers and console logs locally.

    Standard-library records (uvicorn's among them) go through the same
    renderer, so the output stream carries a single format.
    """
    is_json = log_format.lower() == "json" or (
        log_format.lower() == "auto" and not sys.stdout.isatty()
    )
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if is_json
        else structlog.dev.ConsoleRenderer()
    )
    timestamper = structlog.processors.TimeStamper(fmt="iso", key="timestamp")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                timestamper,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    logging.basicConfig(handlers=[handler], level=numeric_level, force=True)


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger bound with the emitting module name."""
    return structlog.get_logger(logger_name=name)
