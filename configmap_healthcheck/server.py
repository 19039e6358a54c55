"""Process entry point: validate volumes, snapshot them, then serve probes."""

from __future__ import annotations

import sys
from typing import NoReturn

import uvicorn

from .app import create_app
from .core.config import Settings, load_settings, resolve_config
from .core.errors import HealthcheckError
from .core.log import get_logger, setup_logging
from .volumes import LocalFileSystem, VolumeFileSystem, build_snapshot, validate_volumes

logger = get_logger(__name__)


def _abort(exc: HealthcheckError) -> NoReturn:
    logger.error("startup_failed", error=str(exc), error_type=type(exc).__name__)
    sys.exit(1)


def serve(settings: Settings, fs: VolumeFileSystem) -> None:
    """Run the startup sequence and block serving requests.

    Every startup failure raises ``HealthcheckError`` before the listener binds.
    """
    config = resolve_config(settings)
    logger.info(
        "configuration_resolved",
        volumes=[str(path) for path in config.volume_paths],
        port=config.port,
    )
    validate_volumes(config.volume_paths, fs)
    snapshot = build_snapshot(config.volume_paths, fs)

    app = create_app(snapshot, fs)
    logger.info("server_starting", host=config.host, port=config.port)
    # Logging is already configured; uvicorn records flow through the same handler.
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
    )


def main() -> None:
    try:
        settings = load_settings()
    except HealthcheckError as exc:
        setup_logging()
        _abort(exc)
    setup_logging(settings.log_level, settings.log_format)

    try:
        serve(settings, LocalFileSystem())
    except HealthcheckError as exc:
        _abort(exc)
