"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from . import __version__
from .api.router import api_router
from .volumes import LocalFileSystem, VolumeFileSystem, VolumeSnapshot


def create_app(snapshot: VolumeSnapshot, fs: VolumeFileSystem | None = None) -> FastAPI:
    """Create the probe application around an already built snapshot."""
    app = FastAPI(
        title="ConfigMap Healthcheck",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.snapshot = snapshot
    app.state.filesystem = fs or LocalFileSystem()

    app.include_router(api_router)
    return app
