"""Filesystem access used by validation, snapshotting and probing."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

# Symlink Kubernetes repoints whenever the projected content changes.
DATA_ENTRY = "..data"


class VolumeFileSystem(Protocol):
    def exists(self, path: Path) -> bool:
        ...

    def is_dir(self, path: Path) -> bool:
        ...

    def modification_time(self, path: Path) -> int:
        """Return an opaque timestamp for ``path``; raise ``OSError`` if it cannot be read."""
        ...


class LocalFileSystem:
    """Reads the host filesystem, following symlinks like ``stat``."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def modification_time(self, path: Path) -> int:
        return path.stat().st_mtime_ns


def data_entry(volume: Path) -> Path:
    return volume / DATA_ENTRY
