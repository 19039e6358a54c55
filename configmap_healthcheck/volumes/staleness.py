"""Per-request comparison of live ``..data`` timestamps against the snapshot."""

from __future__ import annotations

from pathlib import Path

from ..core.errors import ProbeReadError
from ..core.log import get_logger
from .filesystem import VolumeFileSystem, data_entry
from .snapshot import VolumeSnapshot

logger = get_logger(__name__)


def current_timestamp(path: Path, fs: VolumeFileSystem) -> int:
    try:
        return fs.modification_time(data_entry(path))
    except OSError as exc:
        raise ProbeReadError(f"Unable to read the timestamp of {data_entry(path)}: {exc}") from exc


def is_modified(path: Path, baseline: int, fs: VolumeFileSystem) -> bool:
    """Return whether the volume's ``..data`` timestamp differs from ``baseline``.

    Any difference counts, including a timestamp that moved backward. A volume
    whose timestamp can no longer be read (removed after startup, for example)
    is reported as modified so the probe fails instead of claiming health.
    """
    try:
        current = current_timestamp(path, fs)
    except ProbeReadError as exc:
        logger.warning("volume_unreadable", volume=str(path), error=str(exc))
        return True
    if current != baseline:
        logger.info("volume_modified", volume=str(path), baseline=baseline, current=current)
        return True
    return False


def any_modified(snapshot: VolumeSnapshot, fs: VolumeFileSystem) -> bool:
    return any(is_modified(path, baseline, fs) for path, baseline in snapshot.items())
