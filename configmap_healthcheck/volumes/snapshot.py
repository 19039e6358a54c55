"""Baseline ``..data`` timestamps captured once at startup."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Sequence

from ..core.errors import VolumeReadError
from ..core.log import get_logger
from .filesystem import VolumeFileSystem, data_entry

logger = get_logger(__name__)


class VolumeSnapshot(Mapping[Path, int]):
    """Read-only mapping of volume path to its ``..data`` timestamp.

    Entries keep configuration order. Nothing mutates a snapshot after it is
    built, so probe handlers share one instance without locking.
    """

    def __init__(self, timestamps: Mapping[Path, int]) -> None:
        self._timestamps: dict[Path, int] = dict(timestamps)

    def __getitem__(self, path: Path) -> int:
        return self._timestamps[path]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._timestamps)

    def __len__(self) -> int:
        return len(self._timestamps)

    def __repr__(self) -> str:
        return f"VolumeSnapshot({self._timestamps!r})"


def build_snapshot(paths: Sequence[Path], fs: VolumeFileSystem) -> VolumeSnapshot:
    timestamps: dict[Path, int] = {}
    for path in paths:
        try:
            timestamps[path] = fs.modification_time(data_entry(path))
        except OSError as exc:
            raise VolumeReadError(f"Unable to read the timestamp of {data_entry(path)}: {exc}") from exc
        logger.info("snapshot_built", volume=str(path), timestamp=timestamps[path])
    return VolumeSnapshot(timestamps)
