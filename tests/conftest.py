import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from configmap_healthcheck.app import create_app
from configmap_healthcheck.volumes import DATA_ENTRY, LocalFileSystem, build_snapshot

BASELINE_NS = int(datetime(2017, 7, 12, 11, 12, 40, tzinfo=timezone.utc).timestamp()) * 1_000_000_000


def make_volume(path: Path, timestamp_ns: int = BASELINE_NS) -> Path:
    """Lay out a directory the way Kubernetes projects a ConfigMap."""
    target = path / "..2017_07_12_11_12_40.000000001"
    target.mkdir(parents=True)
    (target / "app.properties").write_text("key=value\n", encoding="utf-8")
    os.symlink(target.name, path / DATA_ENTRY)
    os.utime(path / DATA_ENTRY, ns=(timestamp_ns, timestamp_ns))
    return path


def rotate_volume(path: Path, timestamp_ns: int) -> None:
    """Repoint ``..data`` at fresh content, as the kubelet does on a ConfigMap update."""
    target = path / f"..rotated_{timestamp_ns}"
    target.mkdir()
    (target / "app.properties").write_text("key=other\n", encoding="utf-8")
    os.utime(target, ns=(timestamp_ns, timestamp_ns))
    staging = path / "..data_tmp"
    os.symlink(target.name, staging)
    os.replace(staging, path / DATA_ENTRY)


class FakeFileSystem:
    """In-memory stand-in keyed by path."""

    def __init__(self) -> None:
        self.directories: set[Path] = set()
        self.files: dict[Path, int] = {}

    def add_volume(self, path: Path, timestamp: int) -> None:
        self.directories.add(path)
        self.files[path / DATA_ENTRY] = timestamp

    def exists(self, path: Path) -> bool:
        return path in self.directories or path in self.files

    def is_dir(self, path: Path) -> bool:
        return path in self.directories

    def modification_time(self, path: Path) -> int:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None


@pytest.fixture()
def volume(tmp_path: Path) -> Path:
    return make_volume(tmp_path / "some-volume")


@pytest.fixture()
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture()
def client(volume: Path) -> Generator[TestClient, None, None]:
    fs = LocalFileSystem()
    app = create_app(build_snapshot([volume], fs), fs)
    with TestClient(app) as test_client:
        yield test_client
