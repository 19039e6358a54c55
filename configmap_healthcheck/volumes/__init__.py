"""Projected volume validation, snapshotting and staleness checks."""

from .filesystem import DATA_ENTRY, LocalFileSystem, VolumeFileSystem
from .snapshot import VolumeSnapshot, build_snapshot
from .staleness import any_modified, is_modified
from .validator import ValidationErrorKind, ValidationFailure, check_volumes, validate_volumes

__all__ = [
    "DATA_ENTRY",
    "LocalFileSystem",
    "VolumeFileSystem",
    "VolumeSnapshot",
    "build_snapshot",
    "any_modified",
    "is_modified",
    "ValidationErrorKind",
    "ValidationFailure",
    "check_volumes",
    "validate_volumes",
]
