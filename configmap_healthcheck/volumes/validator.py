"""Startup validation of configured volume paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Sequence

from ..core.errors import VolumeValidationError
from ..core.log import get_logger
from .filesystem import VolumeFileSystem, data_entry

logger = get_logger(__name__)


class ValidationErrorKind(str, Enum):
    NOT_ABSOLUTE = "not_absolute"
    DOES_NOT_EXIST = "does_not_exist"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_A_VOLUME = "not_a_volume"


# Log tooling greps for these exact texts.
_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.NOT_ABSOLUTE: "The following paths are not absolute: {paths}",
    ValidationErrorKind.DOES_NOT_EXIST: "The following paths does not exist: {paths}",
    ValidationErrorKind.NOT_A_DIRECTORY: "The following paths are not directories: {paths}",
    ValidationErrorKind.NOT_A_VOLUME: "The following paths does not seem to be volumes: {paths}",
}


@dataclass(frozen=True)
class ValidationFailure:
    """First failing check together with every path it rejected."""

    kind: ValidationErrorKind
    paths: tuple[Path, ...]

    @property
    def message(self) -> str:
        rendered = "[" + ", ".join(str(path) for path in self.paths) + "]"
        return _MESSAGES[self.kind].format(paths=rendered)


def _checks(fs: VolumeFileSystem) -> Iterable[tuple[ValidationErrorKind, Callable[[Path], bool]]]:
    # Each predicate may assume every earlier one held.
    yield ValidationErrorKind.NOT_ABSOLUTE, lambda path: path.is_absolute()
    yield ValidationErrorKind.DOES_NOT_EXIST, fs.exists
    yield ValidationErrorKind.NOT_A_DIRECTORY, fs.is_dir
    yield ValidationErrorKind.NOT_A_VOLUME, lambda path: fs.exists(data_entry(path))


def check_volumes(paths: Sequence[Path], fs: VolumeFileSystem) -> ValidationFailure | None:
    """Run the checks in order and return the first failure, or ``None`` when all pass."""
    for kind, passes in _checks(fs):
        offending = tuple(path for path in paths if not passes(path))
        if offending:
            return ValidationFailure(kind=kind, paths=offending)
    return None


def validate_volumes(paths: Sequence[Path], fs: VolumeFileSystem) -> None:
    failure = check_volumes(paths, fs)
    if failure is not None:
        raise VolumeValidationError(failure)
    logger.info("volumes_validated", volumes=[str(path) for path in paths])
