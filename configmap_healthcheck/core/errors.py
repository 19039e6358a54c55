"""Error taxonomy for startup and probe failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..volumes.validator import ValidationFailure


class HealthcheckError(Exception):
    """Base class for every error raised by the healthcheck."""


class ConfigurationError(HealthcheckError):
    """Missing or invalid environment configuration."""


class VolumeValidationError(HealthcheckError):
    """One or more configured paths are not usable projected volumes."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class VolumeReadError(HealthcheckError):
    """A ``..data`` timestamp could not be read while building the snapshot."""


class ProbeReadError(HealthcheckError):
    """A ``..data`` timestamp could not be read during a live probe."""
