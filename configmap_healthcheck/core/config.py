"""Application settings and configuration helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_PORT = 6852

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Process settings read from the environment (and an optional ``.env`` file)."""

    volumes: str | None = None
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    host: str = "0.0.0.0"
    log_level: LogLevel = "INFO"
    log_format: Literal["auto", "json", "console"] = "auto"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("port", mode="before")
    @classmethod
    def _port_is_plain_digits(cls, value: object) -> object:
        if isinstance(value, str) and not re.fullmatch(r"[0-9]+", value):
            raise ValueError("must be a plain decimal integer")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@dataclass(frozen=True)
class Config:
    """Validated startup configuration."""

    volume_paths: tuple[Path, ...]
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"


def load_settings() -> Settings:
    """Read settings from the environment, reporting bad values as ``ConfigurationError``."""
    try:
        return Settings()
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        ]
        raise ConfigurationError(
            "Invalid environment configuration: " + "; ".join(problems)
        ) from exc


def resolve_config(settings: Settings | None = None) -> Config:
    """Turn settings into a ``Config``.

    ``VOLUMES`` is split on commas; order and count are kept exactly as given,
    so malformed entries surface later in volume validation. Empty entries are
    rejected here because they have no path to report.
    """
    if settings is None:
        settings = load_settings()
    if not settings.volumes:
        raise ConfigurationError("No volumes specified in the VOLUMES environment variable.")
    entries = settings.volumes.split(",")
    if "" in entries:
        raise ConfigurationError(
            f"The VOLUMES environment variable contains an empty entry: {settings.volumes!r}"
        )
    paths = tuple(Path(item) for item in entries)
    return Config(volume_paths=paths, port=settings.port, host=settings.host)
