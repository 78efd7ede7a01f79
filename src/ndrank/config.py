"""
Operator configuration.

Settings are read from the environment (optionally seeded from a ``.env``
file) the first time they are needed and cached for the rest of the process.

Environment variables:
    NDRANK_MAX_WORKERS: Thread pool size for axis-wise operators (default: 8)
    NDRANK_PARALLEL_MIN_SLICES: Minimum number of slices before axis-wise
        operators fan out to the thread pool (default: 64)
    NDRANK_LOG_LEVEL: Level for loggers built by ``setup_logger`` (default: WARNING)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from ndrank.exceptions import ConfigurationError

DEFAULT_MAX_WORKERS = 8
DEFAULT_PARALLEL_MIN_SLICES = 64
DEFAULT_LOG_LEVEL = "WARNING"

_settings: Settings | None = None


def _read_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got: {raw!r}") from e
    if value < 1:
        raise ConfigurationError(f"{name} must be positive, got: {value}")
    return value


def _read_log_level(name: str, default: str) -> int:
    raw = (os.getenv(name) or default).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ConfigurationError(f"{name} is not a valid log level: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    """Runtime settings for ndrank operators."""

    max_workers: int = DEFAULT_MAX_WORKERS
    parallel_min_slices: int = DEFAULT_PARALLEL_MIN_SLICES
    log_level: int = logging.WARNING

    @property
    def parallel(self) -> bool:
        """Whether axis-wise operators may use a thread pool at all."""
        return self.max_workers > 1

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Settings:
        """
        Build settings from environment variables.

        :param dotenv: If True, load ``.env`` from the working directory or its
            parents first (existing variables win)
        :return: Settings instance
        :raises ConfigurationError: If a variable is malformed
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        return cls(
            max_workers=_read_positive_int("NDRANK_MAX_WORKERS", DEFAULT_MAX_WORKERS),
            parallel_min_slices=_read_positive_int(
                "NDRANK_PARALLEL_MIN_SLICES", DEFAULT_PARALLEL_MIN_SLICES
            ),
            log_level=_read_log_level("NDRANK_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next ``get_settings`` re-reads the environment."""
    global _settings
    _settings = None
