"""Logging configuration for declmap entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import read_env_choice

LOG_LEVEL_ENV: Final[str] = "DECLMAP_LOG_LEVEL"
LOG_LEVELS: Final[tuple[str, ...]] = ("debug", "info", "warning", "error", "critical")
DEFAULT_LOG_LEVEL: Final[str] = "info"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = logging.INFO


def parse_log_level(name: str) -> int:
    return logging.getLevelNamesMapping()[name.upper()]


def get_logging_config() -> LoggingConfig:
    name = read_env_choice(LOG_LEVEL_ENV, allowed=LOG_LEVELS, default=DEFAULT_LOG_LEVEL)
    return LoggingConfig(level=parse_log_level(name))


LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Attach a single stderr handler to the root logger.

    Replay output is one line per pass and per canvas operation, so records
    carry only a clock time and the logger name. Later calls are no-ops unless
    ``force`` is set.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, force=force)
