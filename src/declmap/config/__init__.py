"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_choice
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import (
    LOG_LEVELS,
    LoggingConfig,
    configure_logging,
    get_logging_config,
    parse_log_level,
)
from .mapper import MapperConfig, get_mapper_config

__all__ = [
    "LOG_LEVELS",
    "ConfigurationError",
    "InvalidConfigurationError",
    "LoggingConfig",
    "MapperConfig",
    "configure_logging",
    "get_logging_config",
    "get_mapper_config",
    "parse_log_level",
    "read_env_choice",
]
