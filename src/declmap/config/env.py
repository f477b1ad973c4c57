"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def read_env_choice(name: str, *, allowed: Sequence[str], default: str) -> str:
    """Return a lower-cased environment value restricted to ``allowed``.

    Unset or blank variables fall back to ``default``.
    """

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized not in allowed:
        raise InvalidConfigurationError(name, value, tuple(allowed))
    return normalized
