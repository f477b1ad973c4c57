"""Reconciliation defaults for declaration mappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from declmap.domain.mapping import DuplicateIdPolicy

from .env import read_env_choice

DUPLICATE_IDS_ENV: Final[str] = "DECLMAP_DUPLICATE_IDS"


@dataclass(frozen=True, slots=True)
class MapperConfig:
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.LAST_WINS


def get_mapper_config(*, duplicate_ids: DuplicateIdPolicy | None = None) -> MapperConfig:
    """Build mapper settings, letting explicit arguments override the environment."""

    if duplicate_ids is not None:
        return MapperConfig(duplicate_ids=duplicate_ids)
    value = read_env_choice(
        DUPLICATE_IDS_ENV,
        allowed=tuple(policy.value for policy in DuplicateIdPolicy),
        default=DuplicateIdPolicy.LAST_WINS.value,
    )
    return MapperConfig(duplicate_ids=DuplicateIdPolicy(value))
