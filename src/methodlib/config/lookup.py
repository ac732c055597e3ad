"""Lookup configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_int_env_var

SUGGESTION_LIMIT_ENV: Final[str] = "METHODLIB_SUGGESTION_LIMIT"
DEFAULT_SUGGESTION_LIMIT: Final[int] = 5


@dataclass(frozen=True, slots=True)
class LookupConfig:
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT


def get_lookup_config() -> LookupConfig:
    return LookupConfig(
        suggestion_limit=optional_int_env_var(
            SUGGESTION_LIMIT_ENV,
            default=DEFAULT_SUGGESTION_LIMIT,
            minimum=0,
        ),
    )
