"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_int_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .lookup import DEFAULT_SUGGESTION_LIMIT, LookupConfig, get_lookup_config

__all__ = [
    "DEFAULT_SUGGESTION_LIMIT",
    "ConfigurationError",
    "LookupConfig",
    "configure_logging",
    "get_lookup_config",
    "optional_int_env_var",
]
