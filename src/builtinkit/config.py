"""
Runtime settings for builtinkit.

Settings are read once from the process environment and validated with
pydantic. Call ``get_settings.cache_clear()`` after changing the
environment to pick up new values.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "BUILTINKIT_"

_LOGGING_CONFIGURED = False


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    compact_on_delete: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name


def load_settings() -> Settings:
    """Build settings from ``BUILTINKIT_*`` environment variables."""
    values = {}
    for field in Settings.model_fields:
        raw = os.environ.get(ENV_PREFIX + field.upper())
        if raw is not None:
            values[field] = raw
    return Settings.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings."""
    return load_settings()


def configure_logging(force: bool = False) -> None:
    """Apply the configured log level to the package logger."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    logging.getLogger("builtinkit").setLevel(get_settings().log_level)
    _LOGGING_CONFIGURED = True
