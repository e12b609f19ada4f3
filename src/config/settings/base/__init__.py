"""Settings base."""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
    parse_bool,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "get_base_settings",
    "parse_bool",
]
