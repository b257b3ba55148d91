"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    LogFormat,
    get_base_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "LogFormat",
    "get_base_settings",
]
