"""Agregador de settings do adapter.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.alexa import (
    DEFAULT_WEBHOOK_PATH,
    AlexaSettings,
    get_alexa_settings,
)
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    LogFormat,
    get_base_settings,
)

__all__ = [
    "DEFAULT_WEBHOOK_PATH",
    "VALID_LOG_LEVELS",
    "AlexaSettings",
    "BaseSettings",
    "Environment",
    "LogFormat",
    "get_alexa_settings",
    "get_base_settings",
]
