"""Configuração de logging estruturado (JSON via python-json-logger).

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="alexa_adapter")
    logger = get_logger(__name__)

Logs estruturados, sem PII: nunca registrar slots nem ids de usuário.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
