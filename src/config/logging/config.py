"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="alexa_adapter")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("alexa_request_received", extra={"request_type": "IntentRequest"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter
from config.settings.base import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_SERVICE_NAME = "alexa_adapter"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    log_format: str = "json",
    stream: TextIO | None = None,
) -> None:
    """Configura o root logger com um único handler.

    Deve ser chamada uma vez na inicialização do serviço.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do contexto.
        log_format: "json" (padrão) ou "text".
        stream: Destino do handler (padrão: stderr).

    Raises:
        ValueError: Se o nível ou o formato forem inválidos.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    if log_format == "json":
        formatter: logging.Formatter = create_json_formatter()
    elif log_format == "text":
        formatter = create_text_formatter()
    else:
        raise ValueError(f"Formato de log inválido: {log_format}")

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
