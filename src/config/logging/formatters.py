"""Formatters de logging estruturado.

Campos obrigatórios em todo log:
- asctime, level, logger, message
- correlation_id (chave da requisição Alexa em curso, quando houver)
- service
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Ordem estável dos campos no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(service)s] %(name)s %(correlation_id)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via ``extra`` são anexados ao objeto JSON.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "app.adapter",
         "message": "alexa_request_received", "correlation_id": "9f1c...",
         "service": "alexa_adapter", "request_type": "IntentRequest"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para desenvolvimento local (LOG_FORMAT=text)."""
    return logging.Formatter(TEXT_FORMAT)
