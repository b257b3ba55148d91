"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Cloud Logging, BigQuery, etc.).

Métricas suportadas:
- Latência: tempo entre a chegada da requisição e a resposta
- Desfecho da correlação: replied | expired | unmatched
- Eventos inbound descartados: normalização ou validação falhou

Uso:
    from app.observability.metrics import record_latency, record_reply_outcome

    record_reply_outcome("expired", correlation_key)
"""

from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

ReplyOutcome = Literal["replied", "expired", "unmatched"]


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "alexa_webhook")
        operation: Nome da operação (ex: "reply")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_reply_outcome(
    outcome: ReplyOutcome,
    correlation_id: str | None = None,
) -> None:
    """Registra o desfecho de uma chave de correlação."""
    logger.info(
        "metric_reply_outcome",
        extra={
            "metric_type": "reply_outcome",
            "component": "correlation_table",
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )


def record_inbound_dropped(
    reason: str,
    correlation_id: str | None = None,
) -> None:
    """Registra evento inbound descartado (sem PII no motivo)."""
    logger.info(
        "metric_inbound_dropped",
        extra={
            "metric_type": "inbound_dropped",
            "component": "alexa_adapter",
            "reason": reason,
            "correlation_id": correlation_id,
        },
    )
