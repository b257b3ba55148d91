"""Observabilidade — correlation_id e métricas via logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_reply_outcome
"""

from app.observability.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_inbound_dropped,
    record_latency,
    record_reply_outcome,
)

__all__ = [
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "record_inbound_dropped",
    "record_latency",
    "record_reply_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
