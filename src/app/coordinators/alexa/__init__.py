"""Coordenação Alexa: correlação requisição/resposta e canal de eventos."""

from app.coordinators.alexa.correlation_table import (
    DEFAULT_REPLY_TIMEOUT_SECONDS,
    CorrelationTable,
    PendingReply,
    ReplyState,
)
from app.coordinators.alexa.event_channel import EventChannel, Subscription

__all__ = [
    "DEFAULT_REPLY_TIMEOUT_SECONDS",
    "CorrelationTable",
    "EventChannel",
    "PendingReply",
    "ReplyState",
    "Subscription",
]
