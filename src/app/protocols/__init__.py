"""Protocolos e contratos do core da aplicação."""

from .models import (
    NOTE_CONTENT_TYPE,
    Card,
    InboundEvent,
    OutboundCommand,
    OutputSpeech,
    PlatformResponse,
    ResponseBody,
)
from .normalizer import RequestNormalizerProtocol
from .payload_builder import PayloadBuilderProtocol
from .validator import SchemaOperation, SchemaValidatorProtocol, ValidationError

__all__ = [
    "NOTE_CONTENT_TYPE",
    "Card",
    "InboundEvent",
    "OutboundCommand",
    "OutputSpeech",
    "PayloadBuilderProtocol",
    "PlatformResponse",
    "RequestNormalizerProtocol",
    "ResponseBody",
    "SchemaOperation",
    "SchemaValidatorProtocol",
    "ValidationError",
]
