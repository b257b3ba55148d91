"""Normalizer Alexa — converte requisições para o modelo InboundEvent."""

from __future__ import annotations

from typing import Any

from app.observability import generate_correlation_id
from app.protocols.models import InboundEvent

from .extractor import extract_request_fields


def normalize_request(
    payload: Any,
    correlation_key: str | None = None,
) -> InboundEvent:
    """Normaliza o corpo de uma requisição Alexa.

    Args:
        payload: Corpo JSON já decodificado.
        correlation_key: Chave da requisição. Gera um UUID novo se None.

    Returns:
        InboundEvent imutável.

    Raises:
        NormalizationError: se o corpo estiver malformado.
    """
    fields = extract_request_fields(payload)
    return InboundEvent(
        correlation_key=correlation_key or generate_correlation_id(),
        **fields,
    )


class AlexaRequestNormalizer:
    """Implementação de RequestNormalizerProtocol para Alexa."""

    def normalize(self, payload: dict[str, Any], correlation_key: str) -> InboundEvent:
        return normalize_request(payload, correlation_key)
