"""Contratos canônicos trocados entre api/ e app/.

Modelos Pydantic imutáveis. Nomes Python em snake_case; a serialização
por alias produz os campos camelCase esperados pela plataforma Alexa e
pelos consumidores do evento normalizado.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOTE_CONTENT_TYPE = "Note"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class InboundEvent(_CamelModel):
    """Evento normalizado de uma requisição de intent recebida."""

    application: dict[str, Any] = Field(default_factory=dict)
    intent_name: str | None = Field(
        default=None,
        description="Nome do intent ou o próprio request_type fora de IntentRequest.",
    )
    request_type: str
    slots: dict[str, Any] = Field(default_factory=dict)
    user: dict[str, Any] = Field(default_factory=dict)
    correlation_key: str = Field(..., min_length=1)

    def to_message(self) -> dict[str, Any]:
        """Serializa no formato camelCase entregue aos consumidores."""
        return self.model_dump(by_alias=True)


class OutboundCommand(_CamelModel):
    """Comando de resposta para um evento normalizado anteriormente."""

    recipient_correlation_key: str
    content_type: str = NOTE_CONTENT_TYPE
    content: str = ""
    title: str = ""


class OutputSpeech(_CamelModel):
    """Fala sintetizada: texto puro ou SSML."""

    type: Literal["PlainText", "SSML"]
    text: str | None = None
    ssml: str | None = None


class Card(_CamelModel):
    """Card simples exibido no app da Alexa."""

    type: Literal["Simple"] = "Simple"
    title: str = ""
    content: str = ""


class ResponseBody(_CamelModel):
    output_speech: OutputSpeech
    card: Card
    should_end_session: bool = True


class PlatformResponse(_CamelModel):
    """Resposta completa devolvida ao Alexa Skills Kit."""

    response: ResponseBody

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o JSON da plataforma (sem campos nulos)."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "NOTE_CONTENT_TYPE",
    "Card",
    "InboundEvent",
    "OutboundCommand",
    "OutputSpeech",
    "PlatformResponse",
    "ResponseBody",
]
