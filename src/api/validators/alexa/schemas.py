"""Schemas Pydantic das operações validadas pelo adapter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.protocols.models import OutboundCommand


class SendTarget(BaseModel):
    """Destinatário: a chave de correlação da requisição original."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Chave de correlação.")


class SendObject(BaseModel):
    """Conteúdo a enviar."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., min_length=1, description="Tipo do conteúdo (ex: Note).")
    content: str = Field(..., description="Texto puro ou SSML; vazio é válido.")
    name: str | None = Field(default=None, description="Título do card.")


class SendSchema(BaseModel):
    """Payload aceito por AlexaAdapter.send()."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    to: SendTarget
    object_: SendObject = Field(..., alias="object")

    def to_command(self) -> OutboundCommand:
        """Converte para o comando outbound canônico."""
        return OutboundCommand(
            recipient_correlation_key=self.to.id,
            content_type=self.object_.type,
            content=self.object_.content,
            title=self.object_.name or "",
        )
