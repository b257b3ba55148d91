"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import OutboundCommand, PlatformResponse


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir a resposta da plataforma."""

    def build_response(self, command: OutboundCommand) -> PlatformResponse: ...
