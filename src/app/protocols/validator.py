"""Protocolos de validação de schema."""

from __future__ import annotations

from typing import Any, Literal, Protocol

SchemaOperation = Literal["send", "inbound"]


class ValidationError(Exception):
    """Erro de validação de payload."""


class SchemaValidatorProtocol(Protocol):
    """Contrato mínimo para validação de payloads por operação.

    Retorna o payload validado ou levanta ValidationError.
    """

    def validate(self, payload: Any, operation: SchemaOperation) -> Any: ...
