"""Validador de schema por operação."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from api.validators.alexa.schemas import SendSchema
from app.protocols.models import InboundEvent
from app.protocols.validator import SchemaOperation, ValidationError

logger = logging.getLogger(__name__)

_SCHEMAS: dict[str, type[BaseModel]] = {
    "send": SendSchema,
    "inbound": InboundEvent,
}


class AlexaSchemaValidator:
    """Implementação de SchemaValidatorProtocol baseada em Pydantic."""

    def validate(self, payload: Any, operation: SchemaOperation) -> Any:
        """Valida o payload contra o schema da operação.

        Args:
            payload: dict bruto ou modelo já construído
            operation: "send" ou "inbound"

        Returns:
            Modelo validado (SendSchema ou InboundEvent)

        Raises:
            ValidationError: se a operação for desconhecida ou o payload inválido
        """
        schema = _SCHEMAS.get(operation)
        if schema is None:
            raise ValidationError(f"unknown schema operation: {operation}")

        if isinstance(payload, BaseModel):
            # Revalida o conteúdo: instâncias podem vir de model_construct ou model_copy
            payload = payload.model_dump(by_alias=True)

        try:
            return schema.model_validate(payload)
        except PydanticValidationError as exc:
            logger.debug(
                "schema_validation_failed",
                extra={"operation": operation, "error_count": exc.error_count()},
            )
            raise ValidationError(_summarize(exc)) from exc


def _summarize(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts) or "invalid payload"
