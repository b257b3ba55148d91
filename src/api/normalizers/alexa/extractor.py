"""Extrator de payloads do Alexa Skills Kit.

Estrutura esperada do corpo:
- request: {type, intent?: {name, slots?}}
- session: {application, user}

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import Any

from utils.errors import NormalizationError

logger = logging.getLogger(__name__)

INTENT_REQUEST_TYPE = "IntentRequest"


def get_path(data: Any, *keys: str) -> Any:
    """Lê um caminho aninhado de dicts; caminho ausente retorna None."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _require_object(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    if not isinstance(value, dict):
        raise NormalizationError(f"{key}_missing")
    return value


def extract_request_fields(payload: Any) -> dict[str, Any]:
    """Extrai os campos do corpo bruto para estrutura intermediária.

    Raises:
        NormalizationError: se o corpo não for objeto, se request/session
            estiverem ausentes ou se request.type não for string.
    """
    if not isinstance(payload, dict):
        raise NormalizationError("payload_not_object")

    request = _require_object(payload, "request")
    session = _require_object(payload, "session")

    request_type = request.get("type")
    if not isinstance(request_type, str) or not request_type:
        raise NormalizationError("request_type_missing")

    if request_type == INTENT_REQUEST_TYPE:
        intent_name = get_path(request, "intent", "name")
    else:
        intent_name = request_type

    slots = get_path(request, "intent", "slots")
    if not isinstance(slots, dict):
        slots = {}

    application = session.get("application")
    user = session.get("user")

    return {
        "request_type": request_type,
        "intent_name": intent_name if isinstance(intent_name, str) else None,
        "slots": slots,
        "application": application if isinstance(application, dict) else {},
        "user": user if isinstance(user, dict) else {},
    }
