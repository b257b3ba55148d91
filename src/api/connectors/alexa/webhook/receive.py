"""Parse inicial do corpo do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import Any


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no corpo do webhook."""


def parse_webhook_body(raw_body: bytes) -> dict[str, Any]:
    """Decodifica o corpo JSON da requisição.

    GET e POST são tratados igualmente; corpo vazio vira objeto vazio.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
