"""Recebimento de webhooks do Alexa Skills Kit."""

from api.connectors.alexa.webhook.receive import (
    InvalidJsonError,
    WebhookRequestError,
    parse_webhook_body,
)

__all__ = ["InvalidJsonError", "WebhookRequestError", "parse_webhook_body"]
