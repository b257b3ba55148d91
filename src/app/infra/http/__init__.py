"""Servidor HTTP próprio do adapter (uvicorn)."""

from app.infra.http.webhook_server import HttpOptions, WebhookServer, WebhookServerError

__all__ = ["HttpOptions", "WebhookServer", "WebhookServerError"]
