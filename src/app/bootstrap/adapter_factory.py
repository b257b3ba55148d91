"""Factory do AlexaAdapter a partir das settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.adapter import AlexaAdapter
from app.infra.http import HttpOptions
from config.settings import get_alexa_settings, get_base_settings

if TYPE_CHECKING:
    from config.settings import AlexaSettings


def create_adapter(settings: AlexaSettings | None = None) -> AlexaAdapter:
    """Cria o adapter conforme env.

    Com ALEXA_HTTP_PORT definido, o adapter sobe o próprio servidor;
    caso contrário expõe o router para montagem no app principal.
    """
    alexa = settings or get_alexa_settings()
    http = None
    if alexa.uses_own_server:
        http = HttpOptions(host=alexa.http_host, port=alexa.http_port, path=alexa.webhook_path)
    return AlexaAdapter(
        service_id=alexa.service_id or None,
        reply_timeout_seconds=alexa.reply_timeout_seconds,
        http=http,
        log_level=get_base_settings().log_level,
    )
