"""Settings específicas do canal Alexa.

Configurações do webhook e da correlação requisição/resposta.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_REPLY_TIMEOUT_SECONDS: float = 60.0
DEFAULT_WEBHOOK_PATH: str = "/webhook/alexa"


@dataclass(frozen=True)
class AlexaSettings:
    """Configurações do canal Alexa.

    Attributes:
        service_id: ID fixo da instância do adapter (vazio = gerar UUID)
        reply_timeout_seconds: Tempo máximo de espera pela resposta
        webhook_path: Prefixo do webhook quando montado no app principal
        http_host: Host do servidor de webhook próprio
        http_port: Porta do servidor próprio (0 = montar no app principal)
    """

    service_id: str = ""
    reply_timeout_seconds: float = DEFAULT_REPLY_TIMEOUT_SECONDS
    webhook_path: str = DEFAULT_WEBHOOK_PATH
    http_host: str = "127.0.0.1"
    http_port: int = 0

    @property
    def uses_own_server(self) -> bool:
        """True quando o adapter deve subir o próprio servidor."""
        return self.http_port > 0

    def validate(self) -> list[str]:
        """Valida configurações do canal.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.reply_timeout_seconds <= 0:
            errors.append("ALEXA_REPLY_TIMEOUT_SECONDS deve ser > 0")

        if not self.webhook_path.startswith("/"):
            errors.append("ALEXA_WEBHOOK_PATH deve começar com '/'")

        if self.webhook_path.endswith("/"):
            errors.append("ALEXA_WEBHOOK_PATH não deve terminar com '/'")

        if not 0 <= self.http_port <= 65535:
            errors.append("ALEXA_HTTP_PORT deve estar entre 0 e 65535")

        return errors


def _parse_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("settings_invalid_number", extra={"setting": name})
        return default


def _parse_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("settings_invalid_number", extra={"setting": name})
        return default


def _load_alexa_from_env() -> AlexaSettings:
    """Carrega AlexaSettings de variáveis de ambiente."""
    return AlexaSettings(
        service_id=os.getenv("ALEXA_SERVICE_ID", ""),
        reply_timeout_seconds=_parse_float(
            "ALEXA_REPLY_TIMEOUT_SECONDS", DEFAULT_REPLY_TIMEOUT_SECONDS
        ),
        webhook_path=os.getenv("ALEXA_WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH),
        http_host=os.getenv("ALEXA_HTTP_HOST", "127.0.0.1"),
        http_port=_parse_int("ALEXA_HTTP_PORT", 0),
    )


@lru_cache(maxsize=1)
def get_alexa_settings() -> AlexaSettings:
    """Retorna instância cacheada de AlexaSettings."""
    return _load_alexa_from_env()
