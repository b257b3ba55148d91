"""Tabela de correlação: chave da requisição -> resposta pendente.

Cada requisição HTTP recebida registra um callback de uso único sob a sua
chave de correlação. A primeira ocorrência entre entrega (deliver) e
expiração (expire) remove o registro e decide o destino da requisição;
a segunda é um no-op.

Todas as operações são síncronas e executadas no event loop, portanto
register/deliver/expire são passos atômicos entre si. O timer de
expiração é um TimerHandle de ``loop.call_later``, cancelado na entrega.

Ciclo de vida por chave:
    RECEIVED -> AWAITING_REPLY -> REPLIED | EXPIRED
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from app.observability.metrics import record_latency, record_reply_outcome

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import PlatformResponse

logger = logging.getLogger(__name__)

DEFAULT_REPLY_TIMEOUT_SECONDS = 60.0
_MAX_FINISHED_KEYS = 1024


class ReplyState(Enum):
    """Estado de uma requisição em relação à sua resposta."""

    RECEIVED = "received"
    AWAITING_REPLY = "awaiting_reply"
    REPLIED = "replied"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self in (ReplyState.REPLIED, ReplyState.EXPIRED)


@dataclass(slots=True)
class PendingReply:
    """Registro de uma resposta aguardada (posse exclusiva da tabela)."""

    key: str
    on_reply: Callable[[PlatformResponse], None]
    on_expire: Callable[[], None] | None
    timer: asyncio.TimerHandle
    registered_at: float


class CorrelationTable:
    """Mapa concorrente-seguro de chave de correlação para callback único.

    Args:
        timeout_seconds: Tempo de vida de um registro sem resposta.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_REPLY_TIMEOUT_SECONDS) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds deve ser > 0")
        self._timeout_seconds = timeout_seconds
        self._pending: dict[str, PendingReply] = {}
        self._finished: OrderedDict[str, ReplyState] = OrderedDict()
        self._closed = False

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def __contains__(self, key: object) -> bool:
        return key in self._pending

    def state(self, key: str) -> ReplyState | None:
        """Retorna o estado conhecido da chave (None se nunca vista)."""
        if key in self._pending:
            return ReplyState.AWAITING_REPLY
        return self._finished.get(key)

    def register(
        self,
        key: str,
        on_reply: Callable[[PlatformResponse], None],
        on_expire: Callable[[], None] | None = None,
    ) -> bool:
        """Registra callback de uso único e arma o timer de expiração.

        Deve ser chamado de dentro do event loop.

        Args:
            key: Chave de correlação (gerada por requisição)
            on_reply: Invocado uma única vez com a resposta entregue
            on_expire: Notificado se a chave expirar sem resposta

        Returns:
            True se registrado; False se a chave já existe ou a tabela fechou.
        """
        if self._closed:
            logger.warning("correlation_register_after_close", extra={"correlation_id": key})
            return False
        if key in self._pending:
            logger.warning("correlation_key_already_registered", extra={"correlation_id": key})
            return False

        loop = asyncio.get_running_loop()
        timer = loop.call_later(self._timeout_seconds, self.expire, key)
        self._pending[key] = PendingReply(
            key=key,
            on_reply=on_reply,
            on_expire=on_expire,
            timer=timer,
            registered_at=time.monotonic(),
        )
        logger.debug(
            "correlation_registered",
            extra={
                "correlation_id": key,
                "timeout_seconds": self._timeout_seconds,
                "pending": len(self._pending),
            },
        )
        return True

    def deliver(self, key: str, response: PlatformResponse) -> bool:
        """Entrega a resposta ao callback registrado, se houver.

        Entrega sem registro (expirada ou desconhecida) é descartada
        silenciosamente.

        Returns:
            True se o callback foi invocado.
        """
        entry = self._pending.pop(key, None)
        if entry is None:
            logger.debug("correlation_unmatched", extra={"correlation_id": key})
            record_reply_outcome("unmatched", key)
            return False

        entry.timer.cancel()
        self._mark_finished(key, ReplyState.REPLIED)
        record_reply_outcome("replied", key)
        record_latency(
            "correlation_table",
            "reply",
            (time.monotonic() - entry.registered_at) * 1000,
            key,
        )
        try:
            entry.on_reply(response)
        except Exception:
            logger.exception("correlation_reply_callback_failed", extra={"correlation_id": key})
        return True

    def expire(self, key: str) -> bool:
        """Remove o registro sem invocar on_reply (chamado pelo timer).

        Returns:
            True se havia registro pendente.
        """
        entry = self._pending.pop(key, None)
        if entry is None:
            return False

        entry.timer.cancel()
        self._mark_finished(key, ReplyState.EXPIRED)
        record_reply_outcome("expired", key)
        logger.info(
            "correlation_expired",
            extra={"correlation_id": key, "timeout_seconds": self._timeout_seconds},
        )
        self._notify_expired(entry)
        return True

    def close(self) -> int:
        """Cancela todos os timers e descarta os registros pendentes.

        Returns:
            Quantidade de registros descartados.
        """
        self._closed = True
        dropped = list(self._pending.values())
        self._pending.clear()
        for entry in dropped:
            entry.timer.cancel()
            self._mark_finished(entry.key, ReplyState.EXPIRED)
            self._notify_expired(entry)
        if dropped:
            logger.info("correlation_table_closed", extra={"dropped": len(dropped)})
        return len(dropped)

    def _notify_expired(self, entry: PendingReply) -> None:
        if entry.on_expire is None:
            return
        try:
            entry.on_expire()
        except Exception:
            logger.exception(
                "correlation_expire_callback_failed",
                extra={"correlation_id": entry.key},
            )

    def _mark_finished(self, key: str, state: ReplyState) -> None:
        self._finished[key] = state
        while len(self._finished) > _MAX_FINISHED_KEYS:
            self._finished.popitem(last=False)
