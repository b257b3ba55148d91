"""Canal de eventos em processo.

Desacopla o recebimento HTTP do consumo das mensagens (lado inbound) e a
entrega de respostas da requisição que as aguarda (lado outbound).

Cada chamada a ``subscribe`` cria uma fila própria; eventos publicados sem
nenhum assinante são descartados. Respostas são roteadas para
``CorrelationTable.deliver``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.coordinators.alexa.correlation_table import CorrelationTable
    from app.protocols.models import InboundEvent, PlatformResponse

logger = logging.getLogger(__name__)

_CLOSED = object()


class Subscription:
    """Iterador assíncrono sobre os eventos inbound de uma assinatura."""

    def __init__(self, channel: EventChannel) -> None:
        self._channel = channel
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._closed = False

    def push(self, item: object) -> None:
        if not self._closed:
            self._queue.put_nowait(item)

    def close(self) -> None:
        """Encerra a assinatura; o iterador termina após drenar a fila."""
        if self._closed:
            return
        self._queue.put_nowait(_CLOSED)
        self._closed = True
        self._channel._discard(self)

    def __aiter__(self) -> Subscription:
        return self

    async def __anext__(self) -> InboundEvent:
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item  # type: ignore[return-value]


class EventChannel:
    """Pub/sub em processo entre o webhook, os consumidores e a tabela."""

    def __init__(self, table: CorrelationTable) -> None:
        self._table = table
        self._subscriptions: set[Subscription] = set()
        self._closed = False

    @property
    def table(self) -> CorrelationTable:
        return self._table

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self) -> Subscription:
        """Cria uma assinatura imediatamente ativa."""
        subscription = Subscription(self)
        if self._closed:
            subscription.close()
            return subscription
        self._subscriptions.add(subscription)
        return subscription

    def publish_inbound(self, event: InboundEvent) -> int:
        """Publica evento normalizado para as assinaturas ativas.

        Returns:
            Número de assinaturas que receberam o evento.
        """
        if self._closed:
            logger.warning(
                "inbound_published_after_close",
                extra={"correlation_id": event.correlation_key},
            )
            return 0
        if not self._subscriptions:
            logger.debug(
                "inbound_event_without_subscribers",
                extra={"correlation_id": event.correlation_key},
            )
        for subscription in list(self._subscriptions):
            subscription.push(event)
        return len(self._subscriptions)

    def publish_response(self, key: str, response: PlatformResponse) -> bool:
        """Roteia a resposta para a requisição que a aguarda."""
        return self._table.deliver(key, response)

    def close(self) -> None:
        """Encerra todas as assinaturas."""
        self._closed = True
        for subscription in list(self._subscriptions):
            subscription.close()
        self._subscriptions.clear()

    def _discard(self, subscription: Subscription) -> None:
        self._subscriptions.discard(subscription)
