"""Adapter Alexa — ponte entre o Alexa Skills Kit e eventos normalizados.

Fluxo de uma requisição:
1. O webhook entrega o corpo decodificado a ``handle_request``
2. O corpo é normalizado em InboundEvent com chave de correlação nova
3. A resposta pendente é registrada na CorrelationTable (antes da publicação)
4. O evento é publicado no EventChannel e chega aos iteradores de ``listen``
5. Um consumidor externo chama ``send`` com a chave como destinatário
6. A resposta formatada é entregue ao callback, que completa a requisição

O canal e a tabela pertencem à instância: são criados na construção e
descartados em ``disconnect`` (e recriados num novo ``connect``).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.alexa import AlexaRequestNormalizer
from api.payload_builders.alexa import AlexaResponseBuilder
from api.routes.alexa.webhook import create_webhook_router
from api.validators.alexa import AlexaSchemaValidator
from app.coordinators.alexa import DEFAULT_REPLY_TIMEOUT_SECONDS, CorrelationTable, EventChannel
from app.infra.http import WebhookServer
from app.observability import (
    correlation_scope,
    generate_correlation_id,
    record_inbound_dropped,
)
from app.protocols.validator import ValidationError
from app.use_cases.alexa import SendReplyUseCase
from utils.errors import NormalizationError, NotSupportedError, UnsupportedContentTypeError

if TYPE_CHECKING:
    from fastapi import APIRouter

    from app.coordinators.alexa.event_channel import Subscription
    from app.infra.http import HttpOptions
    from app.protocols.models import InboundEvent, PlatformResponse
    from app.protocols.normalizer import RequestNormalizerProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.validator import SchemaValidatorProtocol

logger = logging.getLogger(__name__)

SERVICE_NAME = "alexa"


class InboundEventStream:
    """Sequência assíncrona de eventos validados sobre uma assinatura.

    A assinatura é ativada na criação, para não perder eventos publicados
    antes da primeira iteração. Ela é encerrada ao esgotar a sequência,
    em ``aclose()`` ou quando o stream é coletado sem ter sido consumido.
    """

    def __init__(self, subscription: Subscription, validator: SchemaValidatorProtocol) -> None:
        self._subscription = subscription
        self._validator = validator

    def __aiter__(self) -> InboundEventStream:
        return self

    async def __anext__(self) -> InboundEvent:
        while True:
            try:
                event = await self._subscription.__anext__()
            except StopAsyncIteration:
                self._subscription.close()
                raise
            try:
                return self._validator.validate(event, "inbound")
            except ValidationError as exc:
                logger.error(
                    "alexa_inbound_validation_failed",
                    extra={"correlation_id": event.correlation_key, "error": str(exc)},
                )
                record_inbound_dropped("validation_failed", event.correlation_key)

    async def aclose(self) -> None:
        self._subscription.close()

    def __del__(self) -> None:
        subscription = getattr(self, "_subscription", None)
        if subscription is not None:
            subscription.close()


class AlexaAdapter:
    """Adapter de uma única instância com uma única tabela de correlação.

    Args:
        service_id: Identificador da instância. Gera UUID se None.
        reply_timeout_seconds: Tempo de vida de uma resposta pendente.
        http: Se informado, o adapter sobe o próprio servidor de webhook
            em ``connect`` e ``get_router`` retorna None.
        log_level: Nível de log do servidor próprio.
        validator, normalizer, builder: Colaboradores injetáveis.
    """

    def __init__(
        self,
        service_id: str | None = None,
        *,
        reply_timeout_seconds: float = DEFAULT_REPLY_TIMEOUT_SECONDS,
        http: HttpOptions | None = None,
        log_level: str = "info",
        validator: SchemaValidatorProtocol | None = None,
        normalizer: RequestNormalizerProtocol | None = None,
        builder: PayloadBuilderProtocol | None = None,
    ) -> None:
        self._service_id = service_id or generate_correlation_id()
        self._reply_timeout_seconds = reply_timeout_seconds
        self._validator = validator or AlexaSchemaValidator()
        self._normalizer = normalizer or AlexaRequestNormalizer()
        self._builder = builder or AlexaResponseBuilder()
        self._connected = False

        self._table = CorrelationTable(timeout_seconds=reply_timeout_seconds)
        self._channel = EventChannel(self._table)

        self._router = create_webhook_router(self)
        self._webhook_server: WebhookServer | None = None
        if http is not None:
            self._webhook_server = WebhookServer(http, self._router, log_level=log_level)

    # ──────────────────────────────────────────────────────────────────────
    # Identidade
    # ──────────────────────────────────────────────────────────────────────

    def service_name(self) -> str:
        """Nome do serviço/integração."""
        return SERVICE_NAME

    def service_id(self) -> str:
        """ID desta instância do adapter."""
        return self._service_id

    def get_router(self) -> APIRouter | None:
        """Router para montagem num app hospedeiro (None com servidor próprio)."""
        if self._webhook_server is not None:
            return None
        return self._router

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def pending_replies(self) -> int:
        return self._table.pending_count

    @property
    def correlation_table(self) -> CorrelationTable:
        return self._table

    @property
    def channel(self) -> EventChannel:
        return self._channel

    @property
    def webhook_server(self) -> WebhookServer | None:
        return self._webhook_server

    async def users(self) -> dict[str, Any]:
        raise NotSupportedError("users")

    async def channels(self) -> dict[str, Any]:
        raise NotSupportedError("channels")

    # ──────────────────────────────────────────────────────────────────────
    # Ciclo de vida
    # ──────────────────────────────────────────────────────────────────────

    async def connect(self) -> dict[str, str]:
        """Conecta o adapter (idempotente) e sobe o servidor próprio, se houver."""
        status = {"type": "connected", "serviceID": self._service_id}
        if self._connected:
            return status

        if self._channel.closed:
            self._table = CorrelationTable(timeout_seconds=self._reply_timeout_seconds)
            self._channel = EventChannel(self._table)

        if self._webhook_server is not None:
            await self._webhook_server.listen()

        self._connected = True
        logger.info(
            "adapter_connected",
            extra={"service_id": self._service_id, "own_server": self._webhook_server is not None},
        )
        return status

    async def disconnect(self) -> None:
        """Desconecta: encerra assinaturas, descarta pendências e para o servidor."""
        self._connected = False
        self._channel.close()
        dropped = self._table.close()
        if self._webhook_server is not None:
            await self._webhook_server.close()
        logger.info(
            "adapter_disconnected",
            extra={"service_id": self._service_id, "dropped_replies": dropped},
        )

    # ──────────────────────────────────────────────────────────────────────
    # Inbound
    # ──────────────────────────────────────────────────────────────────────

    async def handle_request(self, payload: Any) -> PlatformResponse | None:
        """Processa uma requisição recebida e aguarda a sua resposta.

        Returns:
            A resposta entregue via ``send``, ou None se o corpo for
            inválido ou a resposta expirar.
        """
        correlation_key = generate_correlation_id()
        with correlation_scope(correlation_key):
            try:
                event = self._normalizer.normalize(payload, correlation_key)
            except NormalizationError as exc:
                logger.warning(
                    "alexa_request_normalization_failed",
                    extra={"channel": "alexa", "error": str(exc)},
                )
                record_inbound_dropped(str(exc), correlation_key)
                return None

            loop = asyncio.get_running_loop()
            reply: asyncio.Future[PlatformResponse | None] = loop.create_future()

            def _on_reply(response: PlatformResponse) -> None:
                if not reply.done():
                    reply.set_result(response)

            def _on_expire() -> None:
                if not reply.done():
                    reply.set_result(None)

            # Registro antes da publicação: a resposta nunca chega antes do listener
            if not self._table.register(correlation_key, _on_reply, _on_expire):
                return None

            logger.info(
                "alexa_request_received",
                extra={"channel": "alexa", "request_type": event.request_type},
            )
            self._channel.publish_inbound(event)

            try:
                return await reply
            finally:
                if correlation_key in self._table:
                    # Requisição cancelada (cliente desconectou)
                    self._table.expire(correlation_key)

    def listen(self) -> InboundEventStream:
        """Sequência de eventos normalizados e validados.

        Cada chamada cria uma assinatura nova. Eventos que falham na
        validação são logados e descartados da sequência.
        """
        return InboundEventStream(self._channel.subscribe(), self._validator)

    # ──────────────────────────────────────────────────────────────────────
    # Outbound
    # ──────────────────────────────────────────────────────────────────────

    async def send(self, data: Any) -> dict[str, str]:
        """Envia a resposta de uma requisição pendente.

        Args:
            data: ``{to: {id: chave}, object: {type: "Note", content, name?}}``

        Returns:
            ``{"type": "sent", "serviceID": ...}`` — também quando a chave já
            expirou (entrega sem destinatário é descartada em silêncio).

        Raises:
            ValidationError: payload fora do schema de envio.
            UnsupportedContentTypeError: object.type diferente de Note.
        """
        logger.debug("alexa_send_requested", extra={"service_id": self._service_id})
        use_case = SendReplyUseCase(
            validator=self._validator,
            builder=self._builder,
            channel=self._channel,
        )
        try:
            use_case.execute(data)
        except (ValidationError, UnsupportedContentTypeError) as exc:
            logger.warning(
                "alexa_send_rejected",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            raise
        return {"type": "sent", "serviceID": self._service_id}
