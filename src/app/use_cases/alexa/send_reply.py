"""Use case para envio da resposta de uma requisição Alexa."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.coordinators.alexa.event_channel import EventChannel
    from app.protocols.models import OutboundCommand
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.validator import SchemaValidatorProtocol

logger = logging.getLogger(__name__)


class SendReplyUseCase:
    """Orquestra validação, build e publicação da resposta.

    Falhas de validação (ValidationError) e de tipo de conteúdo
    (UnsupportedContentTypeError) são propagadas ao chamador sem
    nenhum efeito colateral.
    """

    def __init__(
        self,
        validator: SchemaValidatorProtocol,
        builder: PayloadBuilderProtocol,
        channel: EventChannel,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._channel = channel

    def execute(self, data: Any) -> bool:
        """Executa o envio.

        Args:
            data: Payload ``{to: {id}, object: {type, content, name?}}``

        Returns:
            True se alguma requisição pendente recebeu a resposta; False
            se a chave já expirou ou nunca existiu.
        """
        schema = self._validator.validate(data, "send")
        command: OutboundCommand = schema.to_command()
        response = self._builder.build_response(command)
        delivered = self._channel.publish_response(command.recipient_correlation_key, response)
        logger.info(
            "alexa_reply_published",
            extra={
                "correlation_id": command.recipient_correlation_key,
                "delivered": delivered,
                "speech_type": response.response.output_speech.type,
            },
        )
        return delivered
