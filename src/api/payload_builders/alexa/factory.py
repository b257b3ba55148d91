"""Montagem da resposta completa do Alexa Skills Kit."""

from __future__ import annotations

from api.payload_builders.alexa.card import SimpleCardBuilder
from api.payload_builders.alexa.speech import OutputSpeechBuilder
from app.protocols.models import (
    NOTE_CONTENT_TYPE,
    OutboundCommand,
    PlatformResponse,
    ResponseBody,
)
from utils.errors import UnsupportedContentTypeError


class AlexaResponseBuilder:
    """Implementação de PayloadBuilderProtocol para Alexa.

    Apenas interações de turno único: shouldEndSession é sempre True.
    """

    def __init__(
        self,
        speech_builder: OutputSpeechBuilder | None = None,
        card_builder: SimpleCardBuilder | None = None,
    ) -> None:
        self._speech_builder = speech_builder or OutputSpeechBuilder()
        self._card_builder = card_builder or SimpleCardBuilder()

    def build_response(self, command: OutboundCommand) -> PlatformResponse:
        """Constrói a resposta da plataforma a partir do comando.

        Args:
            command: Comando outbound

        Returns:
            PlatformResponse pronta para serialização

        Raises:
            UnsupportedContentTypeError: se o tipo de conteúdo não for Note
        """
        if command.content_type != NOTE_CONTENT_TYPE:
            raise UnsupportedContentTypeError(command.content_type)

        return PlatformResponse(
            response=ResponseBody(
                output_speech=self._speech_builder.build(command.content),
                card=self._card_builder.build(command.content, command.title),
                should_end_session=True,
            )
        )


_DEFAULT_BUILDER = AlexaResponseBuilder()


def build_response(command: OutboundCommand) -> PlatformResponse:
    """Atalho usando o builder padrão."""
    return _DEFAULT_BUILDER.build_response(command)
