"""Builders de payload para respostas do Alexa Skills Kit.

Este pacote separa a fala (PlainText/SSML), o card e a montagem final.
"""

from api.payload_builders.alexa.card import SimpleCardBuilder
from api.payload_builders.alexa.factory import AlexaResponseBuilder, build_response
from api.payload_builders.alexa.speech import (
    SSML_CLOSE_TAG,
    SSML_OPEN_TAG,
    OutputSpeechBuilder,
    is_ssml,
)

__all__ = [
    "SSML_CLOSE_TAG",
    "SSML_OPEN_TAG",
    "AlexaResponseBuilder",
    "OutputSpeechBuilder",
    "SimpleCardBuilder",
    "build_response",
    "is_ssml",
]
