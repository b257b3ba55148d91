"""Normalizer Alexa — extração e normalização de requisições de intent.

Responsabilidades:
- Extrair request/session do corpo enviado pelo Alexa Skills Kit
- Normalizar para o modelo interno InboundEvent
- Gerar a chave de correlação da requisição

Tipos de request tratados: LaunchRequest, IntentRequest, SessionEndedRequest
e qualquer outro tipo (repassado como intent_name).
"""

from .extractor import INTENT_REQUEST_TYPE, extract_request_fields
from .normalizer import AlexaRequestNormalizer, normalize_request

__all__ = [
    "INTENT_REQUEST_TYPE",
    "AlexaRequestNormalizer",
    "extract_request_fields",
    "normalize_request",
]
