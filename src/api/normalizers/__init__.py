"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- alexa/: normalizer de requisições do Alexa Skills Kit

Cada canal tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .alexa import AlexaRequestNormalizer, extract_request_fields, normalize_request

__all__ = [
    "AlexaRequestNormalizer",
    "extract_request_fields",
    "normalize_request",
]
