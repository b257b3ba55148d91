"""Exceções de domínio do adapter Alexa.

Erros do lado outbound são propagados ao chamador de ``send``; erros do
lado inbound são contidos (logados) pelo handler HTTP e pelo ``listen``.
"""

from __future__ import annotations


class AdapterError(RuntimeError):
    """Base para falhas do adapter."""


class NormalizationError(AdapterError, ValueError):
    """Payload inbound malformado que não pode ser normalizado."""


class UnsupportedContentTypeError(AdapterError, ValueError):
    """Tipo de conteúdo outbound diferente de ``Note``."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Only Note is supported, got: {content_type!r}")
        self.content_type = content_type


class NotSupportedError(AdapterError, NotImplementedError):
    """Operação que a plataforma não oferece (ex: diretório de usuários)."""
