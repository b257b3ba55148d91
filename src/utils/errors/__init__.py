"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AdapterError,
    NormalizationError,
    NotSupportedError,
    UnsupportedContentTypeError,
)

__all__ = [
    "AdapterError",
    "NormalizationError",
    "NotSupportedError",
    "UnsupportedContentTypeError",
]
