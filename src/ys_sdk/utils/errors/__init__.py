"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ApiError,
    CryptoError,
    DecodeError,
    TransportError,
    YsSdkError,
)

__all__ = [
    "ApiError",
    "CryptoError",
    "DecodeError",
    "TransportError",
    "YsSdkError",
]
