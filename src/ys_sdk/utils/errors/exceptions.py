"""Taxonomia de erros do SDK.

Nenhum erro é recuperado localmente: toda falha aborta a chamada inteira
e chega ao chamador com a causa original encadeada (``raise ... from``).
"""

from __future__ import annotations


class YsSdkError(RuntimeError):
    """Base para todas as falhas do SDK."""


class CryptoError(YsSdkError):
    """Falha ao carregar chave, assinar, cifrar ou decifrar."""


class TransportError(YsSdkError):
    """Falha de conexão, timeout ou resposta HTTP diferente de 200."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(YsSdkError):
    """Corpo de resposta ou businessData com JSON mal-formado."""


class ApiError(YsSdkError):
    """Código de negócio diferente de SUCCESS retornado pela API."""

    def __init__(
        self,
        code: str,
        message: str,
        sub_code: str = "",
        sub_message: str = "",
    ) -> None:
        super().__init__(f"code:{code} msg:{message}")
        self.code = code
        self.message = message
        self.sub_code = sub_code
        self.sub_message = sub_message
