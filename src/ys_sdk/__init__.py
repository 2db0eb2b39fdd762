"""ys_sdk: cliente da API de pagamentos com envelope assinado e cifrado.

Re-exporta a fachada, os modelos de domínio e a taxonomia de erros.
"""

from ys_sdk.client import YsClient, create_ys_client
from ys_sdk.domain import (
    SUCCESS_CODE,
    ClientConfig,
    RequestEnvelope,
    ResponseEnvelope,
    SealedRequest,
    UploadRequest,
)
from ys_sdk.utils.errors import (
    ApiError,
    CryptoError,
    DecodeError,
    TransportError,
    YsSdkError,
)

__all__ = [
    "SUCCESS_CODE",
    "ApiError",
    "ClientConfig",
    "CryptoError",
    "DecodeError",
    "RequestEnvelope",
    "ResponseEnvelope",
    "SealedRequest",
    "TransportError",
    "UploadRequest",
    "YsClient",
    "YsSdkError",
    "create_ys_client",
]
