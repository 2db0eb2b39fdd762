"""Modelos de domínio do envelope de requisição/resposta."""

from .client_config import ClientConfig
from .envelope import (
    SUCCESS_CODE,
    RequestEnvelope,
    ResponseEnvelope,
    SealedRequest,
    UploadRequest,
)

__all__ = [
    "SUCCESS_CODE",
    "ClientConfig",
    "RequestEnvelope",
    "ResponseEnvelope",
    "SealedRequest",
    "UploadRequest",
]
