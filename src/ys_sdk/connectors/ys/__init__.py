"""Conector HTTP da API de pagamentos."""

from .api_errors import decode_response_body, parse_response_envelope, raise_for_api_status
from .http_base import HttpClient, HttpClientConfig
from .http_client import YsTransport, create_ys_transport

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "YsTransport",
    "create_ys_transport",
    "decode_response_body",
    "parse_response_envelope",
    "raise_for_api_status",
]
