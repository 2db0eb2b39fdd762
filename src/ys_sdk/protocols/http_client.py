"""Contrato do transporte HTTP da API."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from ys_sdk.domain import RequestEnvelope, ResponseEnvelope


class YsTransportProtocol(Protocol):
    """Contrato mínimo para envio de envelopes."""

    def send_json(self, url: str, envelope: RequestEnvelope) -> ResponseEnvelope: ...

    def send_multipart(
        self,
        url: str,
        envelope: RequestEnvelope,
        file: BinaryIO,
    ) -> ResponseEnvelope: ...
