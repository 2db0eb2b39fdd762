"""Contrato de montagem do envelope assinado/cifrado."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ys_sdk.domain import SealedRequest


class EnvelopeBuilderProtocol(Protocol):
    """Interface mínima esperada pelo YsClient para montar envelopes."""

    def build(
        self,
        method: str,
        version: str,
        biz_content: str | Mapping[str, Any],
    ) -> SealedRequest: ...
