"""Contratos (Protocol) que o YsClient consome.

Permitem injetar fakes em testes sem depender das implementações concretas.
"""

from .crypto import EnvelopeBuilderProtocol
from .http_client import YsTransportProtocol

__all__ = ["EnvelopeBuilderProtocol", "YsTransportProtocol"]
