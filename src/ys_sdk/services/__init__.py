"""Serviços de montagem do envelope."""

from .envelope_builder import SIGN_FIELD_ORDER, EnvelopeBuilder, build_sign_string

__all__ = ["SIGN_FIELD_ORDER", "EnvelopeBuilder", "build_sign_string"]
