"""Decodificação do corpo de resposta e status de negócio da API."""

from __future__ import annotations

import base64
import binascii
import json

from pydantic import ValidationError

from ys_sdk.domain import ResponseEnvelope
from ys_sdk.utils.errors import ApiError, DecodeError


def decode_response_body(body: bytes) -> bytes:
    """Remove a camada base64 opcional do corpo.

    O servidor pode ou não codificar a resposta em base64; se a
    decodificação estrita falhar, os bytes brutos são usados. Quebras de
    linha (base64 MIME, 76 colunas) são ignoradas.
    """
    try:
        return base64.b64decode(b"".join(body.split()), validate=True)
    except (ValueError, binascii.Error):
        return body


def parse_response_envelope(body: bytes) -> ResponseEnvelope:
    """Converte o corpo (já sem base64) em ResponseEnvelope.

    Raises:
        DecodeError: Se o corpo não for um objeto JSON válido
    """
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Invalid response JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError("Response JSON must be an object")

    try:
        return ResponseEnvelope.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(f"Invalid response envelope: {exc}") from exc


def raise_for_api_status(response: ResponseEnvelope) -> None:
    """Levanta ApiError quando `code` não é SUCCESS."""
    if not response.is_success:
        raise ApiError(
            code=response.code,
            message=response.message,
            sub_code=response.sub_code,
            sub_message=response.sub_message,
        )
