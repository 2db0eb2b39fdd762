"""Montagem do envelope assinado e cifrado.

Sequência fixa por requisição:
1. reqId + timeStamp
2. chave AES aleatória (16 caracteres)
3. check = base64(RSA(chave pública, chave AES))
4. bizContent = AES-ECB(conteúdo, chave AES)
5. string canônica na ordem de SIGN_FIELD_ORDER
6. sign = SHA256withRSA(chave privada, string canônica)
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote_plus

from ys_sdk.domain import ClientConfig, RequestEnvelope, SealedRequest
from ys_sdk.infra.crypto import (
    AES_KEY_SIZE,
    CHARSET,
    aes_encrypt_ecb,
    get_random_string,
    load_private_key,
    load_public_key,
    rsa_encrypt,
    rsa_sign,
)
from ys_sdk.utils.clock import current_timestamp, new_request_id
from ys_sdk.utils.errors import CryptoError

# Ordem faz parte do contrato do protocolo (não é alfabética).
SIGN_FIELD_ORDER: tuple[str, ...] = (
    "timeStamp",
    "method",
    "charset",
    "reqId",
    "certId",
    "version",
    "check",
    "bizContent",
)


def build_sign_string(envelope: RequestEnvelope) -> str:
    """Concatena `chave=valor` (valor URL-encoded) na ordem do protocolo."""
    wire = envelope.to_wire()
    return "&".join(f"{name}={quote_plus(wire[name])}" for name in SIGN_FIELD_ORDER)


def serialize_biz_content(biz_content: str | Mapping[str, Any]) -> str:
    """Normaliza o conteúdo de negócio para texto JSON."""
    if isinstance(biz_content, str):
        return biz_content
    try:
        return json.dumps(biz_content, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise CryptoError(f"bizContent is not JSON-serializable: {exc}") from exc


class EnvelopeBuilder:
    """Constrói envelopes a partir das credenciais do integrador.

    As chaves são carregadas uma vez; cada chamada a `build` gera uma chave
    AES nova e não compartilha estado com outras chamadas.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        logger: logging.Logger | None = None,
        log_payloads: bool = False,
        key_factory: Callable[[], str] | None = None,
    ) -> None:
        self._config = config
        self._private_key = load_private_key(
            config.private_key,
            config.private_key_passphrase or None,
        )
        self._public_key = load_public_key(config.public_key)
        self._logger = logger or logging.getLogger(__name__)
        self._log_payloads = log_payloads
        self._key_factory = key_factory or (lambda: get_random_string(AES_KEY_SIZE))

    def build(
        self,
        method: str,
        version: str,
        biz_content: str | Mapping[str, Any],
    ) -> SealedRequest:
        """Retorna envelope assinado + chave AES da requisição.

        Raises:
            CryptoError: Se qualquer etapa de cifra/assinatura falhar
        """
        plaintext = serialize_biz_content(biz_content)
        aes_key = self._key_factory().encode(CHARSET)

        check = base64.b64encode(rsa_encrypt(self._public_key, aes_key)).decode("ascii")
        unsigned = RequestEnvelope(
            req_id=new_request_id(),
            timestamp=current_timestamp(),
            method=method,
            version=version,
            cert_id=self._config.cert_id,
            check=check,
            biz_content=aes_encrypt_ecb(plaintext, aes_key),
        )

        sign_string = build_sign_string(unsigned)
        if self._log_payloads:
            self._logger.debug("ys_sign_string", extra={"sign_string": sign_string})

        envelope = unsigned.model_copy(update={"sign": rsa_sign(self._private_key, sign_string)})
        self._logger.debug(
            "ys_envelope_built",
            extra={"req_id": envelope.req_id, "method": method, "version": version},
        )
        return SealedRequest(envelope=envelope, aes_key=aes_key)
