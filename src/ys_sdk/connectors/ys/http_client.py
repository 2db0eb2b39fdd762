"""Transporte da API: envelope -> HTTP POST -> ResponseEnvelope.

Dois formatos de envio:
- JSON (`application/json`) para requisições comuns
- multipart/form-data com campo `file` para uploads

Em ambos o corpo da resposta passa pela mesma decodificação
(base64 opcional + JSON).
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, BinaryIO

from ys_sdk.config.logging import log_fallback
from ys_sdk.connectors.ys.api_errors import decode_response_body, parse_response_envelope
from ys_sdk.connectors.ys.http_base import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    import httpx

    from ys_sdk.config.settings import YsSettings
    from ys_sdk.domain import RequestEnvelope, ResponseEnvelope


class YsTransport(HttpClient):
    """Cliente HTTP especializado para a API de pagamentos."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.Client | None = None,
        *,
        logger: logging.Logger | None = None,
        log_payloads: bool = False,
    ) -> None:
        super().__init__(config, client)
        self._logger = logger or logging.getLogger(__name__)
        self._log_payloads = log_payloads

    def send_json(self, url: str, envelope: RequestEnvelope) -> ResponseEnvelope:
        """Envia o envelope como JSON e retorna a resposta decodificada.

        Raises:
            TransportError: Falha de conexão ou status != 200
            DecodeError: Corpo de resposta mal-formado
        """
        payload = envelope.to_wire()
        if self._log_payloads:
            self._logger.debug("ys_request_payload", extra={"url": url, "payload": payload})

        response = self.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        return self._process_response(response, url, envelope.req_id)

    def send_multipart(
        self,
        url: str,
        envelope: RequestEnvelope,
        file: BinaryIO,
    ) -> ResponseEnvelope:
        """Envia arquivo + campos do envelope como multipart/form-data.

        O arquivo é lido em streaming a partir do handle; abrir e fechar o
        handle é responsabilidade do chamador.
        """
        fields = envelope.to_form_fields()
        filename = os.path.basename(getattr(file, "name", "") or "file")
        if self._log_payloads:
            self._logger.debug(
                "ys_upload_payload",
                extra={"url": url, "payload": fields, "upload_filename": filename},
            )

        response = self.post(
            url,
            data=fields,
            files={"file": (filename, file)},
        )
        return self._process_response(response, url, envelope.req_id)

    def _process_response(
        self,
        response: httpx.Response,
        url: str,
        req_id: str,
    ) -> ResponseEnvelope:
        raw_body = response.content
        if self._log_payloads:
            self._logger.debug(
                "ys_response_body",
                extra={"url": url, "body": raw_body.decode(errors="replace")},
            )

        body = decode_response_body(raw_body)
        if body is raw_body:
            log_fallback(self._logger, "response_body_base64", reason="not_base64")

        parsed = parse_response_envelope(body)
        self._logger.debug(
            "ys_response_received",
            extra={"req_id": req_id, "code": parsed.code, "sub_code": parsed.sub_code},
        )
        return parsed


def create_ys_transport(
    settings: YsSettings | None = None,
    *,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> YsTransport:
    """Factory para criar o transporte com config padrão.

    Args:
        settings: YsSettings opcional. Se None, carrega do ambiente.
        client: httpx.Client opcional (testes ou sessão do chamador).
        logger: Logger injetado.
    """
    # Import local para evitar dependência circular
    from ys_sdk.config.settings import get_ys_settings

    ys = settings or get_ys_settings()
    config = HttpClientConfig(
        timeout_seconds=ys.request_timeout_seconds,
        verify_ssl=ys.verify_ssl,
    )
    return YsTransport(config, client, logger=logger, log_payloads=ys.log_payloads)
