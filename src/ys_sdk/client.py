"""Fachada do SDK: envelope -> transporte -> decifra da resposta.

Uso:
    from ys_sdk import ClientConfig, YsClient

    client = YsClient(ClientConfig(cert_id="...", private_key=pem, public_key=pem))
    response, data = client.request(url, "trade.query", "1.0", {"orderNo": "123"})

Cada chamada gera seu próprio envelope e chave AES; a única informação
compartilhada entre chamadas é o ClientConfig (imutável).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, BinaryIO

from ys_sdk.connectors.ys import HttpClientConfig, YsTransport, raise_for_api_status
from ys_sdk.connectors.ys.api_logging import log_api_error, log_success
from ys_sdk.domain import ResponseEnvelope, UploadRequest
from ys_sdk.infra.crypto import aes_decrypt_ecb
from ys_sdk.observability import reset_current_req_id, set_current_req_id
from ys_sdk.services import EnvelopeBuilder
from ys_sdk.utils.errors import ApiError, DecodeError, TransportError

if TYPE_CHECKING:
    import httpx

    from ys_sdk.config.settings import YsSettings
    from ys_sdk.domain import ClientConfig, SealedRequest
    from ys_sdk.protocols import EnvelopeBuilderProtocol, YsTransportProtocol

BizContent = str | Mapping[str, Any]


class YsClient:
    """Cliente síncrono da API de pagamentos.

    Args:
        config: Credenciais do integrador
        transport: Transporte HTTP (padrão: YsTransport com timeout_seconds)
        builder: Montador de envelopes (padrão: EnvelopeBuilder(config))
        logger: Logger injetado (padrão: logger do módulo)
        log_payloads: Loga conteúdo de negócio e payloads em DEBUG
        timeout_seconds: Timeout por requisição do transporte padrão
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: YsTransportProtocol | None = None,
        builder: EnvelopeBuilderProtocol | None = None,
        logger: logging.Logger | None = None,
        log_payloads: bool = False,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._config = config
        self._logger = logger or logging.getLogger(__name__)
        self._log_payloads = log_payloads
        self._builder = builder or EnvelopeBuilder(
            config,
            logger=self._logger,
            log_payloads=log_payloads,
        )
        self._transport = transport or YsTransport(
            HttpClientConfig(timeout_seconds=timeout_seconds),
            logger=self._logger,
            log_payloads=log_payloads,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def request(
        self,
        url: str,
        method: str,
        version: str,
        biz_content: BizContent,
    ) -> tuple[ResponseEnvelope, dict[str, Any]]:
        """Requisição comum (POST JSON).

        Returns:
            (envelope de resposta, businessData decifrado)

        Raises:
            CryptoError: Falha de assinatura/cifra/decifra
            TransportError: Falha de conexão ou status != 200
            DecodeError: Resposta ou businessData mal-formados
            ApiError: `code` diferente de SUCCESS
        """
        self._log_biz_content(method, biz_content)
        sealed = self._builder.build(method, version, biz_content)
        token = set_current_req_id(sealed.envelope.req_id)
        try:
            response = self._transport.send_json(url, sealed.envelope)
            self._check_code(response, method, sealed)
            data = self.decode(sealed.aes_key, response.business_data)
            log_success(method, sealed.envelope.req_id, response.sub_code, self._logger)
            return response, data
        finally:
            reset_current_req_id(token)

    def upload_request(
        self,
        url: str,
        method: str,
        version: str,
        file_path: str,
        biz_content: BizContent,
    ) -> tuple[ResponseEnvelope, dict[str, Any] | None]:
        """Requisição de upload (multipart com campo `file`).

        Além de `code`, exige `subCode == SUCCESS` para decifrar o
        businessData; caso contrário retorna (resposta, None).

        Raises:
            TransportError: Arquivo inacessível, falha de conexão ou status != 200
            CryptoError, DecodeError, ApiError: como em `request`
        """
        self._log_biz_content(method, biz_content)
        sealed = self._builder.build(method, version, biz_content)
        upload = UploadRequest(envelope=sealed.envelope, file_path=file_path)
        token = set_current_req_id(upload.envelope.req_id)
        try:
            with _open_upload_file(upload.file_path) as file:
                response = self._transport.send_multipart(url, upload.envelope, file)
            self._check_code(response, method, sealed)

            if not response.is_sub_success:
                self._logger.info(
                    "ys_upload_sub_code_not_success",
                    extra={
                        "method": method,
                        "req_id": upload.envelope.req_id,
                        "sub_code": response.sub_code,
                    },
                )
                return response, None

            data = self.decode(sealed.aes_key, response.business_data)
            log_success(method, upload.envelope.req_id, response.sub_code, self._logger)
            return response, data
        finally:
            reset_current_req_id(token)

    def decode(self, aes_key: bytes, business_data: str) -> dict[str, Any]:
        """Decifra businessData (AES-ECB) e interpreta como objeto JSON.

        Raises:
            CryptoError: Falha de decifra
            DecodeError: Conteúdo decifrado não é um objeto JSON
        """
        plaintext = aes_decrypt_ecb(business_data, aes_key)
        try:
            data = json.loads(plaintext)
        except (ValueError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid businessData JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError("businessData must be a JSON object")
        return data

    def _check_code(
        self,
        response: ResponseEnvelope,
        method: str,
        sealed: SealedRequest,
    ) -> None:
        try:
            raise_for_api_status(response)
        except ApiError as exc:
            log_api_error(exc, method, sealed.envelope.req_id, self._logger)
            raise

    def _log_biz_content(self, method: str, biz_content: BizContent) -> None:
        if self._log_payloads:
            self._logger.debug(
                "ys_request_biz_content",
                extra={"method": method, "biz_content": biz_content},
            )


def _open_upload_file(file_path: str) -> BinaryIO:
    try:
        return open(file_path, "rb")  # noqa: SIM115 - fechado pelo `with` do chamador
    except OSError as exc:
        raise TransportError(f"Cannot open upload file: {exc}") from exc


def create_ys_client(
    settings: YsSettings | None = None,
    *,
    logger: logging.Logger | None = None,
    http_client: httpx.Client | None = None,
    setup_logging: bool = False,
) -> YsClient:
    """Factory para criar o cliente a partir de YsSettings.

    Args:
        settings: YsSettings opcional. Se None, carrega do ambiente.
        logger: Logger injetado.
        http_client: httpx.Client opcional (testes ou sessão do chamador).
        setup_logging: Se True, instala o logging JSON com `settings.log_level`.

    Raises:
        ValueError: Se settings inválidas.
    """
    # Import local para evitar dependência circular
    from ys_sdk.config.logging import configure_logging
    from ys_sdk.config.settings import get_ys_settings
    from ys_sdk.connectors.ys import create_ys_transport

    ys = settings or get_ys_settings()
    errors = ys.validate()
    if errors:
        raise ValueError("Invalid YsSettings: " + "; ".join(errors))

    if setup_logging:
        configure_logging(level=ys.log_level)

    transport = create_ys_transport(ys, client=http_client, logger=logger)
    return YsClient(
        ys.to_client_config(),
        transport=transport,
        logger=logger,
        log_payloads=ys.log_payloads,
    )
