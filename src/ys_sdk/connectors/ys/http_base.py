"""Cliente HTTP base (síncrono) para o conector da API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ys_sdk.utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples: uma chamada por invocação, sem retry.

    Um `httpx.Client` pode ser injetado (ex.: com `httpx.MockTransport`);
    sem ele, um cliente é aberto e fechado a cada chamada.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    def post(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Executa POST e exige HTTP 200.

        Raises:
            TransportError: Timeout, falha de conexão ou status != 200
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                response = self._client.post(
                    url,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                    **kwargs,
                )
            else:
                with httpx.Client(verify=self._config.verify_ssl) as client:
                    response = client.post(
                        url,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                        **kwargs,
                    )
        except httpx.TimeoutException as exc:
            raise TransportError(f"http_timeout: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"http_connection_error: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"http_invalid_url: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "http_unexpected_status",
                extra={"url": url, "status_code": response.status_code},
            )
            raise TransportError(
                f"unexpected HTTP status: {response.status_code}",
                status_code=response.status_code,
            )
        return response
