"""Settings da API de pagamentos.

Credenciais e parâmetros de transporte carregados de variáveis de ambiente
com prefixo ``YS_``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from ys_sdk.config.logging.config import VALID_LOG_LEVELS
from ys_sdk.domain import ClientConfig

DEFAULT_API_BASE_URL: str = ""

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class YsSettings:
    """Configurações do cliente.

    Attributes:
        cert_id: Identificador do certificado do integrador
        private_key: Chave privada do integrador (PEM ou base64 DER)
        private_key_passphrase: Senha da chave privada, se cifrada
        public_key: Chave pública da plataforma (PEM ou base64 DER)
        api_base_url: URL base usada por `endpoint()`
        request_timeout_seconds: Timeout de cada requisição HTTP
        verify_ssl: Validação de certificado TLS
        log_payloads: Loga string de assinatura, payloads e corpos de resposta (DEBUG)
        log_level: Nível do logging JSON instalado por `create_ys_client(setup_logging=True)`
    """

    # Credenciais
    cert_id: str = ""
    private_key: str = field(default="", repr=False)
    private_key_passphrase: str = field(default="", repr=False)
    public_key: str = field(default="", repr=False)

    # API
    api_base_url: str = DEFAULT_API_BASE_URL

    # Transporte
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True

    # Logging
    log_payloads: bool = False
    log_level: str = "INFO"

    def to_client_config(self) -> ClientConfig:
        """Extrai as credenciais como ClientConfig."""
        return ClientConfig(
            cert_id=self.cert_id,
            private_key=self.private_key,
            public_key=self.public_key,
            private_key_passphrase=self.private_key_passphrase,
        )

    def endpoint(self, path: str) -> str:
        """Monta URL completa para `path` a partir de api_base_url.

        Raises:
            ValueError: Se api_base_url não configurada.
        """
        if not self.api_base_url:
            raise ValueError("YS_API_BASE_URL não configurado")
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.cert_id:
            errors.append("YS_CERT_ID não configurado")

        if not self.private_key:
            errors.append("YS_PRIVATE_KEY não configurado")

        if not self.public_key:
            errors.append("YS_PUBLIC_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("YS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"YS_LOG_LEVEL inválido: {self.log_level}")

        return errors


def _load_from_env() -> YsSettings:
    """Carrega YsSettings a partir de variáveis de ambiente."""
    return YsSettings(
        cert_id=os.getenv("YS_CERT_ID", ""),
        private_key=os.getenv("YS_PRIVATE_KEY", ""),
        private_key_passphrase=os.getenv("YS_PRIVATE_KEY_PASSPHRASE", ""),
        public_key=os.getenv("YS_PUBLIC_KEY", ""),
        api_base_url=os.getenv("YS_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(os.getenv("YS_REQUEST_TIMEOUT_SECONDS", "30")),
        verify_ssl=_env_bool("YS_VERIFY_SSL", True),
        log_payloads=_env_bool("YS_LOG_PAYLOADS", False),
        log_level=os.getenv("YS_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_ys_settings() -> YsSettings:
    """Retorna instância cacheada de YsSettings."""
    return _load_from_env()
