"""Credenciais do integrador."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ClientConfig:
    """Credenciais usadas em toda requisição.

    Attributes:
        cert_id: Identificador do certificado cadastrado na plataforma
        private_key: Chave privada do integrador (assina as requisições)
        public_key: Chave pública da plataforma (cifra a chave AES)
        private_key_passphrase: Senha da chave privada, se cifrada (opcional)
    """

    cert_id: str
    private_key: str = field(repr=False)
    public_key: str = field(repr=False)
    private_key_passphrase: str = field(default="", repr=False)

    @classmethod
    def from_mapping(cls, conf: Mapping[str, Any]) -> ClientConfig:
        """Constrói a partir de um dict (cert_id, private_key, public_key, private_key_passphrase)."""
        return cls(
            cert_id=str(conf.get("cert_id", "") or ""),
            private_key=str(conf.get("private_key", "") or ""),
            public_key=str(conf.get("public_key", "") or ""),
            private_key_passphrase=str(conf.get("private_key_passphrase", "") or ""),
        )
