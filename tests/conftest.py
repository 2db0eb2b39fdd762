"""Configuração do pytest para o projeto ys_sdk."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ys_sdk.domain import ClientConfig  # noqa: E402


def _private_pem(key: rsa.RSAPrivateKey) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


def _public_pem(key: rsa.RSAPublicKey) -> str:
    return key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


@pytest.fixture(scope="session")
def merchant_key() -> rsa.RSAPrivateKey:
    """Par de chaves do integrador (assina requisições)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def platform_key() -> rsa.RSAPrivateKey:
    """Par de chaves da plataforma (decifra `check`)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def merchant_private_pem(merchant_key: rsa.RSAPrivateKey) -> str:
    return _private_pem(merchant_key)


@pytest.fixture(scope="session")
def platform_public_pem(platform_key: rsa.RSAPrivateKey) -> str:
    return _public_pem(platform_key.public_key())


@pytest.fixture(scope="session")
def client_config(merchant_private_pem: str, platform_public_pem: str) -> ClientConfig:
    return ClientConfig(
        cert_id="cert-001",
        private_key=merchant_private_pem,
        public_key=platform_public_pem,
    )


@pytest.fixture
def upload_file(tmp_path: Path) -> Path:
    path = tmp_path / "invoice.pdf"
    path.write_bytes(b"%PDF-1.4 fake invoice content")
    return path
