"""Carregamento de chaves RSA (PEM ou DER em base64 puro)."""

from __future__ import annotations

import base64
import binascii

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ys_sdk.utils.errors import CryptoError

_PEM_MARKER = "-----BEGIN"


def _der_bytes(raw_key: str) -> bytes:
    """Decodifica corpo de chave sem cabeçalho PEM (formato comum em gateways)."""
    compact = "".join(raw_key.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise CryptoError(f"Invalid key encoding: {exc}") from exc


def load_private_key(private_key_pem: str, passphrase: str | None = None) -> rsa.RSAPrivateKey:
    """Carrega chave privada RSA.

    Aceita PEM (PKCS#8 ou PKCS#1) ou o corpo DER em base64 sem cabeçalhos.

    Args:
        private_key_pem: Chave privada
        passphrase: Senha da chave (opcional)

    Returns:
        Objeto de chave privada RSA

    Raises:
        CryptoError: Se chave inválida ou não-RSA
    """
    if not private_key_pem or not private_key_pem.strip():
        raise CryptoError("Invalid private key: empty")

    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None
    text = private_key_pem.strip()

    try:
        if text.startswith(_PEM_MARKER):
            key = serialization.load_pem_private_key(
                text.encode("utf-8"),
                password=passphrase_bytes,
                backend=default_backend(),
            )
        else:
            key = serialization.load_der_private_key(
                _der_bytes(text),
                password=passphrase_bytes,
                backend=default_backend(),
            )
    except CryptoError:
        raise
    except Exception as exc:
        raise CryptoError(f"Invalid private key: {exc}") from exc

    if not isinstance(key, rsa.RSAPrivateKey):
        raise CryptoError("Invalid private key: not an RSA key")
    return key


def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """Carrega chave pública RSA (SubjectPublicKeyInfo ou PKCS#1).

    Raises:
        CryptoError: Se chave inválida ou não-RSA
    """
    if not public_key_pem or not public_key_pem.strip():
        raise CryptoError("Invalid public key: empty")

    text = public_key_pem.strip()
    try:
        if text.startswith(_PEM_MARKER):
            key = serialization.load_pem_public_key(text.encode("utf-8"), backend=default_backend())
        else:
            key = serialization.load_der_public_key(_der_bytes(text), backend=default_backend())
    except CryptoError:
        raise
    except Exception as exc:
        raise CryptoError(f"Invalid public key: {exc}") from exc

    if not isinstance(key, rsa.RSAPublicKey):
        raise CryptoError("Invalid public key: not an RSA key")
    return key
