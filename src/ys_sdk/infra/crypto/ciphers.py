"""Primitivas RSA/AES consumidas pelo envelope.

- RSA: PKCS#1 v1.5 para cifrar a chave AES (`check`) e SHA256withRSA para
  assinar a string canônica.
- AES: modo ECB com padding PKCS#7, ciphertext trafega em base64.
"""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ys_sdk.utils.errors import CryptoError

from .constants import AES_BLOCK_SIZE_BITS, CHARSET


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode(CHARSET) if isinstance(value, str) else value


def rsa_encrypt(public_key: rsa.RSAPublicKey, data: str | bytes) -> bytes:
    """Cifra `data` com a chave pública da contraparte (PKCS#1 v1.5)."""
    try:
        return public_key.encrypt(_to_bytes(data), padding.PKCS1v15())
    except Exception as exc:
        raise CryptoError(f"RSA encryption failed: {exc}") from exc


def rsa_sign(private_key: rsa.RSAPrivateKey, data: str | bytes) -> str:
    """Assina `data` com SHA256withRSA e retorna a assinatura em base64."""
    try:
        signature = private_key.sign(_to_bytes(data), padding.PKCS1v15(), hashes.SHA256())
    except Exception as exc:
        raise CryptoError(f"RSA signing failed: {exc}") from exc
    return base64.b64encode(signature).decode("ascii")


def rsa_verify(public_key: rsa.RSAPublicKey, data: str | bytes, signature_b64: str) -> bool:
    """Valida assinatura SHA256withRSA em base64.

    Returns:
        True se assinatura válida, False caso contrário
    """
    try:
        signature = base64.b64decode(signature_b64, validate=True)
    except (ValueError, binascii.Error):
        return False
    try:
        public_key.verify(signature, _to_bytes(data), padding.PKCS1v15(), hashes.SHA256())
    except (InvalidSignature, ValueError):
        return False
    return True


def _aes_ecb(key: bytes) -> Cipher[modes.ECB]:
    try:
        return Cipher(algorithms.AES(key), modes.ECB())
    except ValueError as exc:
        raise CryptoError(f"Invalid AES key: {exc}") from exc


def aes_encrypt_ecb(plaintext: str | bytes, key: bytes) -> str:
    """Cifra `plaintext` em AES-ECB/PKCS#7 e retorna base64."""
    cipher = _aes_ecb(key)
    try:
        padder = sym_padding.PKCS7(AES_BLOCK_SIZE_BITS).padder()
        padded = padder.update(_to_bytes(plaintext)) + padder.finalize()
        encryptor = cipher.encryptor()
        encrypted = encryptor.update(padded) + encryptor.finalize()
    except Exception as exc:
        raise CryptoError(f"AES encryption failed: {exc}") from exc
    return base64.b64encode(encrypted).decode("ascii")


def aes_decrypt_ecb(ciphertext_b64: str, key: bytes) -> bytes:
    """Decifra ciphertext AES-ECB/PKCS#7 em base64 e retorna os bytes."""
    cipher = _aes_ecb(key)
    try:
        encrypted = base64.b64decode("".join(ciphertext_b64.split()), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise CryptoError(f"Invalid base64 ciphertext: {exc}") from exc

    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(encrypted) + decryptor.finalize()
        unpadder = sym_padding.PKCS7(AES_BLOCK_SIZE_BITS).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except Exception as exc:
        raise CryptoError(f"AES decryption failed: {exc}") from exc
