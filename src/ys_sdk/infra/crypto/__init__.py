"""Módulo de criptografia do envelope de requisição.

Contém as primitivas RSA/AES usadas para montar `check`, `bizContent` e
`sign`, e para decifrar o `businessData` das respostas.
"""

from .ciphers import aes_decrypt_ecb, aes_encrypt_ecb, rsa_encrypt, rsa_sign, rsa_verify
from .constants import AES_KEY_SIZE, ALL_CHARS, CHARSET
from .keys import load_private_key, load_public_key
from .random_key import get_random_string

__all__ = [
    "AES_KEY_SIZE",
    "ALL_CHARS",
    "CHARSET",
    "aes_decrypt_ecb",
    "aes_encrypt_ecb",
    "get_random_string",
    "load_private_key",
    "load_public_key",
    "rsa_encrypt",
    "rsa_sign",
    "rsa_verify",
]
