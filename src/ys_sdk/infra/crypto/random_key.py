"""Geração da chave simétrica por requisição."""

from __future__ import annotations

import secrets

from .constants import AES_KEY_SIZE, ALL_CHARS


def get_random_string(length: int = AES_KEY_SIZE, alphabet: str = ALL_CHARS) -> str:
    """Retorna string aleatória com `length` caracteres de `alphabet`.

    Cada caractere é sorteado uniformemente em [0, len(alphabet)) a partir
    do gerador criptograficamente seguro do sistema.
    """
    if length < 0:
        raise ValueError("length must be >= 0")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return "".join(alphabet[secrets.randbelow(len(alphabet))] for _ in range(length))
