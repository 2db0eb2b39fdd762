"""Constantes criptográficas do envelope."""

AES_KEY_SIZE = 16  # 128 bits, chave simétrica gerada por requisição
AES_BLOCK_SIZE_BITS = 128
ALL_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
CHARSET = "utf-8"
