"""Testes para geração da chave simétrica."""

from __future__ import annotations

import pytest

from ys_sdk.infra.crypto import ALL_CHARS, get_random_string


def test_random_string_length_and_alphabet() -> None:
    value = get_random_string(16)
    assert len(value) == 16
    assert set(value) <= set(ALL_CHARS)


def test_random_strings_do_not_collide() -> None:
    values = {get_random_string(16) for _ in range(1000)}
    assert len(values) == 1000


def test_random_string_custom_alphabet() -> None:
    assert set(get_random_string(64, alphabet="ab")) <= {"a", "b"}


def test_random_string_zero_length() -> None:
    assert get_random_string(0) == ""


def test_random_string_invalid_args() -> None:
    with pytest.raises(ValueError):
        get_random_string(-1)
    with pytest.raises(ValueError):
        get_random_string(4, alphabet="")
