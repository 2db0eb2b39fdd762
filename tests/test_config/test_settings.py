"""Testes para YsSettings."""

from __future__ import annotations

import pytest

from ys_sdk.config.settings import YsSettings, get_ys_settings
from ys_sdk.config.settings.ys import _load_from_env
from ys_sdk.domain import ClientConfig


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_ys_settings.cache_clear()
    yield
    get_ys_settings.cache_clear()


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YS_CERT_ID", "cert-001")
    monkeypatch.setenv("YS_PRIVATE_KEY", "priv")
    monkeypatch.setenv("YS_PRIVATE_KEY_PASSPHRASE", "pw")
    monkeypatch.setenv("YS_PUBLIC_KEY", "pub")
    monkeypatch.setenv("YS_API_BASE_URL", "https://api.example.test/")
    monkeypatch.setenv("YS_REQUEST_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("YS_VERIFY_SSL", "false")
    monkeypatch.setenv("YS_LOG_PAYLOADS", "1")
    monkeypatch.setenv("YS_LOG_LEVEL", "debug")

    settings = _load_from_env()

    assert settings.cert_id == "cert-001"
    assert settings.api_base_url == "https://api.example.test"
    assert settings.request_timeout_seconds == 12.5
    assert settings.verify_ssl is False
    assert settings.log_payloads is True
    assert settings.log_level == "DEBUG"
    assert settings.to_client_config().private_key_passphrase == "pw"
    assert settings.validate() == []


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("YS_REQUEST_TIMEOUT_SECONDS", "YS_VERIFY_SSL", "YS_LOG_PAYLOADS"):
        monkeypatch.delenv(name, raising=False)
    settings = _load_from_env()
    assert settings.request_timeout_seconds == 30.0
    assert settings.verify_ssl is True
    assert settings.log_payloads is False


def test_get_ys_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YS_CERT_ID", "first")
    first = get_ys_settings()
    monkeypatch.setenv("YS_CERT_ID", "second")
    assert get_ys_settings() is first


def test_validate_reports_missing_values() -> None:
    errors = YsSettings(request_timeout_seconds=0).validate()
    assert "YS_CERT_ID não configurado" in errors
    assert "YS_PRIVATE_KEY não configurado" in errors
    assert "YS_PUBLIC_KEY não configurado" in errors
    assert "YS_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors


def test_validate_rejects_unknown_log_level() -> None:
    settings = YsSettings(cert_id="c", private_key="priv", public_key="pub", log_level="VERBOSE")
    assert settings.validate() == ["YS_LOG_LEVEL inválido: VERBOSE"]


def test_to_client_config() -> None:
    settings = YsSettings(cert_id="c", private_key="priv", public_key="pub")
    assert settings.to_client_config() == ClientConfig(cert_id="c", private_key="priv", public_key="pub")


def test_endpoint() -> None:
    settings = YsSettings(api_base_url="https://api.example.test/")
    assert settings.endpoint("/trade/query") == "https://api.example.test/trade/query"


def test_endpoint_requires_base_url() -> None:
    with pytest.raises(ValueError, match="YS_API_BASE_URL"):
        YsSettings().endpoint("trade/query")


def test_repr_hides_keys() -> None:
    assert "priv-secret" not in repr(YsSettings(private_key="priv-secret"))
    assert "pw-secret" not in repr(YsSettings(private_key_passphrase="pw-secret"))
