"""Testes para os modelos de envelope."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ys_sdk.domain import (
    SUCCESS_CODE,
    ClientConfig,
    RequestEnvelope,
    ResponseEnvelope,
    UploadRequest,
)


def _envelope() -> RequestEnvelope:
    return RequestEnvelope(
        timestamp="2026-10-19 10:00:00",
        method="trade.query",
        version="1.0",
        req_id="261019100000123",
        cert_id="cert-001",
        check="chk",
        biz_content="biz",
        sign="sig",
    )


class TestRequestEnvelope:
    """Testes para RequestEnvelope."""

    def test_to_wire_uses_protocol_names(self) -> None:
        assert _envelope().to_wire() == {
            "timeStamp": "2026-10-19 10:00:00",
            "method": "trade.query",
            "charset": "utf-8",
            "sign": "sig",
            "check": "chk",
            "bizContent": "biz",
            "reqId": "261019100000123",
            "certId": "cert-001",
            "version": "1.0",
        }

    def test_form_fields_are_flat_strings(self) -> None:
        fields = _envelope().to_form_fields()
        assert len(fields) == 9
        assert all(isinstance(value, str) for value in fields.values())

    def test_envelope_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            _envelope().sign = "other"  # type: ignore[misc]

    def test_upload_request_composes_envelope(self) -> None:
        envelope = _envelope()
        upload = UploadRequest(envelope=envelope, file_path="/tmp/a.pdf")
        assert upload.envelope is envelope
        assert upload.file_path == "/tmp/a.pdf"


class TestResponseEnvelope:
    """Testes para ResponseEnvelope."""

    def test_parse_from_wire_aliases(self) -> None:
        response = ResponseEnvelope.model_validate(
            {
                "code": "SUCCESS",
                "msg": "ok",
                "subCode": "FAIL",
                "subMsg": "bad",
                "timeStamp": "t",
                "norce": "n-1",
                "sign": "s",
                "businessData": "bd",
            }
        )
        assert response.message == "ok"
        assert response.sub_code == "FAIL"
        assert response.sub_message == "bad"
        assert response.nonce == "n-1"
        assert response.business_data == "bd"
        assert response.is_success
        assert not response.is_sub_success

    def test_missing_and_null_fields_default_to_empty(self) -> None:
        response = ResponseEnvelope.model_validate({"code": "FAIL", "businessData": None})
        assert response.business_data == ""
        assert response.message == ""
        assert not response.is_success

    def test_unknown_fields_ignored_and_numbers_coerced(self) -> None:
        response = ResponseEnvelope.model_validate({"code": 500, "extra": "x"})
        assert response.code == "500"

    def test_success_constant(self) -> None:
        assert SUCCESS_CODE == "SUCCESS"


class TestClientConfig:
    """Testes para ClientConfig."""

    def test_from_mapping(self) -> None:
        config = ClientConfig.from_mapping(
            {"cert_id": "c-1", "private_key": "priv", "public_key": "pub", "other": 1}
        )
        assert config == ClientConfig(cert_id="c-1", private_key="priv", public_key="pub")

    def test_from_mapping_passphrase(self) -> None:
        config = ClientConfig.from_mapping(
            {"cert_id": "c-1", "private_key": "priv", "public_key": "pub", "private_key_passphrase": "pw"}
        )
        assert config.private_key_passphrase == "pw"
        assert "pw" not in repr(config)

    def test_from_mapping_missing_keys(self) -> None:
        config = ClientConfig.from_mapping({"cert_id": None})
        assert config.cert_id == ""
        assert config.private_key == ""

    def test_repr_hides_keys(self) -> None:
        text = repr(ClientConfig(cert_id="c-1", private_key="SECRET", public_key="PUB"))
        assert "SECRET" not in text
        assert "c-1" in text
