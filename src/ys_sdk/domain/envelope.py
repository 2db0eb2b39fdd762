"""Envelopes trocados com a API.

Os nomes de campo no wire são fixos (`timeStamp`, `bizContent`, `norce`...);
os modelos expõem nomes Python e serializam via alias.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUCCESS_CODE = "SUCCESS"


class RequestEnvelope(BaseModel):
    """Envelope assinado e cifrado de uma requisição."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str = Field(..., alias="timeStamp", description="Relógio de parede da requisição.")
    method: str = Field(..., description="Nome do método de negócio chamado.")
    charset: str = Field(default="utf-8", description="Charset fixo do protocolo.")
    sign: str = Field(default="", description="Assinatura SHA256withRSA em base64.")
    check: str = Field(default="", description="Chave AES cifrada com RSA, em base64.")
    biz_content: str = Field(default="", alias="bizContent", description="Conteúdo de negócio cifrado.")
    req_id: str = Field(..., alias="reqId", description="Identificador ordenável da requisição.")
    cert_id: str = Field(..., alias="certId", description="Identificador do certificado.")
    version: str = Field(..., description="Versão do método.")

    def to_wire(self) -> dict[str, str]:
        """Retorna o payload JSON com os nomes de campo do protocolo."""
        return self.model_dump(by_alias=True)

    def to_form_fields(self) -> dict[str, str]:
        """Codificação plana (string -> string) usada no multipart."""
        return {key: str(value) for key, value in self.to_wire().items()}


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """Requisição de upload: envelope base + referência ao arquivo."""

    envelope: RequestEnvelope
    file_path: str


@dataclass(frozen=True, slots=True)
class SealedRequest:
    """Envelope pronto para envio + chave AES usada para cifrá-lo.

    A chave só existe em memória durante a chamada.
    """

    envelope: RequestEnvelope
    aes_key: bytes = field(repr=False)


class ResponseEnvelope(BaseModel):
    """Envelope de resposta da API (imutável)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    code: str = Field(default="", description="Status de primeiro nível.")
    message: str = Field(default="", alias="msg", description="Mensagem do status.")
    sub_code: str = Field(default="", alias="subCode", description="Status de segundo nível.")
    sub_message: str = Field(default="", alias="subMsg", description="Mensagem do sub-status.")
    timestamp: str = Field(default="", alias="timeStamp", description="Horário da resposta.")
    nonce: str = Field(default="", alias="norce", description="Nonce (grafia do protocolo).")
    sign: str = Field(default="", description="Assinatura da resposta.")
    business_data: str = Field(default="", alias="businessData", description="Dados de negócio cifrados.")

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_success(self) -> bool:
        """True se `code` é SUCCESS."""
        return self.code == SUCCESS_CODE

    @property
    def is_sub_success(self) -> bool:
        """True se `subCode` é SUCCESS."""
        return self.sub_code == SUCCESS_CODE
