"""reqId da chamada em curso, propagado para os logs.

Usa ContextVar para ser thread-safe: chamadas concorrentes do YsClient
em threads distintas não compartilham o valor.

Uso:
    token = set_current_req_id(envelope.req_id)
    try:
        ...
    finally:
        reset_current_req_id(token)
"""

from __future__ import annotations

from contextvars import ContextVar, Token

_current_req_id: ContextVar[str] = ContextVar("ys_req_id", default="")


def get_current_req_id() -> str:
    """Retorna o reqId do contexto atual ou string vazia."""
    return _current_req_id.get()


def set_current_req_id(req_id: str) -> Token[str]:
    """Define o reqId no contexto atual.

    Returns:
        Token para reset posterior via reset_current_req_id().
    """
    return _current_req_id.set(req_id)


def reset_current_req_id(token: Token[str]) -> None:
    """Restaura o reqId ao valor anterior."""
    _current_req_id.reset(token)
