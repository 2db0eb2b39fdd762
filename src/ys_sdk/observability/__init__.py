"""Contexto de rastreamento das chamadas do SDK."""

from .correlation import get_current_req_id, reset_current_req_id, set_current_req_id

__all__ = [
    "get_current_req_id",
    "reset_current_req_id",
    "set_current_req_id",
]
