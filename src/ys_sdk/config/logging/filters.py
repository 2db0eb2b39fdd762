"""Filters de logging para injeção de contexto."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class RequestIdFilter(logging.Filter):
    """Injeta req_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        req_id_getter: Função que retorna o reqId da chamada em curso.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        req_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_req_id = req_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Se req_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "req_id", None)
        record.req_id = existing if existing else self._get_req_id()
        record.service = self._service_name
        return True
