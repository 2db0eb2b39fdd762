"""Helpers de logging para a API (sem chaves nem conteúdo de negócio)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ys_sdk.utils.errors import ApiError

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: ApiError,
    method: str,
    req_id: str,
    log: logging.Logger | None = None,
) -> None:
    """Loga código de negócio diferente de SUCCESS."""
    (log or logger).warning(
        "ys_api_error",
        extra={
            "method": method,
            "req_id": req_id,
            "code": api_error.code,
            "sub_code": api_error.sub_code,
        },
    )


def log_success(
    method: str,
    req_id: str,
    sub_code: str,
    log: logging.Logger | None = None,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    (log or logger).info(
        "ys_request_succeeded",
        extra={"method": method, "req_id": req_id, "sub_code": sub_code},
    )
