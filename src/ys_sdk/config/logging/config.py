"""Configuração centralizada de logging.

Uso:
    from ys_sdk.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o SDK
    configure_logging(level="INFO")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("ys_request_succeeded", extra={"method": "trade.query"})

Nunca logar chaves, chave AES ou conteúdo de negócio em claro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ys_sdk.config.logging.filters import RequestIdFilter
from ys_sdk.config.logging.formatters import create_json_formatter
from ys_sdk.observability import get_current_req_id

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "ys_sdk"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    req_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        req_id_getter: Função que retorna o reqId do contexto atual.
            Padrão: reqId da chamada em curso do YsClient.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestIdFilter(service_name, req_id_getter or get_current_req_id))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um caminho alternativo determinístico foi usado.

    Ex.: corpo de resposta sem camada base64 processado como bytes brutos.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.debug(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
