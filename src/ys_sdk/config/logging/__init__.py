"""Configuração de logging estruturado.

Uso:
    from ys_sdk.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_app")
    logger = get_logger(__name__)
"""

from ys_sdk.config.logging.config import configure_logging, get_logger, log_fallback
from ys_sdk.config.logging.filters import RequestIdFilter
from ys_sdk.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
