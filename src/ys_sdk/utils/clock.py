"""Identificadores e carimbos de tempo do envelope."""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def new_request_id(now: datetime | None = None) -> str:
    """Gera reqId ordenável no formato yyMMddHHmmss + milissegundos (15 dígitos)."""
    moment = now or datetime.now()
    return f"{moment:%y%m%d%H%M%S}{moment.microsecond // 1000:03d}"


def current_timestamp(now: datetime | None = None) -> str:
    """Retorna o relógio de parede local no formato aceito pelo campo timeStamp."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
