"""Agregador de settings do ys_sdk."""

from __future__ import annotations

from ys_sdk.config.settings.ys import (
    DEFAULT_API_BASE_URL,
    YsSettings,
    get_ys_settings,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "YsSettings",
    "get_ys_settings",
]
