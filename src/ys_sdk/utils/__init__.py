"""Utilitários compartilhados do ys_sdk."""
