"""Configuração do ys_sdk (settings e logging)."""
