"""Implementações concretas de IO e criptografia."""
