"""
Errores del modelo. Un solo tipo: entrada inválida (no hay I/O, nada reintentable).
"""
from __future__ import annotations


class InvalidInput(ValueError):
    """Parámetro no numérico, negativo o fuera de rango."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
