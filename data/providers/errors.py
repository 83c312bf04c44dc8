from __future__ import annotations


class ProviderError(RuntimeError):
    """Fallo del proveedor externo (status HTTP, red, JSON inválido, falta API key)."""
