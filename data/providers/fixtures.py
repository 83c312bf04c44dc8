"""
Fixtures por liga con proveedor elegible (TheSportsDB o API-Football).
El proveedor por defecto sale de settings.fixtures_provider.
"""
from __future__ import annotations

import logging
from typing import Callable

from config.settings import settings
from data.providers import api_football, thesportsdb
from data.providers.errors import ProviderError

logger = logging.getLogger(__name__)

PROVIDERS: dict[str, Callable[[int], list[dict]]] = {
    "thesportsdb": thesportsdb.get_next_fixtures,
    "api-football": api_football.get_next_fixtures,
}


def get_provider(name: str | None = None) -> Callable[[int], list[dict]]:
    key = (name or settings.fixtures_provider or "thesportsdb").strip().lower()
    try:
        return PROVIDERS[key]
    except KeyError:
        raise ProviderError(f"Proveedor de fixtures desconocido: {key}") from None


def get_fixtures(league_id: int, provider: str | None = None) -> list[dict]:
    fetch = get_provider(provider)
    fixtures = fetch(league_id)
    logger.info("Fixtures liga %s: %d partidos", league_id, len(fixtures))
    return fixtures
