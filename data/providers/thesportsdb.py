"""
Cliente de TheSportsDB (v1, JSON). Gratis, sin cuota agresiva; la clave "3" es pública.
"""
from __future__ import annotations

import logging

import requests

from config.settings import settings
from data.providers.errors import ProviderError

logger = logging.getLogger(__name__)


def _get(path: str, params: dict | None = None) -> dict:
    url = f"{settings.thesportsdb_base}/{settings.thesportsdb_key}{path}"
    logger.debug("TheSportsDB GET %s %s", url, params)
    try:
        r = requests.get(url, params=params, timeout=settings.http_timeout)
    except requests.RequestException as e:
        raise ProviderError(f"TheSportsDB request failed: {e}") from e

    if r.status_code != 200:
        logger.warning("TheSportsDB %s: %s", r.status_code, url)
        raise ProviderError(f"TheSportsDB Error {r.status_code}: {r.text}")

    try:
        data = r.json()
    except ValueError as e:
        raise ProviderError(f"TheSportsDB returned invalid JSON: {e}") from e
    # Ligas sin próximos partidos devuelven null
    return data or {}


def _to_fixture(ev: dict) -> dict:
    return {
        "id": ev.get("idEvent"),
        "date": ev.get("dateEvent"),
        "time": ev.get("strTime"),
        "home": ev.get("strHomeTeam"),
        "away": ev.get("strAwayTeam"),
        "league": ev.get("strLeague"),
        "raw": ev,
    }


def get_next_fixtures(league_id: int) -> list[dict]:
    """Próximos eventos de una liga (eventsnextleague)."""
    data = _get("/eventsnextleague.php", params={"id": league_id})
    events = data.get("events") or data.get("event") or []
    return [_to_fixture(ev) for ev in events]
