"""
Cliente de API-Football v3 (api-sports.io).
Usa config.settings para API key y temporada.
"""
from __future__ import annotations

import logging

import requests

from config.settings import settings
from data.providers.errors import ProviderError

logger = logging.getLogger(__name__)

NEXT_FIXTURES = 10


def _headers() -> dict[str, str]:
    if not settings.api_football_key:
        raise ProviderError("API_FOOTBALL_KEY no está configurada (config o .env)")
    return {"x-apisports-key": settings.api_football_key}


def _get(path: str, params: dict | None = None) -> dict:
    url = f"{settings.api_football_base}{path}"
    logger.debug("API-Football GET %s %s", url, params)
    try:
        r = requests.get(url, headers=_headers(), params=params, timeout=settings.http_timeout)
    except requests.RequestException as e:
        raise ProviderError(f"API-Football request failed: {e}") from e

    if not r.ok:
        logger.warning("API-Football %s: %s", r.status_code, url)
        raise ProviderError(f"API error {r.status_code}: {r.text}")

    try:
        return r.json()
    except ValueError as e:
        raise ProviderError(f"API-Football returned invalid JSON: {e}") from e


def get_next_fixtures(league_id: int, season: int | None = None) -> list[dict]:
    """Próximos NEXT_FIXTURES partidos de la liga en la temporada (default: actual)."""
    if season is None:
        season = settings.current_season()
    data = _get("/fixtures", params={"league": league_id, "season": season, "next": NEXT_FIXTURES})

    out: list[dict] = []
    for m in data.get("response") or []:
        fixture = m.get("fixture") or {}
        teams = m.get("teams") or {}
        out.append({
            "id": fixture.get("id"),
            "date": fixture.get("date"),
            "home": (teams.get("home") or {}).get("name"),
            "away": (teams.get("away") or {}).get("name"),
        })
    return out
