from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from data.providers.fixtures import get_fixtures

router = APIRouter()


def _parse_league(league: str | None) -> tuple[int | None, str | None]:
    """(league_id, error). Solo IDs numéricos del proveedor."""
    if not league or not league.strip():
        return None, "league required"
    try:
        return int(league.strip()), None
    except ValueError:
        return None, "league must be a numeric id"


@router.get("/fixtures")
def get_league_fixtures(
    league: str | None = Query(None),
    provider: str | None = Query(None),
):
    league_id, error = _parse_league(league)
    if error:
        return JSONResponse(status_code=400, content={"error": error})
    # ProviderError -> 500 (handler en app.main)
    return get_fixtures(league_id, provider=provider)
