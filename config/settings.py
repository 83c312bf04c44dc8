"""
Configuración centralizada cargada desde variables de entorno.
Para producción: definir env vars o usar .env (python-dotenv).
"""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Raíz del proyecto (donde está app/, config/, core/, data/)
BASE_DIR: Path = Path(__file__).resolve().parents[1]

# Modelo Poisson (medias generales de las grandes ligas)
BASE_HOME_XG: float = float(os.getenv("LP2M_BASE_HOME_XG", "1.45"))
BASE_AWAY_XG: float = float(os.getenv("LP2M_BASE_AWAY_XG", "1.15"))
XG_FLOOR: float = float(os.getenv("LP2M_XG_FLOOR", "0.2"))
MAX_GOALS: int = int(os.getenv("LP2M_MAX_GOALS", "7"))
# Tope para maxGoals en /api/predict (la función pura no lo aplica)
MAX_GOALS_LIMIT: int = int(os.getenv("LP2M_MAX_GOALS_LIMIT", "30"))

# Proveedor de fixtures: "thesportsdb" (gratis) o "api-football"
FIXTURES_PROVIDER: str = (os.getenv("LP2M_FIXTURES_PROVIDER", "thesportsdb") or "thesportsdb").strip().lower()

# TheSportsDB: "3" es la clave pública
THESPORTSDB_KEY: str = (os.getenv("THESPORTSDB_KEY") or "3").strip()
THESPORTSDB_BASE: str = os.getenv("THESPORTSDB_BASE", "https://www.thesportsdb.com/api/v1/json")

# API-Football (api-sports.io)
API_FOOTBALL_KEY: str = (os.getenv("API_FOOTBALL_KEY") or "").strip()
API_FOOTBALL_BASE: str = os.getenv("API_FOOTBALL_BASE", "https://v3.football.api-sports.io")
# Vacío -> año actual en cada request
SEASON: str = (os.getenv("LP2M_SEASON") or "").strip()

HTTP_TIMEOUT: float = float(os.getenv("LP2M_HTTP_TIMEOUT", "20"))

# App
PORT: int = int(os.getenv("PORT", "10000"))
LOG_LEVEL: str = os.getenv("LP2M_LOG_LEVEL", "INFO")


class Settings:
    """Objeto de configuración accesible en toda la app."""

    def __init__(self) -> None:
        self.base_dir = BASE_DIR

        self.base_home_xg = BASE_HOME_XG
        self.base_away_xg = BASE_AWAY_XG
        self.xg_floor = XG_FLOOR
        self.max_goals = MAX_GOALS
        self.max_goals_limit = MAX_GOALS_LIMIT

        self.fixtures_provider = FIXTURES_PROVIDER
        self.thesportsdb_key = THESPORTSDB_KEY
        self.thesportsdb_base = THESPORTSDB_BASE
        self.api_football_key = API_FOOTBALL_KEY
        self.api_football_base = API_FOOTBALL_BASE
        self.season = SEASON
        self.http_timeout = HTTP_TIMEOUT

        self.port = PORT
        self.log_level = LOG_LEVEL

    def current_season(self) -> int:
        if self.season:
            return int(self.season)
        return datetime.now().year

    def model_params(self) -> dict[str, float]:
        """Parámetros del modelo Poisson para pasar a core.poisson.predict."""
        return {
            "base_home_xg": self.base_home_xg,
            "base_away_xg": self.base_away_xg,
            "xg_floor": self.xg_floor,
        }


settings = Settings()
