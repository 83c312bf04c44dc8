"""
Modelo Poisson independiente para probabilidades de partido (1X2, Over 2.5, marcadores).

Los goles de local y visitante son Poisson independientes (sin término de correlación).
La grilla se corta en max_goals: la masa fuera de la grilla se pierde, así que
home + draw + away puede quedar apenas por debajo de 100. No se renormaliza.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from core.errors import InvalidInput

# Medias generales de los grandes campeonatos
BASE_HOME_XG = 1.45
BASE_AWAY_XG = 1.15
# Evita distribuciones degeneradas con λ = 0
XG_FLOOR = 0.2
DEFAULT_MAX_GOALS = 7
TOP_SCORES = 5
# Alcanza para cuantizar cualquier float finito (hasta ~1.8e308)
_DECIMAL_CTX = Context(prec=400)


@dataclass(frozen=True)
class XgRates:
    home: float
    away: float


@dataclass(frozen=True)
class ScoreCell:
    home_goals: int
    away_goals: int
    probability: float

    @property
    def score(self) -> str:
        return f"{self.home_goals}-{self.away_goals}"


@dataclass(frozen=True)
class OutcomeSummary:
    home_win: float
    draw: float
    away_win: float
    over25: float


@dataclass(frozen=True)
class PredictionResult:
    xg_home: float
    xg_away: float
    prob_home: float
    prob_draw: float
    prob_away: float
    prob_over25: float
    top_scores: list[tuple[str, float]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "xgHome": self.xg_home,
            "xgAway": self.xg_away,
            "prob": {
                "home": self.prob_home,
                "draw": self.prob_draw,
                "away": self.prob_away,
                "over25": self.prob_over25,
            },
            "topScores": [{"score": score, "p": p} for score, p in self.top_scores],
        }


def poisson_pmf(lmbda: float, k: int) -> float:
    """
    PMF(k; λ) = e^-λ * λ^k / k!, calculada en escala log:
    exp(-λ + k·ln λ - ln k!). Las colas tienden a 0 sin overflow.
    """
    if lmbda == 0:
        return 1.0 if k == 0 else 0.0
    return math.exp(-lmbda + k * math.log(lmbda) - math.lgamma(k + 1))


def _to_fixed(x: float, places: int) -> float:
    """Redondeo half-up sobre el valor binario exacto (como toFixed en JS)."""
    q = Decimal(1).scaleb(-places)
    return float(Decimal(x).quantize(q, rounding=ROUND_HALF_UP, context=_DECIMAL_CTX))


def _pct(p: float) -> float:
    return _to_fixed(p * 100, 1)


def _as_strength(value: Any, field: str) -> float:
    # bool es subclase de int: no es una fuerza válida
    if isinstance(value, bool):
        raise InvalidInput(field, f"expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        try:
            x = float(value)
        except OverflowError:
            raise InvalidInput(field, "number too large") from None
    elif isinstance(value, str):
        try:
            x = float(value.strip())
        except ValueError:
            raise InvalidInput(field, f"expected a number, got {value!r}") from None
    else:
        raise InvalidInput(field, f"expected a number, got {type(value).__name__}")

    if not math.isfinite(x):
        raise InvalidInput(field, "must be finite")
    if x < 0:
        raise InvalidInput(field, f"must be >= 0, got {x}")
    return x


def _as_max_goals(value: Any, field: str = "maxGoals") -> int:
    if isinstance(value, bool):
        raise InvalidInput(field, f"expected an integer, got {value!r}")
    if isinstance(value, int):
        n = value
    elif isinstance(value, float) and value.is_integer():
        n = int(value)
    elif isinstance(value, str):
        try:
            n = int(value.strip())
        except ValueError:
            raise InvalidInput(field, f"expected an integer, got {value!r}") from None
    else:
        raise InvalidInput(field, f"expected an integer, got {value!r}")

    if n < 0:
        raise InvalidInput(field, f"must be >= 0, got {n}")
    return n


def expected_goals(
    strength_home: float,
    strength_away: float,
    base_home_xg: float = BASE_HOME_XG,
    base_away_xg: float = BASE_AWAY_XG,
    xg_floor: float = XG_FLOOR,
) -> XgRates:
    """xG ajustados por fuerza: base * fuerza, con piso xg_floor."""
    sh = _as_strength(strength_home, "strengthHome")
    sa = _as_strength(strength_away, "strengthAway")
    home = max(xg_floor, base_home_xg * sh)
    away = max(xg_floor, base_away_xg * sa)
    if not math.isfinite(home):
        raise InvalidInput("strengthHome", "expected goal rate overflows")
    if not math.isfinite(away):
        raise InvalidInput("strengthAway", "expected goal rate overflows")
    return XgRates(home=home, away=away)


def score_grid(xg_home: float, xg_away: float, max_goals: int = DEFAULT_MAX_GOALS) -> list[ScoreCell]:
    """
    Todas las celdas (h, a) con 0 <= h, a <= max_goals, en orden de enumeración
    (h primero, después a).
    """
    n = _as_max_goals(max_goals)
    away_pmf = [poisson_pmf(xg_away, a) for a in range(n + 1)]
    cells: list[ScoreCell] = []
    for h in range(n + 1):
        ph = poisson_pmf(xg_home, h)
        for a in range(n + 1):
            cells.append(ScoreCell(h, a, ph * away_pmf[a]))
    return cells


def outcome_summary(cells: list[ScoreCell]) -> OutcomeSummary:
    p_home_win = p_draw = p_away_win = p_over25 = 0.0
    for c in cells:
        p = c.probability
        if c.home_goals > c.away_goals:
            p_home_win += p
        elif c.home_goals == c.away_goals:
            p_draw += p
        else:
            p_away_win += p
        if c.home_goals + c.away_goals >= 3:
            p_over25 += p
    return OutcomeSummary(p_home_win, p_draw, p_away_win, p_over25)


def top_scorelines(cells: list[ScoreCell], n: int = TOP_SCORES) -> list[ScoreCell]:
    """Los n marcadores más probables. sorted() es estable: empates quedan en orden de grilla."""
    return sorted(cells, key=lambda c: c.probability, reverse=True)[:n]


def predict(
    strength_home: Any = 1.0,
    strength_away: Any = 1.0,
    max_goals: Any = DEFAULT_MAX_GOALS,
    *,
    base_home_xg: float = BASE_HOME_XG,
    base_away_xg: float = BASE_AWAY_XG,
    xg_floor: float = XG_FLOOR,
    top_n: int = TOP_SCORES,
) -> PredictionResult:
    """
    Predicción completa para un partido.

    Probabilidades en porcentaje con 1 decimal, xG con 2 decimales. Cada bucket
    se redondea por separado; la suma 1X2 no se fuerza a 100.
    Lanza InvalidInput si algún parámetro no es válido.
    """
    n = _as_max_goals(max_goals)
    xg = expected_goals(strength_home, strength_away, base_home_xg, base_away_xg, xg_floor)

    cells = score_grid(xg.home, xg.away, n)
    summary = outcome_summary(cells)
    top = top_scorelines(cells, top_n)

    return PredictionResult(
        xg_home=_to_fixed(xg.home, 2),
        xg_away=_to_fixed(xg.away, 2),
        prob_home=_pct(summary.home_win),
        prob_draw=_pct(summary.draw),
        prob_away=_pct(summary.away_win),
        prob_over25=_pct(summary.over25),
        top_scores=[(c.score, _pct(c.probability)) for c in top],
    )


def predict_from_payload(
    payload: dict[str, Any] | None,
    default_max_goals: int = DEFAULT_MAX_GOALS,
    max_goals_limit: int | None = None,
    **params: Any,
) -> dict[str, Any]:
    """
    Entrada JSON { strengthHome?, strengthAway?, maxGoals? } -> respuesta JSON.
    Campos ausentes o null toman el default. max_goals_limit acota maxGoals
    (solo en el borde HTTP). params extra van directo a predict().
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidInput("body", "expected a JSON object")

    def _get(key: str, default: Any) -> Any:
        v = payload.get(key)
        return default if v is None else v

    max_goals = _as_max_goals(_get("maxGoals", default_max_goals))
    if max_goals_limit is not None and max_goals > max_goals_limit:
        raise InvalidInput("maxGoals", f"must be <= {max_goals_limit}, got {max_goals}")

    result = predict(
        _get("strengthHome", 1.0),
        _get("strengthAway", 1.0),
        max_goals,
        **params,
    )
    return result.to_dict()
