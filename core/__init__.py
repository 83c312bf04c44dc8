"""
Lógica de negocio: modelo Poisson de partido.
Sin dependencias de I/O (DB, HTTP, disco); solo datos en memoria.
"""
from core.errors import InvalidInput
from core.poisson import (
    PredictionResult,
    expected_goals,
    outcome_summary,
    poisson_pmf,
    predict,
    predict_from_payload,
    score_grid,
    top_scorelines,
)

__all__ = [
    "InvalidInput",
    "PredictionResult",
    "poisson_pmf",
    "expected_goals",
    "score_grid",
    "outcome_summary",
    "top_scorelines",
    "predict",
    "predict_from_payload",
]
