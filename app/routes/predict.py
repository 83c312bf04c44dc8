from typing import Any

from fastapi import APIRouter, Body

from config.settings import settings
from core.poisson import predict_from_payload

router = APIRouter()


@router.post("/predict")
def post_predict(payload: Any = Body(None)):
    """
    body: { strengthHome?, strengthAway?, maxGoals? }
    InvalidInput -> 400 (handler en app.main).
    """
    return predict_from_payload(
        payload,
        default_max_goals=settings.max_goals,
        max_goals_limit=settings.max_goals_limit,
        **settings.model_params(),
    )
