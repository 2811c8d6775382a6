"""Diet metrics routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db, require_session_user
from domain.models import User
from domain.schemas.meal_schemas import MetricsResponse
from domain.mappers import MealMapper
from services import MetricsService

router = APIRouter(prefix="/users", tags=["Metrics"])


@router.get("/metrics/", response_model=MetricsResponse)
def get_metrics(
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """
    Summary of the caller's meals.

    Returns:
        mealsCount, inDiet, outDiet and score.bestScore (longest run of
        in-diet meals by ate_at), plus score.currentScore (the run still
        open at the latest meal).
    """
    metrics = MetricsService.summarize(db, user.id)
    return MealMapper.to_metrics_response(metrics)
