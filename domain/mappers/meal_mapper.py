"""
Meal domain mappers.
Handles transformation between ORM models / service results and response DTOs.
"""

from domain.models import Meal
from domain.schemas.meal_schemas import MealResponse, MetricsResponse, ScoreResponse
from services.metrics_service import MealMetrics


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse.model_validate(meal)

    @staticmethod
    def to_metrics_response(metrics: MealMetrics) -> MetricsResponse:
        """
        Convert computed MealMetrics to the metrics payload.

        ``bestScore`` carries the longest in-diet streak and ``currentScore``
        the streak still running at the most recent meal.
        """
        return MetricsResponse(
            meals_count=metrics.meals_count,
            in_diet=metrics.in_diet,
            out_diet=metrics.out_diet,
            score=ScoreResponse(
                best_score=metrics.streak.best,
                current_score=metrics.streak.current,
            ),
        )
