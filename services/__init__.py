"""Services package - Business logic layer"""

from services.session_service import SessionService
from services.meal_service import MealService
from services.metrics_service import MetricsService, compute_streaks

__all__ = [
    "SessionService",
    "MealService",
    "MetricsService",
    "compute_streaks",
]
