"""
Domain schemas package - Pydantic request/response models.
"""

from domain.schemas.user_schemas import UserCreate, UserResponse, UserListResponse
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealEnvelope,
    MealListResponse,
    ScoreResponse,
    MetricsResponse,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "UserListResponse",
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealEnvelope",
    "MealListResponse",
    "ScoreResponse",
    "MetricsResponse",
]
