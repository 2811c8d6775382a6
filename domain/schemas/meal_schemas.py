from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime
from uuid import UUID

from domain.schemas.user_schemas import parse_timestamp, to_naive_utc, utc_isoformat


class MealCreate(BaseModel):
    """Schema for recording a new meal; every field is required"""

    name: str
    description: str
    ate_at: datetime = Field(..., description="When the meal was eaten")
    is_diet: bool = Field(..., description="Whether the meal is within the diet")

    @field_validator("ate_at", mode="before")
    @classmethod
    def parse_ate_at(cls, v):
        return parse_timestamp(v)

    @field_validator("ate_at")
    @classmethod
    def normalize_ate_at(cls, v):
        return to_naive_utc(v)


class MealUpdate(BaseModel):
    """
    Partial update of a meal.

    A field left out of the request, or sent as null, keeps the stored value.
    Any other value is applied as given, so ``"is_diet": false`` and
    ``"description": ""`` are real changes.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    ate_at: Optional[datetime] = None
    is_diet: Optional[bool] = None

    @field_validator("ate_at", mode="before")
    @classmethod
    def parse_ate_at(cls, v):
        return parse_timestamp(v)

    @field_validator("ate_at")
    @classmethod
    def normalize_ate_at(cls, v):
        return to_naive_utc(v)

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly provided with a non-null value"""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class MealResponse(BaseModel):
    """Schema for meal response"""

    id: UUID
    name: str
    description: str
    ate_at: datetime
    is_diet: bool
    user_id: UUID

    model_config = {"from_attributes": True}

    @field_serializer("ate_at", when_used="json")
    def serialize_ate_at(self, v: datetime) -> str:
        return utc_isoformat(v)


class MealEnvelope(BaseModel):
    meal: MealResponse


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class ScoreResponse(BaseModel):
    """Diet streaks: the best run seen and the run still open at the latest meal"""

    best_score: int = Field(..., alias="bestScore")
    current_score: int = Field(..., alias="currentScore")

    model_config = {"populate_by_name": True}


class MetricsResponse(BaseModel):
    """Summary statistics over every meal of the caller"""

    meals_count: int = Field(..., alias="mealsCount")
    in_diet: int = Field(..., alias="inDiet")
    out_diet: int = Field(..., alias="outDiet")
    score: ScoreResponse

    model_config = {"populate_by_name": True}
