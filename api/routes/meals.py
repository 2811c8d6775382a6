"""Meal ledger routes, scoped to the session user"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_db, require_session_user
from domain.models import User
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealEnvelope,
    MealListResponse,
)
from domain.mappers import MealMapper
from services import MealService

router = APIRouter(prefix="/users/meal", tags=["Meals"])


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal_data: MealCreate,
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """Record a meal for the caller"""
    MealService.create_meal(db, user.id, meal_data)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/", response_model=MealListResponse)
def list_meals(
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """List every meal of the caller"""
    meals = MealService.list_meals(db, user.id)
    return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])


@router.get("/{meal_id}", response_model=MealEnvelope)
def get_meal(
    meal_id: UUID,
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """Fetch one meal; 404 when it is missing or belongs to another user"""
    meal = MealService.get_meal(db, user.id, meal_id)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.patch("/{meal_id}", response_model=MealEnvelope)
def update_meal(
    meal_id: UUID,
    meal_data: MealUpdate,
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """Partially update one meal; omitted or null fields keep their value"""
    meal = MealService.update_meal(db, user.id, meal_id, meal_data)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal(
    meal_id: UUID,
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """Delete one meal; answers 204 whether or not it existed"""
    MealService.delete_meal(db, user.id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
