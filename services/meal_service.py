from typing import List
from uuid import UUID, uuid4
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for a user's meal ledger"""

    @staticmethod
    def create_meal(db: Session, user_id: UUID, meal_data: MealCreate) -> Meal:
        """Record a meal for the user"""
        meal = MealRepository(db).create_meal(
            user_id,
            id=uuid4(),
            name=meal_data.name,
            description=meal_data.description,
            ate_at=meal_data.ate_at,
            is_diet=meal_data.is_diet,
        )
        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.id} is_diet={meal.is_diet}"
        )
        return meal

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        meals = MealRepository(db).list_for_user(user_id)
        logger.info(f"meals_listed user_id={user_id} count={len(meals)}")
        return meals

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: UUID) -> Meal:
        """
        Fetch one of the user's meals.

        Raises:
            NotFoundError: the meal does not exist or belongs to someone else
        """
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    @staticmethod
    def update_meal(
        db: Session, user_id: UUID, meal_id: UUID, meal_data: MealUpdate
    ) -> Meal:
        """
        Apply a partial update to one of the user's meals.

        Only fields present in the request with a non-null value change;
        everything else keeps its stored value.

        Raises:
            NotFoundError: the meal does not exist or belongs to someone else
        """
        changes = meal_data.changes()
        meal = MealRepository(db).update_for_user(user_id, meal_id, changes)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        logger.info(
            f"meal_updated user_id={user_id} meal_id={meal_id} fields={sorted(changes)}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> bool:
        """Delete one of the user's meals; returns whether anything was removed"""
        deleted = MealRepository(db).delete_for_user(user_id, meal_id)
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id} found={deleted}")
        return deleted
