"""
Meal Repository - Data access layer for meal records.

Every query filters on the owner's user id, so a meal id on its own never
reaches a record.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_for_user(self, user_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal by id if it belongs to the user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: UUID) -> List[Meal]:
        """Get all meals of a user in the store's natural order"""
        return self.db.query(Meal).filter(Meal.user_id == user_id).all()

    def list_for_user_by_ate_at(self, user_id: UUID) -> List[Meal]:
        """Get all meals of a user, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.ate_at.asc())
            .all()
        )

    def create_meal(self, user_id: UUID, **fields) -> Meal:
        """Create a new meal owned by the user"""
        return self.create(Meal(user_id=user_id, **fields))

    def update_for_user(
        self, user_id: UUID, meal_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Meal]:
        """Apply field changes to a user's meal; None if the meal is not theirs"""
        meal = self.get_for_user(user_id, meal_id)
        if meal is None:
            return None
        for key, value in changes.items():
            setattr(meal, key, value)
        return self.update(meal)

    def delete_for_user(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a user's meal; returns whether a row was removed"""
        count = (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count > 0

    def count_for_user(self, user_id: UUID, is_diet: Optional[bool] = None) -> int:
        """Count a user's meals, optionally only those with the given diet flag"""
        query = self.db.query(func.count(Meal.id)).filter(Meal.user_id == user_id)
        if is_diet is not None:
            query = query.filter(Meal.is_diet == is_diet)
        return int(query.scalar() or 0)
