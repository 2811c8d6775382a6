"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from abc import ABC

from app.exceptions import ServiceValidationError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        try:
            self.db.add(entity)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ServiceValidationError(
                f"Could not store {self.model.__name__}", details={"error": str(e.orig)}
            )
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ServiceValidationError(
                f"Could not update {self.model.__name__}", details={"error": str(e.orig)}
            )
        self.db.refresh(entity)
        return entity
