"""
User Repository - Data access layer for user and session lookups
"""

from typing import Optional, List
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_session_id(self, session_id: UUID) -> Optional[User]:
        """Get the user holding a session token"""
        return self.db.query(User).filter(User.session_id == session_id).first()

    def list_by_session_id(self, session_id: UUID) -> List[User]:
        """Get every user holding a session token"""
        return self.db.query(User).filter(User.session_id == session_id).all()

    def create_user(
        self, session_id: UUID, name: str, email: str, birth_date: datetime
    ) -> User:
        """Create a new user bound to a session token"""
        user = User(session_id=session_id, name=name, email=email, birth_date=birth_date)
        return self.create(user)
