from typing import List, Optional, Union
from uuid import UUID, uuid4
from datetime import datetime
from sqlalchemy.orm import Session
import logging

from domain.models import User
from repositories import UserRepository

logger = logging.getLogger("dailydiet.session")


def parse_session_token(token: Union[str, UUID, None]) -> Optional[UUID]:
    """Turn a cookie value into a session UUID; None for anything malformed."""
    if token is None or isinstance(token, UUID):
        return token
    try:
        return UUID(str(token).strip())
    except ValueError:
        return None


class SessionService:
    """Registration and session-token lookups"""

    @staticmethod
    def register(db: Session, name: str, email: str, birth_date: datetime) -> User:
        """Create a user with a freshly issued random session token"""
        user = UserRepository(db).create_user(
            session_id=uuid4(), name=name, email=email, birth_date=birth_date
        )
        logger.info(f"user_registered user_id={user.id}")
        return user

    @staticmethod
    def resolve(db: Session, token: Union[str, UUID, None]) -> Optional[User]:
        """
        Look up the user holding a session token.

        Returns None for a missing, malformed or unknown token; rejecting the
        request is left to the caller.
        """
        session_id = parse_session_token(token)
        if session_id is None:
            return None
        user = UserRepository(db).get_by_session_id(session_id)
        if user is None:
            logger.debug("session_unresolved")
        return user

    @staticmethod
    def list_session_users(db: Session, token: Union[str, UUID, None]) -> List[User]:
        """Every user bound to the session token (in practice at most one)"""
        session_id = parse_session_token(token)
        if session_id is None:
            return []
        return UserRepository(db).list_by_session_id(session_id)
