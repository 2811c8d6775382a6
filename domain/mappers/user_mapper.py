"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        The session token stays out of the response; the client already holds
        it as a cookie.
        """
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            birth_date=user.birth_date,
        )
