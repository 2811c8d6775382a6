"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import User
from domain.models.meal import Meal

__all__ = [
    # Database
    "Base",
    "Database",
    # Models
    "User",
    "Meal",
]
