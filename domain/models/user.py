"""
User account database model.
"""

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base


class User(Base):
    """Registered user, identified on each request by its session token"""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, unique=True, nullable=False, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    birth_date = Column("birthDate", DateTime, nullable=False)

    # Relationships
    meals = relationship("Meal", back_populates="user")
