"""
Meal database model.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Uuid, true
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal eaten by a user, flagged as within the diet or not"""

    __tablename__ = "meal"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(String(1024), nullable=False)
    ate_at = Column(DateTime, nullable=False)
    is_diet = Column(Boolean, nullable=False, default=True, server_default=true())
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="meals")
