"""API routes package"""

from . import users, meals, metrics, health

__all__ = ["users", "meals", "metrics", "health"]
