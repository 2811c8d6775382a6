"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import UnauthorizedError
from domain.models import User
from services import SessionService


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency.

    Sessions come from the Database attached to the application, so each app
    instance talks to the store it was created with.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.get_session()


def get_session_token(
    request: Request, settings: Settings = Depends(get_settings)
) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


def require_session_user(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the session cookie to a user, or stop the request with 401.
    """
    if not token:
        raise UnauthorizedError("Missing session cookie")
    user = SessionService.resolve(db, token)
    if user is None:
        raise UnauthorizedError("Unknown session")
    return user
