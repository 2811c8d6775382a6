"""User registration and session routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_settings, require_session_user
from app.config import Settings
from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserListResponse
from domain.mappers import UserMapper
from services import SessionService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response)
def register_user(
    user: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a user and hand the new session token back as a cookie"""
    new_user = SessionService.register(db, user.name, user.email, user.birth_date)
    response = Response(status_code=status.HTTP_201_CREATED)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=str(new_user.session_id),
        max_age=settings.session_cookie_max_age,
        path=settings.session_cookie_path,
    )
    return response


@router.get("/", response_model=UserListResponse)
def list_session_users(
    user: User = Depends(require_session_user),
    db: Session = Depends(get_db),
):
    """Return the users bound to the caller's session"""
    users = SessionService.list_session_users(db, user.session_id)
    return UserListResponse(users=[UserMapper.to_response(u) for u in users])
