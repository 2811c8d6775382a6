from pydantic import BaseModel, EmailStr, Field, field_serializer, field_validator
from typing import List
from datetime import date, datetime, timezone
from uuid import UUID


def parse_timestamp(value):
    """Accept plain ISO dates ("1990-05-14") where a timestamp is expected."""
    if isinstance(value, str) and len(value) == 10:
        try:
            return datetime.combine(date.fromisoformat(value), datetime.min.time())
        except ValueError:
            return value
    return value


def to_naive_utc(value):
    """Timestamps are stored as naive UTC."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utc_isoformat(value: datetime) -> str:
    """Stored timestamps are UTC; say so on the way out."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class UserCreate(BaseModel):
    name: str
    email: EmailStr
    birth_date: datetime = Field(..., alias="birthDate")

    model_config = {"populate_by_name": True}

    @field_validator("birth_date", mode="before")
    @classmethod
    def parse_birth_date(cls, v):
        return parse_timestamp(v)

    @field_validator("birth_date")
    @classmethod
    def normalize_birth_date(cls, v):
        return to_naive_utc(v)


class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    birth_date: datetime = Field(..., alias="birthDate")

    model_config = {"from_attributes": True, "populate_by_name": True}

    @field_serializer("birth_date", when_used="json")
    def serialize_birth_date(self, v: datetime) -> str:
        return utc_isoformat(v)


class UserListResponse(BaseModel):
    users: List[UserResponse]
