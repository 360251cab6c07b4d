"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field
from pydantic_core import PydanticCustomError

from src.service.inventory.domain.entity.user_entity import UserEntity, UserRole
from src.service.inventory.driving_adapter.http_controller.schema.envelope_schema import (
    CamelModel,
)


PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # bcrypt input limit, counted in UTF-8 bytes

Email = Annotated[EmailStr, AfterValidator(str.lower)]


def _check_password_bytes(value: str) -> str:
    if len(value.encode('utf-8')) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError(
            'password_too_long',
            'Password cannot exceed {max_bytes} bytes',
            {'max_bytes': PASSWORD_MAX_BYTES},
        )
    return value


NewPassword = Annotated[
    str, Field(min_length=PASSWORD_MIN_LENGTH), AfterValidator(_check_password_bytes)
]


class RegisterRequest(BaseModel):
    email: Email
    password: NewPassword

    class Config:
        json_schema_extra = {'example': {'email': 'user@example.com', 'password': 'secret123'}}


class LoginRequest(BaseModel):
    email: Email
    password: str

    class Config:
        json_schema_extra = {'example': {'email': 'user@example.com', 'password': 'secret123'}}


class UserResponse(CamelModel):
    id: int
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user_entity: UserEntity) -> 'UserResponse':
        return cls(
            id=user_entity.id or 0,
            email=user_entity.email,
            role=user_entity.role,
            created_at=user_entity.created_at,
            updated_at=user_entity.updated_at,
        )


class AuthResponse(CamelModel):
    user: UserResponse
    token: str
