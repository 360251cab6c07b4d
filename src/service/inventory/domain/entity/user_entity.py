from datetime import datetime
from enum import Enum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import InvalidCredentialsError
from src.service.inventory.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    USER = 'user'
    ADMIN = 'admin'


def _normalize_email(value: str) -> str:
    return value.strip().lower()


@attrs.define
class UserEntity:
    email: str = attrs.field(default='', converter=_normalize_email)
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise InvalidCredentialsError()

        return user_entity

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def verify_password(self, plain_password: str, password_hasher: IPasswordHasher) -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )
