"""
Bearer token issuance and verification
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from src.platform.config.core_setting import Settings, settings as default_settings
from src.platform.exception.exceptions import InvalidTokenError, TokenExpiredError
from src.service.inventory.domain.entity.user_entity import UserEntity


class JwtAuth:
    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self.secret = config.SECRET_KEY.get_secret_value()
        self.algorithm = config.ALGORITHM
        self.token_expire_hours = config.ACCESS_TOKEN_EXPIRE_HOURS

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'id': user_entity.id,
            'role': user_entity.role.value,
            'iat': now,
            'exp': now + timedelta(hours=self.token_expire_hours),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['sub', 'exp']},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError()
        except jwt.PyJWTError:
            raise InvalidTokenError()

    def get_user_id_from_jwt(self, token: str) -> int:
        payload = self.decode_jwt_token(token)
        try:
            return int(payload['sub'])
        except (TypeError, ValueError):
            raise InvalidTokenError()
