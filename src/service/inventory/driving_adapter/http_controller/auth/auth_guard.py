from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidTokenError, NoTokenError
from src.service.inventory.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.inventory.domain.entity.user_entity import UserEntity
from src.service.inventory.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# Missing header and other schemes resolve to None
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
) -> UserEntity:
    """
    Resolve the caller from ``Authorization: Bearer <token>``.

    The referenced user is re-loaded so tokens of deleted accounts stop working.
    """
    if credentials is None or not credentials.credentials.strip():
        raise NoTokenError()

    user_id = jwt_auth.get_user_id_from_jwt(credentials.credentials.strip())

    user_entity = await user_query_repo.get_by_id(user_id)
    if user_entity is None:
        raise InvalidTokenError()

    return user_entity
