from functools import partial
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidCredentialsError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_password_hasher import IPasswordHasher
from src.service.inventory.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.inventory.domain.entity.user_entity import UserEntity


class AuthenticateUserUseCase:
    """Credential check for login. Every failure is the same generic error."""

    def __init__(self, user_query_repo: IUserQueryRepo, password_hasher: IPasswordHasher) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo, password_hasher=password_hasher)

    @Logger.io
    async def authenticate(self, *, email: str, password: str) -> UserEntity:
        user_entity = UserEntity.validate_user_exists(
            await self.user_query_repo.get_by_email(email)
        )

        is_valid = await anyio.to_thread.run_sync(
            partial(user_entity.verify_password, password, self.password_hasher)
        )
        if not is_valid:
            Logger.base.warning(f'🔒 [LOGIN] Wrong password for user {user_entity.id}')
            raise InvalidCredentialsError()

        return user_entity
