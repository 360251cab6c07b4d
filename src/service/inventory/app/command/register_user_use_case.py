"""
User registration (Use Case Layer)
"""

from functools import partial
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DuplicateFieldError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_password_hasher import IPasswordHasher
from src.service.inventory.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.inventory.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.inventory.domain.entity.user_entity import UserEntity, UserRole


class RegisterUserUseCase:
    def __init__(
        self,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def register(self, *, email: str, password: str) -> UserEntity:
        user_entity = UserEntity(email=email, role=UserRole.USER)

        if await self.user_query_repo.exists_by_email(user_entity.email):
            raise DuplicateFieldError('email', user_entity.email)

        # bcrypt is CPU-bound; keep it off the event loop
        await anyio.to_thread.run_sync(
            partial(user_entity.set_password, password, self.password_hasher)
        )
        created = await self.user_command_repo.create(user_entity)

        Logger.base.info(f'👤 [REGISTER] Registered user {created.id}')
        return created
