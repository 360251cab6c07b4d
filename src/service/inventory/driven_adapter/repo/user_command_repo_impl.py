from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DuplicateFieldError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.inventory.domain.entity.user_entity import UserEntity, UserRole
from src.service.inventory.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                role=user_entity.role.value,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError:
                # lost a race with a concurrent registration of the same email
                await session.rollback()
                raise DuplicateFieldError('email', user_entity.email)
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
